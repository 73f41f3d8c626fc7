"""
URL storage strategies using Strategy Pattern.

Handlers talk to the ``URLStore`` interface only, so an external store can
replace the in-memory one without touching handler or service code.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

from shortener_app.models import Click, ShortURL
from shortener_app.storage.locks import ReadWriteLock


class URLStore(ABC):
    """
    Abstract base class for URL + click storage.

    A short code always maps to one record and one ordered click sequence.
    Both are created together by ``insert`` and read together by ``snapshot``.

    All methods are async for interface consistency with I/O-backed stores.
    """

    @abstractmethod
    async def insert(self, record: ShortURL) -> None:
        """
        Store (or overwrite) a record and start an empty click sequence.

        Args:
            record: The ShortURL to store under ``record.short_code``
        """
        pass

    @abstractmethod
    async def exists(self, short_code: str) -> bool:
        """True if a record was ever inserted under this code (expired or not)"""
        pass

    @abstractmethod
    async def get(self, short_code: str) -> Optional[ShortURL]:
        """Get the record for a code, or None"""
        pass

    @abstractmethod
    async def append_click(self, short_code: str, click: Click) -> bool:
        """
        Append a click to the code's sequence.

        Returns:
            True if recorded, False if the code is unknown
        """
        pass

    @abstractmethod
    async def snapshot(self, short_code: str) -> Optional[Tuple[ShortURL, List[Click]]]:
        """
        Get a record and a copy of its clicks as one consistent read.

        Returns:
            (record, clicks) or None if the code is unknown
        """
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Drop every entry"""
        pass


class _Entry:
    """A record and its clicks, always replaced or read as a unit"""

    __slots__ = ("record", "clicks")

    def __init__(self, record: ShortURL):
        self.record = record
        self.clicks: List[Click] = []


class InMemoryURLStore(URLStore):
    """
    In-memory store using a Python dict guarded by a reader/writer lock.

    Pros:
    - No external services
    - A record and its clicks share one entry, so they can never drift apart

    Cons:
    - Lost on restart
    - Not shared between processes

    Note: Async for interface consistency, but operations are instant
    and never await while holding the lock.
    """

    def __init__(self):
        self._entries: Dict[str, _Entry] = {}
        self._lock = ReadWriteLock()

    async def insert(self, record: ShortURL) -> None:
        with self._lock.write_locked():
            self._entries[record.short_code] = _Entry(record)

    async def exists(self, short_code: str) -> bool:
        with self._lock.read_locked():
            return short_code in self._entries

    async def get(self, short_code: str) -> Optional[ShortURL]:
        with self._lock.read_locked():
            entry = self._entries.get(short_code)
            return entry.record if entry else None

    async def append_click(self, short_code: str, click: Click) -> bool:
        with self._lock.write_locked():
            entry = self._entries.get(short_code)
            if entry is None:
                return False
            entry.clicks.append(click)
            return True

    async def snapshot(self, short_code: str) -> Optional[Tuple[ShortURL, List[Click]]]:
        with self._lock.read_locked():
            entry = self._entries.get(short_code)
            if entry is None:
                return None
            return entry.record, list(entry.clicks)

    async def clear(self) -> None:
        with self._lock.write_locked():
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._entries)
