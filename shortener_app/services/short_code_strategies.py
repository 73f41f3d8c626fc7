"""
Short code generation strategies for URL shortener.
Uses Strategy Pattern to allow different generation algorithms.

Every strategy turns a Unix timestamp (seconds) into a code and back.
The same timestamp always yields the same code, so two automatic
creations in the same second share a code.
"""

from abc import ABC, abstractmethod
from typing import Optional

from hashids import Hashids


class ShortCodeStrategy(ABC):
    """Abstract base class for short code generation strategies"""

    @abstractmethod
    def generate(self, timestamp: int) -> str:
        """
        Generate a short code.

        Args:
            timestamp: Unix timestamp in seconds

        Returns:
            The encoded short code
        """
        pass

    @abstractmethod
    def decode(self, short_code: str) -> Optional[int]:
        """
        Recover the timestamp a code was generated from.

        Returns:
            The timestamp, or None if this strategy could not have produced the code
        """
        pass


class HashidsShortCodeStrategy(ShortCodeStrategy):
    """
    Hashids encoding strategy (default).

    Salted, reversible, padded to a minimum length.

    Pros: Non-sequential looking codes, no lookups needed
    Cons: Same second -> same code (no collision retry)
    """

    def __init__(self, salt: str = "url-shortener-salt", min_length: int = 5):
        self.salt = salt
        self.min_length = min_length
        self._hashids = Hashids(salt=salt, min_length=min_length)

    def generate(self, timestamp: int) -> str:
        if timestamp < 0:
            raise ValueError(f"Cannot encode negative timestamp: {timestamp}")
        return self._hashids.encode(timestamp)

    def decode(self, short_code: str) -> Optional[int]:
        numbers = self._hashids.decode(short_code)
        if len(numbers) != 1:
            return None
        return numbers[0]


class Base62ShortCodeStrategy(ShortCodeStrategy):
    """
    Base62 encoding strategy with timestamp obfuscation.
    Adds a salt to the timestamp and converts it to Base62.

    Pros: Compact, readable, no dependencies
    Cons: Predictable if salt is known (but obfuscated)
    """

    BASE62_CHARS = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

    def __init__(self, salt: int = 1256, min_length: int = 5):
        self.salt = salt
        self.min_length = min_length

    def generate(self, timestamp: int) -> str:
        """
        Generate short code using Base62 encoding.

        Process:
        1. Add salt to timestamp for obfuscation
        2. Encode to Base62
        3. Left-pad with the zero digit up to min_length

        Padding only adds leading zero digits, so decoding stays exact.
        """
        if timestamp < 0:
            raise ValueError(f"Cannot encode negative timestamp: {timestamp}")

        encoded = self._base62_encode(timestamp + self.salt)
        return encoded.rjust(self.min_length, self.BASE62_CHARS[0])

    def decode(self, short_code: str) -> Optional[int]:
        if not short_code or any(c not in self.BASE62_CHARS for c in short_code):
            return None

        number = 0
        for char in short_code:
            number = number * 62 + self.BASE62_CHARS.index(char)

        timestamp = number - self.salt
        return timestamp if timestamp >= 0 else None

    def _base62_encode(self, number: int) -> str:
        """
        Convert integer to Base62 string.

        Base62 uses: 0-9 (10) + a-z (26) + A-Z (26) = 62 characters
        This is more compact than Base10 and URL-safe.
        """
        if number == 0:
            return self.BASE62_CHARS[0]

        result = ""
        while number > 0:
            result = self.BASE62_CHARS[number % 62] + result
            number //= 62

        return result
