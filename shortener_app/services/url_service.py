import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from shortener_app.config import settings
from shortener_app.exceptions import Conflict, Gone, InvalidRequest, NotFound
from shortener_app.models import Click, ShortURL
from shortener_app.schemas.url import ClickDetail, URLCreate, URLStats
from shortener_app.services.short_code_factory import ShortCodeFactory
from shortener_app.services.short_code_strategies import ShortCodeStrategy
from shortener_app.storage.strategies import URLStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

# Single-segment paths served by the app itself; a custom code equal to one
# of these would get a short link that never reaches the redirect route.
RESERVED_SHORT_CODES = frozenset({"health", "docs", "redoc", "openapi.json"})


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def strip_port(remote_addr: str) -> str:
    """
    Drop the port from a ``host:port`` remote address.

    ``[::1]:5000`` -> ``::1``, ``10.0.0.1:5000`` -> ``10.0.0.1``.
    An address without a port is returned unchanged.
    """
    if remote_addr.startswith("["):
        end = remote_addr.find("]")
        return remote_addr[1:end] if end != -1 else remote_addr
    if remote_addr.count(":") == 1:
        return remote_addr.split(":", 1)[0]
    return remote_addr


def build_short_link(scheme: str, host: str, short_code: str) -> str:
    return f"{scheme}://{host or settings.fallback_host}/{short_code}"


class URLService:
    """
    URL Service with dependency injection for storage and time.

    - The store is injected (not created internally)
    - The clock is injected so expiry can be tested without sleeping
    - Errors are raised as ShortenerError subclasses and rendered by main.py
    """

    def __init__(
        self,
        store: URLStore,
        clock: Optional[Clock] = None,
        short_code_strategy: Optional[ShortCodeStrategy] = None
    ):
        """
        Initialize URL service with dependencies.

        Args:
            store: URL + click storage
            clock: Returns the current UTC time (default: real clock)
            short_code_strategy: Code generator (default: from factory/settings)
        """
        self.store = store
        self.clock = clock or utc_now
        self.short_code_strategy = short_code_strategy or ShortCodeFactory.create_strategy()

    async def create_short_url(self, data: URLCreate) -> ShortURL:
        """Create a new short URL

        Process:
        1. Apply the default validity when none is given
        2. Use the custom code if free (409 otherwise), or derive one from the timestamp
        3. Store the record with an empty click sequence

        Note: Derived codes have no collision retry. A second automatic
        creation in the same second overwrites the first entry.
        """
        now = self.clock()
        validity = data.validity or settings.default_validity_minutes
        try:
            expires_at = now + timedelta(minutes=validity)
        except OverflowError:
            raise InvalidRequest("validity is out of range")

        if data.shortcode:
            if data.shortcode in RESERVED_SHORT_CODES:
                logger.info("Custom short code is reserved: %s", data.shortcode)
                raise Conflict("Shortcode is reserved")
            if await self.store.exists(data.shortcode):
                logger.info("Custom short code already in use: %s", data.shortcode)
                raise Conflict()
            short_code = data.shortcode
        else:
            short_code = self.short_code_strategy.generate(int(now.timestamp()))
            if await self.store.exists(short_code):
                logger.warning("Overwriting short code generated in the same second: %s", short_code)

        url = ShortURL(
            short_code=short_code,
            original_url=data.url,
            created_at=now,
            expires_at=expires_at,
            is_active=True,
        )
        await self.store.insert(url)

        logger.info("Created short code %s -> %s (expires %s)", short_code, data.url, expires_at)
        return url

    async def resolve_redirect(
        self,
        short_code: str,
        referrer: str = "",
        user_agent: str = "",
        remote_addr: str = ""
    ) -> str:
        """
        Record a click and return the URL to redirect to.

        Flow:
        1. Look up the record (404 if absent or inactive)
        2. Refuse expired records (410)
        3. Append the click before the caller sends the redirect
        """
        url = await self.store.get(short_code)
        if url is None or not url.is_active:
            logger.info("Redirect for unknown short code: %s", short_code)
            raise NotFound()

        now = self.clock()
        if url.is_expired(now):
            logger.info("Redirect for expired short code: %s", short_code)
            raise Gone()

        click = Click(
            timestamp=now,
            referrer=referrer,
            user_agent=user_agent,
            ip_address=strip_port(remote_addr),
        )
        await self.store.append_click(short_code, click)

        return url.original_url

    async def get_url_stats(self, short_code: str) -> URLStats:
        """Get statistics for a short URL

        Expired and inactive codes are still reported.
        """
        snapshot = await self.store.snapshot(short_code)
        if snapshot is None:
            raise NotFound()

        url, clicks = snapshot
        return URLStats(
            original_url=url.original_url,
            created_at=url.created_at,
            expires_at=url.expires_at,
            total_clicks=len(clicks),
            click_details=[
                ClickDetail(
                    timestamp=click.timestamp,
                    referrer=click.referrer,
                    user_agent=click.user_agent,
                    ip_address=click.ip_address,
                )
                for click in clicks
            ],
        )
