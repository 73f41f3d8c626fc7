from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ShortURL(BaseModel):
    """
    A shortened URL record.

    Records are immutable once stored: the short code and original URL
    never change, and records are never deleted. Expired records stay
    queryable for stats but refuse redirection.
    """

    short_code: str = Field(..., description="Unique key appended to the base URL")
    original_url: str = Field(..., description="Destination of the redirect")
    created_at: datetime
    expires_at: datetime
    # Set at creation; nothing toggles it yet
    is_active: bool = True

    model_config = ConfigDict(frozen=True)

    def is_expired(self, now: datetime) -> bool:
        """True strictly after the expiry instant"""
        return now > self.expires_at
