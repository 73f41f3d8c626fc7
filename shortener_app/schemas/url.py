from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator
from pydantic.alias_generators import to_camel

ALLOWED_SCHEMES = ("http://", "https://")

# About 100 years either way, keeping now + validity inside datetime's range
MAX_VALIDITY_MINUTES = 100 * 366 * 24 * 60


def format_rfc3339(value: datetime) -> str:
    """Render a timestamp as RFC 3339 UTC text with second precision"""
    utc = value.astimezone(timezone.utc).replace(microsecond=0, tzinfo=None)
    return utc.isoformat() + "Z"


class URLCreate(BaseModel):
    url: str = Field(..., description="The original URL to be shortened")
    validity: Optional[StrictInt] = Field(
        None,
        ge=-MAX_VALIDITY_MINUTES,
        le=MAX_VALIDITY_MINUTES,
        description="Minutes until expiry; null or 0 means the default",
    )
    shortcode: Optional[str] = Field(None, description="Custom short code")

    @field_validator("url")
    @classmethod
    def check_scheme(cls, value: str) -> str:
        if not value.startswith(ALLOWED_SCHEMES):
            raise ValueError("URL must start with http:// or https://")
        return value


class CamelModel(BaseModel):
    """Response schemas are serialized with camelCase keys"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ShortLinkResponse(CamelModel):
    short_link: str
    expiry: str


class ClickDetail(CamelModel):
    timestamp: datetime
    referrer: str
    user_agent: str
    ip_address: str


class URLStats(CamelModel):
    original_url: str
    created_at: datetime
    expires_at: datetime
    total_clicks: int
    click_details: List[ClickDetail]
