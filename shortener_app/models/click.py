from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Click(BaseModel):
    """
    One recorded visit to a short code's redirect endpoint.

    Appended to the code's click sequence before the redirect is sent.
    """

    timestamp: datetime
    referrer: str = Field("", description="HTTP Referer header, empty if absent")
    user_agent: str = Field("", description="User-Agent header, empty if absent")
    ip_address: str = Field("", description="Client address without the port")

    model_config = ConfigDict(frozen=True)
