"""
Error taxonomy for the URL shortener.

The service layer raises these; ``main.py`` registers one handler that turns
any ``ShortenerError`` into ``{"error": "<message>"}`` with its status code.
"""

from typing import Optional

from fastapi import status


class ShortenerError(Exception):
    """Base class for errors that map to an HTTP status"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidRequest(ShortenerError):
    """Malformed body or disallowed URL scheme"""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request body"


class Conflict(ShortenerError):
    """Custom short code already taken"""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Shortcode already in use"


class NotFound(ShortenerError):
    """Short code never existed, or exists but is inactive"""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Short URL not found"


class Gone(ShortenerError):
    """Short code exists but is past its expiry"""

    status_code = status.HTTP_410_GONE
    default_message = "Short URL has expired"
