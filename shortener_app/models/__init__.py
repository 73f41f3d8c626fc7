"""
Domain records for the URL shortener.

Both records live in process memory only (see ``shortener_app.storage``).
"""

from .url import ShortURL
from .click import Click

__all__ = ["ShortURL", "Click"]
