"""
Request logging middleware.

Emits one line per request once the inner app has produced its response:
method, path, remote address and elapsed time. The timestamp comes from
the log formatter.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.types import ASGIApp

logger = logging.getLogger("shortener_app.access")


def remote_address(request: Request) -> str:
    """``host:port`` of the peer, bracketing IPv6 hosts"""
    if request.client is None:
        return ""
    host, port = request.client.host, request.client.port
    if ":" in host:
        host = f"[{host}]"
    return f"{host}:{port}" if port is not None else host


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request after the wrapped app handles it"""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        try:
            return await call_next(request)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.info(
                "%s %s %s %.3fms",
                request.method,
                request.url.path,
                remote_address(request),
                elapsed_ms,
            )


def wrap_app(app: ASGIApp) -> ASGIApp:
    """Return ``app`` wrapped in request logging"""
    return RequestLoggingMiddleware(app)
