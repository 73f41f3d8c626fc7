from .request_logging import RequestLoggingMiddleware, remote_address, wrap_app

__all__ = ["RequestLoggingMiddleware", "remote_address", "wrap_app"]
