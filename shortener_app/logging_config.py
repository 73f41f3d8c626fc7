"""
Logging setup for the URL shortener.

All modules log through ``logging.getLogger(__name__)`` which places them
under the ``shortener_app`` logger configured here.
"""

import logging
from typing import Optional

LOGGER_NAME = "shortener_app"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_console_handler: Optional[logging.Handler] = None


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a console handler to the application logger.

    Safe to call more than once: the handler added by a previous call is
    replaced, not duplicated.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...)

    Returns:
        The configured application logger
    """
    global _console_handler

    log_level = getattr(logging, level.upper(), logging.INFO)

    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(log_level)

    if _console_handler is not None:
        app_logger.removeHandler(_console_handler)

    _console_handler = logging.StreamHandler()
    _console_handler.setLevel(log_level)
    _console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    app_logger.addHandler(_console_handler)

    return app_logger
