"""Logging setup."""
import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_QUIET_LIBRARIES = ("httpx", "httpcore", "asyncio")


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the package logger."""
    logger = logging.getLogger("vidextract")
    logger.setLevel(level.upper())

    if not any(getattr(h, "_vidextract", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._vidextract = True
        logger.addHandler(handler)
    logger.propagate = False

    for lib in _QUIET_LIBRARIES:
        logging.getLogger(lib).setLevel(logging.WARNING)
