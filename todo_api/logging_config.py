"""Logging setup."""
import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send all application and server logs to stderr in one format."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)
    # uvicorn's loggers carry their own handlers; route them through the root
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
