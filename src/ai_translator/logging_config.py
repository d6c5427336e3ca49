"""Logging setup shared by the application modules."""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging with a single console handler.

    Args:
        level: Level name such as "DEBUG" or "INFO". Defaults to INFO.
    """
    log_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, usually called with __name__."""
    return logging.getLogger(name)
