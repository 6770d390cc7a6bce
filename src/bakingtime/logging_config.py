"""Utilities for configuring application logging."""

import logging
import sys
from typing import Optional

_LOGGER_NAME = "bakingtime"


def _configure_base_logger(level: str) -> logging.Logger:
    """Configure (once) the base logger shared by the library and the server."""

    base_logger = logging.getLogger(_LOGGER_NAME)
    base_logger.setLevel(level)
    if base_logger.handlers:
        return base_logger

    base_logger.propagate = False

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    base_logger.addHandler(stream_handler)

    base_logger.debug("Logger configured with stream handler")
    return base_logger


def get_logger(name: Optional[str] = None, level: str = "INFO") -> logging.Logger:
    """Return a child logger that shares the base handler configuration."""

    base_logger = _configure_base_logger(level)
    if not name or name == _LOGGER_NAME:
        return base_logger

    if name.startswith(f"{_LOGGER_NAME}."):
        name = name[len(_LOGGER_NAME) + 1 :]
    return base_logger.getChild(name)
