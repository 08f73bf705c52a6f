"""Logging helpers for FilterLab."""

from __future__ import annotations

import logging
from typing import Optional

ROOT_LOGGER_NAME = "filterlab"

_LOGGER: Optional[logging.Logger] = None


def _root_logger() -> logging.Logger:
    global _LOGGER
    if _LOGGER is None:
        _LOGGER = logging.getLogger(ROOT_LOGGER_NAME)
        if not _LOGGER.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
            handler.setFormatter(formatter)
            _LOGGER.addHandler(handler)
        _LOGGER.setLevel(logging.INFO)
    return _LOGGER


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the FilterLab logger, or a child of it for ``name``."""

    root = _root_logger()
    if not name:
        return root
    return root.getChild(name)


def set_level(level: int) -> None:
    _root_logger().setLevel(level)
