"""Process-wide logging setup.

The level is written once during startup, before any command runs, and read
by every logger afterwards.
"""
from __future__ import annotations

import logging

TRACE = 5

logging.addLevelName(TRACE, "TRACE")

_LEVELS = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "panic": logging.CRITICAL,
}


def level_names() -> list[str]:
    return list(_LEVELS)


def parse_level(name: str) -> int:
    """Map a level name (case-insensitive) to a ``logging`` level number."""
    try:
        return _LEVELS[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown log level {name!r}, expected one of: {', '.join(_LEVELS)}") from None


def configure_logging(fmt: str) -> None:
    """Install the stderr handler. No-op when the root logger already has one."""
    logging.basicConfig(level=logging.INFO, format=fmt)


def set_level(level: int) -> None:
    logging.getLogger().setLevel(level)
