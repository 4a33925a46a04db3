"""Log levels and the process-wide maximum level."""

from __future__ import annotations

import enum
import logging


class Level(enum.IntEnum):
    """Level filter, ordered from the quietest to the most verbose."""

    OFF = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    def __str__(self) -> str:
        return self.name


_TRACE_LEVELNO = 5
logging.addLevelName(_TRACE_LEVELNO, "TRACE")

_LOGGING_LEVELS = {
    Level.OFF: logging.CRITICAL + 50,
    Level.ERROR: logging.ERROR,
    Level.WARN: logging.WARNING,
    Level.INFO: logging.INFO,
    Level.DEBUG: logging.DEBUG,
    Level.TRACE: _TRACE_LEVELNO,
}

_NAMES = {
    "debug": Level.DEBUG,
    "trace": Level.TRACE,
    "info": Level.INFO,
    "warn": Level.WARN,
    "error": Level.ERROR,
    "off": Level.OFF,
}


def _to_logging(level: Level) -> int:
    """Return the standard-library level number for ``level``."""
    return _LOGGING_LEVELS[level]


def _from_logging(levelno: int) -> Level:
    """Map a standard-library level number onto a :class:`Level`."""
    if levelno >= logging.ERROR:
        return Level.ERROR
    if levelno >= logging.WARNING:
        return Level.WARN
    if levelno >= logging.INFO:
        return Level.INFO
    if levelno >= logging.DEBUG:
        return Level.DEBUG
    return Level.TRACE


def get_level(name: object) -> Level:
    """Parse a level name case-insensitively; unknown names mean DEBUG."""
    if isinstance(name, Level):
        return name
    return _NAMES.get(str(name).lower(), Level.DEBUG)


def set_level(level: object) -> None:
    """Set the maximum level; accepts a :class:`Level` or its name."""
    logging.getLogger().setLevel(_to_logging(get_level(level)))