# SPDX-License-Identifier: MIT
# Copyright (c) 2025 csi-logging contributors

"""Log level taxonomy and the mapping onto backend levels."""

import logging
from enum import IntEnum
from typing import Any


class Level(IntEnum):
    """Caller-facing log levels, ordered from most to least severe.

    PANIC logs and then raises :class:`~csi_logging.backend.PanicError`.
    FATAL logs and then exits the process, even if the backend threshold
    would filter the entry.
    """

    PANIC = 0
    FATAL = 1
    ERROR = 2
    WARN = 3
    INFO = 4
    DEBUG = 5
    TRACE = 6


class BackendLevel(IntEnum):
    """Levels understood by the backends, numbered on the stdlib logging scale."""

    TRACE = 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR
    FATAL = logging.CRITICAL
    PANIC = 60


logging.addLevelName(BackendLevel.TRACE, "TRACE")
logging.addLevelName(BackendLevel.PANIC, "PANIC")


# DEBUG maps to WARN on purpose; see DESIGN.md before changing it.
_LEVEL_MAP = {
    Level.PANIC: BackendLevel.PANIC,
    Level.FATAL: BackendLevel.FATAL,
    Level.ERROR: BackendLevel.ERROR,
    Level.WARN: BackendLevel.WARN,
    Level.INFO: BackendLevel.INFO,
    Level.DEBUG: BackendLevel.WARN,
    Level.TRACE: BackendLevel.TRACE,
}

_NAME_ALIASES = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
}


def to_backend_level(level: Any) -> BackendLevel:
    """Translate a caller-facing level into the backend level.

    Values outside :class:`Level` fall back to INFO instead of raising.
    """
    if isinstance(level, bool):
        return BackendLevel.INFO
    try:
        return _LEVEL_MAP[Level(level)]
    except (ValueError, TypeError):
        return BackendLevel.INFO


def parse_level(name: str) -> BackendLevel:
    """Parse a backend level name such as ``"info"`` or ``"WARNING"``.

    Args:
        name: Level name, case-insensitive

    Returns:
        Matching BackendLevel

    Raises:
        ValueError: If the name is not a known level
    """
    key = str(name).strip().upper()
    key = _NAME_ALIASES.get(key, key)
    try:
        return BackendLevel[key]
    except KeyError:
        raise ValueError(
            f"Invalid log level: {name}. Must be one of {[lvl.name for lvl in BackendLevel]}"
        ) from None
