# SPDX-License-Identifier: MIT
# Copyright (c) 2025 csi-logging contributors

"""Abstract leveled-logging backend and the field-carrying log entry."""

import logging
import os
import sys
from abc import ABC, abstractmethod
from typing import Any, Callable

from .levels import BackendLevel, parse_level


def _exit(code: int) -> None:
    """Flush and close all logging handlers, then end the process.

    Uses os._exit so the process ends even when called from a worker thread
    or under an `except BaseException` block.
    """
    logging.shutdown()
    sys.stdout.flush()
    sys.stderr.flush()
    os._exit(code)


class PanicError(RuntimeError):
    """Raised after a PANIC-level entry has been written."""

    def __init__(self, message: str, fields: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.fields = dict(fields or {})


class Backend(ABC):
    """Abstract base class for logging backends.

    A backend owns the process-level concerns of logging: the level
    threshold, the output sink and the exit behaviour of FATAL entries.
    Callers never write to it directly; they build an :class:`Entry` with
    :meth:`with_fields` and log through that.
    """

    def __init__(
        self,
        level: str | BackendLevel = BackendLevel.INFO,
        name: str | None = None,
        exit_func: Callable[[int], Any] | None = None,
    ):
        """Initialize the backend.

        Args:
            level: Minimum level written to the sink (name or BackendLevel)
            name: Optional backend name for identification
            exit_func: Called with exit code 1 after a FATAL entry.
                Defaults to flushing the log handlers and
                calling os._exit.

        Raises:
            ValueError: If level is not a known level name
        """
        self.level = level if isinstance(level, BackendLevel) else parse_level(level)
        self.name = name or "csi"
        self.exit_func = exit_func or _exit

    def is_enabled(self, level: BackendLevel) -> bool:
        """Return True if entries at this level reach the sink."""
        return level >= self.level

    def with_fields(self, fields: dict[str, Any]) -> "Entry":
        """Create an entry carrying the given fields."""
        return Entry(self, fields)

    def with_field(self, key: str, value: Any) -> "Entry":
        """Create an entry carrying a single field."""
        return Entry(self, {key: value})

    @abstractmethod
    def write(self, level: BackendLevel, message: str, fields: dict[str, Any]) -> None:
        """Write a rendered entry to the sink.

        Args:
            level: Level of the entry
            message: Fully formatted message
            fields: Structured fields attached to the entry
        """
        pass


class Entry:
    """A set of fields bound to a backend.

    Entries are never modified in place: ``with_field`` and ``with_fields``
    return a new entry with the merged field set.
    """

    def __init__(self, backend: Backend, fields: dict[str, Any] | None = None):
        self.backend = backend
        self._fields = dict(fields or {})

    @property
    def fields(self) -> dict[str, Any]:
        return dict(self._fields)

    def with_field(self, key: str, value: Any) -> "Entry":
        return self.with_fields({key: value})

    def with_fields(self, fields: dict[str, Any]) -> "Entry":
        merged = dict(self._fields)
        merged.update(fields)
        return Entry(self.backend, merged)

    def log(self, level: BackendLevel, msg: str, *args: Any) -> None:
        """Write a %-formatted message at the given level.

        PANIC raises PanicError and FATAL calls the backend's exit function
        once the entry is written, whether or not the threshold filtered it.

        Raises:
            PanicError: If level is PANIC
        """
        message = msg % args if args else msg

        if self.backend.is_enabled(level):
            self.backend.write(level, message, dict(self._fields))

        if level == BackendLevel.PANIC:
            raise PanicError(message, self._fields)
        if level == BackendLevel.FATAL:
            self.backend.exit_func(1)
