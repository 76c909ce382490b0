# SPDX-License-Identifier: MIT
# Copyright (c) 2025 csi-logging contributors

"""Abstract CSI logger interface."""

from abc import ABC, abstractmethod
from typing import Any

from .levels import Level

Fields = dict[str, Any]


class CSILogger(ABC):
    """Abstract base class for per-operation CSI loggers."""

    @abstractmethod
    def log(self, level: Level, msg: str, *args: Any) -> None:
        """Log a %-formatted message at the given level.

        Args:
            level: Caller-facing level; unknown values log at INFO
            msg: The log message, prefixed with the method name
            *args: Arguments merged into msg with the % operator
        """
        pass

    @abstractmethod
    def with_field(self, key: str, value: Any) -> "CSILogger":
        """Attach a field to every subsequent entry.

        Args:
            key: Field name; an existing value is overwritten
            value: Field value

        Returns:
            This logger, for chaining
        """
        pass

    @abstractmethod
    def with_fields(self, fields: Fields) -> "CSILogger":
        """Attach several fields to every subsequent entry.

        Args:
            fields: Mapping of field names to values

        Returns:
            This logger, for chaining
        """
        pass

    @abstractmethod
    def info(self, msg: str, *args: Any) -> None:
        """Log an info-level message."""
        pass

    @abstractmethod
    def error(self, msg: str, *args: Any) -> None:
        """Log an error-level message."""
        pass

    @abstractmethod
    def warning(self, msg: str, *args: Any) -> None:
        """Log a warning-level message."""
        pass
