# SPDX-License-Identifier: MIT
# Copyright (c) 2025 csi-logging contributors

"""Silent backend implementation for testing."""

from typing import Any, Callable

from .backend import Backend
from .config import LoggingConfig
from .levels import BackendLevel


class SilentBackend(Backend):
    """Backend that stores entries in memory without output.

    Useful for testing to verify logging behavior without cluttering test output.
    Note: SilentBackend does not filter entries by level - all entries are captured.
    """

    def __init__(
        self,
        level: str | BackendLevel = "INFO",
        name: str | None = None,
        exit_func: Callable[[int], Any] | None = None,
    ):
        """Initialize silent backend.

        Args:
            level: Logging level (stored but not used for filtering)
            name: Optional backend name for identification
            exit_func: Called after FATAL entries; defaults to sys.exit
        """
        super().__init__(level=level, name=name, exit_func=exit_func)
        self.logs: list[dict[str, Any]] = []

    @classmethod
    def from_config(cls, config: LoggingConfig, **kwargs: Any) -> "SilentBackend":
        """Create a SilentBackend from a LoggingConfig.

        Args:
            config: Configuration carrying level and name
            **kwargs: Passed through (exit_func)

        Returns:
            Configured SilentBackend instance
        """
        return cls(level=config.level, name=config.name, **kwargs)

    def is_enabled(self, level: BackendLevel) -> bool:
        return True

    def write(self, level: BackendLevel, message: str, fields: dict[str, Any]) -> None:
        """Store a log entry.

        Args:
            level: Level of the entry
            message: The formatted message
            fields: Structured fields attached to the entry
        """
        self.logs.append({
            "level": level.name,
            "message": message,
            "fields": dict(fields),
        })

    def clear_logs(self) -> None:
        """Clear all stored log entries (useful for testing)."""
        self.logs.clear()

    def get_logs(self, level: str | None = None) -> list[dict[str, Any]]:
        """Get stored log entries, optionally filtered by level.

        Args:
            level: Optional level name to filter by (TRACE, INFO, WARN, ...)

        Returns:
            List of log entries
        """
        if level is None:
            return self.logs
        return [log for log in self.logs if log["level"] == level.upper()]

    def has_log(self, message: str, level: str | None = None) -> bool:
        """Check if a specific log message exists.

        Args:
            message: Message to search for (substring match)
            level: Optional level name to filter by

        Returns:
            True if message is found, False otherwise
        """
        return any(message in log["message"] for log in self.get_logs(level))
