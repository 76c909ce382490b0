# SPDX-License-Identifier: MIT
# Copyright (c) 2025 csi-logging contributors

"""Stdout backend with structured JSON or logfmt output."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Callable, TextIO

from .backend import Backend
from .config import LoggingConfig
from .levels import BackendLevel


def _timestamp(record: logging.LogRecord) -> str:
    return (
        datetime.fromtimestamp(record.created, timezone.utc)
        .isoformat()
        .replace("+00:00", "Z")
    )


def _level_name(record: logging.LogRecord) -> str:
    try:
        return BackendLevel(record.levelno).name
    except ValueError:
        return record.levelname


class JSONFormatter(logging.Formatter):
    """Custom formatter that outputs structured JSON logs."""

    def __init__(self, logger_name: str = "csi"):
        """Initialize JSON formatter.

        Args:
            logger_name: Name to use in the logger field of JSON output
        """
        super().__init__()
        self.logger_name = logger_name

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
        log_entry: dict[str, Any] = {
            "timestamp": _timestamp(record),
            "level": _level_name(record),
            "logger": self.logger_name,
            "message": record.getMessage(),
        }

        fields = getattr(record, "fields", None)
        if fields:
            log_entry["fields"] = fields

        return json.dumps(log_entry, default=str)


class TextFormatter(logging.Formatter):
    """Formatter that renders records as logfmt key=value lines."""

    @staticmethod
    def _quote(value: Any) -> str:
        text = str(value)
        if text == "" or any(c in text for c in ' "=\t\n'):
            return json.dumps(text)
        return text

    def format(self, record: logging.LogRecord) -> str:
        parts = [
            f"time={_timestamp(record)}",
            f"level={_level_name(record).lower()}",
            f"msg={json.dumps(record.getMessage())}",
        ]
        fields = getattr(record, "fields", None) or {}
        for key in sorted(fields):
            parts.append(f"{key}={self._quote(fields[key])}")
        return " ".join(parts)


class StdoutBackend(Backend):
    """Backend that writes one line per entry to stdout.

    The underlying ``logging.Logger`` is owned by this backend and is not
    registered with the logging module, so two backends never share
    handlers or levels.
    """

    FORMATS = ("json", "text")

    def __init__(
        self,
        level: str | BackendLevel = "INFO",
        name: str | None = None,
        log_format: str = "json",
        stream: TextIO | None = None,
        exit_func: Callable[[int], Any] | None = None,
    ):
        """Initialize stdout backend.

        Args:
            level: Minimum level written (TRACE, DEBUG, INFO, WARN, ERROR, FATAL, PANIC)
            name: Optional backend name, reported as the logger field
            log_format: "json" or "text"
            stream: Output stream; defaults to sys.stdout
            exit_func: Called after FATAL entries; defaults to sys.exit

        Raises:
            ValueError: If level or log_format is invalid
        """
        super().__init__(level=level, name=name, exit_func=exit_func)

        self.log_format = log_format.lower()
        if self.log_format not in self.FORMATS:
            raise ValueError(f"Invalid log format: {log_format}. Must be one of {list(self.FORMATS)}")

        if self.log_format == "json":
            formatter: logging.Formatter = JSONFormatter(logger_name=self.name)
        else:
            formatter = TextFormatter()

        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(formatter)

        self._stdlib_logger = logging.Logger(self.name, level=int(self.level))
        self._stdlib_logger.addHandler(handler)

    @classmethod
    def from_config(cls, config: LoggingConfig, **kwargs: Any) -> "StdoutBackend":
        """Create a StdoutBackend from a LoggingConfig.

        Args:
            config: Configuration carrying level, name and log_format
            **kwargs: Passed through (stream, exit_func)

        Returns:
            Configured StdoutBackend instance
        """
        return cls(level=config.level, name=config.name, log_format=config.log_format, **kwargs)

    def write(self, level: BackendLevel, message: str, fields: dict[str, Any]) -> None:
        self._stdlib_logger.log(int(level), message, extra={"fields": fields})
