# SPDX-License-Identifier: MIT
# Copyright (c) 2025 csi-logging contributors

"""Logging backend configuration."""

import os
from dataclasses import dataclass, replace
from typing import Any, Mapping


@dataclass(frozen=True)
class LoggingConfig:
    """Configuration for the logging backend.

    Attributes:
        backend_type: Backend driver ("stdout" or "silent")
        level: Minimum level written by the backend
        name: Backend name, reported in rendered entries
        log_format: Output format for the stdout backend ("json" or "text")
    """
    backend_type: str = "stdout"
    level: str = "INFO"
    name: str = "csi"
    log_format: str = "json"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "LoggingConfig":
        """Build a configuration from environment variables.

        Reads LOG_TYPE, LOG_LEVEL, LOG_NAME and LOG_FORMAT. Unset or empty
        variables fall back to the dataclass defaults.

        Args:
            environ: Mapping to read from; defaults to os.environ

        Returns:
            LoggingConfig instance
        """
        env = environ if environ is not None else os.environ
        defaults = cls()
        return cls(
            backend_type=(env.get("LOG_TYPE") or defaults.backend_type).lower(),
            level=(env.get("LOG_LEVEL") or defaults.level).upper(),
            name=env.get("LOG_NAME") or defaults.name,
            log_format=(env.get("LOG_FORMAT") or defaults.log_format).lower(),
        )

    def with_updates(self, **updates: Any) -> "LoggingConfig":
        """Return a copy with the given non-None values replaced.

        Args:
            **updates: Field overrides; None values are ignored

        Returns:
            New LoggingConfig instance
        """
        overrides = {key: value for key, value in updates.items() if value is not None}
        if "backend_type" in overrides:
            overrides["backend_type"] = overrides["backend_type"].lower()
        if "level" in overrides:
            overrides["level"] = overrides["level"].upper()
        if "log_format" in overrides:
            overrides["log_format"] = overrides["log_format"].lower()
        return replace(self, **overrides)
