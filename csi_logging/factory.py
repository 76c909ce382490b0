# SPDX-License-Identifier: MIT
# Copyright (c) 2025 csi-logging contributors

"""Factory functions for creating logging backends."""

from .backend import Backend
from .config import LoggingConfig
from .silent_backend import SilentBackend
from .stdout_backend import StdoutBackend

_default_backend: Backend | None = None


def create_backend_from_config(config: LoggingConfig) -> Backend:
    """Create a backend from a LoggingConfig.

    Args:
        config: Backend configuration

    Returns:
        Backend instance

    Raises:
        ValueError: If backend_type, level or log_format is not recognized
    """
    if config.backend_type == "stdout":
        return StdoutBackend.from_config(config)
    elif config.backend_type == "silent":
        return SilentBackend.from_config(config)
    else:
        raise ValueError(
            f"Unknown backend_type: {config.backend_type}. "
            f"Must be one of: stdout, silent"
        )


def create_backend(
    backend_type: str | None = None,
    level: str | None = None,
    name: str | None = None,
    log_format: str | None = None,
) -> Backend:
    """Factory function to create a backend instance.

    Each argument falls back to its environment variable, then to the
    LoggingConfig default.

    Args:
        backend_type: "stdout" or "silent". Defaults to LOG_TYPE env or "stdout".
        level: Minimum level. Defaults to LOG_LEVEL env or "INFO".
        name: Backend name. Defaults to LOG_NAME env or "csi".
        log_format: "json" or "text". Defaults to LOG_FORMAT env or "json".

    Returns:
        Backend instance

    Raises:
        ValueError: If backend_type, level or log_format is not recognized

    Example:
        >>> backend = create_backend(backend_type="stdout", level="DEBUG")
        >>> test_backend = create_backend(backend_type="silent")
    """
    config = LoggingConfig.from_env().with_updates(
        backend_type=backend_type,
        level=level,
        name=name,
        log_format=log_format,
    )
    return create_backend_from_config(config)


def get_default_backend() -> Backend:
    """Return the process default backend, creating it from the environment on first use."""
    global _default_backend
    if _default_backend is None:
        _default_backend = create_backend()
    return _default_backend


def set_default_backend(backend: Backend | None) -> None:
    """Replace the process default backend.

    Passing None resets it so the next get_default_backend() call rebuilds
    it from the environment.
    """
    global _default_backend
    _default_backend = backend
