# SPDX-License-Identifier: MIT
# Copyright (c) 2025 csi-logging contributors

"""CSI Logging.

A small structured-logging façade for CSI storage plugins. Each RPC handler
creates a logger bound to its method name and node ID, attaches context
fields such as volume or snapshot IDs, and logs through an injected backend.

Example:
    >>> from csi_logging import Level, new, create_backend
    >>>
    >>> backend = create_backend(backend_type="stdout", level="INFO")
    >>> log = new("CreateVolume", "node-1", backend=backend)
    >>> log.with_field("volumeID", "vol-42").info("provisioning %d GiB", 10)
    >>>
    >>> # Silent backend for tests
    >>> from csi_logging import SilentBackend
    >>> test_backend = SilentBackend()
    >>> new("DeleteVolume", "node-1", backend=test_backend).log(Level.WARN, "not found")
    >>> test_backend.has_log("DeleteVolume: not found", level="WARN")
    True
"""

__version__ = "0.1.0"

from .backend import Backend, Entry, PanicError
from .config import LoggingConfig
from .csi_log import CSILog, new
from .factory import (
    create_backend,
    create_backend_from_config,
    get_default_backend,
    set_default_backend,
)
from .levels import BackendLevel, Level, parse_level, to_backend_level
from .logger import CSILogger, Fields
from .silent_backend import SilentBackend
from .stdout_backend import StdoutBackend

__all__ = [
    "__version__",
    "Backend",
    "BackendLevel",
    "CSILog",
    "CSILogger",
    "Entry",
    "Fields",
    "Level",
    "LoggingConfig",
    "PanicError",
    "SilentBackend",
    "StdoutBackend",
    "create_backend",
    "create_backend_from_config",
    "get_default_backend",
    "new",
    "parse_level",
    "set_default_backend",
    "to_backend_level",
]
