# SPDX-License-Identifier: MIT
# Copyright (c) 2025 csi-logging contributors

"""Concrete CSI logger bound to a method name and node ID."""

from typing import Any

from .backend import Backend
from .factory import get_default_backend
from .levels import Level, to_backend_level
from .logger import CSILogger, Fields


class CSILog(CSILogger):
    """Logger for a single CSI operation.

    Every message is prefixed with the method name and every entry carries
    a ``nodeID`` field. ``with_field`` and ``with_fields`` update this
    instance and return it, so an instance must not be shared between
    threads that attach fields.

    Example:
        >>> log = new("CreateVolume", "node-1", backend=SilentBackend())
        >>> log.with_field("volumeID", "vol-1").info("creating %s", "vol-1")
        # => message "CreateVolume: creating vol-1", fields nodeID, volumeID
    """

    def __init__(self, method_name: str, node_id: str, backend: Backend):
        self._method_name = method_name
        self._node_id = node_id
        self._entry = backend.with_fields({"nodeID": node_id})

    @property
    def method_name(self) -> str:
        return self._method_name

    @property
    def node_id(self) -> str:
        return self._node_id

    @property
    def fields(self) -> Fields:
        """Copy of the fields attached so far, including nodeID."""
        return self._entry.fields

    def log(self, level: Level, msg: str, *args: Any) -> None:
        message = msg % args if args else msg
        self._entry.log(to_backend_level(level), f"{self._method_name}: {message}")

    def with_field(self, key: str, value: Any) -> CSILogger:
        self._entry = self._entry.with_field(key, value)
        return self

    def with_fields(self, fields: Fields) -> CSILogger:
        self._entry = self._entry.with_fields(fields)
        return self

    def info(self, msg: str, *args: Any) -> None:
        self.log(Level.INFO, msg, *args)

    def error(self, msg: str, *args: Any) -> None:
        self.log(Level.ERROR, msg, *args)

    def warning(self, msg: str, *args: Any) -> None:
        self.log(Level.WARN, msg, *args)


def new(method_name: str, node_id: str, backend: Backend | None = None) -> CSILogger:
    """Create a logger for one invocation of a CSI method.

    Args:
        method_name: Operation name used as the message prefix
        node_id: Node identity, attached as the ``nodeID`` field (may be empty)
        backend: Backend to write to; defaults to the process default backend

    Returns:
        A fresh logger with only the nodeID field set
    """
    if backend is None:
        backend = get_default_backend()
    return CSILog(method_name, node_id, backend)
