#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 csi-logging contributors

"""Example usage of the csi_logging module.

This script demonstrates per-operation loggers for CSI RPC handlers.
"""

from csi_logging import Level, PanicError, SilentBackend, create_backend, new


def main():
    """Demonstrate logging functionality."""

    print("=" * 60)
    print("CSI Logging Examples")
    print("=" * 60)
    print()

    # Example 1: JSON output
    print("Example 1: StdoutBackend with JSON output")
    print("-" * 60)
    backend = create_backend(backend_type="stdout", level="INFO", name="example-driver")

    log = new("CreateVolume", "node-1", backend=backend)
    log.info("request received")
    log.with_fields({"volumeID": "vol-42", "capacityGiB": 10}).info("provisioning %s", "vol-42")
    log.warning("capacity rounded up to %d GiB", 16)
    log.log(Level.TRACE, "this trace entry is below INFO and is not written")
    print()

    # Example 2: logfmt output
    print("Example 2: StdoutBackend with text output")
    print("-" * 60)
    text_backend = create_backend(backend_type="stdout", level="TRACE", log_format="text")

    log = new("NodeStageVolume", "node-2", backend=text_backend)
    log.with_field("stagingPath", "/var/lib/kubelet/plugins/staging").info("staging volume")
    log.log(Level.TRACE, "mount options %s", ["ro", "noatime"])
    log.log(Level.DEBUG, "debug entries are written at WARN")
    print()

    # Example 3: Silent backend for testing
    print("Example 3: SilentBackend for testing")
    print("-" * 60)
    test_backend = SilentBackend()

    new("DeleteSnapshot", "node-3", backend=test_backend).with_field("snapshotID", "snap-1").error("not found")
    for entry in test_backend.get_logs():
        print(entry)
    print()

    # Example 4: Panic
    print("Example 4: PANIC raises after logging")
    print("-" * 60)
    try:
        new("ControllerPublishVolume", "node-4", backend=test_backend).log(Level.PANIC, "inconsistent state")
    except PanicError as e:
        print(f"caught PanicError: {e}")
    print()


if __name__ == "__main__":
    main()
