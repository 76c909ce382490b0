# SPDX-License-Identifier: MIT
# Copyright (c) 2025 csi-logging contributors

"""Test fixtures for csi_logging."""

import pytest

import csi_logging.factory as factory
from csi_logging import SilentBackend


class ExitRecorder:
    """Stand-in for sys.exit that records exit codes."""

    def __init__(self):
        self.codes: list[int] = []

    def __call__(self, code: int) -> None:
        self.codes.append(code)


@pytest.fixture(autouse=True)
def reset_default_backend():
    """Reset the process default backend before and after each test."""
    factory._default_backend = None
    yield
    factory._default_backend = None


@pytest.fixture
def exit_recorder() -> ExitRecorder:
    return ExitRecorder()


@pytest.fixture
def backend(exit_recorder: ExitRecorder) -> SilentBackend:
    """Silent backend whose FATAL exits are recorded instead of performed."""
    return SilentBackend(exit_func=exit_recorder)
