# SPDX-License-Identifier: MIT
# Copyright (c) 2025 csi-logging contributors

"""Tests for StdoutBackend."""

import json
import re
from io import StringIO
from unittest.mock import patch

import pytest

from csi_logging import BackendLevel, LoggingConfig, PanicError, StdoutBackend


class TestStdoutBackend:
    """Tests for StdoutBackend JSON output."""

    def test_initialization(self):
        """Test StdoutBackend initialization."""
        backend = StdoutBackend(level="DEBUG", name="test-driver")

        assert backend.level is BackendLevel.DEBUG
        assert backend.name == "test-driver"
        assert backend.log_format == "json"

    def test_default_values(self):
        """Test default initialization values."""
        backend = StdoutBackend()

        assert backend.level is BackendLevel.INFO
        assert backend.name == "csi"

    def test_invalid_log_level(self):
        """Test that invalid log level raises ValueError."""
        with pytest.raises(ValueError, match="Invalid log level"):
            StdoutBackend(level="INVALID")

    def test_invalid_log_format(self):
        """Test that invalid log format raises ValueError."""
        with pytest.raises(ValueError, match="Invalid log format"):
            StdoutBackend(log_format="xml")

    @patch('sys.stdout', new_callable=StringIO)
    def test_json_output(self, mock_stdout):
        """Test that entries are written to stdout as JSON."""
        backend = StdoutBackend(level="INFO", name="test")

        backend.with_fields({"nodeID": "node-1", "volumeID": "vol-1"}).log(
            BackendLevel.INFO, "CreateVolume: starting"
        )

        log_entry = json.loads(mock_stdout.getvalue().strip())
        assert log_entry["level"] == "INFO"
        assert log_entry["message"] == "CreateVolume: starting"
        assert log_entry["logger"] == "test"
        assert log_entry["fields"] == {"nodeID": "node-1", "volumeID": "vol-1"}
        assert log_entry["timestamp"].endswith("Z")

    def test_explicit_stream(self):
        """Test writing to an injected stream."""
        stream = StringIO()
        backend = StdoutBackend(stream=stream)

        backend.with_fields({}).log(BackendLevel.WARN, "careful")

        log_entry = json.loads(stream.getvalue())
        assert log_entry["level"] == "WARN"
        assert "fields" not in log_entry

    def test_custom_level_names(self):
        """Test that TRACE, FATAL and PANIC keep their names in the output."""
        stream = StringIO()
        backend = StdoutBackend(level="TRACE", stream=stream, exit_func=lambda code: None)
        entry = backend.with_fields({})

        entry.log(BackendLevel.TRACE, "t")
        entry.log(BackendLevel.FATAL, "f")
        with pytest.raises(PanicError):
            entry.log(BackendLevel.PANIC, "p")

        levels = [json.loads(line)["level"] for line in stream.getvalue().splitlines()]
        assert levels == ["TRACE", "FATAL", "PANIC"]

    def test_level_filtering(self):
        """Test that entries below the configured level are not output."""
        stream = StringIO()
        backend = StdoutBackend(level="WARN", stream=stream)
        entry = backend.with_fields({})

        entry.log(BackendLevel.TRACE, "trace")
        entry.log(BackendLevel.INFO, "info")
        entry.log(BackendLevel.WARN, "warn")

        lines = stream.getvalue().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["message"] == "warn"

    def test_non_serializable_field(self):
        """Test that non-JSON values are rendered with str()."""
        stream = StringIO()
        backend = StdoutBackend(stream=stream)

        backend.with_field("size", object).log(BackendLevel.INFO, "x")

        assert json.loads(stream.getvalue())["fields"]["size"] == str(object)

    def test_backends_do_not_share_handlers(self):
        """Test that two backends with the same name write only to their own stream."""
        first, second = StringIO(), StringIO()
        StdoutBackend(name="same", stream=first).with_fields({}).log(BackendLevel.INFO, "one")
        StdoutBackend(name="same", stream=second).with_fields({}).log(BackendLevel.INFO, "two")

        assert len(first.getvalue().splitlines()) == 1
        assert len(second.getvalue().splitlines()) == 1

    def test_from_config(self):
        """Test creating a backend from LoggingConfig."""
        config = LoggingConfig(level="ERROR", name="from-config", log_format="text")

        backend = StdoutBackend.from_config(config)

        assert backend.level is BackendLevel.ERROR
        assert backend.name == "from-config"
        assert backend.log_format == "text"


class TestTextFormat:
    """Tests for logfmt output."""

    def test_text_output(self):
        """Test logfmt rendering with sorted, quoted fields."""
        stream = StringIO()
        backend = StdoutBackend(log_format="text", stream=stream)

        backend.with_fields({"volumeID": "vol-1", "nodeID": "node 1"}).log(
            BackendLevel.ERROR, "DeleteVolume: failed"
        )

        line = stream.getvalue().strip()
        assert re.match(r"^time=\S+Z level=error ", line)
        assert 'msg="DeleteVolume: failed"' in line
        assert line.endswith('nodeID="node 1" volumeID=vol-1')

    def test_text_empty_value_quoted(self):
        """Test that an empty field value is rendered as an empty quoted string."""
        stream = StringIO()
        backend = StdoutBackend(log_format="TEXT", stream=stream)

        backend.with_field("nodeID", "").log(BackendLevel.INFO, "m")

        assert stream.getvalue().strip().endswith('nodeID=""')
