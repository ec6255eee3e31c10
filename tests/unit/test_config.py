"""
Unit tests for configuration and logging setup.
"""

import io
import json
import logging

import pytest

from httpmessage import Request, Response, ResponseEmitter
from httpmessage.config import MessageConfig
from httpmessage.http.message import DEFAULT_PROTOCOL_VERSION
from httpmessage.http.response import DEFAULT_CHUNK_SIZE
from httpmessage.log import JsonFormatter, configure_logging


class TestMessageConfig:
    """Tests for MessageConfig."""

    def test_defaults(self):
        """Test default values."""
        config = MessageConfig()

        assert config.protocol_version == "1.1"
        assert config.log_level == "INFO"
        assert config.log_format == "text"
        assert config.chunk_size == 8192
        config.validate()

    def test_from_env(self, monkeypatch):
        """Test reading settings from the environment."""
        monkeypatch.setenv("HTTPMESSAGE_PROTOCOL_VERSION", "2")
        monkeypatch.setenv("HTTPMESSAGE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("HTTPMESSAGE_LOG_FORMAT", "json")
        monkeypatch.setenv("HTTPMESSAGE_CHUNK_SIZE", "1024")

        config = MessageConfig.from_env()

        assert config.protocol_version == "2"
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"
        assert config.chunk_size == 1024

    def test_from_env_defaults(self, monkeypatch):
        """Test that unset variables fall back to defaults."""
        for name in ("PROTOCOL_VERSION", "LOG_LEVEL", "LOG_FORMAT", "CHUNK_SIZE"):
            monkeypatch.delenv(f"HTTPMESSAGE_{name}", raising=False)
        assert MessageConfig.from_env() == MessageConfig()

    def test_from_env_bad_chunk_size(self, monkeypatch):
        """Test that a non-numeric chunk size is reported as ValueError."""
        monkeypatch.setenv("HTTPMESSAGE_CHUNK_SIZE", "lots")

        with pytest.raises(ValueError, match="HTTPMESSAGE_CHUNK_SIZE"):
            MessageConfig.from_env()

    def test_environment_does_not_change_library_defaults(self, monkeypatch):
        """Test that config only feeds the CLI, never the value types."""
        monkeypatch.setenv("HTTPMESSAGE_PROTOCOL_VERSION", "1.0")
        monkeypatch.setenv("HTTPMESSAGE_CHUNK_SIZE", "16")

        assert Request().protocol_version == DEFAULT_PROTOCOL_VERSION
        assert Response().protocol_version == DEFAULT_PROTOCOL_VERSION
        assert ResponseEmitter(io.BytesIO()).chunk_size == DEFAULT_CHUNK_SIZE

    @pytest.mark.parametrize("changes", [
        {"protocol_version": "HTTP/1.1"},
        {"protocol_version": "1.1.1"},
        {"log_level": "LOUD"},
        {"log_format": "xml"},
        {"chunk_size": 0},
    ])
    def test_validate_rejects(self, changes):
        """Test that invalid settings fail validation."""
        with pytest.raises(ValueError):
            MessageConfig(**changes).validate()

    def test_lowercase_level_accepted(self):
        """Test that level names are case-insensitive."""
        MessageConfig(log_level="debug").validate()


@pytest.mark.usefixtures("restore_logging")
class TestLogging:
    """Tests for configure_logging and the JSON formatter."""

    def test_configure_sets_package_level(self):
        """Test that the package logger gets the requested level."""
        logger = configure_logging("WARNING")

        assert logger.name == "httpmessage"
        assert logger.level == logging.WARNING

    def test_unknown_level_falls_back(self):
        """Test that an unknown level name means INFO."""
        assert configure_logging("NOPE").level == logging.INFO

    def test_json_format_installs_formatter(self):
        """Test that json format puts a JsonFormatter on the root handler."""
        configure_logging("INFO", "json")
        assert isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)

    def test_json_formatter_output(self):
        """Test the shape of a JSON log line."""
        record = logging.LogRecord(
            name="httpmessage.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="hello %s",
            args=("world",),
            exc_info=None,
        )

        entry = json.loads(JsonFormatter().format(record))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "httpmessage.test"
        assert entry["message"] == "hello world"
        assert "timestamp" in entry
        assert "exception" not in entry
