"""
=============================================================================
CONFIGURATION
=============================================================================

Command-line settings, kept in one typed, validated dataclass.

=============================================================================
CONFIGURATION SOURCES
=============================================================================

    ┌──────────────────────────────────────────────────────────────────────┐
    │  First match wins:                                                   │
    │                                                                      │
    │  1. CLI flags           python -m httpmessage --log-level DEBUG ...  │
    │  2. HTTPMESSAGE_* vars  HTTPMESSAGE_LOG_LEVEL=DEBUG                  │
    │  3. Dataclass defaults  MessageConfig()                              │
    └──────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

import logging
import os
import re
from dataclasses import dataclass


LOG_FORMATS = ("text", "json")

_PROTOCOL_VERSION_PATTERN = re.compile(r"^\d(\.\d)?$")


@dataclass
class MessageConfig:
    """
    Settings for the command-line tool.

    The library itself never reads them: Request() and Response() default
    to DEFAULT_PROTOCOL_VERSION and ResponseEmitter to DEFAULT_CHUNK_SIZE
    whatever the environment says.

        config = MessageConfig.from_env()
        config.validate()
        configure_logging(config.log_level, config.log_format)
    """

    protocol_version: str = "1.1"
    """Protocol version the CLI gives the requests and responses it builds."""

    log_level: str = "INFO"
    """DEBUG, INFO, WARNING, ERROR or CRITICAL."""

    log_format: str = "text"
    """
    'text' or 'json'.
    JSON is better for log aggregators, text for humans.
    """

    chunk_size: int = 8192
    """Bytes copied per write when the CLI emits a response body."""

    @classmethod
    def from_env(cls) -> "MessageConfig":
        """
        Create configuration from environment variables.

        HTTPMESSAGE_PROTOCOL_VERSION   default 1.1
        HTTPMESSAGE_LOG_LEVEL          default INFO
        HTTPMESSAGE_LOG_FORMAT         default text
        HTTPMESSAGE_CHUNK_SIZE         default 8192

        Raises:
            ValueError: If HTTPMESSAGE_CHUNK_SIZE is not an integer.
        """
        raw_chunk_size = os.getenv("HTTPMESSAGE_CHUNK_SIZE", "8192")
        try:
            chunk_size = int(raw_chunk_size)
        except ValueError:
            raise ValueError(
                f"HTTPMESSAGE_CHUNK_SIZE must be an integer, got {raw_chunk_size!r}"
            ) from None

        return cls(
            protocol_version=os.getenv("HTTPMESSAGE_PROTOCOL_VERSION", "1.1"),
            log_level=os.getenv("HTTPMESSAGE_LOG_LEVEL", "INFO"),
            log_format=os.getenv("HTTPMESSAGE_LOG_FORMAT", "text"),
            chunk_size=chunk_size,
        )

    def validate(self) -> None:
        """
        Fail fast on bad values.

        Raises:
            ValueError: Describing the first invalid setting.
        """
        if not _PROTOCOL_VERSION_PATTERN.match(self.protocol_version):
            raise ValueError(f"Invalid protocol version: {self.protocol_version!r}")

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")

        if self.log_format not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {LOG_FORMATS}, got {self.log_format!r}")

        if self.chunk_size < 1:
            raise ValueError("chunk_size must be >= 1")
