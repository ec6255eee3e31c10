"""
Logging setup for httpmessage.

Every module logs through ``logging.getLogger(__name__)``, so the whole
package hangs off the "httpmessage" logger:

    logging.getLogger("httpmessage").setLevel(logging.DEBUG)
    logging.getLogger("httpmessage.http.response").addHandler(file_handler)

configure_logging() is what the CLI calls; library users normally
configure logging themselves.
"""

import json
import logging
from datetime import datetime, timezone


TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """One JSON object per record, for log aggregators (ELK, Datadog)."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def configure_logging(level: str = "INFO", log_format: str = "text") -> logging.Logger:
    """
    Configure the root handler and the "httpmessage" logger level.

    Args:
        level: Level name (DEBUG, INFO, ...); unknown names fall back to INFO.
        log_format: "text" or "json".

    Returns:
        The "httpmessage" logger.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler()
    if log_format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT))

    logging.basicConfig(level=numeric_level, handlers=[handler], force=True)

    package_logger = logging.getLogger("httpmessage")
    package_logger.setLevel(numeric_level)
    return package_logger
