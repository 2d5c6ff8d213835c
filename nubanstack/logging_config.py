"""
Structured Logging Configuration Module

Log records under the "nubanstack" logger hierarchy, rendered either as one
JSON object per line or as plain text.
"""

import logging
import json
from datetime import datetime, timezone
from typing import Optional

from .config import NubanstackConfig, get_config

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Optional attributes log_action attaches to a record
STRUCTURED_FIELDS = ("correlation_id", "action", "resource", "extra")


class JSONFormatter(logging.Formatter):
    """Render a record as a single JSON line"""

    def format(self, record):
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "module": record.module,
            "message": record.getMessage(),
        }
        for field in STRUCTURED_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                entry[field] = value

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def setup_logging(level: str = "INFO", logger_name: str = "nubanstack",
                  log_format: str = "json") -> logging.Logger:
    """
    Attach a single stream handler to logger_name.

    Args:
        level: Log level name, case-insensitive
        logger_name: Logger to configure
        log_format: "json" for structured output, "text" for plain lines

    Returns:
        The configured logger. It no longer propagates to the root logger.
    """
    logger = logging.getLogger(logger_name)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(TEXT_FORMAT) if log_format.lower() == "text" else JSONFormatter()
    )
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))
    logger.propagate = False

    return logger


def setup_logging_from_config(config: Optional[NubanstackConfig] = None) -> logging.Logger:
    """Setup logging from NubanstackConfig (the global one by default)"""
    config = config or get_config()
    return setup_logging(config.log_level, "nubanstack", config.log_format)


def log_action(logger: logging.Logger, level: str, message: str,
               action: Optional[str] = None, resource: Optional[str] = None,
               correlation_id: Optional[str] = None, extra: Optional[dict] = None):
    """Log message with the structured fields JSONFormatter knows about"""
    fields = {
        "action": action,
        "resource": resource,
        "correlation_id": correlation_id,
        "extra": extra,
    }
    logger.log(
        getattr(logging, level.upper()), message,
        extra={k: v for k, v in fields.items() if v}
    )
