"""
Logging setup with optional structured JSON output.
"""
import json
import logging
from datetime import datetime, timezone
from typing import Optional

from .config import LoggingConfig, get_config

# Attributes every LogRecord carries; anything else was passed via `extra=`.
_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RESERVED:
                log_obj[key] = value
        return json.dumps(log_obj, default=str)


def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Attach a single stream handler to the package logger.

    Calling it again replaces the handler instead of stacking a second one.
    """
    config = config or get_config().logging

    logger = logging.getLogger("ref_schemas")
    for existing in list(logger.handlers):
        if getattr(existing, "_ref_schemas_handler", False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler()
    handler._ref_schemas_handler = True
    if config.json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))

    logger.addHandler(handler)
    logger.setLevel(config.level.upper())
    return logger
