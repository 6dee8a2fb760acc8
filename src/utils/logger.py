import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Attributes every LogRecord has; anything else came in through `extra=`.
_RESERVED = set(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """
    JSON formatter for Lambda logs.
    One object per line, with any `extra={...}` fields merged in so they can
    be queried in CloudWatch Logs Insights.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S,%f%z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in _RESERVED and not key.startswith("_"):
                payload[key] = value

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def get_logger(name: str = "verify-email") -> logging.Logger:
    """
    Returns a JSON-logging logger for the given name.
    Safe to call many times; handlers are only attached once.
    """
    logger = logging.getLogger(name)

    if getattr(logger, "_configured", False):
        return logger

    level = getattr(logging, LOG_LEVEL, logging.INFO)
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)

    # We emit JSON ourselves; the Lambda root handler would double-log.
    logger.propagate = False

    logger._configured = True  # type: ignore[attr-defined]

    return logger

