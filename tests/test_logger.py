import json
import logging

from utils.logger import JsonFormatter, get_logger


def _record(**extra):
    record = logging.LogRecord("tracking", logging.INFO, __file__, 1, "tracking.inserted", (), None)
    record.__dict__.update(extra)
    return record


def test_formats_extra_fields():
    line = JsonFormatter().format(_record(email="a@b.com", user_id="42"))
    payload = json.loads(line)
    assert payload["level"] == "INFO"
    assert payload["logger"] == "tracking"
    assert payload["message"] == "tracking.inserted"
    assert payload["email"] == "a@b.com"
    assert payload["user_id"] == "42"
    assert "lineno" not in payload


def test_get_logger_configures_once():
    logger = get_logger("test-once")
    assert get_logger("test-once") is logger
    assert len(logger.handlers) == 1
    assert logger.propagate is False
