from __future__ import annotations

import json
import logging

from customer_usage.utils.logging import JsonFormatter, _json_formatter, configure_logging

EXPECTED_RECORDS = 4
EXPECTED_LINE_NUMBER = 7


def _record(msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_standard_extra_fields() -> None:
    record = _record()
    record.records = EXPECTED_RECORDS
    record.source = "customer.csv"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["records"] == EXPECTED_RECORDS
    assert payload["source"] == "customer.csv"
    assert "lineno" not in payload


def test_json_formatter_renders_logger_extra_kwargs() -> None:
    logger = logging.getLogger("test.json")
    record = logger.makeRecord(
        "test.json",
        logging.WARNING,
        __file__,
        1,
        "Skipping malformed line",
        (),
        None,
        extra={"line_number": EXPECTED_LINE_NUMBER, "source": "customer.csv"},
    )

    payload = json.loads(JsonFormatter().format(record))

    assert payload["line_number"] == EXPECTED_LINE_NUMBER
    assert payload["source"] == "customer.csv"
    assert set(payload) == {"level", "logger", "message", "line_number", "source"}


def test_configure_logging_selects_json_formatter() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging(level="DEBUG", json_logs=True)
        assert root.level == logging.DEBUG
        assert any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)
