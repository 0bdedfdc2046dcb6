from __future__ import annotations

import json
import logging
import sys

from branch_sales.utils.logging import JsonFormatter, _json_formatter

EXPECTED_ROWS = 10
EXPECTED_WORKERS = 4


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
    record.rows = EXPECTED_ROWS
    record.statistic = "total_profit"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["rows"] == EXPECTED_ROWS
    assert payload["statistic"] == "total_profit"
    assert "lineno" not in payload


def test_json_formatter_supports_legacy_nested_extra_field() -> None:
    record = _record()
    record.extra = {"workers": EXPECTED_WORKERS}

    payload = json.loads(_json_formatter(record))

    assert payload["workers"] == EXPECTED_WORKERS
    assert "extra" not in payload


def test_json_formatter_includes_exception_text() -> None:
    try:
        raise ValueError("bad row")
    except ValueError:
        record = logging.LogRecord(
            "test.logger", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
        )

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "ERROR"
    assert "ValueError: bad row" in payload["exc_info"]
