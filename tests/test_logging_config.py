"""Tests for JSON and text log formatters."""

from __future__ import annotations

import json
import logging
import sys

from villageinfo.logging_config import JSONFormatter, TextFormatter, setup_logging
from villageinfo.services.request_context import request_id_var


def _make_record(msg: str = "hello", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="villageinfo.test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_json_output_structure():
    data = json.loads(JSONFormatter().format(_make_record("dataset loaded")))
    assert data["level"] == "INFO"
    assert data["logger"] == "villageinfo.test"
    assert data["message"] == "dataset loaded"
    assert "timestamp" in data
    assert "lineno" not in data


def test_json_includes_extra_fields():
    record = _make_record("lookup")
    record.state = "Bihar"
    data = json.loads(JSONFormatter().format(record))
    assert data["state"] == "Bihar"


def test_json_request_id():
    token = request_id_var.set("abc123def456")
    try:
        data = json.loads(JSONFormatter().format(_make_record()))
        assert data["request_id"] == "abc123def456"
    finally:
        request_id_var.reset(token)


def test_json_omits_empty_request_id():
    token = request_id_var.set("")
    try:
        data = json.loads(JSONFormatter().format(_make_record()))
        assert "request_id" not in data
    finally:
        request_id_var.reset(token)


def test_json_exception():
    try:
        raise ValueError("bad csv")
    except ValueError:
        record = _make_record("error", logging.ERROR)
        record.exc_info = sys.exc_info()
    data = json.loads(JSONFormatter().format(record))
    assert "ValueError: bad csv" in data["exception"]


def test_text_format_with_request_id():
    token = request_id_var.set("aabbccdd1122ffff")
    try:
        output = TextFormatter().format(_make_record("hello text"))
        assert "[aabbccdd1122]" in output
        assert "villageinfo.test - hello text" in output
    finally:
        request_id_var.reset(token)


def test_setup_logging_json():
    root = logging.getLogger()
    saved_level, saved_handlers = root.level, list(root.handlers)
    try:
        setup_logging("debug", "json")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
        assert logging.getLogger("uvicorn.access").propagate is True
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
