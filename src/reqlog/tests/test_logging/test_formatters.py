# src/reqlog/tests/test_logging/test_formatters.py
import logging
import json
from reqlog.core.logging.formatters import JsonFormatter, ColorFormatter

def make_record():
    # create a LogRecord that simulates an access line
    return logging.LogRecord("reqlog.access", logging.INFO, __file__, 10, "%s / -> %s", ("GET", "200 OK"), None)

def test_json_formatter_basic_fields():
    rec = make_record()
    # attach extras the way RequestLogger.log does
    rec.http_method = "GET"
    rec.http_status = 200
    rec.response_time_ms = 12.5
    fmt = JsonFormatter(env="testing", service="svc")
    data = json.loads(fmt.format(rec))
    assert data["message"] == "GET / -> 200 OK"
    assert data["level"] == "INFO"
    assert data["logger"] == "reqlog.access"
    assert data["service"] == "svc"
    assert data["env"] == "testing"
    assert "timestamp" in data
    assert "version" in data
    assert data["http_method"] == "GET"
    assert data["http_status"] == 200
    assert data["response_time_ms"] == 12.5

def test_json_formatter_skips_standard_record_attributes():
    data = json.loads(JsonFormatter().format(make_record()))
    for noisy in ("args", "msg", "levelno", "pathname", "thread"):
        assert noisy not in data

def test_json_formatter_non_serializable_extra():
    rec = make_record()
    class X:
        def __repr__(self):
            return "<X>"
    rec.obj = X()
    data = json.loads(JsonFormatter(env="dev", service="svc").format(rec))
    # non-serializable obj should be stringified
    assert data["obj"] == "<X>"

def test_color_formatter_wraps_level_only():
    line = ColorFormatter().format(make_record())
    assert "\033[32mINFO" in line
    assert line.endswith("| GET / -> 200 OK")
    assert "reqlog.access" in line
