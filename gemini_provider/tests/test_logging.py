"""Structured logging helpers."""
from __future__ import annotations

import json
import logging

from gemini_provider.base.log_support import JsonFormatter, LogContext
from gemini_provider.base.logging import (
    BASE_LOGGER_NAME,
    REQUIRED_NORMALIZED_KEYS,
    _parse_level,  # type: ignore[attr-defined]
    configure_logger,
    get_logger,
    log_event,
    normalized_log_event,
)
from gemini_provider.tests.helpers import events


def test_parse_level_variants():
    assert _parse_level(None) == logging.INFO
    assert _parse_level("debug") == logging.DEBUG
    assert _parse_level("WARN") == logging.WARNING
    assert _parse_level("bogus", default=logging.ERROR) == logging.ERROR


def test_get_logger_prefixes_names():
    assert get_logger("google.models").name == f"{BASE_LOGGER_NAME}.google.models"
    assert get_logger(f"{BASE_LOGGER_NAME}.x").name == f"{BASE_LOGGER_NAME}.x"
    assert get_logger().propagate is False


def test_log_event_drops_none_fields(log_records):
    log_event(get_logger("t"), "thing", LogContext(provider="Google"), a=1, b=None)
    (ev,) = events(log_records)
    assert ev == {"event": "thing", "provider": "Google", "a": 1, "_level": logging.INFO}


def test_normalized_event_required_keys_and_error_level(log_records):
    normalized_log_event(
        get_logger("t"),
        "chat.error",
        LogContext(provider="Google", model="gemini-2.5-pro"),
        phase="finalize",
        error_code="auth",
        tokens={"totalTokenCount": 3},
        emitted=False,
    )
    (ev,) = events(log_records)
    for key in REQUIRED_NORMALIZED_KEYS:
        assert key in ev
    assert ev["error_code"] == "auth"
    assert ev["tokens"] == {"totalTokenCount": 3}
    assert ev["model"] == "gemini-2.5-pro"
    assert ev["_level"] == logging.WARNING


def test_normalized_event_without_error_is_info(log_records):
    normalized_log_event(get_logger("t"), "models.fetch.start", phase="start", attempt=None)
    (ev,) = events(log_records)
    assert "error_code" not in ev
    assert ev["attempt"] is None
    assert ev["_level"] == logging.INFO


def test_json_formatter_hoists_payload_keys():
    record = logging.LogRecord("gemini_provider.t", logging.INFO, __file__, 1, json.dumps({"event": "e", "x": 2}), None, None)
    out = json.loads(JsonFormatter().format(record))
    assert out["event"] == "e"
    assert out["x"] == 2
    assert out["level"] == "INFO"
    assert "msg" not in out


def test_configure_logger_file_handler(tmp_path):
    path = tmp_path / "logs" / "provider.log"
    logger = configure_logger(level="DEBUG", file_path=str(path))
    try:
        log_event(get_logger("t"), "to.file", x=1)
        for h in logger.handlers:
            h.flush()
        line = path.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["event"] == "to.file"
    finally:
        configure_logger(level="INFO", file_path=None)
    assert not any(getattr(h, "baseFilename", None) for h in logger.handlers)


def test_none_extras_dropped_unless_keep_none(log_records):
    normalized_log_event(get_logger("t"), "e", phase="start", emitted=True, url="https://x", http_status=None)
    log_event(get_logger("t"), "raw", keep_none=True, value=None)
    normalized, raw = events(log_records)
    assert normalized["emitted"] is True
    assert normalized["url"] == "https://x"
    assert "http_status" not in normalized
    assert raw["value"] is None


def test_log_context_bind_and_flatten():
    base = LogContext(provider="Google", api_version="v1beta")
    bound = base.bind(url="https://x/models", skipped=None)
    assert base.extra == {}
    assert bound.to_dict() == {"provider": "Google", "api_version": "v1beta", "url": "https://x/models"}


def test_captured_records_are_live_and_handler_detaches_between_tests(log_records):
    base = get_logger()
    assert sum(1 for h in base.handlers if hasattr(h, "records")) == 1
    log_event(get_logger("t"), "late")
    assert [e["event"] for e in events(log_records)] == ["late"]
