"""Tests for logging, request context and metrics helpers."""

import json
import logging
import sys

from serp_interactions.observability.context import (
    clear_request_context,
    get_request_context,
    set_request_context,
)
from serp_interactions.observability.logging import JsonFormatter, configure_logging
from serp_interactions.observability.metrics import VOTE_CLICKS, get_metrics, get_metrics_content_type


def _record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord("serp_interactions.service_layer.vote_service", logging.INFO, __file__, 1, msg, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    def teardown_method(self):
        clear_request_context()

    def test_basic_fields(self):
        payload = json.loads(JsonFormatter().format(_record()))

        assert payload["level"] == "INFO"
        assert payload["message"] == "hello"
        assert payload["logger"] == "serp_interactions.service_layer.vote_service"
        assert payload["component"] == "vote_service"
        assert "request_id" not in payload

    def test_includes_request_context(self):
        set_request_context("abc123", target_url="https://example.com")

        payload = json.loads(JsonFormatter().format(_record()))

        assert payload["request_id"] == "abc123"
        assert payload["target_url"] == "https://example.com"

    def test_extra_fields_are_redacted(self):
        payload = json.loads(JsonFormatter().format(_record(token="s3cret", group="up")))

        assert payload["token"] == "[REDACTED]"
        assert payload["group"] == "up"

    def test_long_messages_are_truncated(self):
        payload = json.loads(JsonFormatter().format(_record("x" * 5000)))

        assert len(payload["message"]) == JsonFormatter.MAX_MESSAGE_LEN + 3

    def test_exception_info(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = _record()
            record.exc_info = sys.exc_info()

        payload = json.loads(JsonFormatter().format(record))

        assert "RuntimeError: boom" in payload["exception"]


def test_request_context_defaults_empty():
    clear_request_context()
    assert get_request_context() == {}


def test_configure_logging_installs_single_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging("debug", json_output=False, logger_levels={"serp_interactions.ui": "warning"})
        configure_logging("debug", json_output=True, logger_levels={"serp_interactions.ui": "warning"})

        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
        assert root.level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("serp_interactions.ui").level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_metrics_exposition():
    VOTE_CLICKS.labels(kind="cast").inc()

    body = get_metrics().decode()

    assert "serp_vote_clicks_total" in body
    assert get_metrics_content_type().startswith("text/plain")
