"""Tests for logging helpers and correlation ID propagation."""

import logging

import pytest

from profile_rag.observability import get_correlation_id, set_correlation_id
from profile_rag.observability.correlation import clear_correlation_id
from profile_rag.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)
from profile_rag.observability.logger import CorrelationIdFilter


class TestSafeLogValue:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, "None"),
            ("text", "text"),
            ([1, 2, 3], "list(3 items)"),
            ({"a": 1}, "dict(1 keys)"),
            (42, "42"),
        ],
    )
    def test_converts_values(self, value, expected) -> None:
        assert safe_log_value(value) == expected

    def test_truncates_long_values(self) -> None:
        result = safe_log_value("x" * 20, max_length=5)
        assert result == "xxxxx... (truncated, 20 total)"


class TestLogWithContext:
    def test_context_is_attached_to_record(self, caplog) -> None:
        """Should pass converted context as record attributes."""
        logger = logging.getLogger("profile_rag.tests")

        with caplog.at_level(logging.INFO, logger="profile_rag.tests"):
            log_with_context(logger, logging.INFO, "built", failed_count=2, sources=["a", "b"])

        record = caplog.records[-1]
        assert record.getMessage() == "built"
        assert record.failed_count == "2"
        assert record.sources == "list(2 items)"


    def test_exception_context(self, caplog) -> None:
        """Should attach the error type, message and traceback."""
        logger = logging.getLogger("profile_rag.tests")
        error = RuntimeError("provider down")

        with caplog.at_level(logging.ERROR, logger="profile_rag.tests"):
            log_exception_with_context(logger, "rebuild failed", error, previous_state="ready")

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.error_type == "RuntimeError"
        assert record.error_msg == "provider down"
        assert record.previous_state == "ready"
        assert record.exc_info[1] is error


class TestCorrelationId:
    def test_generated_when_missing(self) -> None:
        value = set_correlation_id()
        try:
            assert value
            assert get_correlation_id() == value
        finally:
            clear_correlation_id()

    def test_filter_uses_placeholder_when_unset(self) -> None:
        clear_correlation_id()
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "-"

    def test_filter_uses_current_id(self) -> None:
        set_correlation_id("req-1")
        try:
            record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
            CorrelationIdFilter().filter(record)
            assert record.correlation_id == "req-1"
        finally:
            clear_correlation_id()
