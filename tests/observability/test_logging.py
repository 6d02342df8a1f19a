"""Tests for correlation IDs and logging helpers."""

import logging

from ratecard_backend.observability import (
    clear_correlation_id,
    get_correlation_id,
    get_logger,
    set_correlation_id,
)
from ratecard_backend.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)
from ratecard_backend.observability.logger import CorrelationIdFilter


def make_record() -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, "message", None, None)


class TestCorrelationId:
    def teardown_method(self):
        clear_correlation_id()

    def test_set_uses_given_value(self):
        assert set_correlation_id("abc-123") == "abc-123"
        assert get_correlation_id() == "abc-123"

    def test_set_generates_value_when_missing(self):
        generated = set_correlation_id()
        assert generated
        assert get_correlation_id() == generated

    def test_clear(self):
        set_correlation_id("abc-123")
        clear_correlation_id()
        assert get_correlation_id() == ""

    def test_filter_injects_current_id(self):
        set_correlation_id("req-1")
        record = make_record()
        assert CorrelationIdFilter().filter(record) is True
        assert record.correlation_id == "req-1"

    def test_filter_uses_placeholder_outside_request(self):
        record = make_record()
        CorrelationIdFilter().filter(record)
        assert record.correlation_id == "-"


class TestSafeLogValue:
    def test_none(self):
        assert safe_log_value(None) == "None"

    def test_collections_are_summarised(self):
        assert safe_log_value([1, 2, 3]) == "list(3 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"

    def test_scalars_render_as_strings(self):
        assert safe_log_value(42) == "42"
        assert safe_log_value("cardA.pdf") == "cardA.pdf"


def test_log_with_context_passes_safe_extra(caplog):
    logger = get_logger("ratecard_backend.tests")
    with caplog.at_level(logging.INFO, logger="ratecard_backend.tests"):
        log_with_context(logger, logging.INFO, "Text extracted", entries=[1, 2])

    [record] = caplog.records
    assert record.getMessage() == "Text extracted"
    assert record.entries == "list(2 items)"


def test_log_exception_with_context_records_error(caplog):
    logger = get_logger("ratecard_backend.tests")
    with caplog.at_level(logging.ERROR, logger="ratecard_backend.tests"):
        log_exception_with_context(logger, "Extraction failed", ValueError("bad"), job_id=4)

    [record] = caplog.records
    assert record.error_type == "ValueError"
    assert record.error_msg == "bad"
    assert record.job_id == "4"
