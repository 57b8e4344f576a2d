import logging

import pytest

from llm_dispatch.core.logging import (
    NOISY_HTTP_LOGGERS,
    CorrelationFormatter,
    HttpRequestLogDowngradeFilter,
    configure_root_logging,
    correlation_context,
    set_noisy_http_logger_levels,
)


def _record(name: str, level: int, msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, msg, None, None)


@pytest.mark.unit
class TestHttpRequestLogDowngradeFilter:
    def test_downgrades_info_from_matching_prefix(self):
        record = _record("httpx._client", logging.INFO)

        assert HttpRequestLogDowngradeFilter("httpx").filter(record) is True
        assert record.levelno == logging.DEBUG
        assert record.levelname == "DEBUG"

    def test_leaves_other_loggers_alone(self):
        record = _record("llm_dispatch.llms.base", logging.INFO)

        HttpRequestLogDowngradeFilter("httpx").filter(record)

        assert record.levelno == logging.INFO

    def test_leaves_warnings_alone(self):
        record = _record("httpx", logging.WARNING)

        HttpRequestLogDowngradeFilter("httpx").filter(record)

        assert record.levelno == logging.WARNING


@pytest.mark.unit
class TestCorrelation:
    def test_formatter_prefixes_short_correlation_id(self):
        record = _record("llm_dispatch", logging.INFO, "resolved")
        record.correlation_id = "0123456789abcdef"

        assert CorrelationFormatter("%(message)s").format(record) == "[01234567] resolved"

    def test_formatter_without_correlation_id(self):
        record = _record("llm_dispatch", logging.INFO, "resolved")

        assert CorrelationFormatter("%(message)s").format(record) == "resolved"

    def test_context_tags_records_and_restores_factory(self):
        original_factory = logging.getLogRecordFactory()

        with correlation_context("session-1234"):
            record = logging.getLogRecordFactory()("x", logging.INFO, __file__, 1, "m", None, None)

        assert record.correlation_id == "session-1234"
        assert logging.getLogRecordFactory() is original_factory


@pytest.mark.unit
class TestConfigureRootLogging:
    def test_noisy_http_loggers_are_warning_outside_debug(self):
        set_noisy_http_logger_levels("INFO")

        for name in NOISY_HTTP_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_noisy_http_loggers_follow_debug(self):
        set_noisy_http_logger_levels("DEBUG")

        for name in NOISY_HTTP_LOGGERS:
            assert logging.getLogger(name).level == logging.DEBUG

    def test_installs_single_correlation_handler(self):
        configure_root_logging("debug")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        handler = root.handlers[0]
        assert isinstance(handler.formatter, CorrelationFormatter)
        assert any(isinstance(f, HttpRequestLogDowngradeFilter) for f in handler.filters)

    def test_invalid_level_falls_back_to_info(self):
        configure_root_logging("LOUD")

        assert logging.getLogger().level == logging.INFO

    def setup_method(self):
        self._saved_handlers = list(logging.getLogger().handlers)
        self._saved_level = logging.getLogger().level

    def teardown_method(self):
        # Avoid cross-test leakage since configure_root_logging mutates global logging.
        root = logging.getLogger()
        root.handlers[:] = self._saved_handlers
        root.setLevel(self._saved_level)
        for name in NOISY_HTTP_LOGGERS:
            logging.getLogger(name).setLevel(logging.NOTSET)
