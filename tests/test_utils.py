"""Tests for shared utilities and exceptions."""
import logging
import logging.handlers
from unittest.mock import patch

import pytest

from fpgaroute.shared.configuration.settings import LoggingSettings
from fpgaroute.shared.exceptions import (
    FpgaRouteException, InvalidNetError, NetRoutingError, RouteTreeError,
    RoutingError, RoutingExhaustedError, ValidationError
)
from fpgaroute.shared.utils import (
    get_context_logger, memory_usage_mb, setup_logging, timing_context,
    validate_log_level, validate_non_negative_number, validate_positive_number
)


class TestExceptions:

    def test_error_code_prefixes_message(self):
        assert str(FpgaRouteException("boom", error_code="E1")) == "[E1] boom"
        assert str(FpgaRouteException("boom")) == "boom"

    def test_details_default_to_empty(self):
        assert FpgaRouteException("boom").details == {}

    def test_routing_error_hierarchy(self):
        error = RoutingExhaustedError("gave up", net_id="n", sink="P", expansions=12)
        assert isinstance(error, NetRoutingError)
        assert isinstance(error, RoutingError)
        assert error.reason == "exhausted"
        assert error.error_code == "ROUTING_EXHAUSTED"
        assert (error.net_id, error.sink, error.expansions) == ("n", "P", 12)

    def test_invalid_net_error(self):
        error = InvalidNetError("no pins", net_id="n", reason="no_sinks")
        assert error.reason == "no_sinks"
        assert str(error) == "[INVALID_NET] no pins"

    def test_route_tree_errors_are_not_routing_errors(self):
        assert not issubclass(RouteTreeError, RoutingError)


class TestValidation:

    @pytest.mark.parametrize("value", [1, 0.5, 10**9])
    def test_positive_accepts(self, value):
        validate_positive_number(value, "x")

    @pytest.mark.parametrize("value", [0, -1, "3", None, True])
    def test_positive_rejects(self, value):
        with pytest.raises(ValidationError) as excinfo:
            validate_positive_number(value, "x")
        assert excinfo.value.field == "x"
        assert excinfo.value.value is value

    def test_non_negative(self):
        validate_non_negative_number(0, "x")
        with pytest.raises(ValidationError):
            validate_non_negative_number(-0.1, "x")

    def test_log_level(self):
        validate_log_level("warning")
        with pytest.raises(ValidationError):
            validate_log_level("NOISY")
        with pytest.raises(ValidationError):
            validate_log_level(10)


class TestPerformanceUtils:

    def test_memory_usage_is_positive(self):
        assert memory_usage_mb() > 0

    def test_timing_context_records_elapsed(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="fpgaroute.shared.utils.performance_utils"):
            with timing_context("block") as timing:
                pass

        assert timing['elapsed'] >= 0.0
        assert timing['memory_mb'] > 0
        assert "block took" in caplog.text

    def test_timing_context_records_on_error(self):
        with patch("fpgaroute.shared.utils.performance_utils.memory_usage_mb", return_value=42.0):
            with pytest.raises(RuntimeError):
                with timing_context("failing") as timing:
                    raise RuntimeError("boom")

        assert 'elapsed' in timing
        assert timing['memory_mb'] == 42.0


class TestLogging:

    def test_context_logger_prefixes_messages(self, caplog):
        log = get_context_logger("fpgaroute.test", net="n1", sink="P")
        with caplog.at_level(logging.INFO, logger="fpgaroute.test"):
            log.info("routed")

        assert caplog.records[-1].getMessage() == "[net=n1 sink=P] routed"
        assert log.isEnabledFor(logging.INFO)

    def test_context_logger_without_context(self, caplog):
        log = get_context_logger("fpgaroute.test")
        with caplog.at_level(logging.WARNING, logger="fpgaroute.test"):
            log.warning("plain")
        assert caplog.records[-1].getMessage() == "plain"

    def test_setup_console_logging(self, isolated_root_logger):
        setup_logging(LoggingSettings(level="DEBUG",
                                      component_levels={'fpgaroute.algorithms': "ERROR"}))

        assert isolated_root_logger.level == logging.DEBUG
        assert len(isolated_root_logger.handlers) == 1
        assert isinstance(isolated_root_logger.handlers[0], logging.StreamHandler)
        assert logging.getLogger('fpgaroute.algorithms').level == logging.ERROR
        logging.getLogger('fpgaroute.algorithms').setLevel(logging.NOTSET)

    def test_setup_file_logging(self, isolated_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "route.log"
        setup_logging(LoggingSettings(console_output=False, file_output=True,
                                      log_file=str(log_file)))

        handlers = isolated_root_logger.handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.handlers.RotatingFileHandler)
        handlers[0].flush()
        assert "fpgaroute logging initialized" in log_file.read_text(encoding='utf-8')
