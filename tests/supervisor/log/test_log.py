"""
Tests for the supervisor logging package.

Tests Logger, LogConfig, LogFormatter and LoggerFactory including:
- Level resolution
- Extra field rendering
- Disabled logging
- Child logger propagation
"""

import logging
from io import StringIO

import pytest

from owl.log import InvalidLogLevelError, LogConfig, Logger, LoggerFactory
from owl.log.formatters import LogFormatter

# =============================================================================
# LogConfig
# =============================================================================


@pytest.mark.unit
class TestLogConfig:
    """Test level resolution."""

    @pytest.mark.parametrize(
        "level,expected",
        [
            ("debug", logging.DEBUG),
            ("INFO", logging.INFO),
            ("warning", logging.WARNING),
            ("trace", 5),
            ("30", 30),
            (logging.ERROR, logging.ERROR),
            (False, False),
            ("false", False),
            (True, logging.INFO),
        ],
    )
    def test_resolve_level(self, level, expected):
        assert LogConfig.from_params(level).level == expected

    def test_invalid_level(self):
        with pytest.raises(InvalidLogLevelError, match="loud"):
            LogConfig.from_params("loud")

    def test_is_frozen(self):
        config = LogConfig.from_params("info")

        with pytest.raises(AttributeError):
            config.level = logging.DEBUG  # type: ignore[misc]


# =============================================================================
# Formatter
# =============================================================================


def _record(msg: str = "hello", extra: dict | None = None) -> logging.LogRecord:
    record = logging.LogRecord("/owl", logging.INFO, __file__, 1, msg, (), None)
    if extra is not None:
        setattr(record, "__owl__extra", extra)
    return record


@pytest.mark.unit
class TestLogFormatter:
    """Test output layout."""

    def test_plain_message(self):
        out = LogFormatter(LogConfig()).format(_record())

        assert "[I] hello" in out
        assert out.endswith("[/owl]")
        assert "\x1b[" not in out

    def test_extra_fields_sorted(self):
        out = LogFormatter(LogConfig()).format(_record(extra={"pid": 3, "code": 1}))

        assert out.index("[code:1]") < out.index("[pid:3]")

    def test_exception_extra(self):
        out = LogFormatter(LogConfig()).format(
            _record(extra={"exception": ValueError("bad")})
        )

        assert "[exception:ValueError: bad]" in out

    def test_colors(self):
        out = LogFormatter(LogConfig(colors=True)).format(_record())

        assert out.startswith("\x1b[")
        assert out.endswith("\x1b[0m")


# =============================================================================
# Logger and factory
# =============================================================================


@pytest.mark.unit
class TestLogger:
    """Test logger behaviour through the factory."""

    def test_root_logger_writes_stream(self, debug_logger, log_stream):
        debug_logger.info("started", extra={"pid": 42})

        out = log_stream.getvalue()
        assert "started" in out
        assert "[pid:42]" in out
        assert "[/owl]" in out

    def test_level_filters(self, log_stream):
        lg = LoggerFactory.create_root(LogConfig.from_params("warning"), log_stream)
        lg.info("hidden")
        lg.warning("shown")

        assert "hidden" not in log_stream.getvalue()
        assert "shown" in log_stream.getvalue()

    def test_disabled_logger(self, quiet_logger):
        assert quiet_logger.logging_disabled is True
        assert quiet_logger.isEnabledFor(logging.CRITICAL) is False

    def test_trace_level(self, log_stream):
        lg = LoggerFactory.create_root(LogConfig.from_params("trace"), log_stream)
        lg.trace("fine grained")

        assert "[T] fine grained" in log_stream.getvalue()

    def test_child_propagates_to_root(self, debug_logger, log_stream):
        child = debug_logger.child("relay", extra={"component": "relay"})
        child.debug("forwarded")

        out = log_stream.getvalue()
        assert "forwarded" in out
        assert "[component:relay]" in out
        assert "[/owl/relay]" in out
        assert isinstance(child, Logger)

    def test_recreate_root_replaces_handler(self, log_stream):
        LoggerFactory.create_root(LogConfig.from_params("info"), StringIO())
        lg = LoggerFactory.create_root(LogConfig.from_params("info"), log_stream)
        lg.info("once")

        assert log_stream.getvalue().count("once") == 1
        assert len(lg.handlers) == 1

