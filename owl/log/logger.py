"""
Logger class for the supervisor.

Extends the standard Python logger with pre-populated extra fields, a TRACE
level and an explicit "disabled" mode (level=False).
"""

import logging
import sys
from typing import Any

from .config import LogConfig
from .constants import LogConstants


class Logger(logging.Logger):
    """
    Enhanced logger with extra field handling.

    Extra fields given per call are merged over the fields given at creation
    and attached to the record as ``__owl__extra`` for LogFormatter.
    """

    def __init__(
        self,
        name: str,
        config: LogConfig | None = None,
        extra: dict[str, Any] | None = None,
    ):
        """
        Initialize the enhanced logger.

        Args:
            name: Logger name
            config: Logger configuration (default LogConfig if None)
            extra: Pre-populated extra fields to include in all log records
        """
        # Handle case where Logger is instantiated by standard logging system
        if config is None:
            config = LogConfig()

        if config.level is False:
            super().__init__(name, logging.CRITICAL + 1)
            self._logging_disabled = True
        else:
            super().__init__(name, config.level)
            self._logging_disabled = False

        self._config = config
        self._extra = extra or {}

    @property
    def config(self) -> LogConfig:
        """Get logger configuration."""
        return self._config

    @property
    def logging_disabled(self) -> bool:
        """Check if logging is disabled (level=False)."""
        return self._logging_disabled

    def child(self, suffix: str, extra: dict[str, Any] | None = None) -> "Logger":
        """
        Create a derived logger named ``<self.name>/<suffix>``.

        The child shares this logger's config and handlers.
        """
        from .factory import LoggerFactory

        merged = dict(self._extra)
        if extra:
            merged.update(extra)
        return LoggerFactory.create(f"{self.name}/{suffix}", self._config, extra=merged)

    def makeRecord(  # type: ignore[override]
        self,
        name: str,
        level: int,
        fn: str,
        lno: int,
        msg: str,
        args: tuple,
        exc_info: Any,
        func: str | None = None,
        extra: dict[str, Any] | None = None,
        sinfo: str | None = None,
    ) -> logging.LogRecord:
        """Create log record with extra field handling."""
        merged_extra = dict(self._extra)
        if extra:
            merged_extra.update(extra)
        record = super().makeRecord(
            name, level, fn, lno, msg, args, exc_info, func=func, sinfo=sinfo
        )
        # Use setattr to avoid Python name mangling with __ prefix
        setattr(record, "__owl__extra", merged_extra)
        return record

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a TRACE level message."""
        if self._logging_disabled:
            return
        trace_level = LogConstants.CUSTOM_LEVELS["TRACE"]
        if self.isEnabledFor(trace_level):
            self._log(trace_level, msg, args, **kwargs)

    def _log(self, level: int, msg: str, args: tuple, **kwargs: Any) -> None:  # type: ignore[override]
        if self._logging_disabled:
            return

        try:
            super()._log(level, msg, args, **kwargs)
        except (TypeError, ValueError) as e:
            # Log to stderr so format bugs don't go unnoticed
            msg_preview = msg[:80] + "..." if len(msg) > 80 else msg
            sys.stderr.write(
                f"LOG_FORMAT_ERROR [{self.name}]: {e.__class__.__name__}: {e} "
                f"| msg={msg_preview!r} args={args!r}\n"
            )
