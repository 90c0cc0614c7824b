"""
Log formatter for the supervisor logger.

Renders records as::

    [12:34:56,789] [I] child started     [pid:4242] [1234] [/owl/launcher]

Extra fields are sorted by key and bracketed after the message, followed by
the supervisor pid and the logger name.
"""

import logging
from typing import Any

from .config import LogConfig
from .constants import LogConstants


def _format_extra(record: logging.LogRecord) -> str:
    """Format extra fields as ``[key:value]`` pairs."""
    extra: dict[str, Any] | None = getattr(record, "__owl__extra", None)
    if not extra:
        return ""

    parts = []
    for key in sorted(extra):
        value = extra[key]
        if isinstance(value, BaseException):
            value = f"{value.__class__.__name__}: {value}"
        parts.append(f"[{key}:{value}]")
    return " " + " ".join(parts)


class LogFormatter(logging.Formatter):
    """
    Formatter producing the supervisor's single-line log layout.

    Colors are applied per level when enabled in LogConfig.
    """

    def __init__(self, config: LogConfig) -> None:
        super().__init__(LogConstants.DEFAULT_FORMAT)
        self._config = config

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        """Format timestamp with optional microsecond precision."""
        s = super().formatTime(record, "%H:%M:%S")
        s += f",{int(record.msecs):03d}"
        if self._config.micros:
            micros = int((record.created % 1) * 1000000) % 1000
            s += f"{micros:03d}"
        return s

    def format(self, record: logging.LogRecord) -> str:
        """Format the record with padding, extra fields and metadata."""
        head = super().format(record)
        first, sep, rest = head.partition("\n")

        pad = " " * max(1, LogConstants.DEFAULT_RULE_WIDTH - len(first))
        body = first + pad + _format_extra(record).lstrip()
        meta = f" [{record.process}] [{record.name}]"

        if self._config.colors:
            col = LogConstants.COLORS.get(record.levelno, "")
            line = col + body + LogConstants.GRAY + meta + LogConstants.RESET
        else:
            line = body + meta

        return line + sep + rest
