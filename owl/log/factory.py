"""
Factory for creating and configuring supervisor loggers.

Loggers are named with ``/``-separated paths (``/owl``, ``/owl/relay``) and
write to stderr: the child owns stdout for the whole run.
"""

import logging
import sys
from typing import Any

from .config import LogConfig
from .formatters import LogFormatter
from .logger import Logger


class LoggerFactory:
    """Factory for creating and configuring loggers."""

    @staticmethod
    def create_root(config: LogConfig, stream: Any = None) -> Logger:
        """
        Create the ``/owl`` root logger with a stderr handler.

        Args:
            config: Logger configuration
            stream: Output stream (defaults to sys.stderr)

        Returns:
            Configured root logger

        Example:
            >>> config = LogConfig.from_params("info")
            >>> lg = LoggerFactory.create_root(config)
            >>> lg.info("supervisor started")
            [12:34:56,789] [I] supervisor started      [1234] [/owl]
        """
        lg = LoggerFactory.create("/owl", config)
        for handler in list(lg.handlers):
            lg.removeHandler(handler)

        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        if config.level is not False:
            handler.setLevel(config.level)
        handler.setFormatter(LogFormatter(config))
        lg.addHandler(handler)
        return lg

    @staticmethod
    def create(
        name: str,
        config: LogConfig,
        extra: dict[str, Any] | None = None,
    ) -> Logger:
        """
        Create (or reconfigure) a logger with the given configuration.

        Child loggers (``/owl/...``) have no handlers of their own and
        propagate to their parent through the ``/`` hierarchy.

        Args:
            name: Logger name
            config: Logger configuration
            extra: Pre-populated extra fields to include in all log records

        Returns:
            Configured logger instance
        """
        manager = logging.root.manager
        existing = manager.loggerDict.get(name)
        if isinstance(existing, Logger):
            existing._config = config
            existing._extra = extra or {}
            existing._logging_disabled = config.level is False
            existing.setLevel(
                logging.CRITICAL + 1 if config.level is False else config.level
            )
            return existing

        lg = Logger(name, config, extra=extra)
        lg.manager = manager
        lg.parent = LoggerFactory._find_parent(name)
        lg.propagate = lg.parent is not logging.root
        manager.loggerDict[name] = lg
        return lg

    @staticmethod
    def _find_parent(name: str) -> logging.Logger:
        """Find the nearest existing ``/``-path ancestor, else the root logger."""
        path = name.rstrip("/")
        while "/" in path:
            path = path.rsplit("/", 1)[0]
            candidate = logging.root.manager.loggerDict.get(path)
            if isinstance(candidate, Logger):
                return candidate
        return logging.root
