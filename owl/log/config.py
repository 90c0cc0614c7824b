"""
Immutable logger configuration.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .constants import LogConstants
from .exceptions import InvalidLogLevelError


@dataclass(frozen=True)
class LogConfig:
    """
    Immutable configuration for supervisor loggers.

    level is an int for normal levels, or False to disable logging.
    """

    level: int | bool = logging.WARNING
    micros: bool = False
    colors: bool = False

    @staticmethod
    def resolve_level(level: str | int | bool) -> int | bool:
        """
        Resolve a level name, number or bool to an int or False.

        Raises:
            InvalidLogLevelError: If a string level is not recognised
        """
        if isinstance(level, bool):
            return False if not level else logging.INFO
        if isinstance(level, str):
            name = level.strip().lower()
            if name.isnumeric():
                return int(name)
            if name in LogConstants.LEVEL_NAMES:
                return LogConstants.LEVEL_NAMES[name]
            raise InvalidLogLevelError(level)
        return level

    @classmethod
    def from_params(
        cls,
        level: str | int | bool,
        micros: bool = False,
        colors: bool = False,
    ) -> LogConfig:
        """
        Create LogConfig from individual parameters.

        Args:
            level: Log level (string name, numeric value, or False to disable logging)
            micros: Whether to show microsecond precision
            colors: Whether to enable colored output

        Returns:
            LogConfig instance
        """
        return cls(level=cls.resolve_level(level), micros=micros, colors=colors)
