"""
Supervisor logging.

Extends Python's standard logging with:
- A TRACE level below DEBUG
- Structured extra fields rendered as ``[key:value]``
- ``/``-separated logger hierarchy rooted at ``/owl``
- Complete logging disable (level=False or level="false")

Output always goes to stderr so the wrapped command's stdout stays untouched.
"""

import logging

from .config import LogConfig
from .constants import LogConstants
from .exceptions import InvalidLogLevelError, LogError
from .factory import LoggerFactory
from .logger import Logger

logging.addLevelName(LogConstants.CUSTOM_LEVELS["TRACE"], "TRACE")

__all__ = [
    "InvalidLogLevelError",
    "LogConfig",
    "LogConstants",
    "LogError",
    "Logger",
    "LoggerFactory",
]
