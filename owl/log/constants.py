"""
Constants and configuration values for the logging system.
"""

import logging


class LogConstants:
    """Constants for the logging system."""

    # Default format string
    DEFAULT_FORMAT: str = "[%(asctime)s] [%(levelname).1s] %(message)s"

    # Extra fields start after this column
    DEFAULT_RULE_WIDTH: int = 60

    # Custom log levels
    CUSTOM_LEVELS: dict[str, int] = {"TRACE": 5}

    # Log level names for resolution
    LEVEL_NAMES: dict[str, int | bool] = {
        "trace": 5,
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
        "critical": logging.CRITICAL,
        "false": False,  # Special value to disable all logging
    }

    # ANSI escape sequences
    RESET: str = "\x1b[0m"
    GRAY: str = "\x1b[38;5;244m"
    COLORS: dict[int, str] = {
        5: "\x1b[38;5;240m",
        logging.DEBUG: "\x1b[38;5;32m",
        logging.INFO: "\x1b[36m",
        logging.WARNING: "\x1b[33m",
        logging.ERROR: "\x1b[31m",
        logging.CRITICAL: "\x1b[35m",
    }
