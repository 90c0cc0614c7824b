"""
Configuration file support for the supervisor.
"""

from .constants import (
    DEFAULT_CONF_LOCATIONS,
    DEFAULT_HEARTBEAT_MILLIS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_REMOTE_HOST,
    DEFAULT_REMOTE_PORT,
    SECTION_WATCH,
)
from .loader import locate_config, read_config_file, stringify, watch_section

__all__ = [
    "DEFAULT_CONF_LOCATIONS",
    "DEFAULT_HEARTBEAT_MILLIS",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_REMOTE_HOST",
    "DEFAULT_REMOTE_PORT",
    "SECTION_WATCH",
    "locate_config",
    "read_config_file",
    "stringify",
    "watch_section",
]
