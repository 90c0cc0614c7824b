from importlib.metadata import PackageNotFoundError, version

from .exceptions import (
    ConfigError,
    LaunchError,
    OwlError,
    ProcessInfoError,
    StateError,
)
from .heartbeat import HeartbeatEmitter, StateMessage
from .launcher import CommandLauncher, exit_code_for
from .options import Options, parse_option, resolve, split_args
from .procinfo import ProcessInfo, read_process_info
from .relay import SignalRelay, allowed_signals
from .state import SupervisorState

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("owl-supervisor")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

# Explicit public API
__all__ = [
    "__version__",
    # Core
    "CommandLauncher",
    "HeartbeatEmitter",
    "Options",
    "ProcessInfo",
    "SignalRelay",
    "StateMessage",
    "SupervisorState",
    # Functions
    "allowed_signals",
    "exit_code_for",
    "parse_option",
    "read_process_info",
    "resolve",
    "split_args",
    # Exceptions
    "OwlError",
    "ConfigError",
    "LaunchError",
    "ProcessInfoError",
    "StateError",
]
