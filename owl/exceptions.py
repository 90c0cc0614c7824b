"""
Exception hierarchy for the owl supervisor.

Only LaunchError ever reaches the operator (as a diagnostic and a non-zero exit
code). The other errors are raised inside a component and absorbed by its
caller so that the wrapped command is never disturbed by telemetry, signal
relay or configuration trouble.
"""

from typing import Any


class OwlError(Exception):
    """
    Base exception for all owl errors.

    Example:
        try:
            launcher.run()
        except OwlError as e:
            lg.error(f"supervisor error: {e}")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class LaunchError(OwlError):
    """
    The child command could not be spawned or its exit status retrieved.

    Examples:
        - Executable not found
        - Permission denied
        - wait() failed
    """

    pass


class ConfigError(OwlError):
    """
    Configuration file could not be read or parsed.

    Never escapes the option resolver: a broken file means "no configuration".
    """

    pass


class StateError(OwlError):
    """Invalid transition of the shared supervisor state."""

    pass


class ProcessInfoError(OwlError):
    """Process information lookup failed (vanished, denied, unsupported)."""

    pass
