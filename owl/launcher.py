"""
Command launcher.

Runs the wrapped command as a child process with the supervisor's standard
streams, publishes its pid into the shared state and maps its termination to
the supervisor's exit code.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from typing import Any

from .exceptions import LaunchError
from .state import SupervisorState

SUCCESS = 0

# Shell convention: death by signal N is reported as 128 + N
UNIX_SIGNAL_EXIT_CODE = 128

# Reported when the command cannot be spawned or waited for
EXIT_LAUNCH_FAILURE = 125


def exit_code_for(returncode: int, last_signal: int) -> int:
    """
    Map a Popen return code to the supervisor's exit code.

    Normal exits propagate unchanged. A negative return code carries the
    terminating signal, giving ``128 + signum``. If the signal number is not
    available the last signal observed by the supervisor is used instead,
    which is only an approximation of what killed the child.
    """
    if returncode >= 0:
        return returncode
    signum = -returncode
    return UNIX_SIGNAL_EXIT_CODE + (signum or last_signal)


class CommandLauncher:
    """
    Spawns and waits for the wrapped command.

    Example:
        state = SupervisorState()
        launcher = CommandLauncher(lg, state, ("rsync", "-avz", "/a", "b"))
        code = launcher.run()
    """

    def __init__(
        self, lg: Any, state: SupervisorState, command: Sequence[str]
    ) -> None:
        self._lg = lg
        self._state = state
        self._command = tuple(command)
        self._proc: subprocess.Popen | None = None

    @property
    def command(self) -> tuple[str, ...]:
        return self._command

    def spawn(self) -> subprocess.Popen:
        """
        Start the child and publish its pid.

        Raises:
            LaunchError: If the command cannot be executed
        """
        try:
            proc = subprocess.Popen(self._command)
        except (OSError, ValueError) as e:
            raise LaunchError(
                "failed to execute command", command=self._command[0], error=e
            ) from e

        self._proc = proc
        self._state.publish_child(proc.pid)
        self._lg.debug(
            "child started", extra={"pid": proc.pid, "command": self._command[0]}
        )
        return proc

    def wait(self) -> int:
        """
        Block until the child terminates and return the mapped exit code.

        Raises:
            LaunchError: If the termination status cannot be retrieved
        """
        if self._proc is None:
            raise LaunchError("command not started")

        try:
            returncode = self._proc.wait()
        except OSError as e:
            raise LaunchError(
                "failed to retrieve command exit status", pid=self._proc.pid, error=e
            ) from e

        code = exit_code_for(returncode, self._state.last_signal)
        self._lg.debug(
            "child exited",
            extra={"pid": self._proc.pid, "returncode": returncode, "code": code},
        )
        return code

    def run(self) -> int:
        """Run the command to completion; an empty command succeeds at once."""
        if not self._command:
            return SUCCESS
        self.spawn()
        return self.wait()
