"""
Shared supervisor state.

One SupervisorState is created at startup and handed to the launcher, the
signal relay and the heartbeat emitter. Each field has a single writer:

- child_pid is written once by the launcher (0 -> pid) and never reset
- last_signal is written by the relay's signal handler, one signal at a time

Plain attribute stores are atomic under the interpreter, so readers need no
lock; publication of child_pid is also signalled through an Event so waiters
can block on it.
"""

import threading

from .exceptions import StateError


class SupervisorState:
    """Child process id and last observed signal, shared across activities."""

    def __init__(self) -> None:
        self._child_pid = 0
        self._last_signal = 0
        self._published = threading.Event()

    @property
    def child_pid(self) -> int:
        """Child process id, 0 until the child has been spawned."""
        return self._child_pid

    @property
    def last_signal(self) -> int:
        """Number of the most recently observed signal, 0 if none."""
        return self._last_signal

    def publish_child(self, pid: int) -> None:
        """
        Publish the spawned child's process id.

        Raises:
            StateError: If pid is not positive or a child was already published
        """
        if pid <= 0:
            raise StateError("child pid must be positive", pid=pid)
        if self._child_pid:
            raise StateError(
                "child pid already published", current=self._child_pid, pid=pid
            )
        self._child_pid = pid
        self._published.set()

    def record_signal(self, signum: int) -> None:
        """Remember the most recently observed signal."""
        self._last_signal = signum

    def wait_for_child(self, timeout: float | None = None) -> bool:
        """Block until a child pid is published; returns False on timeout."""
        return self._published.wait(timeout)

    def __repr__(self) -> str:
        return (
            f"SupervisorState(child_pid={self._child_pid}, "
            f"last_signal={self._last_signal})"
        )
