"""
Signal relay.

Intercepts every forwardable signal delivered to the supervisor and re-sends
it to the child process.

Python runs signal handlers on the main thread only, so the handler does the
minimum: it records the signal in the shared state and queues the number. A
daemon thread drains the queue and forwards each signal with os.kill. Stopping
the relay restores the previous handlers and posts a sentinel to the queue.
"""

from __future__ import annotations

import os
import queue
import signal
import threading
from types import FrameType
from typing import Any

from .state import SupervisorState

# Candidate signals to intercept
INTERCEPT_CANDIDATES = (
    "SIGABRT",
    "SIGALRM",
    "SIGBUS",
    "SIGCHLD",
    "SIGCONT",
    "SIGFPE",
    "SIGHUP",
    "SIGILL",
    "SIGINT",
    "SIGIO",
    "SIGKILL",
    "SIGPIPE",
    "SIGPROF",
    "SIGQUIT",
    "SIGSEGV",
    "SIGSTOP",
    "SIGSYS",
    "SIGTERM",
    "SIGTRAP",
    "SIGUSR1",
    "SIGUSR2",
    "SIGWINCH",
)

# Cannot be caught, or must not be handled asynchronously
FORBIDDEN = frozenset({"SIGKILL", "SIGSTOP", "SIGILL", "SIGFPE", "SIGSEGV"})

_STOP = object()


def allowed_signals() -> list[signal.Signals]:
    """Signals the relay subscribes to on this platform."""
    result = []
    for name in INTERCEPT_CANDIDATES:
        if name in FORBIDDEN:
            continue
        sig = getattr(signal, name, None)
        if sig is not None:
            result.append(sig)
    return result


def cast_signal(signum: int) -> signal.Signals | None:
    """Convert a signal number to a deliverable Signals member, if possible."""
    try:
        return signal.Signals(signum)
    except ValueError:
        return None


class SignalRelay:
    """
    Forwards intercepted signals to the published child pid.

    start() must be called from the main thread, as required by
    signal.signal().

    Example:
        relay = SignalRelay(lg, state)
        relay.start()
        ...
        relay.stop()
        relay.join()
    """

    def __init__(
        self,
        lg: Any,
        state: SupervisorState,
        signals: list[signal.Signals] | None = None,
    ) -> None:
        self._lg = lg
        self._state = state
        self._signals = allowed_signals() if signals is None else list(signals)
        self._queue: queue.SimpleQueue[Any] = queue.SimpleQueue()
        self._thread: threading.Thread | None = None
        self._original_handlers: dict[signal.Signals, Any] = {}

    @property
    def signals(self) -> list[signal.Signals]:
        return list(self._signals)

    def start(self) -> None:
        """Install signal handlers and start the forwarding thread."""
        if self._thread is not None:
            raise RuntimeError("Signal relay is already running")

        for sig in self._signals:
            try:
                self._original_handlers[sig] = signal.signal(sig, self._handle_signal)
            except (OSError, ValueError) as e:
                self._lg.debug(
                    "cannot intercept signal", extra={"signal": sig.name, "error": e}
                )

        self._thread = threading.Thread(
            target=self._run, name="owl-signal-relay", daemon=True
        )
        self._thread.start()
        self._lg.debug(
            "signal relay started", extra={"signals": len(self._original_handlers)}
        )

    def stop(self) -> None:
        """Restore previous handlers and end the forwarding thread."""
        for sig, handler in self._original_handlers.items():
            try:
                signal.signal(sig, handler)
            except (OSError, ValueError, TypeError) as e:
                self._lg.debug(
                    "cannot restore signal handler",
                    extra={"signal": sig.name, "error": e},
                )
        self._original_handlers.clear()
        self._queue.put(_STOP)

    def join(self, timeout: float | None = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _handle_signal(self, signum: int, frame: FrameType | None) -> None:
        """Record the signal and hand it to the forwarding thread."""
        self._state.record_signal(signum)
        self._queue.put(signum)

    def _run(self) -> None:
        for signum in iter(self._queue.get, _STOP):
            self.relay(signum)

    def relay(self, signum: int) -> bool:
        """
        Forward one signal to the child.

        Returns:
            True if the signal was delivered, False if there was no child, the
            number was not a deliverable signal, or delivery failed
        """
        pid = self._state.child_pid
        if pid <= 0:
            return False

        sig = cast_signal(signum)
        if sig is None:
            self._lg.debug("signal not forwardable", extra={"signal": signum})
            return False

        try:
            os.kill(pid, sig)
        except OSError as e:
            self._lg.debug(
                "signal forward failed",
                extra={"signal": sig.name, "pid": pid, "error": e},
            )
            return False

        self._lg.debug("signal forwarded", extra={"signal": sig.name, "pid": pid})
        return True
