"""
Heartbeat emitter.

Periodically reports the child's run-state to a remote UDP listener. Each
heartbeat is one ASCII datagram::

    <supervisor pid>||<child pid>||<display name>||<run-state>

e.g. ``4242||4243||rsync||Sleeping``. The channel is lossy by design: lookup,
bind and send failures skip the current heartbeat and the loop carries on.

Example:
    emitter = HeartbeatEmitter(lg, state, opts)
    emitter.start()
    ...
    emitter.stop()
    emitter.join()
"""

from __future__ import annotations

import os
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .exceptions import ProcessInfoError
from .net.udp import send_datagram
from .options import Options
from .procinfo import ProcessInfo, read_process_info
from .state import SupervisorState

FIELD_DELIMITER = "||"

# Wait between checks while no child is published
IDLE_POLL_SECS = 0.05


@dataclass(frozen=True)
class StateMessage:
    """One heartbeat payload."""

    supervisor_pid: int
    child_pid: int
    name: str
    state: str

    def render(self) -> str:
        return FIELD_DELIMITER.join(
            (str(self.supervisor_pid), str(self.child_pid), self.name, self.state)
        )

    def encode(self) -> bytes:
        return self.render().encode("ascii", errors="replace")


class HeartbeatEmitter:
    """
    Sends the child's state every interval once a child pid is published.

    Destination and interval are resolved once from the options at
    construction.
    """

    def __init__(
        self,
        lg: Any,
        state: SupervisorState,
        opts: Options,
        lookup: Callable[[int], ProcessInfo] = read_process_info,
        send: Callable[[str, int, bytes], Any] = send_datagram,
        idle_poll: float = IDLE_POLL_SECS,
    ) -> None:
        self._lg = lg
        self._state = state
        self._host = opts.host
        self._port = opts.port
        self._secs = opts.heartbeat_ms / 1000.0
        self._name = opts.name
        self._lookup = lookup
        self._send = send
        self._idle_poll = idle_poll
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._sent = 0

    @property
    def destination(self) -> tuple[str, int]:
        return self._host, self._port

    @property
    def interval(self) -> float:
        """Seconds between heartbeats."""
        return self._secs

    @property
    def sent(self) -> int:
        """Number of datagrams handed to the transport so far."""
        return self._sent

    def build_message(self, info: ProcessInfo) -> StateMessage:
        return StateMessage(
            supervisor_pid=os.getpid(),
            child_pid=info.pid,
            name=self._name if self._name is not None else info.name,
            state=info.state,
        )

    def beat(self) -> bool:
        """
        Run one heartbeat cycle without sleeping.

        Returns:
            True if a datagram was handed to the transport
        """
        pid = self._state.child_pid
        if pid <= 0:
            return False

        try:
            info = self._lookup(pid)
        except ProcessInfoError as e:
            self._lg.debug("heartbeat skipped", extra={"reason": e})
            return False

        message = self.build_message(info)
        try:
            self._send(self._host, self._port, message.encode())
        except OSError as e:
            self._lg.debug(
                "heartbeat send failed",
                extra={"host": self._host, "port": self._port, "error": e},
            )
            return False

        self._sent += 1
        self._lg.debug("heartbeat sent", extra={"message": message.render()})
        return True

    def run(self) -> None:
        """Emit heartbeats until stop() is called."""
        self._lg.debug(
            "heartbeat started",
            extra={"host": self._host, "port": self._port, "secs": self._secs},
        )
        while not self._stop_event.is_set():
            if self._state.child_pid <= 0:
                self._stop_event.wait(self._idle_poll)
                continue
            try:
                self.beat()
            except Exception:
                # Log error but keep the loop alive
                self._lg.exception("Error in heartbeat")
            self._stop_event.wait(self._secs)

    def start(self) -> None:
        """Run the emitter on a daemon thread."""
        if self._thread is not None:
            raise RuntimeError("Heartbeat emitter is already running")
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self.run, name="owl-heartbeat", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        self._stop_event.set()

    def join(self, timeout: float | None = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def get_status(self) -> dict:
        return {
            "running": self.is_running(),
            "destination": f"{self._host}:{self._port}",
            "interval": self._secs,
            "sent": self._sent,
            "stop_requested": self._stop_event.is_set(),
        }
