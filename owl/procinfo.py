"""
Process information lookup.

Thin wrapper over psutil returning the name and run-state label of a process.
Labels follow the state names of ``/proc/<pid>/stat`` (Running, Sleeping,
Zombie, ...) regardless of platform.
"""

from dataclasses import dataclass

import psutil

from .exceptions import ProcessInfoError

# psutil status -> run-state label
STATE_LABELS: dict[str, str] = {
    psutil.STATUS_RUNNING: "Running",
    psutil.STATUS_SLEEPING: "Sleeping",
    psutil.STATUS_DISK_SLEEP: "Waiting",
    psutil.STATUS_STOPPED: "Stopped",
    psutil.STATUS_TRACING_STOP: "TraceStopped",
    psutil.STATUS_ZOMBIE: "Zombie",
    psutil.STATUS_DEAD: "Dead",
    psutil.STATUS_WAKING: "Waking",
    psutil.STATUS_IDLE: "Idle",
    psutil.STATUS_PARKED: "Parked",
    psutil.STATUS_WAITING: "Waiting",
    psutil.STATUS_LOCKED: "Locked",
    # Reported by older psutil releases only
    "wake-kill": "Wakekill",
}


def state_label(status: str) -> str:
    """Map a psutil status string to a run-state label."""
    label = STATE_LABELS.get(status)
    if label is not None:
        return label
    return "".join(part.capitalize() for part in status.replace("_", "-").split("-"))


@dataclass(frozen=True)
class ProcessInfo:
    """Snapshot of a process: pid, OS process name and run-state label."""

    pid: int
    name: str
    state: str


def read_process_info(pid: int) -> ProcessInfo:
    """
    Look up name and state of the process with the given pid.

    Raises:
        ProcessInfoError: If the process vanished, access was denied, or the
            platform lookup failed
    """
    try:
        proc = psutil.Process(pid)
        with proc.oneshot():
            name = proc.name()
            status = proc.status()
    except (psutil.Error, OSError) as e:
        raise ProcessInfoError("process lookup failed", pid=pid, error=e) from e
    return ProcessInfo(pid=pid, name=name, state=state_label(status))
