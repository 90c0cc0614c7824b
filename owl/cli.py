"""
owl - wrap a command and report its state over UDP.

Usage:
    owl [+Name:Value ...] command [args...]

Example:
    owl +Host:127.0.0.1 +Port:9090 rsync -avz /home/user root@192.168.56.102:/home

Options (case-sensitive):
    +Conf:<path>       config file, instead of ./owl.yaml, /etc/owl/owl.yaml, /etc/owl.yaml
    +Host:<host>       telemetry destination host (default 0.0.0.0)
    +Port:<port>       telemetry destination port (default 39576)
    +Heartbeat:<ms>    delay between heartbeats (default 1000)
    +Name:<name>       display name reported instead of the process name
    +Log:<level>       supervisor log level (default warning, "false" to silence)
"""

import sys
from collections.abc import Sequence

from .config.constants import DEFAULT_LOG_LEVEL
from .exceptions import LaunchError
from .heartbeat import HeartbeatEmitter
from .launcher import EXIT_LAUNCH_FAILURE, CommandLauncher
from .log import InvalidLogLevelError, LogConfig, Logger, LoggerFactory
from .options import Options, resolve, split_args
from .relay import SignalRelay
from .state import SupervisorState

# Background activities get this long to wind down after the child exits
STOP_TIMEOUT_SECS = 1.0


def _log_config(level: str) -> LogConfig:
    colors = sys.stderr.isatty()
    try:
        return LogConfig.from_params(level, colors=colors)
    except InvalidLogLevelError:
        return LogConfig.from_params(DEFAULT_LOG_LEVEL, colors=colors)


def _create_logger(level: str) -> Logger:
    return LoggerFactory.create_root(_log_config(level))


def run(argv: Sequence[str], lg: Logger) -> int:
    """
    Supervise one command and return the exit code for the supervisor.

    Args:
        argv: Arguments without the program name
        lg: Root supervisor logger

    Returns:
        The child's exit code, 128 + signal on death by signal, 125 when the
        command cannot be launched, 0 without a command
    """
    opts, command = resolve(lg, argv)
    config = _log_config(opts.log_level)
    if config != lg.config:
        lg = LoggerFactory.create_root(config)

    if not command:
        lg.debug("no command given")
        return 0

    state = SupervisorState()
    relay = SignalRelay(lg.child("relay"), state)
    emitter = HeartbeatEmitter(lg.child("heartbeat"), state, opts)
    launcher = CommandLauncher(lg.child("launcher"), state, command)

    relay.start()
    emitter.start()
    try:
        return launcher.run()
    except LaunchError as e:
        lg.error("cannot run command", extra={"exception": e})
        return EXIT_LAUNCH_FAILURE
    finally:
        _shutdown(relay, emitter)


def _shutdown(relay: SignalRelay, emitter: HeartbeatEmitter) -> None:
    relay.stop()
    emitter.stop()
    relay.join(STOP_TIMEOUT_SECS)
    emitter.join(STOP_TIMEOUT_SECS)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the owl command."""
    args = list(sys.argv[1:] if argv is None else argv)
    cli_opts, _ = split_args(args)
    lg = _create_logger(Options(cli_opts).log_level)
    return run(args, lg)


if __name__ == "__main__":
    sys.exit(main())
