"""
Option resolution for the supervisor command line.

The command line has the form ``owl [+Name:Value ...] command [args...]``.
Leading ``+`` tokens are tool options; the first token that is not an option
starts the child command, and it and everything after it are passed to the
child verbatim.

Options from a config file fill in names not given on the command line; the
command line always wins.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from pathlib import Path
from types import MappingProxyType
from typing import Any

from .config.constants import (
    DEFAULT_CONF_LOCATIONS,
    DEFAULT_HEARTBEAT_MILLIS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_REMOTE_HOST,
    DEFAULT_REMOTE_PORT,
    MAX_HEARTBEAT_MILLIS,
    OPT_CONF,
    OPT_HEARTBEAT,
    OPT_HOST,
    OPT_LOG,
    OPT_NAME,
    OPT_PORT,
    OPTION_DELIMITER,
    OPTION_START,
)
from .config.loader import locate_config, watch_section


def parse_option(token: str) -> tuple[str, str]:
    """
    Split one ``+Name:Value`` token into name and value.

    The value is everything after the first delimiter; without a delimiter
    the value is the empty string.

    Example:
        >>> parse_option("+Port:9090")
        ('Port', '9090')
        >>> parse_option("+Flag")
        ('Flag', '')
    """
    body = token[len(OPTION_START) :] if token.startswith(OPTION_START) else token
    name, _, value = body.partition(OPTION_DELIMITER)
    return name, value


def split_args(argv: Sequence[str]) -> tuple[dict[str, str], tuple[str, ...]]:
    """
    Partition arguments into command line options and the child command.

    Args:
        argv: Arguments without the program name

    Returns:
        (options, command) where command is the residual token tuple
    """
    opts: dict[str, str] = {}
    for index, token in enumerate(argv):
        if not token.startswith(OPTION_START):
            return opts, tuple(argv[index:])
        name, value = parse_option(token)
        opts[name] = value
    return opts, ()


def _parse_port(value: str | None) -> int:
    if not value:
        return DEFAULT_REMOTE_PORT
    try:
        port = int(value)
    except ValueError:
        return DEFAULT_REMOTE_PORT
    return port if 0 < port < 65536 else DEFAULT_REMOTE_PORT


def _parse_millis(value: str | None) -> int:
    if value is None:
        return DEFAULT_HEARTBEAT_MILLIS
    try:
        millis = int(value)
    except ValueError:
        return DEFAULT_HEARTBEAT_MILLIS
    if millis < 0:
        return DEFAULT_HEARTBEAT_MILLIS
    return min(millis, MAX_HEARTBEAT_MILLIS)


class Options(Mapping[str, str]):
    """
    Effective supervisor configuration.

    A read-only name -> value mapping built once at startup. Typed accessors
    apply defaults for names that are absent or unusable.

    Example:
        >>> opts = Options({"Port": "9090"})
        >>> opts.port, opts.heartbeat_ms
        (9090, 1000)
    """

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = MappingProxyType(dict(values or {}))

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Options({dict(self._values)!r})"

    @property
    def host(self) -> str:
        """Telemetry destination host."""
        return self._values.get(OPT_HOST) or DEFAULT_REMOTE_HOST

    @property
    def port(self) -> int:
        """Telemetry destination port."""
        return _parse_port(self._values.get(OPT_PORT))

    @property
    def heartbeat_ms(self) -> int:
        """Delay between heartbeats in milliseconds."""
        return _parse_millis(self._values.get(OPT_HEARTBEAT))

    @property
    def name(self) -> str | None:
        """Display name override for the wrapped command."""
        return self._values.get(OPT_NAME)

    @property
    def conf(self) -> str | None:
        """Explicit config file location."""
        return self._values.get(OPT_CONF)

    @property
    def log_level(self) -> str:
        """Supervisor log level name."""
        return self._values.get(OPT_LOG) or DEFAULT_LOG_LEVEL


def merge_options(
    cli_opts: Mapping[str, str], file_opts: Mapping[str, str]
) -> Options:
    """Merge file options under command line options."""
    merged = dict(file_opts)
    merged.update(cli_opts)
    return Options(merged)


def resolve(
    lg: Any,
    argv: Sequence[str],
    conf_locations: Iterable[str | Path] = DEFAULT_CONF_LOCATIONS,
) -> tuple[Options, tuple[str, ...]]:
    """
    Build the effective configuration and the child command.

    Args:
        lg: Logger for config discovery diagnostics
        argv: Arguments without the program name
        conf_locations: Locations probed when no Conf option is given

    Returns:
        (options, command)
    """
    cli_opts, command = split_args(argv)
    doc = locate_config(lg, cli_opts.get(OPT_CONF), conf_locations)
    opts = merge_options(cli_opts, watch_section(lg, doc))
    return opts, command
