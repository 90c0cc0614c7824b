"""
Configuration file discovery and reading.

The config file is a YAML document whose ``watch`` section mirrors the command
line options::

    watch:
      Host: 192.168.0.90
      Port: 20304
      Heartbeat: 10000

Only scalar values are honoured; they are converted to their canonical text
form so the result can be merged with command line options.
"""

import datetime
import os
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from ..exceptions import ConfigError
from .constants import DEFAULT_CONF_LOCATIONS, MAX_CONFIG_SIZE_BYTES, SECTION_WATCH


def _bool_str(value: bool) -> str:
    return "true" if value else "false"


def _float_str(value: float) -> str:
    return str(int(value)) if value.is_integer() else repr(value)


def _datetime_str(value: datetime.date) -> str:
    return value.isoformat()


# Scalar type -> canonical text. bool precedes int since bool subclasses int.
_STRINGIFIERS: tuple[tuple[type, Callable[[Any], str]], ...] = (
    (str, str),
    (bool, _bool_str),
    (int, str),
    (float, _float_str),
    (datetime.date, _datetime_str),
)


def stringify(value: Any) -> str | None:
    """
    Convert a scalar config value to text.

    Returns:
        Canonical text for str/bool/int/float/date/datetime values, or None
        for unsupported shapes (mappings, sequences, null) which callers skip.
    """
    for kind, convert in _STRINGIFIERS:
        if isinstance(value, kind):
            return convert(value)
    return None


def _check_file_size(path: Path) -> None:
    """Reject oversized config files."""
    file_size = os.path.getsize(path)
    if file_size > MAX_CONFIG_SIZE_BYTES:
        raise ConfigError(
            "configuration file too large",
            path=str(path),
            size=file_size,
            limit=MAX_CONFIG_SIZE_BYTES,
        )


def read_config_file(path: str | Path) -> dict[str, Any]:
    """
    Read and parse one YAML config file.

    Args:
        path: File location

    Returns:
        The parsed top-level mapping

    Raises:
        ConfigError: If the file is missing, unreadable, unparsable, or its
            top level is not a mapping
    """
    path = Path(path)
    try:
        _check_file_size(path)
        with open(path, encoding="utf-8") as f:
            doc = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError("cannot read configuration file", path=str(path)) from e
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise ConfigError("cannot parse configuration file", path=str(path)) from e

    if not isinstance(doc, dict):
        raise ConfigError("configuration root is not a mapping", path=str(path))
    return doc


def locate_config(
    lg: Any,
    explicit_path: str | None,
    candidates: Iterable[str | Path] = DEFAULT_CONF_LOCATIONS,
) -> dict[str, Any] | None:
    """
    Find and read the configuration document.

    When explicit_path is given only that file is tried. Otherwise the
    candidates are probed in order and the first that exists and parses wins.

    Returns:
        The parsed document, or None if no usable file was found
    """
    paths = [explicit_path] if explicit_path is not None else list(candidates)
    for path in paths:
        try:
            doc = read_config_file(path)
        except ConfigError as e:
            lg.debug("config file skipped", extra={"reason": e})
            continue
        lg.debug("config file loaded", extra={"path": str(path)})
        return doc
    return None


def watch_section(lg: Any, doc: Mapping[str, Any] | None) -> dict[str, str]:
    """
    Extract the ``watch`` section as a name -> text mapping.

    Unsupported values are skipped; a missing or non-mapping section yields an
    empty dict.
    """
    if doc is None:
        return {}
    section = doc.get(SECTION_WATCH)
    if not isinstance(section, Mapping):
        return {}

    result: dict[str, str] = {}
    for key, value in section.items():
        text = stringify(value)
        if text is None:
            lg.debug("config value skipped", extra={"key": key})
            continue
        result[str(key)] = text
    return result
