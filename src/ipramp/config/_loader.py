# pyright: reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
# pyright: reportExplicitAny=false
"""TOML file loading, environment parsing and dictionary merging."""

import json
import os
import tomllib
from pathlib import Path  # noqa: TC003
from typing import Any

from ipramp.exceptions import ConfigLoadError

ENV_PREFIX = "IPRAMP_"


def read_toml_file(path: Path) -> dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigLoadError: If the file is not valid TOML.
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Failed to parse TOML file: {e}"
        raise ConfigLoadError(msg, path=path, line=e.lineno, column=e.colno) from e


def copy_value(value: Any) -> Any:
    """Deep-copy nested dicts and lists; other values are returned as is."""
    if isinstance(value, dict):
        return {k: copy_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [copy_value(item) for item in value]
    return value


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into ``base`` without modifying either.

    Nested dicts merge recursively. Lists and scalars from ``override``
    replace the base value outright.
    """
    result: dict[str, Any] = {}
    for key in base.keys() | override.keys():
        if key not in override:
            result[key] = copy_value(base[key])
        elif key not in base:
            result[key] = copy_value(override[key])
        elif isinstance(base[key], dict) and isinstance(override[key], dict):
            result[key] = deep_merge(base[key], override[key])
        else:
            result[key] = copy_value(override[key])
    return result


def parse_string_value(value: str) -> Any:
    """Infer a typed value from a string.

    Tried in order: boolean (``true``/``false``, case-insensitive), integer,
    float (only with a decimal point), JSON array, JSON object. Anything
    else stays a string.

    Examples:
        >>> parse_string_value("TRUE")
        True
        >>> parse_string_value("3600")
        3600
        >>> parse_string_value("quality")
        'quality'
    """
    lower = value.lower()
    if lower in {"true", "false"}:
        return lower == "true"

    try:
        return int(value)
    except ValueError:
        pass

    if "." in value:
        try:
            return float(value)
        except ValueError:
            pass

    if (value.startswith("[") and value.endswith("]")) or (
        value.startswith("{") and value.endswith("}")
    ):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            pass

    return value


def set_nested_key(d: dict[str, Any], key_path: str, value: Any) -> None:
    """Set ``value`` at a dotted path, creating intermediate dicts.

    A non-dict value in the way is replaced by a dict.

    Example:
        >>> d = {}
        >>> set_nested_key(d, "storage.key_prefix", "work")
        >>> d
        {'storage': {'key_prefix': 'work'}}
    """
    parts = key_path.split(".")
    current = d
    for part in parts[:-1]:
        if not isinstance(current.get(part), dict):
            current[part] = {}
        current = current[part]
    current[parts[-1]] = value


def parse_env_vars(prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Collect ``<prefix><SECTION>__<KEY>`` variables into a nested dict.

    ``IPRAMP_SPRINT__DEFAULT_TIMER_SECONDS=3600`` becomes
    ``{"sprint": {"default_timer_seconds": 3600}}``. Values go through
    :func:`parse_string_value`.
    """
    result: dict[str, Any] = {}
    for key, value in os.environ.items():
        if not key.startswith(prefix):
            continue
        config_key = key[len(prefix) :]
        if not config_key:
            continue
        set_nested_key(
            result, config_key.replace("__", ".").lower(), parse_string_value(value)
        )
    return result
