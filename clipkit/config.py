"""
Option declarations from YAML files or mappings.

Declaration format::

    context: myapp
    strict: false
    options:
      - short: o
        long: output
        argument: true
        required: true
        description: output file
      - short: v
        long: verbose
        description: verbose mode

Only ``short`` and ``long`` are mandatory per option. The built-in
-h/--help option is always added; declaring -h or --help yourself shadows
it, or fails when ``strict`` is set.
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from .constants import MAX_CONFIG_SIZE_BYTES
from .exceptions import ConfigError, OptionSpecError
from .option import Option
from .registry import OptionsRegistry

lg = logging.getLogger(__name__)

_OPTION_KEYS = {"short", "long", "argument", "required", "description"}

# Helper functions for registry_from_dict()


def _check_file_size(path: Path) -> None:
    """Check file size limit."""
    file_size = os.path.getsize(path)
    if file_size > MAX_CONFIG_SIZE_BYTES:
        raise ConfigError(
            f"Declaration file '{path}' is {file_size} bytes, "
            f"exceeding maximum size of {MAX_CONFIG_SIZE_BYTES} bytes",
            file=str(path),
        )


def _typed(entry: Mapping, key: str, kind: type, default: Any, where: str) -> Any:
    value = entry.get(key, default)
    if not isinstance(value, kind):
        raise ConfigError(
            f"'{key}' must be of type {kind.__name__}, got {type(value).__name__}",
            source=where,
        )
    return value


def _option_from_entry(entry: Any, where: str) -> Option:
    """Build one Option from a declaration entry."""
    if not isinstance(entry, Mapping):
        raise ConfigError("Option entry must be a mapping", source=where)

    unknown = set(entry) - _OPTION_KEYS
    if unknown:
        raise ConfigError(
            f"Unknown option keys: {', '.join(sorted(map(str, unknown)))}",
            source=where,
        )

    for key in ("short", "long"):
        if key not in entry:
            raise ConfigError(f"Option entry is missing '{key}'", source=where)

    try:
        return Option(
            _typed(entry, "short", str, None, where),
            _typed(entry, "long", str, None, where),
            has_argument=_typed(entry, "argument", bool, False, where),
            required=_typed(entry, "required", bool, False, where),
            description=_typed(entry, "description", str, "", where),
        )
    except OptionSpecError as e:
        raise ConfigError(str(e), source=where) from e


def registry_from_dict(data: Any, source: str = "<mapping>") -> OptionsRegistry:
    """
    Build a registry from a declaration mapping.

    Args:
        data: Parsed declaration (see module docstring)
        source: Name used in error messages

    Raises:
        ConfigError: If the declaration is malformed
    """
    if not isinstance(data, Mapping):
        raise ConfigError("Declaration must be a mapping", source=source)

    if "context" not in data:
        raise ConfigError("Declaration is missing 'context'", source=source)
    context = _typed(data, "context", str, None, source)
    strict = _typed(data, "strict", bool, False, source)

    entries = data.get("options") or []
    if not isinstance(entries, list):
        raise ConfigError("'options' must be a list", source=source)

    options = [
        _option_from_entry(entry, f"{source}: options[{idx}]")
        for idx, entry in enumerate(entries)
    ]
    try:
        return OptionsRegistry(context, *options, strict=strict)
    except OptionSpecError as e:
        raise ConfigError(str(e), source=source) from e


def load_registry(fname: str | Path) -> OptionsRegistry:
    """
    Load a registry from a YAML declaration file.

    Raises:
        ConfigError: If the file is missing, unreadable, too large, not
            UTF-8, not valid YAML, or not a valid declaration
    """
    path = Path(fname)
    if not path.is_file():
        raise ConfigError(f"Declaration file '{path}' not found", file=str(path))

    _check_file_size(path)

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}", file=str(path)) from e
    except UnicodeDecodeError as e:
        raise ConfigError(
            f"Declaration file '{path}' is not valid UTF-8: {e}", file=str(path)
        ) from e
    except OSError as e:
        raise ConfigError(
            f"Cannot read declaration file '{path}': {e}", file=str(path)
        ) from e

    registry = registry_from_dict(data, source=str(path))
    lg.info(
        "loaded option declarations",
        extra={"file": str(path), "options": len(registry)},
    )
    return registry
