"""
Engine configuration.

Limits are policy for the calling layer, not correctness rules of the
core: the table generator works for any number of variables, the API
layer uses these values to keep 2**k enumeration bounded.

A YAML file may override any default:

    max_free_variables: 12
    warn_free_variables: 10
    max_expression_depth: 8
    simplify: true
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from truthtable.errors import ConfigError


@dataclass
class EngineConfig:
    """
    Properties:
        max_free_variables: Hard limit on enumerated variables (None = unlimited)
        warn_free_variables: Emit a UserWarning above this many (None = never)
        max_expression_depth: Analyzer warns about deeper trees
        simplify: Evaluate the simplified expression when building tables
    """

    max_free_variables: Optional[int] = 20
    warn_free_variables: Optional[int] = 16
    max_expression_depth: int = 10
    simplify: bool = False


_FIELD_TYPES = {
    "max_free_variables": (int, type(None)),
    "warn_free_variables": (int, type(None)),
    "max_expression_depth": (int,),
    "simplify": (bool,),
}


def config_from_dict(data: Optional[Dict[str, Any]]) -> EngineConfig:
    """
    Build a config from a mapping, rejecting unknown keys and bad types.

    Raises:
        ConfigError: On anything that is not a valid override
    """
    if data is None:
        return EngineConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a mapping, got {type(data).__name__}")

    known = {f.name for f in fields(EngineConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    for key, value in data.items():
        allowed = _FIELD_TYPES[key]
        # bool is a subclass of int
        if isinstance(value, bool) and bool not in allowed:
            raise ConfigError(f"Invalid value for {key}: {value!r}")
        if not isinstance(value, allowed):
            raise ConfigError(f"Invalid value for {key}: {value!r}")
        if isinstance(value, int) and not isinstance(value, bool) and value < 0:
            raise ConfigError(f"{key} must not be negative, got {value}")

    return EngineConfig(**data)


def load_config(path: Union[str, Path]) -> EngineConfig:
    """
    Load configuration from a YAML file.

    An empty file gives the defaults.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigError: If the YAML is invalid or has bad values
    """
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    return config_from_dict(data)


__all__ = ["EngineConfig", "config_from_dict", "load_config"]
