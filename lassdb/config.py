"""Database configuration read from a TOML file."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

DEFAULT_CONFIG_PATH = "lassdb.toml"


class ConfigError(ValueError):
    """Raised when a configuration is malformed."""


@dataclass(frozen=True)
class Config:
    """Settings controlling persistence of the database."""

    autosave: bool
    flush_on_exit: bool
    snapshot_path: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Config:
        """Build a configuration from a parsed mapping, checking every field."""
        expected = {"autosave": bool, "flush_on_exit": bool, "snapshot_path": str}
        values = {}
        for name, kind in expected.items():
            if name not in data:
                raise ConfigError(f"missing field {name!r}")
            value = data[name]
            if not isinstance(value, kind):
                raise ConfigError(
                    f"field {name!r} must be {kind.__name__}, got {type(value).__name__}"
                )
            values[name] = value
        return cls(**values)


def load_config(path: str | os.PathLike[str] = DEFAULT_CONFIG_PATH) -> Config:
    """Read and validate the configuration file at ``path``."""
    content = Path(path).read_text(encoding="utf-8")
    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid config format: {exc}") from exc
    return Config.from_dict(data)