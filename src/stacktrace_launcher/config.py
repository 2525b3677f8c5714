"""Launcher configuration loader.

Settings come from an optional ``launcher.yaml`` placed beside the launcher
script. Every key is optional; a missing or empty file yields the defaults,
which reproduce ``cargo run --quiet --manifest-path <dir>/Cargo.toml``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Final

try:
    import yaml
except ImportError as exc:  # pragma: no cover
    raise RuntimeError("PyYAML is required to load launcher.yaml") from exc

from .errors import ConfigError
from .paths import MANIFEST_NAME

CONFIG_NAME: Final[str] = "launcher.yaml"
_SCALAR_TYPES: Final[tuple[type, ...]] = (str, int, float)


def _as_tuple(key: str, values: Any) -> tuple[str, ...]:
    if isinstance(values, str):
        return (values,)
    if not isinstance(values, list) or not all(
        isinstance(value, _SCALAR_TYPES) and not isinstance(value, bool) for value in values
    ):
        raise ConfigError(f"'{key}' must be a string or a list of strings, got {values!r}")
    return tuple(str(value) for value in values)


def _as_str(raw: dict[str, Any], key: str, default: str) -> str:
    value = raw.get(key)
    if value is None or value == "":
        return default
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a string, got {value!r}")
    return value


def _as_level(raw: dict[str, Any], default: str) -> str:
    level = _as_str(raw, "log_level", default).upper()
    # getLevelName maps known names to their numeric level
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"'log_level' must be a logging level name, got {level!r}")
    return level


@dataclass(frozen=True, slots=True)
class LauncherConfig:
    """Immutable description of the tool invocation."""

    tool: str = "cargo"
    tool_args: tuple[str, ...] = ("run",)
    quiet_flag: str = "--quiet"
    manifest_flag: str = "--manifest-path"
    manifest_name: str = MANIFEST_NAME
    log_level: str = "WARNING"

    @classmethod
    def from_mapping(cls, raw: dict[str, Any]) -> LauncherConfig:
        """Build a config from a parsed YAML mapping, falling back to defaults.

        Raises:
            ConfigError: If a key holds a value of the wrong type or an unknown log level.
        """
        defaults = cls()
        tool_args = raw.get("tool_args")
        return cls(
            tool=_as_str(raw, "tool", defaults.tool),
            tool_args=defaults.tool_args if tool_args is None else _as_tuple("tool_args", tool_args),
            quiet_flag=_as_str(raw, "quiet_flag", defaults.quiet_flag),
            manifest_flag=_as_str(raw, "manifest_flag", defaults.manifest_flag),
            manifest_name=_as_str(raw, "manifest_name", defaults.manifest_name),
            log_level=_as_level(raw, defaults.log_level),
        )


def _load_yaml_payload(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        return {}
    try:
        payload = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ConfigError(f"{config_path} must contain a mapping, got {type(payload).__name__}")
    return payload


@lru_cache(maxsize=8)
def load_config(directory: str) -> LauncherConfig:
    """Load ``launcher.yaml`` from ``directory`` (cached per directory)."""
    config_path = Path(directory) / CONFIG_NAME
    payload = _load_yaml_payload(config_path)
    return LauncherConfig.from_mapping(payload)
