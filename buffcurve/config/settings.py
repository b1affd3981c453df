"""
Simulation settings.

All tunable constants (max time, cast offset, base cooldown, ranking
breakpoints, group limits) live here, not in the core. The core never
reads these; callers pass the values explicitly.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationSettings:
    max_time: int = 300       # seconds
    cast_offset: int = 10     # t % cooldown == offset


@dataclass(frozen=True)
class CooldownSettings:
    base: float = 30          # seconds


@dataclass(frozen=True)
class DisplaySettings:
    dps_multiplier: float = 10


@dataclass(frozen=True)
class GroupSettings:
    colors: tuple[str, ...] = ("#3b82f6", "#8b5cf6", "#ec4899", "#f59e0b")
    max_groups: int = 4
    max_equations_per_group: int = 4


@dataclass(frozen=True)
class Settings:
    """Complete simulation configuration."""
    simulation: SimulationSettings = field(default_factory=SimulationSettings)
    cooldown: CooldownSettings = field(default_factory=CooldownSettings)
    breakpoints: tuple[int, ...] = (30, 60, 90, 120, 150, 180, 210, 240, 270, 300)
    display: DisplaySettings = field(default_factory=DisplaySettings)
    groups: GroupSettings = field(default_factory=GroupSettings)


DEFAULT_SETTINGS = Settings()

# Active settings (can be replaced at runtime)
_active_settings: Settings = DEFAULT_SETTINGS


def get_settings() -> Settings:
    """Get the active settings."""
    return _active_settings


def set_settings(settings: Settings) -> None:
    """Set the active settings."""
    global _active_settings
    _active_settings = settings


def reset_settings() -> None:
    """Reset to default settings."""
    global _active_settings
    _active_settings = DEFAULT_SETTINGS


_SECTIONS = ("simulation", "cooldown", "display", "groups")


def _coerce(name: str, kind: str, value: Any) -> Any:
    if kind.startswith("tuple"):
        if not isinstance(value, (list, tuple)):
            raise ValueError(f"'{name}' must be a list, got {type(value).__name__}")
        return tuple(value)
    if kind == "str":
        if not isinstance(value, str):
            raise ValueError(f"'{name}' must be a string, got {value!r}")
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{name}' must be a number, got {value!r}")
    if kind == "int" and not isinstance(value, int):
        raise ValueError(f"'{name}' must be an integer, got {value!r}")
    return value


def _overlay(section: Any, data: Mapping[str, Any], prefix: str) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"Section '{prefix}' must be a mapping.")
    known = {f.name: f for f in dataclasses.fields(section)}
    updates = {}
    for key, value in data.items():
        if key not in known:
            raise ValueError(f"Unknown setting '{prefix}.{key}'")
        updates[key] = _coerce(f"{prefix}.{key}", str(known[key].type), value)
    return dataclasses.replace(section, **updates)


def settings_from_dict(data: Mapping[str, Any], base: Settings = DEFAULT_SETTINGS) -> Settings:
    """Overlay a (possibly partial) nested mapping on `base`."""
    updates: dict[str, Any] = {}
    for key, value in data.items():
        if key in _SECTIONS:
            updates[key] = _overlay(getattr(base, key), value or {}, key)
        elif key == "breakpoints":
            bps = _coerce("breakpoints", "tuple", value)
            if any(isinstance(b, bool) or not isinstance(b, int) or b < 0 for b in bps):
                raise ValueError("'breakpoints' must be non-negative integers")
            updates[key] = bps
        else:
            raise ValueError(f"Unknown settings section '{key}'")
    return dataclasses.replace(base, **updates)


def load_settings_from_yaml(path: str | Path) -> Settings:
    """
    Load settings from a YAML file, falling back to defaults for missing keys.

    Raises:
        FileNotFoundError: the file does not exist
        ValueError: the YAML is malformed or contains unknown/ill-typed keys
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")

    try:
        with p.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML in {p}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ValueError(f"Top level of {p} must be a mapping.")

    settings = settings_from_dict(data)
    logger.info("loaded settings from %s", p)
    return settings
