"""
Configuration for buffcurve: simulation settings, the stock equation catalog
and settings-driven ranking.
"""

from .settings import (
    Settings,
    SimulationSettings,
    CooldownSettings,
    DisplaySettings,
    GroupSettings,
    DEFAULT_SETTINGS,
    get_settings,
    set_settings,
    reset_settings,
    settings_from_dict,
    load_settings_from_yaml,
)
from .equations import create_equations, build_request
from .ranking import rank_result


__all__ = [
    "Settings",
    "SimulationSettings",
    "CooldownSettings",
    "DisplaySettings",
    "GroupSettings",
    "DEFAULT_SETTINGS",
    "get_settings",
    "set_settings",
    "reset_settings",
    "settings_from_dict",
    "load_settings_from_yaml",
    "create_equations",
    "build_request",
    "rank_result",
]
