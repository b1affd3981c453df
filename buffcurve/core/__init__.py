"""
Core calculation engine for buffcurve.

This module defines the pure, I/O-free calculation pipeline:
- create_time_axis: discrete time domain [0..max_time]
- Equation / EquationCatalog: ordered multiplier definitions
- resolve_cooldown: sequential cooldown-modifier chaining
- build_cast_schedule: cast mask + cast times
- build_series / combine_series: gating + running mean
- evaluate_group: per-group isolated evaluation
- calculate: top-level orchestration
- rank_series: ranking of series at given time points

The core layer is independent from configuration and presentation.
"""

from .timeaxis import create_time_axis
from .equation import Equation, EquationCatalog
from .cooldown import AppliedModifier, CooldownResolution, resolve_cooldown
from .schedule import CastSchedule, build_cast_schedule
from .series import Series, running_mean, gate, product
from .builder import build_series, build_all_series, combine_series
from .group import Group, GroupResult, evaluate_group, validate_groups
from .calculator import CalculationRequest, CalculationResult, calculate, calculate_from
from .ranking import RankingRow, RankingColumn, rank_series
from .exceptions import (
    CoreError,
    InvalidTimeAxis,
    InvalidCooldown,
    MalformedEquation,
    InvalidEquation,
    InvalidGroup,
    EquationNotFound,
)


__all__ = [
    # time axis
    "create_time_axis",

    # equations
    "Equation",
    "EquationCatalog",

    # cooldown / schedule
    "AppliedModifier",
    "CooldownResolution",
    "resolve_cooldown",
    "CastSchedule",
    "build_cast_schedule",

    # series
    "Series",
    "running_mean",
    "gate",
    "product",
    "build_series",
    "build_all_series",
    "combine_series",

    # groups / orchestration
    "Group",
    "GroupResult",
    "evaluate_group",
    "validate_groups",
    "CalculationRequest",
    "CalculationResult",
    "calculate",
    "calculate_from",

    # ranking
    "RankingRow",
    "RankingColumn",
    "rank_series",

    # exceptions
    "CoreError",
    "InvalidTimeAxis",
    "InvalidCooldown",
    "MalformedEquation",
    "InvalidEquation",
    "InvalidGroup",
    "EquationNotFound",
]
