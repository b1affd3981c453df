# buffcurve/core/calculator.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

import numpy as np

from .builder import build_all_series
from .cooldown import AppliedModifier, resolve_cooldown
from .equation import EquationCatalog
from .group import Group, GroupResult, evaluate_group, validate_groups
from .schedule import build_cast_schedule
from .series import Series


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CalculationRequest:
    """Immutable snapshot of everything one calculation depends on."""

    catalog: EquationCatalog
    time_axis: np.ndarray = field(repr=False)
    enabled_keys: frozenset[str] = field(default_factory=frozenset)
    base_cooldown: float = 30
    offset: int = 10
    groups: tuple[Group, ...] = ()

    def __post_init__(self) -> None:
        # Own a read-only copy: generators must not be able to shift the axis.
        axis = np.array(self.time_axis)
        axis.setflags(write=False)
        object.__setattr__(self, "time_axis", axis)
        object.__setattr__(self, "enabled_keys", frozenset(self.enabled_keys))
        object.__setattr__(self, "groups", tuple(self.groups or ()))


@dataclass(frozen=True, slots=True)
class CalculationResult:
    cooldown: float
    applied_modifiers: tuple[AppliedModifier, ...]
    cast_times: np.ndarray
    mask: np.ndarray = field(repr=False)
    series: tuple[Series, ...] = field(default=(), repr=False)
    group_series: tuple[GroupResult, ...] | None = field(default=None, repr=False)

    def get(self, key: str) -> Series | None:
        for s in self.series:
            if s.key == key:
                return s
        return None


def calculate(request: CalculationRequest) -> CalculationResult:
    """
    Run the individual view once and every group independently.

    No memoization: each call recomputes everything from the request.
    """
    validate_groups(request.groups)

    resolution = resolve_cooldown(request.base_cooldown, request.catalog, request.enabled_keys)
    schedule = build_cast_schedule(request.time_axis, resolution.final_cooldown, request.offset)
    series = build_all_series(
        request.catalog,
        request.enabled_keys,
        request.time_axis,
        resolution.final_cooldown,
        schedule,
    )

    group_series: tuple[GroupResult, ...] | None = None
    if request.groups:
        group_series = tuple(
            evaluate_group(
                request.catalog,
                group,
                request.time_axis,
                request.base_cooldown,
                request.offset,
            )
            for group in request.groups
        )

    logger.debug(
        "calculated cooldown=%s casts=%d series=%d groups=%d",
        resolution.final_cooldown,
        schedule.n_casts,
        len(series),
        0 if group_series is None else len(group_series),
    )

    return CalculationResult(
        cooldown=resolution.final_cooldown,
        applied_modifiers=resolution.applied_modifiers,
        cast_times=schedule.cast_times,
        mask=schedule.mask,
        series=series,
        group_series=group_series,
    )


def calculate_from(
    catalog: EquationCatalog,
    time_axis: np.ndarray,
    enabled_keys: Iterable[str],
    base_cooldown: float,
    offset: int = 10,
    groups: Iterable[Group] = (),
) -> CalculationResult:
    """Keyword-friendly wrapper around calculate()."""
    return calculate(
        CalculationRequest(
            catalog=catalog,
            time_axis=time_axis,
            enabled_keys=frozenset(enabled_keys),
            base_cooldown=base_cooldown,
            offset=offset,
            groups=tuple(groups),
        )
    )
