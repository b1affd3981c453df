# buffcurve/core/group.py
from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike

from .builder import build_series, combine_series
from .cooldown import AppliedModifier, resolve_cooldown
from .equation import EquationCatalog
from .exceptions import InvalidGroup
from .schedule import build_cast_schedule
from .series import Series


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Group:
    """A named set of equation keys, evaluated in isolation from every other set."""

    name: str
    keys: frozenset[str] = field(default_factory=frozenset)
    color: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidGroup("Group.name must be a non-empty string.")
        if isinstance(self.keys, str):
            raise InvalidGroup("Group.keys must be an iterable of keys, not a single string.")
        object.__setattr__(self, "keys", frozenset(self.keys))

    @property
    def is_empty(self) -> bool:
        return len(self.keys) == 0


@dataclass(frozen=True, slots=True)
class GroupResult:
    """
    Outcome of evaluating one Group.

    `series` is None for an empty group: there is nothing to render, and a
    constant 1.0 curve would be misleading.
    """

    name: str
    color: str | None
    keys: frozenset[str]
    cooldown: float
    applied_modifiers: tuple[AppliedModifier, ...]
    cast_times: np.ndarray
    series: Series | None = field(default=None, repr=False)

    @property
    def has_series(self) -> bool:
        return self.series is not None


def evaluate_group(
    catalog: EquationCatalog,
    group: Group,
    time_axis: ArrayLike,
    base_cooldown: float,
    offset: int = 10,
) -> GroupResult:
    """
    Evaluate a group as if its keys were the only enabled equations.

    Cooldown, cast schedule and combined series all derive from `group.keys`
    and the shared `base_cooldown`; nothing leaks in from other groups.
    """
    resolution = resolve_cooldown(base_cooldown, catalog, group.keys)
    schedule = build_cast_schedule(time_axis, resolution.final_cooldown, offset)

    members = [
        build_series(eq, time_axis, resolution.final_cooldown, schedule)
        for eq in catalog.select(group.keys)
    ]

    combined: Series | None
    if members:
        combined = combine_series(members, schedule, name=group.name, color=group.color)
    else:
        logger.debug("group %r has no known equations; no series produced", group.name)
        combined = None

    return GroupResult(
        name=group.name,
        color=group.color,
        keys=group.keys,
        cooldown=resolution.final_cooldown,
        applied_modifiers=resolution.applied_modifiers,
        cast_times=schedule.cast_times,
        series=combined,
    )


def validate_groups(
    groups: Sequence[Group],
    catalog: EquationCatalog | None = None,
    *,
    max_groups: int | None = None,
    max_equations_per_group: int | None = None,
) -> None:
    """
    Check a list of groups.

    Names must be unique. Size limits and catalog membership are only
    checked when the corresponding argument is given.
    """
    for g in groups:
        if not isinstance(g, Group):
            raise InvalidGroup("groups must contain Group instances.")

    dupes = sorted(name for name, count in Counter(g.name for g in groups).items() if count > 1)
    if dupes:
        raise InvalidGroup(f"Duplicate group names: {dupes}")

    if max_groups is not None and len(groups) > max_groups:
        raise InvalidGroup(f"Too many groups: {len(groups)} (max {max_groups}).")

    for g in groups:
        if max_equations_per_group is not None and len(g.keys) > max_equations_per_group:
            raise InvalidGroup(
                f"Group '{g.name}' has {len(g.keys)} equations (max {max_equations_per_group})."
            )
        if catalog is not None:
            unknown = sorted(k for k in g.keys if k not in catalog)
            if unknown:
                raise InvalidGroup(f"Group '{g.name}' references unknown equations: {unknown}")
