# buffcurve/core/schedule.py
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import ArrayLike

from .exceptions import InvalidCooldown


@dataclass(frozen=True, slots=True)
class CastSchedule:
    """Boolean cast mask aligned to the time axis + the explicit cast times."""

    mask: np.ndarray = field(repr=False)
    cast_times: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "mask", np.asarray(self.mask, dtype=bool))
        object.__setattr__(self, "cast_times", np.asarray(self.cast_times))

    @property
    def n_casts(self) -> int:
        return int(self.cast_times.size)

    def is_cast(self, t: float) -> bool:
        return bool(np.any(self.cast_times == t))


def _check_cooldown(cooldown: float) -> None:
    if isinstance(cooldown, bool) or not isinstance(cooldown, numbers.Real):
        raise InvalidCooldown(f"cooldown must be a number, got {cooldown!r}")
    if not math.isfinite(cooldown) or cooldown <= 0:
        raise InvalidCooldown(f"cooldown must be a positive finite number, got {cooldown}")


def build_cast_schedule(time_axis: ArrayLike, cooldown: float, offset: int = 10) -> CastSchedule:
    """
    A tick t is a cast iff t % cooldown == offset.

    An offset outside [0, cooldown) yields an all-false mask; that is accepted.
    """
    _check_cooldown(cooldown)

    t = np.asarray(time_axis)
    mask = np.mod(t, cooldown) == offset
    return CastSchedule(mask=mask, cast_times=t[mask])
