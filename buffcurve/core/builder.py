# buffcurve/core/builder.py
from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np
from numpy.typing import ArrayLike

from .equation import Equation, EquationCatalog
from .exceptions import MalformedEquation
from .schedule import CastSchedule
from .series import Series, product


DEFAULT_COMBINED_NAME = "Final DPS"
DEFAULT_COMBINED_COLOR = "#ffffff"


def build_series(
    equation: Equation,
    time_axis: ArrayLike,
    cooldown: float,
    schedule: CastSchedule,
) -> Series:
    """Evaluate one equation, gate it by the cast mask and take its running mean."""
    t = np.asarray(time_axis)
    raw = np.asarray(equation.generator(t, cooldown), dtype=float)

    if raw.ndim != 1:
        raise MalformedEquation(
            f"Equation '{equation.key}': generator must return a 1D sequence, got shape {raw.shape}"
        )
    if raw.size != t.size:
        raise MalformedEquation(
            f"Equation '{equation.key}': generator returned {raw.size} values "
            f"for a time axis of length {t.size}"
        )

    return Series.from_raw(equation.key, equation.color, raw, schedule.mask)


def build_all_series(
    catalog: EquationCatalog,
    enabled_keys: Iterable[str],
    time_axis: ArrayLike,
    cooldown: float,
    schedule: CastSchedule,
) -> tuple[Series, ...]:
    """One Series per enabled equation, in catalog order."""
    return tuple(
        build_series(eq, time_axis, cooldown, schedule) for eq in catalog.select(enabled_keys)
    )


def combine_series(
    series: Sequence[Series],
    schedule: CastSchedule,
    name: str = DEFAULT_COMBINED_NAME,
    color: str | None = DEFAULT_COMBINED_COLOR,
) -> Series:
    """
    Combine several series into one.

    The product is taken over the *raw* arrays; gating and the running mean
    are applied once, afterwards. Multiplying already gated/averaged series
    gives a different curve.
    """
    if len(series) == 0:
        raise MalformedEquation(f"Cannot combine zero series into '{name}'.")

    lengths = {s.n for s in series}
    if len(lengths) != 1:
        detail = ", ".join(f"{s.key}={s.n}" for s in series)
        raise MalformedEquation(f"Cannot combine series of different lengths into '{name}': {detail}")

    combined_raw = product([s.raw for s in series])
    return Series.from_raw(name, color, combined_raw, schedule.mask)
