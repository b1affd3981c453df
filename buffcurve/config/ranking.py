# buffcurve/config/ranking.py
from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from buffcurve.core import CalculationResult, RankingColumn, rank_series
from .settings import Settings, get_settings


MODES = ("breakpoints", "casts")
VIEWS = ("individual", "groups")


def rank_result(
    result: CalculationResult,
    time_axis: ArrayLike,
    *,
    mode: str = "breakpoints",
    view: str = "individual",
    settings: Settings | None = None,
) -> tuple[RankingColumn, ...]:
    """
    Rank a calculation result the way the ranking tables show it.

    view:
      - "individual": one row per enabled equation
      - "groups": one row per group that has a series; rows are flagged
        on that group's own cast ticks

    mode:
      - "breakpoints": columns at settings.breakpoints
      - "casts": columns at the global cast times ("individual"), or at the
        sorted union of the groups' cast times ("groups")

    Returns an empty tuple when there is nothing to rank.
    """
    if mode not in MODES:
        raise ValueError(f"mode must be one of: {', '.join(MODES)}")
    if view not in VIEWS:
        raise ValueError(f"view must be one of: {', '.join(VIEWS)}")
    settings = settings if settings is not None else get_settings()

    cast_times: dict[str, np.ndarray] = {}
    if view == "groups":
        groups = [g for g in (result.group_series or ()) if g.series is not None]
        series = [g.series for g in groups]
        cast_times = {g.name: g.cast_times for g in groups}
    else:
        series = list(result.series)

    if not series:
        return ()

    if mode == "breakpoints":
        time_points = [int(tp) for tp in settings.breakpoints]
    elif view == "groups":
        time_points = sorted({int(tp) for times in cast_times.values() for tp in times})
    else:
        time_points = [int(tp) for tp in result.cast_times]

    return rank_series(
        series,
        time_axis,
        time_points,
        scale=settings.display.dps_multiplier,
        cast_times=cast_times,
    )
