# buffcurve/core/ranking.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence

import numpy as np
from numpy.typing import ArrayLike

from .series import Series


@dataclass(frozen=True, slots=True)
class RankingRow:
    name: str
    color: str | None
    value: float
    position: int               # 1-based
    change: int | None          # previous position - current position (>0 = moved up)
    is_cast: bool


@dataclass(frozen=True, slots=True)
class RankingColumn:
    time_point: int
    rows: tuple[RankingRow, ...]

    def names(self) -> list[str]:
        return [r.name for r in self.rows]


def rank_series(
    series: Sequence[Series],
    time_axis: ArrayLike,
    time_points: Iterable[int],
    *,
    scale: float = 10.0,
    precision: int = 4,
    cast_times: Mapping[str, ArrayLike] | None = None,
) -> tuple[RankingColumn, ...]:
    """
    Rank series by their running mean at each time point, best first.

    - value = round(mean[idx] * scale, precision), idx clamped to the axis end
    - negative time points raise ValueError
    - ties keep input order
    - `change` compares against the previous column
    - `is_cast` is true if the time point is in that series' cast times
    """
    last_index = int(np.asarray(time_axis).size) - 1
    casts = {k: np.asarray(v) for k, v in (cast_times or {}).items()}

    columns: list[RankingColumn] = []
    previous: dict[str, int] | None = None

    for tp in time_points:
        if tp < 0:
            raise ValueError(f"time points must be >= 0, got {tp}")
        idx = min(int(tp), last_index)
        scored = [
            (s, round(s.mean_at(idx) * scale, precision)) for s in series
        ]
        scored.sort(key=lambda item: -item[1])

        rows: list[RankingRow] = []
        for pos, (s, value) in enumerate(scored, start=1):
            change = None
            if previous is not None and s.key in previous:
                change = previous[s.key] - pos
            is_cast = s.key in casts and bool(np.any(casts[s.key] == tp))
            rows.append(
                RankingRow(
                    name=s.key,
                    color=s.color,
                    value=value,
                    position=pos,
                    change=change,
                    is_cast=is_cast,
                )
            )

        columns.append(RankingColumn(time_point=int(tp), rows=tuple(rows)))
        previous = {r.name: r.position for r in rows}

    return tuple(columns)
