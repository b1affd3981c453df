# buffcurve/core/series.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike

from .exceptions import MalformedEquation


def running_mean(values: ArrayLike) -> np.ndarray:
    """
    Cumulative average: out[i] = sum(values[0..i]) / (i + 1).

    Single accumulating pass (cumsum), so integer inputs stay exact.
    """
    v = np.asarray(values, dtype=float)
    if v.ndim != 1:
        raise MalformedEquation(f"running_mean expects a 1D array, got shape {v.shape}")
    if v.size == 0:
        return v.copy()
    return np.cumsum(v) / np.arange(1, v.size + 1)


def gate(mask: ArrayLike, values: ArrayLike) -> np.ndarray:
    """Keep `values` where `mask` is true, 0.0 elsewhere."""
    m = np.asarray(mask, dtype=bool)
    v = np.asarray(values, dtype=float)
    if m.shape != v.shape:
        raise MalformedEquation(
            f"mask and values must have same shape, got {m.shape} vs {v.shape}"
        )
    return np.where(m, v, 0.0)


def product(arrays: Sequence[ArrayLike]) -> np.ndarray:
    """Elementwise product of one or more equally sized 1D arrays."""
    if len(arrays) == 0:
        raise MalformedEquation("product() needs at least one array.")

    out = np.array(arrays[0], dtype=float)
    for arr in arrays[1:]:
        a = np.asarray(arr, dtype=float)
        if a.shape != out.shape:
            raise MalformedEquation(
                f"Cannot multiply arrays of different shapes: {out.shape} vs {a.shape}"
            )
        out = out * a
    return out


@dataclass(frozen=True, slots=True)
class Series:
    """
    Plottable result for one equation (or a combination of equations).

    - raw:   per-tick multiplier
    - gated: raw with non-cast ticks forced to 0
    - mean:  running mean of gated
    """

    key: str
    color: str | None
    raw: np.ndarray = field(repr=False)
    gated: np.ndarray = field(repr=False)
    mean: np.ndarray = field(repr=False)

    def __post_init__(self) -> None:
        raw = np.asarray(self.raw, dtype=float)
        gated = np.asarray(self.gated, dtype=float)
        mean = np.asarray(self.mean, dtype=float)

        for label, arr in (("raw", raw), ("gated", gated), ("mean", mean)):
            if arr.ndim != 1:
                raise MalformedEquation(
                    f"Series '{self.key}': `{label}` must be 1D, got shape {arr.shape}"
                )
        if not (raw.size == gated.size == mean.size):
            raise MalformedEquation(
                f"Series '{self.key}': raw/gated/mean lengths differ "
                f"({raw.size}, {gated.size}, {mean.size})"
            )

        object.__setattr__(self, "raw", raw)
        object.__setattr__(self, "gated", gated)
        object.__setattr__(self, "mean", mean)

    @classmethod
    def from_raw(cls, key: str, color: str | None, raw: ArrayLike, mask: ArrayLike) -> "Series":
        """Gate `raw` by `mask` and derive the running mean."""
        gated = gate(mask, raw)
        return cls(key=key, color=color, raw=raw, gated=gated, mean=running_mean(gated))

    @property
    def n(self) -> int:
        return int(self.raw.size)

    def mean_at(self, index: int) -> float:
        return float(self.mean[index])
