# buffcurve/core/timeaxis.py
from __future__ import annotations

import numbers

import numpy as np

from .exceptions import InvalidTimeAxis


def create_time_axis(max_time: int) -> np.ndarray:
    """
    Return the discrete time domain [0, 1, ..., max_time] as a 1D int array.

    The axis is zero-based, contiguous, strictly increasing and read-only.
    """
    if isinstance(max_time, bool) or not isinstance(max_time, numbers.Integral):
        raise InvalidTimeAxis(f"max_time must be an integer, got {max_time!r}")
    if max_time < 0:
        raise InvalidTimeAxis(f"max_time must be >= 0, got {max_time}")

    axis = np.arange(int(max_time) + 1, dtype=np.int64)
    axis.setflags(write=False)
    return axis
