# buffcurve/core/exceptions.py
from __future__ import annotations


class CoreError(Exception):
    """Base error for all calculation-engine exceptions."""


# ---- Input errors (fatal to the calculation that hit them) ----
class InvalidTimeAxis(CoreError):
    """Raised when max_time is negative or not an integer."""


class InvalidCooldown(CoreError):
    """
    Raised when a supplied or resolved cooldown is <= 0, NaN/inf or not a number.

    Never clamped: a cast schedule cannot be derived from such a value.
    """


class MalformedEquation(CoreError):
    """
    Raised when per-tick arrays do not line up with the time axis.

    - a generator returns a sequence of the wrong length or dimension
      (the message names the offending equation key)
    - series of different lengths are combined (the message lists key=length)
    - zero series are combined
    """


class InvalidEquation(CoreError):
    """Raised when an Equation has a bad key/callable, or a catalog repeats a key."""


class InvalidGroup(CoreError):
    """Raised for a bad group name, duplicate names, or violated group limits."""


# ---- Lookup errors (also behave like KeyError for dict-like APIs) ----
class EquationNotFound(CoreError, KeyError):
    """Raised when a requested equation key is not present in the catalog."""
