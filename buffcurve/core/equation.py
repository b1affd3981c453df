# buffcurve/core/equation.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike

from .exceptions import EquationNotFound, InvalidEquation


Generator = Callable[[np.ndarray, float], ArrayLike]
CooldownModifier = Callable[[float], float]


@dataclass(frozen=True, slots=True)
class Equation:
    """
    A named multiplier curve.

    - generator(time_axis, cooldown) -> one multiplier per tick
    - cooldown_modifier(cooldown) -> new cooldown (optional)
    """

    key: str
    generator: Generator = field(repr=False)
    color: str | None = None
    cooldown_modifier: CooldownModifier | None = field(default=None, repr=False)
    description: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key.strip():
            raise InvalidEquation("Equation.key must be a non-empty string.")
        if not callable(self.generator):
            raise InvalidEquation(f"Equation '{self.key}': generator must be callable.")
        if self.cooldown_modifier is not None and not callable(self.cooldown_modifier):
            raise InvalidEquation(
                f"Equation '{self.key}': cooldown_modifier must be callable or None."
            )

    @property
    def modifies_cooldown(self) -> bool:
        return self.cooldown_modifier is not None


@dataclass(frozen=True, slots=True)
class EquationCatalog:
    """
    Fixed, ordered collection of Equations.

    Declaration order matters: cooldown modifiers are chained in this order.
    """

    equations: tuple[Equation, ...] = ()

    def __post_init__(self) -> None:
        eqs = tuple(self.equations)
        seen: set[str] = set()
        for eq in eqs:
            if not isinstance(eq, Equation):
                raise InvalidEquation("EquationCatalog entries must be Equation instances.")
            if eq.key in seen:
                raise InvalidEquation(f"Duplicate equation key '{eq.key}'.")
            seen.add(eq.key)
        object.__setattr__(self, "equations", eqs)

    @classmethod
    def of(cls, *equations: Equation) -> "EquationCatalog":
        return cls(equations=equations)

    # ---- sequence / dict-like API ----
    def __len__(self) -> int:
        return len(self.equations)

    def __iter__(self) -> Iterator[Equation]:
        return iter(self.equations)

    def __contains__(self, key: object) -> bool:
        return any(eq.key == key for eq in self.equations)

    def __getitem__(self, key: str) -> Equation:
        for eq in self.equations:
            if eq.key == key:
                return eq
        raise EquationNotFound(key)

    def keys(self) -> list[str]:
        return [eq.key for eq in self.equations]

    def get(self, key: str, default: Equation | None = None) -> Equation | None:
        try:
            return self[key]
        except EquationNotFound:
            return default

    # ---- filtering ----
    def select(self, keys: Iterable[str]) -> tuple[Equation, ...]:
        """
        Equations whose key is in `keys`, in catalog order (not `keys` order).

        Keys absent from the catalog are ignored.
        """
        wanted = frozenset(keys)
        return tuple(eq for eq in self.equations if eq.key in wanted)

    def reordered(self, keys: Sequence[str]) -> "EquationCatalog":
        """Return a new catalog with the same equations declared in `keys` order."""
        if sorted(keys) != sorted(self.keys()):
            raise InvalidEquation("reordered() expects a permutation of the catalog keys.")
        return EquationCatalog(equations=tuple(self[k] for k in keys))
