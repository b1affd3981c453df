# buffcurve/config/equations.py
from __future__ import annotations

import dataclasses
from typing import Iterable

import numpy as np

from buffcurve.core import (
    CalculationRequest,
    Equation,
    EquationCatalog,
    Group,
    create_time_axis,
    validate_groups,
)
from .settings import Settings, get_settings


HITS = 8.0


def _const(value: float):
    def gen(t: np.ndarray, cooldown: float) -> np.ndarray:
        return np.full(t.shape, value, dtype=float)
    return gen


def _worlds_night(t: np.ndarray, cooldown: float) -> np.ndarray:
    return 1.0 + np.minimum(np.floor(t / 40.0) * 0.08, 5 * 0.08)


def _toybox(t: np.ndarray, cooldown: float) -> np.ndarray:
    return np.where(t < 60, 1.48, 1.0)


def _burning_will(t: np.ndarray, cooldown: float) -> np.ndarray:
    return np.where(t < 90, 1.0, 1.28)


def _doomsday(t: np.ndarray, cooldown: float) -> np.ndarray:
    return np.where(t < 15, 1.8, 0.9)


def _core_garden(t: np.ndarray, cooldown: float) -> np.ndarray:
    # Scales with the resolved cooldown once the opener is over.
    return 1.0 + np.where(t < 15, 0.006 * 10, 0.006 * cooldown)


def _little_corona(t: np.ndarray, cooldown: float) -> np.ndarray:
    if cooldown < 30:
        return np.where(t < 15, 1.0, np.where(t < 45, 1.16, 1.16**2))
    return np.where(t < 15, 1.0, 1.16)


def _evolution_growth(t: np.ndarray, cooldown: float) -> np.ndarray:
    return 1.0 + np.where(t < 15, 0.0, 0.014 * HITS)


CROSS_PATH_MULTIPLIER = sum(1.04**i / HITS for i in range(int(HITS)))


def create_equations() -> EquationCatalog:
    """The stock catalog. Order is significant for cooldown chaining."""
    return EquationCatalog.of(
        Equation("World's Night", _worlds_night, color="blue"),
        Equation("Toybox", _toybox, color="orange"),
        Equation("Burning Will", _burning_will, color="green"),
        Equation("Doomsday", _doomsday, color="red"),
        Equation("Core Garden", _core_garden, color="purple"),
        Equation("Cross Path", _const(CROSS_PATH_MULTIPLIER), color="brown"),
        Equation("Little Corona", _little_corona, color="pink"),
        Equation(
            "Celestial",
            _const(1.035),
            color="cyan",
            cooldown_modifier=lambda cd: cd - 3,
            description="Reduces cooldown by 3s.",
        ),
        Equation("Cosmos Sky", _const(0.98 * 1.39), color="grey"),
        Equation("Evolution & Growth", _evolution_growth, color="aquamarine"),
    )


def build_request(
    enabled_keys: Iterable[str],
    groups: Iterable[Group] = (),
    *,
    settings: Settings | None = None,
    catalog: EquationCatalog | None = None,
) -> CalculationRequest:
    """
    Assemble a CalculationRequest from settings and the stock (or given) catalog.

    Groups are checked against the configured size limits and the catalog.
    A group without a color gets one from settings.groups.colors, by position.
    """
    settings = settings if settings is not None else get_settings()
    catalog = catalog if catalog is not None else create_equations()
    groups = tuple(groups)

    validate_groups(
        groups,
        catalog,
        max_groups=settings.groups.max_groups,
        max_equations_per_group=settings.groups.max_equations_per_group,
    )

    palette = settings.groups.colors
    groups = tuple(
        g if g.color is not None or not palette
        else dataclasses.replace(g, color=palette[i % len(palette)])
        for i, g in enumerate(groups)
    )

    return CalculationRequest(
        catalog=catalog,
        time_axis=create_time_axis(settings.simulation.max_time),
        enabled_keys=frozenset(enabled_keys),
        base_cooldown=settings.cooldown.base,
        offset=settings.simulation.cast_offset,
        groups=groups,
    )
