# buffcurve/core/cooldown.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from .equation import EquationCatalog


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AppliedModifier:
    key: str
    from_value: float
    to_value: float


@dataclass(frozen=True, slots=True)
class CooldownResolution:
    final_cooldown: float
    applied_modifiers: tuple[AppliedModifier, ...] = ()


def resolve_cooldown(
    base_cooldown: float,
    catalog: EquationCatalog,
    enabled_keys: Iterable[str],
) -> CooldownResolution:
    """
    Chain the cooldown modifiers of enabled equations, in catalog order.

    Only modifiers that changed the running value are recorded, but every
    modifier feeds the next one. No validation of the result happens here:
    a non-positive cooldown is rejected by the cast scheduler.
    """
    enabled = frozenset(enabled_keys)
    current = base_cooldown
    applied: list[AppliedModifier] = []

    for eq in catalog:
        if eq.key not in enabled or eq.cooldown_modifier is None:
            continue
        nxt = eq.cooldown_modifier(current)
        if nxt != current:
            logger.debug("cooldown modifier %r: %s -> %s", eq.key, current, nxt)
            applied.append(AppliedModifier(key=eq.key, from_value=current, to_value=nxt))
        current = nxt

    return CooldownResolution(final_cooldown=current, applied_modifiers=tuple(applied))
