"""Event dataclasses emitted by spellbooks."""

from __future__ import annotations

from dataclasses import dataclass

from spellbook.core.elements import ElementType


@dataclass(slots=True, frozen=True)
class SpellCastEvent:
    """Record that a spell was cast successfully."""

    spell_name: str
    element: ElementType
    mana_cost: int
    mana_after: int


__all__ = ["SpellCastEvent"]
