"""Spell component."""

from __future__ import annotations

from dataclasses import dataclass

from spellbook.core.elements import ElementType


@dataclass(frozen=True)
class Spell:
    """Named effect with an element and a mana cost."""

    name: str
    element: ElementType
    mana_cost: int

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("Spell name must contain at least 1 character")
        if not isinstance(self.element, ElementType):
            raise TypeError(f"Spell element must be an ElementType, got {self.element!r}")
        if isinstance(self.mana_cost, bool) or not isinstance(self.mana_cost, int):
            raise TypeError(f"Mana cost must be an int, got {self.mana_cost!r}")
        if self.mana_cost < 0:
            raise ValueError(f"Mana cost must be non-negative, got {self.mana_cost}")


__all__ = ["Spell"]
