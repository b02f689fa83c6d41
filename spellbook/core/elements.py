"""Element tags attached to spells."""

from __future__ import annotations

from enum import Enum


class ElementType(Enum):
    """Enumerate the closed set of spell elements."""

    FIRE = "Fire"
    ICE = "Ice"
    LIGHTNING = "Lightning"
    EARTH = "Earth"
    WIND = "Wind"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "ElementType":
        """Return the element whose display name matches ``text`` (any case)."""

        wanted = text.strip().lower()
        for element in cls:
            if element.value.lower() == wanted:
                return element
        raise ValueError(f"Unknown element: {text!r}")


__all__ = ["ElementType"]
