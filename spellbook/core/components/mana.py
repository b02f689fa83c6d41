"""Mana pool component."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ManaPool:
    """Track current and maximum mana."""

    current: int
    maximum: int

    def __post_init__(self) -> None:
        if self.maximum < 0 or not 0 <= self.current <= self.maximum:
            raise ValueError(
                f"Mana pool requires 0 <= current <= maximum, got {self.current}/{self.maximum}"
            )

    def can_afford(self, cost: int) -> bool:
        return self.current >= cost

    def spend(self, cost: int) -> None:
        """Deduct ``cost``. Callers check :meth:`can_afford` first."""

        self.current -= cost

    def restore(self, amount: int) -> None:
        """Add ``amount`` without exceeding :attr:`maximum`."""

        self.current = min(self.maximum, self.current + amount)


__all__ = ["ManaPool"]
