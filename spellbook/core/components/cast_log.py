"""Track recent spell casts for a spellbook."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque

from spellbook.core.events import SpellCastEvent

# Default number of events retained in :class:`CastLog.recent`.
MAX_RECENT_CASTS = 20


@dataclass(slots=True)
class CastLog:
    """Component holding the most recent :class:`SpellCastEvent`s."""

    max_recent: int = MAX_RECENT_CASTS
    recent: Deque[SpellCastEvent] = field(default_factory=deque)

    def __post_init__(self) -> None:
        """Ensure ``recent`` is a deque bounded by ``max_recent``."""
        if self.max_recent < 1:
            raise ValueError(f"max_recent must be at least 1, got {self.max_recent}")
        if not isinstance(self.recent, deque) or self.recent.maxlen != self.max_recent:
            self.recent = deque(self.recent, maxlen=self.max_recent)

    def record(self, event: SpellCastEvent) -> None:
        self.recent.append(event)


__all__ = ["CastLog", "MAX_RECENT_CASTS"]
