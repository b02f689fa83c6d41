"""Fixed-capacity spell store gated by a mana pool."""

from __future__ import annotations

import logging
import sys
from typing import List, Optional, TextIO

from .components.cast_log import MAX_RECENT_CASTS, CastLog
from .components.mana import ManaPool
from .components.spell import Spell
from .errors import (
    CapacityExceededError,
    EmptySpellbookError,
    InsufficientManaError,
    InvalidAmountError,
    SpellNotFoundError,
    SpellbookError,
)
from .events import SpellCastEvent

logger = logging.getLogger(__name__)

# Number of slots every spellbook is built with.
MAX_SPELLS = 5


class Spellbook:
    """Learn, cast and list spells while tracking mana."""

    DEFAULT_MAX_MANA = 100
    DEFAULT_STARTING_MANA = 50
    FULL_MESSAGE = "The spellbook is full!"

    def __init__(
        self,
        *,
        max_mana: Optional[int] = None,
        starting_mana: Optional[int] = None,
        max_recent_casts: int = MAX_RECENT_CASTS,
        out: Optional[TextIO] = None,
    ) -> None:
        self._slots: List[Optional[Spell]] = [None] * MAX_SPELLS
        self._spell_count = 0
        self._mana = ManaPool(
            current=self.DEFAULT_STARTING_MANA if starting_mana is None else starting_mana,
            maximum=self.DEFAULT_MAX_MANA if max_mana is None else max_mana,
        )
        self._cast_log = CastLog(max_recent=max_recent_casts)
        self._out = out

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def spell_count(self) -> int:
        return self._spell_count

    @property
    def current_mana(self) -> int:
        return self._mana.current

    @property
    def max_mana(self) -> int:
        return self._mana.maximum

    @property
    def max_spell_count(self) -> int:
        """Number of spells that may be learned before the book is full."""
        return MAX_SPELLS

    @property
    def spells(self) -> tuple[Spell, ...]:
        """Stored spells in slot order."""
        return tuple(s for s in self._slots[: self._spell_count] if s is not None)

    @property
    def recent_casts(self) -> tuple[SpellCastEvent, ...]:
        return tuple(self._cast_log.recent)

    def get_spell(self, name: str) -> Optional[Spell]:
        """Return the stored spell called ``name`` or ``None``."""
        index = self._index_of(name)
        return None if index is None else self._slots[index]

    def knows(self, name: str) -> bool:
        return self._index_of(name) is not None

    # ------------------------------------------------------------------
    # Slot helpers
    # ------------------------------------------------------------------
    def _index_of(self, name: str) -> Optional[int]:
        for index in range(self._spell_count):
            slot = self._slots[index]
            if slot is not None and slot.name == name:
                return index
        return None

    def _try_overwrite(self, spell: Spell) -> bool:
        """Replace a same-named spell in place. Return ``True`` if one existed."""
        index = self._index_of(spell.name)
        if index is None:
            return False
        self._slots[index] = spell
        logger.debug("Overwrote spell '%s' in slot %s", spell.name, index)
        return True

    def _append(self, spell: Spell) -> None:
        self._slots[self._spell_count] = spell
        self._spell_count += 1
        logger.debug(
            "Learned spell '%s' into slot %s (%s/%s)",
            spell.name,
            self._spell_count - 1,
            self._spell_count,
            self.max_spell_count,
        )

    def _rejected(self, error: SpellbookError) -> SpellbookError:
        logger.info("%s rejected: %s", type(self).__name__, error)
        return error

    def _emit(self, text: str) -> None:
        stream = self._out if self._out is not None else sys.stdout
        stream.write(text)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def learn_spell(self, spell: Spell) -> None:
        """Store ``spell``, overwriting any spell with the same name.

        An overwrite always succeeds, even when the book is full. Otherwise
        :class:`CapacityExceededError` is raised once every slot is taken.
        """
        if self._try_overwrite(spell):
            return
        if self._spell_count >= self.max_spell_count:
            raise self._rejected(CapacityExceededError(self.FULL_MESSAGE))
        self._append(spell)

    def cast_spell(self, spell_name: str) -> None:
        """Cast ``spell_name``, deducting its cost and announcing the effect.

        The spell stays in the book afterwards.
        """
        spell = self.get_spell(spell_name)
        if spell is None:
            raise self._rejected(SpellNotFoundError(f"Spell {spell_name} not learned!"))
        if not self._mana.can_afford(spell.mana_cost):
            raise self._rejected(InsufficientManaError(f"Not enough mana to cast {spell_name}!"))

        self._mana.spend(spell.mana_cost)
        self._cast_log.record(
            SpellCastEvent(
                spell_name=spell.name,
                element=spell.element,
                mana_cost=spell.mana_cost,
                mana_after=self._mana.current,
            )
        )
        logger.debug(
            "Cast '%s' for %s mana (%s/%s left)",
            spell.name,
            spell.mana_cost,
            self._mana.current,
            self._mana.maximum,
        )
        self._emit(f"Casted {spell_name}.\n")

    def print_spells(self) -> str:
        """Write every stored spell followed by a total line and return the text."""
        if self._spell_count == 0:
            raise self._rejected(EmptySpellbookError("Spellbook is empty!"))

        lines = [
            f"{spell.name} ({spell.element.value}) - {spell.mana_cost} mana.\n"
            for spell in self.spells
        ]
        lines.append(f"Total spells: {self._spell_count}.\n")
        text = "".join(lines)
        self._emit(text)
        return text

    def restore_mana(self, amount: int) -> None:
        """Restore ``amount`` mana, capped at :attr:`max_mana`."""
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise TypeError(f"Restore amount must be an int, got {amount!r}")
        if amount <= 0:
            raise self._rejected(InvalidAmountError("Restore amount must be positive!"))
        self._mana.restore(amount)
        logger.debug("Restored %s mana (%s/%s)", amount, self._mana.current, self._mana.maximum)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(spells={self._spell_count}/{self.max_spell_count}, "
            f"mana={self._mana.current}/{self._mana.maximum})"
        )


__all__ = ["MAX_SPELLS", "Spellbook"]
