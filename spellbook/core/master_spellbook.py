"""Spellbook variant that bans one element and has its own capacity."""

from __future__ import annotations

import logging
from typing import Optional, TextIO

from .components.cast_log import MAX_RECENT_CASTS
from .components.spell import Spell
from .elements import ElementType
from .errors import CapacityExceededError, ForbiddenElementError, InvalidCapacityError
from .spellbook import MAX_SPELLS, Spellbook

logger = logging.getLogger(__name__)


class MasterSpellbook(Spellbook):
    """Spellbook that refuses ``forbidden_element`` and holds at most ``max_spells``.

    ``max_spells`` above :data:`MAX_SPELLS` is clamped rather than rejected;
    the slot store itself always has :data:`MAX_SPELLS` entries.
    """

    DEFAULT_MAX_MANA = 150
    DEFAULT_STARTING_MANA = 100
    FULL_MESSAGE = "The master spellbook is full!"

    def __init__(
        self,
        forbidden: ElementType,
        max_spells: int,
        *,
        max_mana: Optional[int] = None,
        starting_mana: Optional[int] = None,
        max_recent_casts: int = MAX_RECENT_CASTS,
        out: Optional[TextIO] = None,
    ) -> None:
        if not isinstance(forbidden, ElementType):
            raise TypeError(f"Forbidden element must be an ElementType, got {forbidden!r}")
        if max_spells < 1:
            raise InvalidCapacityError("The master spellbook can hold at least 1 spell!")
        if max_spells > MAX_SPELLS:
            logger.debug("Clamping master spellbook capacity %s to %s", max_spells, MAX_SPELLS)
            max_spells = MAX_SPELLS
        super().__init__(
            max_mana=max_mana,
            starting_mana=starting_mana,
            max_recent_casts=max_recent_casts,
            out=out,
        )
        self._forbidden_element = forbidden
        self._max_spell_count = max_spells

    @property
    def forbidden_element(self) -> ElementType:
        return self._forbidden_element

    @property
    def max_spell_count(self) -> int:
        return self._max_spell_count

    def learn_spell(self, spell: Spell) -> None:
        """Store ``spell`` unless its element is forbidden or the book is full.

        Checks run in a fixed order: a same-name overwrite wins over both
        failures (including a forbidden element), and the forbidden element
        check wins over the capacity check.
        """
        if self._try_overwrite(spell):
            return
        if spell.element is self._forbidden_element:
            raise self._rejected(
                ForbiddenElementError(f"{spell.element.value} is forbidden in the master spellbook!")
            )
        if self.spell_count >= self._max_spell_count:
            raise self._rejected(CapacityExceededError(self.FULL_MESSAGE))
        self._append(spell)


__all__ = ["MasterSpellbook"]
