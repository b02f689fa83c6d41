"""Error types raised by spellbook operations."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Classify why a spellbook operation was rejected."""

    CAPACITY_EXCEEDED = "capacity_exceeded"
    FORBIDDEN_ELEMENT = "forbidden_element"
    NOT_FOUND = "not_found"
    INSUFFICIENT_MANA = "insufficient_mana"
    EMPTY = "empty"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_CAPACITY = "invalid_capacity"


class SpellbookError(Exception):
    """Base class for all rejected spellbook operations.

    ``message`` is the human readable text shown to players and is also what
    ``str(error)`` returns. ``kind`` lets callers branch without matching on
    the concrete subclass.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class CapacityExceededError(SpellbookError):
    kind = ErrorKind.CAPACITY_EXCEEDED


class ForbiddenElementError(SpellbookError):
    kind = ErrorKind.FORBIDDEN_ELEMENT


class SpellNotFoundError(SpellbookError):
    kind = ErrorKind.NOT_FOUND


class InsufficientManaError(SpellbookError):
    kind = ErrorKind.INSUFFICIENT_MANA


class EmptySpellbookError(SpellbookError):
    kind = ErrorKind.EMPTY


class InvalidAmountError(SpellbookError):
    kind = ErrorKind.INVALID_AMOUNT


class InvalidCapacityError(SpellbookError):
    kind = ErrorKind.INVALID_CAPACITY


__all__ = [
    "ErrorKind",
    "SpellbookError",
    "CapacityExceededError",
    "ForbiddenElementError",
    "SpellNotFoundError",
    "InsufficientManaError",
    "EmptySpellbookError",
    "InvalidAmountError",
    "InvalidCapacityError",
]
