"""components package."""

from .cast_log import CastLog
from .mana import ManaPool
from .spell import Spell

__all__ = ["CastLog", "ManaPool", "Spell"]
