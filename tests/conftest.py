# tests/conftest.py
import io
import logging

import pytest

from spellbook.core.components.spell import Spell
from spellbook.core.elements import ElementType
from spellbook.core.master_spellbook import MasterSpellbook
from spellbook.core.spellbook import Spellbook


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def book(out) -> Spellbook:
    return Spellbook(out=out)


@pytest.fixture
def master(out) -> MasterSpellbook:
    return MasterSpellbook(ElementType.FIRE, 3, out=out)


@pytest.fixture
def fireball() -> Spell:
    return Spell("Fireball", ElementType.FIRE, 20)


@pytest.fixture
def isolated_logging():
    """Drop handlers installed by ``logging.basicConfig`` in the code under test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
