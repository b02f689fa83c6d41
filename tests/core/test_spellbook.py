import pytest

from spellbook.core.components.spell import Spell
from spellbook.core.elements import ElementType
from spellbook.core.errors import (
    CapacityExceededError,
    EmptySpellbookError,
    InsufficientManaError,
    InvalidAmountError,
    SpellNotFoundError,
)
from spellbook.core.spellbook import MAX_SPELLS, Spellbook


def _spells(count: int, element: ElementType = ElementType.ICE, cost: int = 5) -> list[Spell]:
    return [Spell(f"Spell{i}", element, cost) for i in range(count)]


def test_initial_state(book):
    assert book.spell_count == 0
    assert book.current_mana == 50
    assert book.max_mana == 100
    assert book.max_spell_count == MAX_SPELLS == 5
    assert book.spells == ()
    assert book.recent_casts == ()


def test_learn_keeps_submission_order(book, out):
    spells = _spells(4)
    for s in spells:
        book.learn_spell(s)
    assert book.spell_count == 4
    assert book.spells == tuple(spells)
    text = book.print_spells()
    assert text.splitlines()[:4] == [f"Spell{i} (Ice) - 5 mana." for i in range(4)]


def test_sixth_distinct_spell_is_rejected(book):
    for s in _spells(5):
        book.learn_spell(s)
    with pytest.raises(CapacityExceededError) as excinfo:
        book.learn_spell(Spell("Extra", ElementType.WIND, 1))
    assert str(excinfo.value) == "The spellbook is full!"
    assert book.spell_count == 5
    assert not book.knows("Extra")


def test_overwrite_in_place_even_when_full(book):
    for s in _spells(5):
        book.learn_spell(s)
    book.learn_spell(Spell("Spell2", ElementType.EARTH, 40))
    assert book.spell_count == 5
    assert book.spells[2] == Spell("Spell2", ElementType.EARTH, 40)
    assert [s.name for s in book.spells] == [f"Spell{i}" for i in range(5)]


def test_overwrite_does_not_change_count(book, fireball):
    book.learn_spell(fireball)
    book.learn_spell(Spell("Fireball", ElementType.LIGHTNING, 7))
    assert book.spell_count == 1
    assert book.get_spell("Fireball") == Spell("Fireball", ElementType.LIGHTNING, 7)


def test_names_are_case_sensitive(book):
    book.learn_spell(Spell("Gust", ElementType.WIND, 1))
    book.learn_spell(Spell("gust", ElementType.WIND, 2))
    assert book.spell_count == 2
    with pytest.raises(SpellNotFoundError):
        book.cast_spell("GUST")


def test_fireball_scenario(book, fireball, out):
    book.learn_spell(fireball)

    book.cast_spell("Fireball")
    assert book.current_mana == 30
    assert out.getvalue() == "Casted Fireball.\n"

    book.cast_spell("Fireball")
    assert book.current_mana == 10

    with pytest.raises(InsufficientManaError) as excinfo:
        book.cast_spell("Fireball")
    assert str(excinfo.value) == "Not enough mana to cast Fireball!"
    assert book.current_mana == 10
    assert out.getvalue() == "Casted Fireball.\nCasted Fireball.\n"
    assert book.knows("Fireball")


def test_cast_unknown_spell(book, out):
    with pytest.raises(SpellNotFoundError) as excinfo:
        book.cast_spell("Meteor")
    assert str(excinfo.value) == "Spell Meteor not learned!"
    assert book.current_mana == 50
    assert out.getvalue() == ""


def test_cast_exact_remaining_mana(book):
    book.learn_spell(Spell("Drain", ElementType.EARTH, 50))
    book.cast_spell("Drain")
    assert book.current_mana == 0


def test_cast_free_spell_with_empty_pool():
    book = Spellbook(starting_mana=0)
    book.learn_spell(Spell("Breeze", ElementType.WIND, 0))
    book.cast_spell("Breeze")
    assert book.current_mana == 0


def test_cast_records_event(book, fireball):
    book.learn_spell(fireball)
    book.cast_spell("Fireball")
    (event,) = book.recent_casts
    assert event.spell_name == "Fireball"
    assert event.element is ElementType.FIRE
    assert event.mana_cost == 20
    assert event.mana_after == 30


def test_failed_cast_is_not_recorded(book):
    book.learn_spell(Spell("Fireball", ElementType.FIRE, 99))
    with pytest.raises(InsufficientManaError):
        book.cast_spell("Fireball")
    assert book.recent_casts == ()


def test_print_spells_format(book, out):
    book.learn_spell(Spell("Fireball", ElementType.FIRE, 20))
    book.learn_spell(Spell("Frost Nova", ElementType.ICE, 15))
    text = book.print_spells()
    expected = (
        "Fireball (Fire) - 20 mana.\n"
        "Frost Nova (Ice) - 15 mana.\n"
        "Total spells: 2.\n"
    )
    assert text == expected
    assert out.getvalue() == expected


def test_print_empty_book_writes_nothing(book, out):
    with pytest.raises(EmptySpellbookError) as excinfo:
        book.print_spells()
    assert str(excinfo.value) == "Spellbook is empty!"
    assert out.getvalue() == ""


def test_print_defaults_to_stdout(capsys, fireball):
    book = Spellbook()
    book.learn_spell(fireball)
    book.cast_spell("Fireball")
    book.print_spells()
    assert capsys.readouterr().out == (
        "Casted Fireball.\nFireball (Fire) - 20 mana.\nTotal spells: 1.\n"
    )


@pytest.mark.parametrize("amount", [0, -1, -100])
def test_restore_rejects_non_positive(book, amount):
    with pytest.raises(InvalidAmountError) as excinfo:
        book.restore_mana(amount)
    assert str(excinfo.value) == "Restore amount must be positive!"
    assert book.current_mana == 50


def test_restore_rejects_non_positive_even_when_full():
    book = Spellbook(starting_mana=100)
    with pytest.raises(InvalidAmountError):
        book.restore_mana(0)
    assert book.current_mana == 100


@pytest.mark.parametrize("amount, expected", [(1, 51), (50, 100), (51, 100), (1000, 100)])
def test_restore_caps_at_max(book, amount, expected):
    book.restore_mana(amount)
    assert book.current_mana == expected


def test_restore_then_recast(book, fireball):
    book.learn_spell(fireball)
    book.cast_spell("Fireball")
    book.cast_spell("Fireball")
    with pytest.raises(InsufficientManaError):
        book.cast_spell("Fireball")
    book.restore_mana(10)
    book.cast_spell("Fireball")
    assert book.current_mana == 0


def test_custom_mana_sizing():
    book = Spellbook(max_mana=40, starting_mana=40)
    assert (book.current_mana, book.max_mana) == (40, 40)


def test_invalid_mana_sizing():
    with pytest.raises(ValueError):
        Spellbook(max_mana=10, starting_mana=20)


def test_get_spell_unknown_returns_none(book):
    assert book.get_spell("Nothing") is None
    assert not book.knows("Nothing")


def test_spellbooks_do_not_share_state(fireball):
    a = Spellbook()
    b = Spellbook()
    a.learn_spell(fireball)
    assert b.spell_count == 0


def test_repr(book, fireball):
    book.learn_spell(fireball)
    assert repr(book) == "Spellbook(spells=1/5, mana=50/100)"


@pytest.mark.parametrize("amount", [0.25, 10.0, "10", True])
def test_restore_rejects_non_int_amount(book, amount):
    with pytest.raises(TypeError):
        book.restore_mana(amount)
    assert book.current_mana == 50
