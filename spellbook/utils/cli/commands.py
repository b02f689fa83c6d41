"""Implementations of spellbook console commands."""

from __future__ import annotations

from typing import Any, Dict, List
import logging

from ...core.components.spell import Spell
from ...core.elements import ElementType
from ...core.errors import SpellbookError
from ...core.master_spellbook import MasterSpellbook
from ...core.spellbook import Spellbook

logger = logging.getLogger(__name__)


def learn(book: Spellbook, args: List[str]) -> bool:
    if len(args) < 3:
        logger.info("Usage: /learn <name> <element> <cost>")
        return False
    name = " ".join(args[:-2])
    element_str, cost_str = args[-2], args[-1]
    try:
        element = ElementType.parse(element_str)
    except ValueError:
        choices = ", ".join(e.value for e in ElementType)
        logger.error("Unknown element: %s. Choose one of: %s", element_str, choices)
        return False
    try:
        spell = Spell(name=name, element=element, mana_cost=int(cost_str))
    except ValueError as e:
        logger.error("Invalid spell: %s", e)
        return False
    try:
        book.learn_spell(spell)
    except SpellbookError as e:
        logger.error("%s", e)
        return False
    logger.info("Learned %s (%s, %s mana).", spell.name, spell.element, spell.mana_cost)
    return True


def cast(book: Spellbook, name: str | None) -> bool:
    if not name:
        logger.info("Usage: /cast <name>")
        return False
    try:
        book.cast_spell(name)
    except SpellbookError as e:
        logger.error("%s", e)
        return False
    return True


def list_spells(book: Spellbook) -> bool:
    try:
        book.print_spells()
    except SpellbookError as e:
        logger.error("%s", e)
        return False
    return True


def restore(book: Spellbook, amount_str: str | None) -> bool:
    if amount_str is None:
        logger.info("Usage: /restore <amount>")
        return False
    try:
        amount = int(amount_str)
    except ValueError:
        logger.error("Invalid amount: %s", amount_str)
        return False
    try:
        book.restore_mana(amount)
    except SpellbookError as e:
        logger.error("%s", e)
        return False
    logger.info("Mana: %s/%s", book.current_mana, book.max_mana)
    return True


def status(book: Spellbook) -> None:
    logger.info("--- %s ---", type(book).__name__)
    logger.info("  Spells: %s/%s", book.spell_count, book.max_spell_count)
    logger.info("  Mana:   %s/%s", book.current_mana, book.max_mana)
    if isinstance(book, MasterSpellbook):
        logger.info("  Forbidden element: %s", book.forbidden_element)
    logger.info("-----------------------------")


def history(book: Spellbook) -> None:
    casts = book.recent_casts
    if not casts:
        logger.info("No spells cast yet.")
        return
    for event in casts:
        logger.info(
            "  %s (%s) - %s mana, %s left",
            event.spell_name,
            event.element,
            event.mana_cost,
            event.mana_after,
        )


def help_command() -> None:
    help_lines = [
        "\nAvailable commands:",
        "  /help                         - Show this help message.",
        "  /learn <name> <element> <cost> - Learn or overwrite a spell. E.g., /learn Fireball Fire 20",
        "  /cast <name>                  - Cast a learned spell.",
        "  /list                         - List learned spells.",
        "  /restore <amount>             - Restore mana.",
        "  /status                       - Show spell count and mana.",
        "  /history                      - Show recent casts.",
        "  /quit                         - Exit the console.\n",
    ]
    for line in help_lines:
        logger.info(line)


def execute(command: str, args: list[str], book: Spellbook, state: Dict[str, Any]) -> Any:
    """Run ``command`` against ``book``. Returns the command's result, if any."""
    if "running" not in state: state["running"] = True
    cmd_lower = command.lower()

    return_value: Any = None

    if cmd_lower == "learn":
        return_value = learn(book, args)
    elif cmd_lower == "cast":
        return_value = cast(book, args[0] if args else None)
    elif cmd_lower == "list":
        return_value = list_spells(book)
    elif cmd_lower == "restore":
        return_value = restore(book, args[0] if args else None)
    elif cmd_lower == "status":
        status(book)
    elif cmd_lower == "history":
        history(book)
    elif cmd_lower == "help":
        help_command()
    elif cmd_lower == "quit":
        state["running"] = False
        logger.info("Quit command received. Shutting down...")
    else:
        logger.error("Unknown command: /%s. Type /help for available commands.", command)

    return return_value


__all__ = [
    "learn", "cast", "list_spells", "restore", "status", "history",
    "help_command", "execute",
]
