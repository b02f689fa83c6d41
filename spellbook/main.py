"""Spellbook bootstrap and interactive console loop."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

from dotenv import load_dotenv

from .config import CONFIG_PATH, Config, load_config
from .core.elements import ElementType
from .core.errors import SpellbookError
from .core.master_spellbook import MasterSpellbook
from .core.spellbook import Spellbook
from .utils.cli.command_parser import parse_command
from .utils.cli.commands import execute

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SPELLBOOK_CONFIG"


def configure_logging(cfg: Config) -> None:
    """Apply the root and per-module levels from ``cfg.logging``."""
    numeric_level = getattr(logging, cfg.logging.global_level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    for module_name, level_str in cfg.logging.module_levels.items():
        module_numeric_level = getattr(logging, level_str.upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def resolve_config_path(config_path: str | Path | None = None) -> Path:
    """Pick the config file: explicit path, then ``$SPELLBOOK_CONFIG``, then the default."""
    if config_path is not None:
        return Path(config_path)
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return CONFIG_PATH


def build_spellbook(
    cfg: Config,
    master: bool = False,
    forbidden: Optional[str] = None,
    max_spells: Optional[int] = None,
    out: Optional[TextIO] = None,
) -> Spellbook:
    """Create a spellbook sized from ``cfg``.

    ``forbidden`` and ``max_spells`` override the master spellbook settings.
    """
    if not master:
        book_cfg = cfg.spellbook
        book: Spellbook = Spellbook(
            max_mana=book_cfg.max_mana,
            starting_mana=book_cfg.starting_mana,
            max_recent_casts=cfg.cast_log.max_recent,
            out=out,
        )
    else:
        master_cfg = cfg.master_spellbook
        element = ElementType.parse(forbidden or master_cfg.forbidden_element)
        book = MasterSpellbook(
            element,
            max_spells if max_spells is not None else master_cfg.max_spells,
            max_mana=master_cfg.max_mana,
            starting_mana=master_cfg.starting_mana,
            max_recent_casts=cfg.cast_log.max_recent,
            out=out,
        )
    logger.info("[Bootstrap] Created %r", book)
    return book


def run_console(book: Spellbook, stream: TextIO) -> None:
    """Read slash commands from ``stream`` until ``/quit`` or end of input."""
    state: Dict[str, Any] = {"running": True}
    for raw_line in stream:
        line = raw_line.strip()
        if not line:
            continue
        cmd = parse_command(line)
        if cmd is None:
            logger.info("Commands start with '/'. Type /help for available commands.")
            continue
        execute(cmd.name, cmd.args, book, state)
        if not state["running"]:
            break


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Interactive spellbook console")
    p.add_argument("--config", default=None, help="Path to a YAML config file")
    p.add_argument("--master", action="store_true", help="Use a master spellbook")
    p.add_argument(
        "--forbidden",
        default=None,
        choices=[e.value for e in ElementType],
        help="Element the master spellbook refuses",
    )
    p.add_argument("--max-spells", type=int, default=None, help="Master spellbook capacity")
    return p


def main(argv: list[str] | None = None) -> int:
    env_path = Path(".env")
    if env_path.exists(): load_dotenv(env_path)

    args = _build_parser().parse_args(argv)
    cfg = load_config(resolve_config_path(args.config))
    configure_logging(cfg)

    try:
        book = build_spellbook(cfg, master=args.master, forbidden=args.forbidden, max_spells=args.max_spells)
    except (ValueError, SpellbookError) as exc:
        logger.error("Could not create spellbook: %s", exc)
        return 1

    logger.info("Spellbook ready. Type /help for commands.")
    try:
        run_console(book, sys.stdin)
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught. Shutting down...")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
