"""Simple configuration loader for spellbook."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class SpellbookConfig:
    """Mana sizing for a plain spellbook."""

    max_mana: int = 100
    starting_mana: int = 50


@dataclass
class MasterSpellbookConfig:
    """Mana sizing and restrictions for a master spellbook."""

    max_mana: int = 150
    starting_mana: int = 100
    forbidden_element: str = "Fire"
    max_spells: int = 5


@dataclass
class CastLogConfig:
    """How many recent casts each spellbook remembers."""

    max_recent: int = 20


@dataclass
class LoggingConfig:
    """Root and per-module log levels."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    spellbook: SpellbookConfig = field(default_factory=SpellbookConfig)
    master_spellbook: MasterSpellbookConfig = field(default_factory=MasterSpellbookConfig)
    cast_log: CastLogConfig = field(default_factory=CastLogConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    book_data = data.get("spellbook") or {}
    spellbook = SpellbookConfig(
        max_mana=int(book_data.get("max_mana", 100)),
        starting_mana=int(book_data.get("starting_mana", 50)),
    )

    master_data = data.get("master_spellbook") or {}
    master = MasterSpellbookConfig(
        max_mana=int(master_data.get("max_mana", 150)),
        starting_mana=int(master_data.get("starting_mana", 100)),
        forbidden_element=str(master_data.get("forbidden_element", "Fire")),
        max_spells=int(master_data.get("max_spells", 5)),
    )

    cast_log_data = data.get("cast_log") or {}
    cast_log = CastLogConfig(max_recent=int(cast_log_data.get("max_recent", 20)))

    logging_data = data.get("logging") or {}
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels={
            str(k): str(v) for k, v in (logging_data.get("module_levels") or {}).items()
        },
    )

    return Config(
        spellbook=spellbook,
        master_spellbook=master,
        cast_log=cast_log,
        logging=logging_cfg,
    )


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "CONFIG_PATH",
    "Config",
    "SpellbookConfig",
    "MasterSpellbookConfig",
    "CastLogConfig",
    "LoggingConfig",
    "load_config",
]
