# volley_core/config.py
from __future__ import annotations
import logging
import os
import textwrap
from typing import List, Optional, Tuple

import yaml
from pydantic import BaseModel, field_validator

from .constants import PRIMARY_SETTER_ID
from .engine import ensure_well_formed
from .models import Player, Rotation, RotationMode, Slot

logger = logging.getLogger(__name__)

# ===== App defaults =====
DEFAULT_CONFIG = {
    "default_mode": "6-2",
    "primary_setter_id": PRIMARY_SETTER_ID,   # canonical setter in a 5-1
    "log_level": "INFO",
}


class AppConfig(BaseModel):
    default_mode: RotationMode = "6-2"
    primary_setter_id: str = PRIMARY_SETTER_ID
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v):
        if v.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return v.upper()


def load_config(path: Optional[str] = None) -> AppConfig:
    """Read an AppConfig from YAML; a missing path gives the defaults."""
    data = dict(DEFAULT_CONFIG)
    if path and os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            obj = yaml.safe_load(f) or {}
        if not isinstance(obj, dict):
            raise ValueError(f"Config {path} must be a mapping.")
        data.update(obj)
    elif path:
        logger.info("Config %s not found; using defaults", path)
    return AppConfig(**data)


# ===== Default lineup (canonical start: p1@1 ... p9@9) =====
DEFAULT_LINEUP_YAML = textwrap.dedent("""\
mode: "6-2"
serving_index: 0
players:
  - {id: p1, name: Setter1, role: S, jersey: 1}
  - {id: p2, name: OH1, role: OH, jersey: 2}
  - {id: p3, name: MB1, role: MB, jersey: 3}
  - {id: p4, name: OPP1, role: OPP, jersey: 4}
  - {id: p5, name: MB2, role: MB, jersey: 5}
  - {id: p6, name: OH2, role: OH, jersey: 6}
  - {id: p7, name: Setter2, role: S, jersey: 7}
  - {id: p8, name: DS1, role: DS, jersey: 8}
  - {id: p9, name: OPP2, role: OPP, jersey: 9}
slots:
  1: p1
  2: p2
  3: p3
  4: p4
  5: p5
  6: p6
  7: p7
  8: p8
  9: p9
""")


def load_lineup_yaml(text: str) -> Tuple[List[Player], Rotation]:
    """
    Parse a roster plus starting slots. Slots are keyed by ring position;
    ring order follows the position numbers.
    """
    obj = yaml.safe_load(text) or {}
    if not isinstance(obj, dict):
        raise ValueError("Lineup YAML must be a mapping.")
    for key in ("players", "slots"):
        if key not in obj:
            raise ValueError(f"Lineup YAML is missing '{key}'.")
    if not isinstance(obj["slots"], dict):
        raise ValueError("'slots' must map positions to player ids.")

    if not isinstance(obj["players"], list) or not all(isinstance(p, dict) for p in obj["players"]):
        raise ValueError("'players' must be a list of player mappings.")
    players = [Player(**p) for p in obj["players"]]
    slots = tuple(
        Slot(pos=int(pos), player_id=str(pid))
        for pos, pid in sorted(obj["slots"].items(), key=lambda kv: int(kv[0]))
    )
    rotation = Rotation(
        slots=slots,
        serving_index=obj.get("serving_index", 0),
        mode=obj.get("mode", DEFAULT_CONFIG["default_mode"]),
    )
    ensure_well_formed(rotation, players)
    return players, rotation
