"""
Roster helpers: the default nine and field-level edits.

Edits return a new list; the player being edited is replaced by a copy.
"""
from __future__ import annotations
import logging
from typing import Dict, List, Optional

from .models import Player, Role

logger = logging.getLogger(__name__)


def default_players() -> List[Player]:
    return [
        Player(id="p1", name="Setter1", role="S", jersey=1),
        Player(id="p2", name="OH1", role="OH", jersey=2),
        Player(id="p3", name="MB1", role="MB", jersey=3),
        Player(id="p4", name="OPP1", role="OPP", jersey=4),
        Player(id="p5", name="MB2", role="MB", jersey=5),
        Player(id="p6", name="OH2", role="OH", jersey=6),
        Player(id="p7", name="Setter2", role="S", jersey=7),
        Player(id="p8", name="DS1", role="DS", jersey=8),
        Player(id="p9", name="OPP2", role="OPP", jersey=9),
    ]

def by_id(roster: List[Player]) -> Dict[str, Player]:
    return {p.id: p for p in roster}

def display_name(p: Player) -> str:
    if p.jersey is None:
        return f"{p.name} ({p.role})"
    return f"#{p.jersey} {p.name} ({p.role})"

def _update(players: List[Player], player_id: str, **fields) -> List[Player]:
    if player_id not in by_id(players):
        logger.warning("Roster edit for unknown player %r ignored", player_id)
        return list(players)
    # round-trip through the model so role/jersey are validated
    return [
        Player(**{**p.model_dump(), **fields}) if p.id == player_id else p
        for p in players
    ]

def set_player_name(players: List[Player], player_id: str, name: str) -> List[Player]:
    return _update(players, player_id, name=name)

def set_player_role(players: List[Player], player_id: str, role: Role) -> List[Player]:
    return _update(players, player_id, role=role)

def set_player_jersey(players: List[Player], player_id: str, jersey: Optional[int] = None) -> List[Player]:
    return _update(players, player_id, jersey=jersey)
