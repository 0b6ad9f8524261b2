from __future__ import annotations
from typing import Iterable, Optional

from .constants import SETTER, PRIMARY_SETTER_ID
from .models import Player, Rotation
from .ring import is_back_row


def setter_ids(players: Iterable[Player]) -> list[str]:
    return [p.id for p in players if p.role == SETTER]

def get_active_setter(
    rotation: Rotation,
    players: Iterable[Player],
    primary_id: str = PRIMARY_SETTER_ID,
) -> Optional[str]:
    """
    5-1: one setter runs every rotation; `primary_id` wins when it is a setter.
    6-2: the back-row setter runs the offense (the front-row one hits).
    Either way, fall back to the first setter in roster order.
    """
    setters = setter_ids(players)
    if not setters:
        return None
    if rotation.mode == "5-1":
        return primary_id if primary_id in setters else setters[0]

    for s in rotation.slots:
        if is_back_row(s.pos) and s.player_id in setters:
            return s.player_id
    return setters[0]
