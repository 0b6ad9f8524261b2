from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Optional

from .constants import RING, RING_SIZE
from .models import Player, Rotation, RotationMode, RotationStructureError, Slot
from .ring import next_position

logger = logging.getLogger(__name__)

# -----------------------
# Structure checks
# -----------------------
def ensure_well_formed(r: Rotation, players: Optional[Iterable[Player]] = None) -> None:
    """
    Raise RotationStructureError unless the slots are a bijection between
    the 9 ring positions and 9 distinct player ids, and their serving-order
    positions also cover 1-9 once each. When a roster is given,
    every referenced id must also exist in it.
    """
    positions = sorted(s.pos for s in r.slots)
    if positions != list(RING):
        raise RotationStructureError(
            f"Slots must cover positions 1-9 exactly once, got {positions}"
        )
    order = sorted(serving_order_position(s) for s in r.slots)
    if order != list(RING):
        raise RotationStructureError(
            f"Serving order must cover positions 1-9 exactly once, got {order}"
        )
    ids = [s.player_id for s in r.slots]
    dupes = sorted({pid for pid in ids if ids.count(pid) > 1})
    if dupes:
        raise RotationStructureError(f"Player ids assigned to more than one slot: {dupes}")
    if players is not None:
        known = {p.id for p in players}
        unknown = [pid for pid in ids if pid not in known]
        if unknown:
            raise RotationStructureError(f"Slots reference unknown player ids: {unknown}")

# -----------------------
# Lookups
# -----------------------
def slot_for_position(r: Rotation, pos: int) -> Optional[Slot]:
    for s in r.slots:
        if s.pos == pos:
            return s
    return None

def position_of(r: Rotation, player_id: str) -> Optional[int]:
    for s in r.slots:
        if s.player_id == player_id:
            return s.pos
    return None

def occupants(r: Rotation) -> Dict[int, str]:
    return {s.pos: s.player_id for s in r.slots}

def serving_order_position(slot: Slot) -> int:
    """
    Zone serving order assigns the slot's player.
    advance() keeps this equal to the slot's zone; manual swaps do not.
    """
    return slot.order_pos if slot.order_pos is not None else slot.pos

def serving_player_id(r: Rotation) -> Optional[str]:
    if r.serving_index >= len(r.slots):
        return None
    return r.slots[r.serving_index].player_id

# -----------------------
# Construction
# -----------------------
def default_rotation(mode: RotationMode = "6-2") -> Rotation:
    slots = tuple(Slot(pos=pos, player_id=f"p{pos}") for pos in RING)
    return Rotation(slots=slots, serving_index=0, mode=mode)

# -----------------------
# Transitions
# -----------------------
def advance(r: Rotation) -> Rotation:
    """Shift all nine players one ring step (6 -> 1 serves next, 9 -> 1 wraps)."""
    ensure_well_formed(r)
    rotated = tuple(
        s.model_copy(update={
            "pos": next_position(s.pos),
            "order_pos": next_position(serving_order_position(s)),
        })
        for s in r.slots
    )
    serving_index = (r.serving_index + RING_SIZE - 1) % RING_SIZE
    logger.debug("Rotated ring; serving index %d -> %d", r.serving_index, serving_index)
    return r.model_copy(update={"slots": rotated, "serving_index": serving_index})

def advance_by(r: Rotation, steps: int) -> Rotation:
    """Advance `steps` times; negative steps rotate backwards."""
    out = r
    for _ in range(steps % RING_SIZE):
        out = advance(out)
    if out is r:
        ensure_well_formed(r)
    return out

def set_slot_position(r: Rotation, player_id: str, pos: int) -> Rotation:
    """
    Move `player_id` to `pos`, swapping with whoever held it. Never overwrites:
    the displaced player takes the mover's old position.
    """
    ensure_well_formed(r)
    slots: List[Slot] = list(r.slots)
    me_idx = next((i for i, s in enumerate(slots) if s.player_id == player_id), -1)
    target_idx = next((i for i, s in enumerate(slots) if s.pos == pos), -1)
    if me_idx == -1 or target_idx == -1:
        logger.warning("Ignoring move of %r to position %r: not on the ring", player_id, pos)
        return r
    if me_idx == target_idx:
        return r

    me = slots[me_idx]
    target = slots[target_idx]
    slots[me_idx] = me.model_copy(update={"pos": target.pos})
    slots[target_idx] = target.model_copy(update={"pos": me.pos})
    logger.debug("Swapped %s (%d) with %s (%d)", me.player_id, me.pos, target.player_id, target.pos)
    return r.model_copy(update={"slots": tuple(slots)})

def toggle_mode(r: Rotation) -> Rotation:
    mode = "5-1" if r.mode == "6-2" else "6-2"
    logger.debug("Mode %s -> %s", r.mode, mode)
    return r.model_copy(update={"mode": mode})
