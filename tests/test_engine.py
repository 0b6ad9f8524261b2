from __future__ import annotations
import pytest
from volley_core.constants import RING
from volley_core.engine import (
    advance, advance_by, default_rotation, ensure_well_formed, position_of,
    serving_player_id, set_slot_position, slot_for_position, toggle_mode,
)
from volley_core.models import Rotation, RotationStructureError, Slot
from volley_core.roster import default_players
from volley_core.test_helpers import quick_rotation

def _positions(r: Rotation):
    return {s.player_id: s.pos for s in r.slots}

def _assert_bijection(r: Rotation):
    assert sorted(s.pos for s in r.slots) == list(RING)
    assert len({s.player_id for s in r.slots}) == 9

def test_advance_shifts_every_player_one_step():
    r = default_rotation()
    nxt = advance(r)
    pos = _positions(nxt)
    assert pos["p1"] == 2
    assert pos["p6"] == 7
    assert pos["p9"] == 1
    assert nxt.serving_index == 8
    assert nxt.mode == r.mode
    # input untouched
    assert _positions(r)["p1"] == 1

def test_serving_player_stays_in_zone_one():
    r = default_rotation()
    for _ in range(12):
        assert position_of(r, serving_player_id(r)) == 1
        r = advance(r)

def test_ring_closure_after_nine_advances():
    r = set_slot_position(default_rotation("5-1"), "p2", 5)
    out = r
    for _ in range(9):
        out = advance(out)
    assert out == r

def test_advance_by_matches_repeated_advance():
    r = default_rotation()
    assert advance_by(r, 2) == advance(advance(r))
    assert advance_by(r, -1) == advance_by(r, 8)
    assert advance_by(r, 9) == r

def test_swap_moves_displaced_player_to_old_position():
    r = default_rotation()
    out = set_slot_position(r, "p1", 4)
    pos = _positions(out)
    assert pos["p1"] == 4
    assert pos["p4"] == 1
    for pid in ("p2", "p3", "p5", "p6", "p7", "p8", "p9"):
        assert pos[pid] == _positions(r)[pid]
    _assert_bijection(out)
    assert _positions(r)["p1"] == 1

def test_swap_with_off_court_slot_keeps_bijection():
    r = default_rotation()
    for pid, target in [("p3", 8), ("p8", 1), ("p5", 9), ("p9", 2)]:
        r = set_slot_position(r, pid, target)
        assert slot_for_position(r, target).player_id == pid
        _assert_bijection(r)

def test_swap_to_own_position_and_unknown_player_are_no_ops():
    r = default_rotation()
    assert set_slot_position(r, "p3", 3) == r
    assert set_slot_position(r, "nobody", 3) is r

def test_toggle_mode_round_trip():
    r = default_rotation()
    assert toggle_mode(r).mode == "5-1"
    assert toggle_mode(toggle_mode(r)) == r

def test_ensure_well_formed_rejects_duplicates_and_gaps():
    with pytest.raises(RotationStructureError):
        ensure_well_formed(quick_rotation({1: "p1", 2: "p2"}))
    dup_ids = Rotation(slots=tuple(Slot(pos=p, player_id="p1" if p < 3 else f"p{p}") for p in RING))
    with pytest.raises(RotationStructureError):
        ensure_well_formed(dup_ids)
    dup_pos = Rotation(slots=tuple(Slot(pos=min(p, 8), player_id=f"p{p}") for p in RING))
    with pytest.raises(RotationStructureError):
        ensure_well_formed(dup_pos)

def test_advance_moves_serving_order_with_zone_but_swap_does_not():
    r = set_slot_position(default_rotation(), "p1", 4)
    moved = slot_for_position(r, 4)
    assert (moved.player_id, moved.order_pos) == ("p1", 1)
    nxt = advance(r)
    moved = slot_for_position(nxt, 5)
    assert (moved.player_id, moved.order_pos) == ("p1", 2)

def test_ensure_well_formed_rejects_broken_serving_order():
    r = Rotation(slots=tuple(Slot(pos=p, player_id=f"p{p}", order_pos=1) for p in RING))
    with pytest.raises(RotationStructureError):
        ensure_well_formed(r)

def test_ensure_well_formed_checks_roster_ids():
    players = default_players()
    ensure_well_formed(default_rotation(), players)
    with pytest.raises(RotationStructureError):
        ensure_well_formed(default_rotation(), players[:8])

def test_advance_and_swap_refuse_malformed_rotation():
    broken = quick_rotation({1: "p1", 2: "p2", 3: "p3"})
    with pytest.raises(RotationStructureError):
        advance(broken)
    with pytest.raises(RotationStructureError):
        set_slot_position(broken, "p1", 2)
