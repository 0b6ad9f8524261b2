"""
Overlap legality at the moment of serve.

Each zone's occupant is placed on the grid by its serving-order position
(Slot.order_pos). A player whose zone differs from that position (after
a manual swap) can fall out of row depth or left-right order relative to
the neighbours the rules pair it with. Slot order plays no part.
"""
from __future__ import annotations
import logging
from typing import Dict, List, Tuple

from .constants import ROW_PAIRS, FRONT_ORDER, BACK_ORDER
from .engine import serving_order_position
from .models import OverlapIssue, Rotation, ValidationResult
from .ring import is_off_court, position_to_grid

logger = logging.getLogger(__name__)


def _placements(rotation: Rotation) -> Dict[int, Tuple[str, Tuple[int, int]]]:
    # zone -> (player id, grid cell of the occupant's serving-order position)
    out: Dict[int, Tuple[str, Tuple[int, int]]] = {}
    for s in rotation.slots:
        if is_off_court(s.pos):
            continue
        order_pos = serving_order_position(s)
        if is_off_court(order_pos):
            # brought on from the bench: takes over this zone's place in the order
            order_pos = s.pos
        out[s.pos] = (s.player_id, position_to_grid(order_pos))
    return out

def check_overlap(rotation: Rotation) -> ValidationResult:
    placed = _placements(rotation)
    issues: List[OverlapIssue] = []

    # Row (front/back): back must be deeper than corresponding front
    for back_pos, front_pos in ROW_PAIRS:
        if back_pos not in placed or front_pos not in placed:
            continue
        back_id, (back_row, _) = placed[back_pos]
        front_id, (front_row, _) = placed[front_pos]
        if back_row <= front_row:
            issues.append(OverlapIssue(
                a=back_id, b=front_id, type="row",
                message=f"Back-row {back_pos} must be behind front-row {front_pos}",
            ))

    # Left/right order within each row: Front (4<3<2), Back (5<6<1)
    for order in (FRONT_ORDER, BACK_ORDER):
        for left, right in zip(order, order[1:]):
            if left not in placed or right not in placed:
                continue
            left_id, (_, left_col) = placed[left]
            right_id, (_, right_col) = placed[right]
            if left_col >= right_col:
                issues.append(OverlapIssue(
                    a=left_id, b=right_id, type="leftRight",
                    message=f"{left} must stay left of {right}",
                ))

    if issues:
        logger.debug("Overlap check found %d issue(s)", len(issues))
    return ValidationResult(ok=not issues, issues=issues)

def summarize(result: ValidationResult) -> str:
    if result.ok:
        return "Lineup is legal."
    return f"{len(result.issues)} issue(s) found."
