"""
Ring model: the 9-position rotation ring and its 3x3 grid geometry.

The grid table in constants.GRID_LAYOUT is the single source of truth for
both display placement and overlap geometry.
"""
from __future__ import annotations
from typing import Dict, Tuple

from .constants import (
    RING, RING_SIZE, POSITION_TO_GRID, GRID_LAYOUT, GRID_ROWS, GRID_COLS,
    BACK_ROW, FRONT_ROW, OFF_POSITIONS,
)

_NEXT_POS: Dict[int, int] = {p: RING[(i + 1) % RING_SIZE] for i, p in enumerate(RING)}


def position_to_grid(pos: int) -> Tuple[int, int]:
    """Return (row, col) for a ring position; row 0 is the front row."""
    return POSITION_TO_GRID[pos]

def grid_to_position(row: int, col: int) -> int:
    # callers clamp first (see clamp_cell)
    return GRID_LAYOUT[row][col]

def clamp_cell(row: int, col: int) -> Tuple[int, int]:
    return (
        min(GRID_ROWS - 1, max(0, row)),
        min(GRID_COLS - 1, max(0, col)),
    )

def next_position(pos: int) -> int:
    return _NEXT_POS[pos]

def is_back_row(pos: int) -> bool:
    return pos in BACK_ROW

def is_front_row(pos: int) -> bool:
    return pos in FRONT_ROW

def is_off_court(pos: int) -> bool:
    return pos in OFF_POSITIONS

def position_label(pos: int) -> str:
    """Zones read "1".."6"; off-court slots read "O1".."O3"."""
    if is_off_court(pos):
        return f"O{pos - OFF_POSITIONS[0] + 1}"
    return str(pos)
