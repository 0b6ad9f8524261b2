from __future__ import annotations
from typing import Dict, List, Tuple

# -----------------------------
# Ring (6 on-court zones + 3 off-court slots)
# -----------------------------
RING: Tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 8, 9)
RING_SIZE = len(RING)

COURT_POSITIONS: Tuple[int, ...] = (1, 2, 3, 4, 5, 6)
OFF_POSITIONS: Tuple[int, ...] = (7, 8, 9)

BACK_ROW: Tuple[int, ...] = (1, 6, 5)   # RB, MB, LB
FRONT_ROW: Tuple[int, ...] = (2, 3, 4)  # RF, MF, LF

# Grid: cols 0..2 (left -> right), rows 0..2 (front row at 0, off-court at 2)
# row 0: 4,3,2 | row 1: 5,6,1 | row 2: 7,8,9
GRID_ROWS = 3
GRID_COLS = 3
GRID_LAYOUT: Tuple[Tuple[int, int, int], ...] = (
    (4, 3, 2),
    (5, 6, 1),
    (7, 8, 9),
)
POSITION_TO_GRID: Dict[int, Tuple[int, int]] = {
    pos: (row, col)
    for row, cells in enumerate(GRID_LAYOUT)
    for col, pos in enumerate(cells)
}

# -----------------------------
# Overlap rules
# -----------------------------
ROW_PAIRS: List[Tuple[int, int]] = [(1, 2), (6, 3), (5, 4)]  # (back, front)
FRONT_ORDER: List[int] = [4, 3, 2]
BACK_ORDER: List[int] = [5, 6, 1]

# ---------------------
# Roles / Modes
# ---------------------
ROLES = ["S", "OH", "OPP", "MB", "L", "DS"]
ROLE_LABELS: Dict[str, str] = {
    "S": "Setter",
    "OH": "Outside Hitter",
    "OPP": "Opposite",
    "MB": "Middle Blocker",
    "L": "Libero",
    "DS": "Defensive Specialist",
}
SETTER = "S"

MODES = ["6-2", "5-1"]
PRIMARY_SETTER_ID = "p1"

# ---------------------
# Roster CSV headers
# ---------------------
CSV_HEADERS = ["id", "name", "role", "jersey"]
HEADER_ALIASES = {
    # canonical -> set of aliases
    "id": {"id", "player_id", "pid"},
    "name": {"name", "player", "full name"},
    "role": {"role", "position", "pos"},
    "jersey": {"jersey", "#", "number", "no", "jersey number"},
}
ROLE_ALIASES: Dict[str, str] = {
    "setter": "S",
    "outside": "OH", "outside hitter": "OH",
    "opposite": "OPP", "opp": "OPP", "right side": "OPP",
    "middle": "MB", "middle blocker": "MB",
    "libero": "L",
    "ds": "DS", "defensive specialist": "DS",
}


# ---------------------
# Normalization helpers
# ---------------------
def normalize_name(s: str) -> str:
    if s is None:
        return ""
    return " ".join(s.split())

def normalize_role(r: str) -> str:
    if not r:
        return ""
    r = r.strip()
    if r.upper() in ROLES:
        return r.upper()
    return ROLE_ALIASES.get(r.lower(), r)
