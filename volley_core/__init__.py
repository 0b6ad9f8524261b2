"""
volley_core package: ring geometry, rotation engine, overlap validation,
lineup policy, roster editing and roster/config loading.
"""
from .constants import (
    RING, RING_SIZE, COURT_POSITIONS, OFF_POSITIONS, BACK_ROW, FRONT_ROW,
    GRID_LAYOUT, ROW_PAIRS, FRONT_ORDER, BACK_ORDER,
    ROLES, ROLE_LABELS, MODES, PRIMARY_SETTER_ID,
)
from .models import (
    Player, Slot, Rotation, OverlapIssue, ValidationResult, RotationStructureError,
)
from .ring import (
    position_to_grid, grid_to_position, clamp_cell, next_position,
    is_back_row, is_front_row, is_off_court, position_label,
)
from .engine import (
    ensure_well_formed, default_rotation, advance, advance_by, set_slot_position,
    toggle_mode, slot_for_position, position_of, serving_order_position, serving_player_id,
)
from .validation import check_overlap, summarize
from .lineup import get_active_setter
from .roster import default_players, set_player_name, set_player_role, set_player_jersey
