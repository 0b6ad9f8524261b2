from __future__ import annotations
from typing import List, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

Position = Literal[1, 2, 3, 4, 5, 6]        # on-court clockwise numbering
OffPosition = Literal[7, 8, 9]              # three off-court slots that also rotate
ExtPosition = Literal[1, 2, 3, 4, 5, 6, 7, 8, 9]
Role = Literal["S", "OH", "OPP", "MB", "L", "DS"]
RotationMode = Literal["6-2", "5-1"]
IssueType = Literal["row", "leftRight"]


class RotationStructureError(ValueError):
    """Slots are not a bijection over the 9 ring positions, or reference unknown players."""


class Player(BaseModel):
    id: str
    name: str
    role: Role
    jersey: Optional[int] = Field(default=None, ge=0)

    @field_validator("name")
    @classmethod
    def _strip(cls, v):
        return v.strip()


class Slot(BaseModel):
    """
    `pos` is the zone the player stands in; `order_pos` is the zone serving
    order assigns them. advance() moves both, a manual swap moves only `pos`.
    """
    model_config = ConfigDict(frozen=True)

    pos: ExtPosition
    player_id: str
    order_pos: Optional[ExtPosition] = None

    @model_validator(mode="before")
    @classmethod
    def _order_defaults_to_pos(cls, data):
        if isinstance(data, dict) and data.get("order_pos") is None and "pos" in data:
            data = {**data, "order_pos": data["pos"]}
        return data


class Rotation(BaseModel):
    model_config = ConfigDict(frozen=True)

    # 9 in a ring (6 on court, 3 off). Tuple order is the ring order that
    # serving_index points into; geometry never depends on it (see Slot).
    slots: Tuple[Slot, ...]
    serving_index: int = Field(default=0, ge=0, le=8)  # ring index currently serving
    mode: RotationMode = "6-2"


class OverlapIssue(BaseModel):
    model_config = ConfigDict(frozen=True)

    a: str
    b: str
    type: IssueType
    message: str


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: bool
    issues: List[OverlapIssue] = Field(default_factory=list)
