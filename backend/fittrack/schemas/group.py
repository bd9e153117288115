from typing import Annotated
from datetime import datetime
from uuid import UUID
from pydantic import BaseModel, StringConstraints, field_validator

from fittrack.domain.codes import is_valid_group_code, normalize_group_code

GroupName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]

class GroupCreate(BaseModel):
    name: GroupName

class GroupJoin(BaseModel):
    code: str

    @field_validator("code")
    @classmethod
    def code_format(cls, v: str) -> str:
        v2 = normalize_group_code(v)
        if not is_valid_group_code(v2):
            raise ValueError("code must be 6 letters or digits")
        return v2

class GroupRead(BaseModel):
    id: UUID
    name: str
    code: str
    created_by: UUID
    created_at: datetime | None = None
    member_ids: list[UUID]

class LeaderboardRow(BaseModel):
    rank: int
    user_id: UUID
    display_name: str
    total_score: float
    workout_count: int

class RankRead(BaseModel):
    group_id: UUID
    user_id: UUID
    rank: int
