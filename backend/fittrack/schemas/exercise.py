from typing import Annotated
from uuid import UUID
from pydantic import BaseModel, Field, field_validator

from fittrack.domain.records import ExerciseType

# Keep max length via Field
ExerciseName = Annotated[str, Field(max_length=120)]
PosInt = Annotated[int, Field(ge=1)]
NonNegFloat = Annotated[float, Field(ge=0)]

class ExerciseCreate(BaseModel):
    """
    Attributes that don't apply to the type may be left out; the scorer
    counts anything missing as zero. Negative values are rejected here so
    the scorer never sees them.
    """
    type: ExerciseType
    name: ExerciseName
    duration: NonNegFloat | None = None   # seconds
    distance: NonNegFloat | None = None
    weight: NonNegFloat | None = None
    reps: PosInt | None = None
    sets: PosInt | None = None

    @field_validator("name")
    @classmethod
    def name_non_blank(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("name cannot be blank")
        return v2

class ExerciseRead(BaseModel):
    id: UUID
    type: ExerciseType
    name: str
    duration: float | None = None
    distance: float | None = None
    weight: float | None = None
    reps: int | None = None
    sets: int | None = None
    score: float
