from typing import Annotated
from datetime import date
from uuid import UUID
from pydantic import BaseModel, Field, StringConstraints

from fittrack.schemas.exercise import ExerciseCreate, ExerciseRead

TitleStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]
# Notes: trimmed, up to 500 chars
NotesStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]

class WorkoutCreate(BaseModel):
    workout_date: date = Field(default_factory=date.today)
    title: TitleStr | None = None
    notes: NotesStr | None = None
    exercises: list[ExerciseCreate] = Field(min_length=1)

class WorkoutRead(BaseModel):
    id: UUID
    user_id: UUID
    title: str
    notes: str | None = None
    workout_date: date
    exercises: list[ExerciseRead]
    score: float

class ExerciseDeleted(BaseModel):
    workout_id: UUID
    exercise_id: UUID
    workout_deleted: bool
