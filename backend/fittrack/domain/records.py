# fittrack/domain/records.py
"""
Plain-data records the scoring engine works on.

They are decoded from stored rows by the service layer and never know about
the database, HTTP or auth. Every record is immutable: an edit builds a new
value and the derived scores are recomputed on read.
"""
from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import Enum
from typing import Iterable, Optional
from uuid import UUID, uuid4


class ExerciseType(str, Enum):
    cardio = "Cardio"
    lifting = "Lifting"


@dataclass(frozen=True, slots=True)
class Exercise:
    type: ExerciseType
    name: str
    duration: Optional[float] = None   # seconds, cardio
    distance: Optional[float] = None   # distance units, cardio
    weight: Optional[float] = None     # lifting
    reps: Optional[int] = None         # lifting
    sets: Optional[int] = None         # lifting
    id: UUID = field(default_factory=uuid4)

    @property
    def score(self) -> float:
        from fittrack.domain.scoring import exercise_score
        return exercise_score(self)


@dataclass(frozen=True, slots=True)
class Workout:
    user_id: UUID
    date: date
    exercises: tuple[Exercise, ...] = ()
    id: UUID = field(default_factory=uuid4)

    @property
    def score(self) -> float:
        from fittrack.domain.scoring import workout_score
        return workout_score(self)


@dataclass(frozen=True, slots=True)
class User:
    """Only raw workouts are held; the total is always derived."""
    name: str
    email: str
    workouts: tuple[Workout, ...] = ()
    id: UUID = field(default_factory=uuid4)

    @property
    def total_score(self) -> float:
        from fittrack.domain.scoring import user_total_score
        return user_total_score(self)

    @property
    def workout_count(self) -> int:
        return len(self.workouts)

    def with_workouts(self, workouts: Iterable[Workout]) -> "User":
        return replace(self, workouts=tuple(workouts))


@dataclass(frozen=True, slots=True)
class Group:
    name: str
    code: str
    created_by: UUID
    member_ids: tuple[UUID, ...] = ()
    created_at: Optional[datetime] = None
    id: UUID = field(default_factory=uuid4)


@dataclass(frozen=True, slots=True)
class LeaderboardEntry:
    # id is the member's user id
    id: UUID
    display_name: str
    total_score: float
    workout_count: int


def replace_exercise(workout: Workout, exercise: Exercise) -> Workout:
    """Swap in the exercise with the same id, keeping its position."""
    exercises = tuple(exercise if ex.id == exercise.id else ex for ex in workout.exercises)
    return replace(workout, exercises=exercises)


def remove_exercise(workout: Workout, exercise_id: UUID) -> Optional[Workout]:
    """
    Drop one exercise. Returns None when nothing is left, meaning the
    workout itself goes away.
    """
    exercises = tuple(ex for ex in workout.exercises if ex.id != exercise_id)
    if not exercises:
        return None
    return replace(workout, exercises=exercises)


def replace_workout(user: User, workout: Workout) -> User:
    return user.with_workouts(workout if w.id == workout.id else w for w in user.workouts)


def remove_workout(user: User, workout_id: UUID) -> User:
    return user.with_workouts(w for w in user.workouts if w.id != workout_id)
