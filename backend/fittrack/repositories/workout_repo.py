# fittrack/repositories/workout_repo.py
from __future__ import annotations
from datetime import date
from typing import Any, Iterable, Mapping, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from fittrack.domain.records import ExerciseType
from fittrack.models import Workout, WorkoutExercise
from fittrack.repositories.base import BaseRepository
from fittrack.logger import get_logger

log = get_logger(__name__)

EXERCISE_FIELDS = ("type", "name", "duration", "distance", "weight", "reps", "sets")

def default_title(types: Iterable[ExerciseType]) -> str:
    """A workout of one exercise type is titled after it, mixed ones are just "Workout"."""
    kinds = {ExerciseType(t) for t in types}
    if len(kinds) == 1:
        return kinds.pop().value
    return "Workout"

class WorkoutRepository(BaseRepository[Workout]):
    model = Workout

    def list_by_user(self, user_id: UUID, *, on: date | None = None) -> list[Workout]:
        stmt = select(Workout).where(Workout.user_id == user_id)\
                              .options(selectinload(Workout.exercises))\
                              .order_by(Workout.workout_date.desc(), Workout.created_at.desc())
        if on is not None:
            # one calendar day
            stmt = stmt.where(Workout.workout_date == on)
        return list(self.db.execute(stmt).scalars().all())

    def create(
        self,
        user_id: UUID,
        *,
        workout_date: date,
        exercises: list[Mapping[str, Any]],
        title: str | None = None,
        notes: str | None = None,
    ) -> Workout:
        """Workout and its exercises land in one commit, so no orphan workouts."""
        workout = Workout(
            user_id=user_id,
            title=title or default_title(ex["type"] for ex in exercises),
            notes=notes,
            workout_date=workout_date,
        )
        workout.exercises = [
            self._build_exercise(user_id, position, fields) for position, fields in enumerate(exercises)
        ]
        try:
            workout = self.commit_and_refresh(workout)
        except Exception:
            self.db.rollback()
            raise
        log.info("workout created id=%s user=%s exercises=%d", workout.id, user_id, len(exercises))
        return workout

    def get_exercise(self, workout: Workout, exercise_id: UUID) -> Optional[WorkoutExercise]:
        for ex in workout.exercises:
            if ex.id == exercise_id:
                return ex
        return None

    def add_exercise(self, workout: Workout, fields: Mapping[str, Any]) -> WorkoutExercise:
        position = max((ex.position for ex in workout.exercises), default=-1) + 1
        ex = self._build_exercise(workout.user_id, position, fields)
        workout.exercises.append(ex)
        self.db.commit()
        self.db.refresh(ex)
        return ex

    def replace_exercise(self, exercise: WorkoutExercise, fields: Mapping[str, Any]) -> WorkoutExercise:
        """Full replacement: attributes left out of ``fields`` are cleared, id and position stay."""
        for name in EXERCISE_FIELDS:
            setattr(exercise, name, fields.get(name))
        return self.commit_and_refresh(exercise)

    def delete_exercise(self, workout: Workout, exercise: WorkoutExercise) -> bool:
        """
        Remove one exercise. When it was the last one the workout is deleted
        too; returns True in that case.
        """
        workout.exercises.remove(exercise)
        if not workout.exercises:
            self.db.delete(workout)
            self.db.commit()
            log.info("workout %s deleted with its last exercise", workout.id)
            return True
        self.db.commit()
        return False

    @staticmethod
    def _build_exercise(user_id: UUID, position: int, fields: Mapping[str, Any]) -> WorkoutExercise:
        return WorkoutExercise(
            user_id=user_id,
            position=position,
            **{name: fields.get(name) for name in EXERCISE_FIELDS},
        )
