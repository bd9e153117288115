# fittrack/services/decode.py
"""Stored rows -> plain records for the scoring core."""
from __future__ import annotations

from fittrack.domain import records
from fittrack.models import Group, User, Workout, WorkoutExercise


def exercise_from_row(row: WorkoutExercise) -> records.Exercise:
    return records.Exercise(
        id=row.id,
        type=records.ExerciseType(row.type),
        name=row.name,
        duration=row.duration,
        distance=row.distance,
        weight=row.weight,
        reps=row.reps,
        sets=row.sets,
    )


def workout_from_row(row: Workout) -> records.Workout:
    return records.Workout(
        id=row.id,
        user_id=row.user_id,
        date=row.workout_date,
        exercises=tuple(exercise_from_row(ex) for ex in row.exercises),
    )


def user_from_row(row: User) -> records.User:
    return records.User(
        id=row.id,
        name=row.name,
        email=row.email,
        workouts=tuple(workout_from_row(w) for w in row.workouts),
    )


def group_from_row(row: Group) -> records.Group:
    return records.Group(
        id=row.id,
        name=row.name,
        code=row.code,
        created_by=row.created_by,
        member_ids=tuple(m.user_id for m in row.members),
        created_at=row.created_at,
    )
