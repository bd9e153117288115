# fittrack/domain/scoring.py
"""
Scoring engine.

Cardio:   distance * 20, plus a pace bonus of (distance per hour) * 10
          when a positive duration is known.
Lifting:  (weight * reps * sets) / 10, scaled by the rep-range multiplier
          (<=5 reps: 1.5, 6..12: 1.0, >12: 0.8).

Nothing in here raises: missing inputs score 0. The leaderboard service
calls the same functions, so a preview computed on the client and the
server-side leaderboard cannot disagree.
"""
from __future__ import annotations
import math
from typing import Optional

from fittrack.domain.records import Exercise, ExerciseType, User, Workout

DISTANCE_POINTS = 20.0
PACE_POINTS = 10.0
VOLUME_DIVISOR = 10.0
SECONDS_PER_HOUR = 3600.0

STRENGTH_MAX_REPS = 5
HYPERTROPHY_MAX_REPS = 12
STRENGTH_MULTIPLIER = 1.5
HYPERTROPHY_MULTIPLIER = 1.0
ENDURANCE_MULTIPLIER = 0.8


def cardio_score(distance: Optional[float], duration: Optional[float]) -> float:
    if distance is None:
        return 0.0
    score = distance * DISTANCE_POINTS
    if duration is not None and duration > 0:
        hours = duration / SECONDS_PER_HOUR
        pace = distance / hours
        score += pace * PACE_POINTS
    return score


def intensity_multiplier(reps: int) -> float:
    if reps <= STRENGTH_MAX_REPS:
        return STRENGTH_MULTIPLIER
    if reps <= HYPERTROPHY_MAX_REPS:
        return HYPERTROPHY_MULTIPLIER
    return ENDURANCE_MULTIPLIER


def lifting_score(weight: Optional[float], reps: Optional[int], sets: Optional[int]) -> float:
    # no partial credit
    if weight is None or reps is None or sets is None:
        return 0.0
    volume = (weight * reps * sets) / VOLUME_DIVISOR
    return volume * intensity_multiplier(reps)


def exercise_score(exercise: Exercise) -> float:
    if exercise.type == ExerciseType.cardio:
        return cardio_score(exercise.distance, exercise.duration)
    if exercise.type == ExerciseType.lifting:
        return lifting_score(exercise.weight, exercise.reps, exercise.sets)
    return 0.0


def workout_score(workout: Workout) -> float:
    # fsum is exactly rounded, so reordering exercises never changes the total
    return math.fsum(exercise_score(ex) for ex in workout.exercises)


def user_total_score(user: User) -> float:
    return math.fsum(workout_score(w) for w in user.workouts)


def user_average_score(user: User) -> float:
    """Score per workout; 0.0 for a user with no workouts."""
    if not user.workouts:
        return 0.0
    return user_total_score(user) / len(user.workouts)


compute_exercise_score = exercise_score
compute_workout_score = workout_score
compute_user_total_score = user_total_score
