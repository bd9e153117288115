import itertools
import pytest

from fittrack.domain import (
    Exercise,
    ExerciseType,
    User,
    Workout,
    cardio_score,
    exercise_score,
    intensity_multiplier,
    lifting_score,
    user_average_score,
    user_total_score,
    workout_score,
)
from datetime import date
from uuid import uuid4


def cardio(distance=None, duration=None):
    return Exercise(type=ExerciseType.cardio, name="Run", distance=distance, duration=duration)

def lifting(weight=None, reps=None, sets=None):
    return Exercise(type=ExerciseType.lifting, name="Squat", weight=weight, reps=reps, sets=sets)


# --- cardio ---

def test_cardio_distance_and_pace():
    # 5 units in half an hour: base 100, pace 10/h -> bonus 100
    assert exercise_score(cardio(distance=5, duration=1800)) == 200.0

@pytest.mark.parametrize("duration", [None, 0, 60, 1800, 36000])
def test_cardio_without_distance_scores_zero(duration):
    assert exercise_score(cardio(duration=duration)) == 0.0

@pytest.mark.parametrize("duration", [None, 0])
def test_cardio_without_usable_duration_gets_base_only(duration):
    assert cardio_score(3, duration) == 60.0

def test_cardio_one_hour_pace_equals_distance():
    assert cardio_score(10, 3600) == pytest.approx(10 * 20 + 10 * 10)

def test_cardio_zero_distance():
    assert cardio_score(0, 1200) == 0.0


# --- lifting ---

def test_lifting_volume_example():
    # 100*10*3/10 = 300, hypertrophy range
    assert exercise_score(lifting(weight=100, reps=10, sets=3)) == 300.0

@pytest.mark.parametrize("reps, expected", [
    (1, 1.5),
    (5, 1.5),
    (6, 1.0),
    (12, 1.0),
    (13, 0.8),
    (30, 0.8),
])
def test_rep_range_boundaries(reps, expected):
    assert intensity_multiplier(reps) == expected

def test_lifting_strength_range_applies_bonus():
    # 200*5*1/10 = 100 * 1.5
    assert lifting_score(200, 5, 1) == pytest.approx(150.0)

def test_lifting_endurance_range_discounts():
    # 50*13*2/10 = 130 * 0.8
    assert lifting_score(50, 13, 2) == pytest.approx(104.0)

@pytest.mark.parametrize("weight, reps, sets", [
    (None, 10, 3),
    (100, None, 3),
    (100, 10, None),
    (None, None, None),
])
def test_lifting_missing_any_field_scores_zero(weight, reps, sets):
    assert exercise_score(lifting(weight=weight, reps=reps, sets=sets)) == 0.0

def test_fields_of_the_other_type_are_ignored():
    ex = Exercise(type=ExerciseType.lifting, name="Odd", distance=10, duration=600)
    assert exercise_score(ex) == 0.0
    ex = Exercise(type=ExerciseType.cardio, name="Odd", weight=100, reps=5, sets=5)
    assert exercise_score(ex) == 0.0

def test_plain_string_type_is_accepted():
    ex = Exercise(type="Cardio", name="Run", distance=1)
    assert exercise_score(ex) == 20.0


# --- aggregation ---

def test_empty_workout_scores_zero():
    assert workout_score(Workout(user_id=uuid4(), date=date(2026, 1, 1))) == 0.0

def test_workout_score_is_sum_of_exercises():
    w = Workout(
        user_id=uuid4(),
        date=date(2026, 1, 1),
        exercises=(cardio(distance=5, duration=1800), lifting(100, 10, 3), lifting(weight=100)),
    )
    assert w.score == 500.0

def test_workout_score_ignores_exercise_order():
    exercises = [cardio(0.1, 700), lifting(62.5, 7, 3), cardio(3.3, 1234), lifting(0.3, 4, 2)]
    scores = {
        workout_score(Workout(user_id=uuid4(), date=date(2026, 1, 1), exercises=tuple(order)))
        for order in itertools.permutations(exercises)
    }
    assert len(scores) == 1

def test_user_total_is_sum_of_workouts():
    uid = uuid4()
    w1 = Workout(user_id=uid, date=date(2026, 1, 1), exercises=(lifting(100, 10, 3),))
    w2 = Workout(user_id=uid, date=date(2026, 1, 2), exercises=(cardio(5, 1800),))
    user = User(id=uid, name="A", email="a@ex.com", workouts=(w1, w2))
    assert user_total_score(user) == 500.0
    assert user.total_score == 500.0
    assert user.workout_count == 2

def test_user_without_workouts_scores_zero():
    assert User(name="A", email="a@ex.com").total_score == 0.0

def test_average_with_no_workouts_is_zero():
    assert user_average_score(User(name="A", email="a@ex.com")) == 0.0

def test_average_is_total_over_workout_count():
    uid = uuid4()
    workouts = (
        Workout(user_id=uid, date=date(2026, 1, 1), exercises=(lifting(100, 10, 3),)),
        Workout(user_id=uid, date=date(2026, 1, 2), exercises=(cardio(5, 1800),)),
        Workout(user_id=uid, date=date(2026, 1, 3)),
    )
    user = User(id=uid, name="A", email="a@ex.com", workouts=workouts)
    assert user_average_score(user) == pytest.approx(500.0 / 3)
