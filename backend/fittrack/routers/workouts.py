from datetime import date
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from fittrack.db import get_db
from fittrack.domain import records
from fittrack.models import User, Workout
from fittrack.repositories.workout_repo import WorkoutRepository
from fittrack.schemas.exercise import ExerciseCreate, ExerciseRead
from fittrack.schemas.workout import ExerciseDeleted, WorkoutCreate, WorkoutRead
from fittrack.services.decode import exercise_from_row, workout_from_row
from fittrack.deps.auth import get_current_user

router = APIRouter(prefix="/workouts", tags=["workouts"])

def to_read(workout: Workout) -> WorkoutRead:
    record = workout_from_row(workout)
    return WorkoutRead(
        id=workout.id,
        user_id=workout.user_id,
        title=workout.title,
        notes=workout.notes,
        workout_date=workout.workout_date,
        exercises=[exercise_read(ex) for ex in record.exercises],
        score=record.score,
    )

def exercise_read(ex: records.Exercise) -> ExerciseRead:
    return ExerciseRead(
        id=ex.id, type=ex.type, name=ex.name, duration=ex.duration, distance=ex.distance,
        weight=ex.weight, reps=ex.reps, sets=ex.sets, score=ex.score,
    )

def owned_workout(workout_id: UUID, db: Session, current: User) -> Workout:
    workout = WorkoutRepository(db).get(workout_id)
    if not workout:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    if workout.user_id != current.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed for this workout")
    return workout

@router.post("", response_model=WorkoutRead, status_code=status.HTTP_201_CREATED)
def create_workout(payload: WorkoutCreate, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    workout = WorkoutRepository(db).create(
        current.id,
        workout_date=payload.workout_date,
        title=payload.title,
        notes=payload.notes,
        exercises=[ex.model_dump() for ex in payload.exercises],
    )
    return to_read(workout)

@router.get("", response_model=list[WorkoutRead])
def list_my_workouts(
    on: date | None = Query(None, description="Only workouts logged on this day"),
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return [to_read(w) for w in WorkoutRepository(db).list_by_user(current.id, on=on)]

@router.get("/{workout_id}", response_model=WorkoutRead)
def get_workout(workout_id: UUID, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return to_read(owned_workout(workout_id, db, current))

@router.delete("/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_workout(workout_id: UUID, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    WorkoutRepository(db).delete(owned_workout(workout_id, db, current))

@router.post("/{workout_id}/exercises", response_model=ExerciseRead, status_code=status.HTTP_201_CREATED)
def add_exercise(
    workout_id: UUID,
    payload: ExerciseCreate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    workout = owned_workout(workout_id, db, current)
    ex = WorkoutRepository(db).add_exercise(workout, payload.model_dump())
    return exercise_read(exercise_from_row(ex))

@router.put("/{workout_id}/exercises/{exercise_id}", response_model=ExerciseRead)
def replace_exercise(
    workout_id: UUID,
    exercise_id: UUID,
    payload: ExerciseCreate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    repo = WorkoutRepository(db)
    workout = owned_workout(workout_id, db, current)
    ex = repo.get_exercise(workout, exercise_id)
    if not ex:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    ex = repo.replace_exercise(ex, payload.model_dump())
    return exercise_read(exercise_from_row(ex))

@router.delete("/{workout_id}/exercises/{exercise_id}", response_model=ExerciseDeleted)
def delete_exercise(
    workout_id: UUID,
    exercise_id: UUID,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    repo = WorkoutRepository(db)
    workout = owned_workout(workout_id, db, current)
    ex = repo.get_exercise(workout, exercise_id)
    if not ex:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    deleted = repo.delete_exercise(workout, ex)
    return ExerciseDeleted(workout_id=workout_id, exercise_id=exercise_id, workout_deleted=deleted)
