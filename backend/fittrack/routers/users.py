from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from fittrack.db import get_db
from fittrack.models import User
from fittrack.repositories.user_repo import UserRepository
from fittrack.schemas.user import UserSummary, UserUpdate
from fittrack.domain.scoring import user_average_score
from fittrack.services.decode import user_from_row
from fittrack.deps.auth import get_current_user

router = APIRouter(prefix="/users", tags=["users"])

def to_summary(user: User) -> UserSummary:
    # total is derived from the stored workouts on every read, never stored
    record = user_from_row(user)
    return UserSummary(
        id=user.id,
        email=user.email,
        name=user.name,
        created_at=user.created_at,
        total_score=record.total_score,
        average_score=user_average_score(record),
        workout_count=record.workout_count,
    )

@router.get("/me", response_model=UserSummary)
def my_summary(current: User = Depends(get_current_user)):
    return to_summary(current)

@router.patch("/me", response_model=UserSummary)
def update_me(payload: UserUpdate, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    user = UserRepository(db).update_name(current.id, name=payload.name)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return to_summary(user)
