from typing import Annotated
from uuid import UUID
from pydantic import BaseModel, EmailStr, Field, StringConstraints, field_validator
from datetime import datetime

NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]

class UserBase(BaseModel):
    email: EmailStr
    name: NameStr

class UserRegister(UserBase):
    # no regex here; Pydantic v2 core regex doesn't support look-arounds
    password: Annotated[str, Field(min_length=12, max_length=128)]

    @field_validator("password")
    @classmethod
    def password_policy(cls, v: str) -> str:
        if not any(c.islower() for c in v):
            raise ValueError("password must include a lowercase letter")
        if not any(c.isupper() for c in v):
            raise ValueError("password must include an uppercase letter")
        if not any(c.isdigit() for c in v):
            raise ValueError("password must include a digit")
        if not any(not c.isalnum() for c in v):
            raise ValueError("password must include a special character")
        return v

class UserLogin(BaseModel):
    email: EmailStr
    password: Annotated[str, Field(min_length=1, max_length=256)]

class UserUpdate(BaseModel):
    name: NameStr

class UserRead(UserBase):
    id: UUID
    created_at: datetime
    model_config = {"from_attributes": True}

class UserSummary(UserRead):
    """Profile plus the figures derived from the user's workouts."""
    total_score: float
    average_score: float
    workout_count: int
