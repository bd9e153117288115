# fittrack/repositories/user_repo.py
from __future__ import annotations
from typing import Optional
from uuid import UUID

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError

from fittrack.models import User
from fittrack.repositories.base import BaseRepository
from fittrack.logger import get_logger

log = get_logger(__name__)

class UserRepository(BaseRepository[User]):
    model = User

    # READS
    def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(func.lower(User.email) == email.lower())
        return self.db.execute(stmt).scalar_one_or_none()

    # WRITES
    def create(self, *, email: str, name: str, password_hash: str) -> User:
        user = User(email=email, name=name, password_hash=password_hash)
        try:
            user = self.commit_and_refresh(user)
        except IntegrityError:
            self.db.rollback()
            # Re-raise a clean marker the router maps to 400
            raise ValueError("email_already_exists")
        log.info("user registered id=%s", user.id)
        return user

    def update_name(self, user_id: UUID, *, name: str) -> Optional[User]:
        user = self.get(user_id)
        if not user:
            return None
        user.name = name
        return self.commit_and_refresh(user)
