# fittrack/repositories/base.py
from __future__ import annotations
from typing import Generic, Optional, TypeVar
from uuid import UUID

from sqlalchemy.orm import Session

T = TypeVar("T")  # SQLAlchemy model type

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style."""
    model: type[T]

    def __init__(self, db: Session):
        self.db = db

    def get(self, entity_id: UUID) -> Optional[T]:
        return self.db.get(self.model, entity_id)

    def commit_and_refresh(self, entity: T) -> T:
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity: T) -> None:
        self.db.delete(entity)
        self.db.commit()
