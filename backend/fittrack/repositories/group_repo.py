# fittrack/repositories/group_repo.py
from __future__ import annotations
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload

from fittrack.domain.codes import generate_group_code, normalize_group_code
from fittrack.models import Group, GroupMember, User, Workout
from fittrack.repositories.base import BaseRepository
from fittrack.settings import get_settings
from fittrack.logger import get_logger

log = get_logger(__name__)

class GroupRepository(BaseRepository[Group]):
    model = Group

    # READS
    def get_by_code(self, code: str) -> Optional[Group]:
        stmt = select(Group).where(Group.code == normalize_group_code(code))
        return self.db.execute(stmt).scalar_one_or_none()

    def list_for_user(self, user_id: UUID) -> list[Group]:
        stmt = select(Group).join(GroupMember, GroupMember.group_id == Group.id)\
                            .where(GroupMember.user_id == user_id)\
                            .options(selectinload(Group.members))\
                            .order_by(Group.created_at.desc())
        return list(self.db.execute(stmt).scalars().unique().all())

    def is_member(self, group: Group, user_id: UUID) -> bool:
        return any(m.user_id == user_id for m in group.members)

    def members_with_workouts(self, group: Group) -> list[User]:
        """Members in join order, workouts and exercises loaded."""
        stmt = select(User, GroupMember.position)\
            .join(GroupMember, GroupMember.user_id == User.id)\
            .where(GroupMember.group_id == group.id)\
            .options(selectinload(User.workouts).selectinload(Workout.exercises))\
            .order_by(GroupMember.position.asc())
        return [user for user, _ in self.db.execute(stmt).all()]

    # WRITES
    def create(self, *, name: str, created_by: UUID) -> Group:
        """
        Generate-check-regenerate: draw a code, skip it if taken, and retry on
        an insert race. Raises ValueError("group_code_exhausted") when every
        attempt collided.
        """
        attempts = get_settings().GROUP_CODE_MAX_ATTEMPTS
        for attempt in range(1, attempts + 1):
            code = generate_group_code()
            if self.get_by_code(code) is not None:
                log.warning("group code collision code=%s attempt=%d", code, attempt)
                continue
            group = Group(name=name, code=code, created_by=created_by)
            group.members.append(GroupMember(user_id=created_by))
            try:
                group = self.commit_and_refresh(group)
            except IntegrityError:
                self.db.rollback()
                log.warning("group code taken on insert code=%s attempt=%d", code, attempt)
                continue
            log.info("group created id=%s code=%s", group.id, group.code)
            return group
        raise ValueError("group_code_exhausted")

    def join(self, group: Group, user_id: UUID) -> Group:
        """Idempotent: joining twice leaves a single membership."""
        if self.is_member(group, user_id):
            return group
        group.members.append(GroupMember(user_id=user_id))
        try:
            group = self.commit_and_refresh(group)
        except IntegrityError:
            # a concurrent join got there first
            self.db.rollback()
            self.db.refresh(group)
            return group
        log.info("user %s joined group %s", user_id, group.id)
        return group
