# fittrack/services/leaderboard.py
"""
Server-side group leaderboard.

Stored rows are decoded into the plain records of ``fittrack.domain`` and
scored with the same functions a client uses for its local preview, so the
two always agree.
"""
from __future__ import annotations
from typing import Iterable
from uuid import UUID

from sqlalchemy.orm import Session

from fittrack.domain.records import LeaderboardEntry, User
from fittrack.domain.ranking import rank_of, sort_leaderboard
from fittrack.models import Group
from fittrack.repositories.group_repo import GroupRepository
from fittrack.services.decode import user_from_row
from fittrack.logger import get_logger

log = get_logger(__name__)


def build_leaderboard(members: Iterable[User]) -> list[LeaderboardEntry]:
    """Members must come in join order; that order breaks score ties."""
    entries = [
        LeaderboardEntry(
            id=m.id,
            display_name=m.name,
            total_score=m.total_score,
            workout_count=m.workout_count,
        )
        for m in members
    ]
    return sort_leaderboard(entries)


def group_leaderboard(db: Session, group: Group) -> list[LeaderboardEntry]:
    members = [user_from_row(u) for u in GroupRepository(db).members_with_workouts(group)]
    board = build_leaderboard(members)
    log.debug("leaderboard group=%s members=%d", group.id, len(board))
    return board


def member_rank(db: Session, group: Group, user_id: UUID) -> int:
    return rank_of(group_leaderboard(db, group), user_id)
