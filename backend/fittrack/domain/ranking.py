# fittrack/domain/ranking.py
"""
Ranking aggregator.

Members are anything exposing ``id`` and ``total_score`` (User records or
LeaderboardEntry values). Ties keep the order the members arrived in, which
for a group is join order.
"""
from __future__ import annotations
from typing import Iterable, Protocol, Sequence, TypeVar
from uuid import UUID

from fittrack.domain.records import LeaderboardEntry


class Ranked(Protocol):
    @property
    def id(self) -> UUID: ...

    @property
    def total_score(self) -> float: ...


M = TypeVar("M", bound=Ranked)


def sort_members_by_score_desc(members: Iterable[M]) -> list[M]:
    # sorted() is stable; negate the key instead of reverse=True,
    # which would also flip the order of tied members
    return sorted(members, key=lambda m: -m.total_score)


def rank_of(members: Iterable[Ranked], user_id: UUID) -> int:
    """1-based rank of ``user_id``; 0 when it is not among the members."""
    for position, member in enumerate(sort_members_by_score_desc(members), start=1):
        if member.id == user_id:
            return position
    return 0


def sort_leaderboard(entries: Sequence[LeaderboardEntry]) -> list[LeaderboardEntry]:
    return sort_members_by_score_desc(entries)
