from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from fittrack.db import get_db
from fittrack.models import Group, User
from fittrack.repositories.group_repo import GroupRepository
from fittrack.schemas.group import GroupCreate, GroupJoin, GroupRead, LeaderboardRow, RankRead
from fittrack.services.decode import group_from_row
from fittrack.services.leaderboard import group_leaderboard, member_rank
from fittrack.deps.auth import get_current_user

router = APIRouter(prefix="/groups", tags=["groups"])

def to_read(group: Group) -> GroupRead:
    record = group_from_row(group)
    return GroupRead(
        id=record.id,
        name=record.name,
        code=record.code,
        created_by=record.created_by,
        created_at=record.created_at,
        member_ids=list(record.member_ids),
    )

def member_group(group_id: UUID, db: Session, current: User) -> Group:
    repo = GroupRepository(db)
    group = repo.get(group_id)
    if not group:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Group not found")
    if not repo.is_member(group, current.id):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not a member of this group")
    return group

@router.post("", response_model=GroupRead, status_code=status.HTTP_201_CREATED)
def create_group(payload: GroupCreate, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    try:
        group = GroupRepository(db).create(name=payload.name, created_by=current.id)
    except ValueError as e:
        if str(e) == "group_code_exhausted":
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="could not allocate a unique group code, try again",
            )
        raise
    return to_read(group)

@router.get("", response_model=list[GroupRead])
def list_my_groups(db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return [to_read(g) for g in GroupRepository(db).list_for_user(current.id)]

@router.post("/join", response_model=GroupRead)
def join_group(payload: GroupJoin, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    repo = GroupRepository(db)
    group = repo.get_by_code(payload.code)
    if not group:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No group with that code")
    return to_read(repo.join(group, current.id))

@router.delete("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_group(group_id: UUID, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    repo = GroupRepository(db)
    group = repo.get(group_id)
    if not group:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Group not found")
    if group.created_by != current.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Only the group owner can delete it")
    repo.delete(group)

@router.get("/{group_id}/leaderboard", response_model=list[LeaderboardRow])
def leaderboard(group_id: UUID, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    board = group_leaderboard(db, member_group(group_id, db, current))
    return [
        LeaderboardRow(
            rank=position,
            user_id=entry.id,
            display_name=entry.display_name,
            total_score=entry.total_score,
            workout_count=entry.workout_count,
        )
        for position, entry in enumerate(board, start=1)
    ]

@router.get("/{group_id}/rank", response_model=RankRead)
def my_rank(group_id: UUID, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    group = member_group(group_id, db, current)
    return RankRead(group_id=group.id, user_id=current.id, rank=member_rank(db, group, current.id))
