"""users, workouts, exercises, groups

Revision ID: 5a1f0c2d9e47
Revises:
Create Date: 2026-01-28 18:12:40.511203

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# define the enum type once so we can create/drop it explicitly
exercise_type = sa.Enum('Cardio', 'Lifting', name='exercise_type')


# revision identifiers, used by Alembic.
revision: str = '5a1f0c2d9e47'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 1) users
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    # 2) workouts
    op.create_table(
        'workouts',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('title', sa.String(length=120), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('workout_date', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )

    # 3) workout_exercises
    op.create_table(
        'workout_exercises',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('workout_id', sa.Uuid(), sa.ForeignKey('workouts.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('type', exercise_type, nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('duration', sa.Float(), nullable=True),
        sa.Column('distance', sa.Float(), nullable=True),
        sa.Column('weight', sa.Float(), nullable=True),
        sa.Column('reps', sa.Integer(), nullable=True),
        sa.Column('sets', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )

    # 4) groups; code uniqueness is what the create loop relies on
    op.create_table(
        'groups',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('code', sa.String(length=6), nullable=False),
        sa.Column('created_by', sa.Uuid(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_index('ix_groups_code', 'groups', ['code'], unique=True)

    # 5) group_members
    op.create_table(
        'group_members',
        sa.Column('position', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('group_id', sa.Uuid(), sa.ForeignKey('groups.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('joined_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.UniqueConstraint('group_id', 'user_id', name='uq_group_members_group_user'),
    )


def downgrade() -> None:
    # drop child tables in reverse order
    op.drop_table('group_members')
    op.drop_index('ix_groups_code', table_name='groups')
    op.drop_table('groups')
    op.drop_table('workout_exercises')
    op.drop_table('workouts')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')

    # finally drop enum type
    exercise_type.drop(op.get_bind(), checkfirst=True)
