"""create sessions + exercise_sets

Revision ID: 4b1e9c2d7a10
Revises:
Create Date: 2026-10-17 09:12:40.318204

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1e9c2d7a10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 1) sessions table
    op.create_table(
        'sessions',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('date', sa.String(length=10), nullable=False),
        sa.Column('type', sa.String(length=32), nullable=False),
        sa.Column('bodyweight', sa.Float(), nullable=True),
        sa.Column('calories', sa.Integer(), nullable=True),
        sa.Column('sleep', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_sessions_date', 'sessions', ['date'])
    op.create_index('ix_sessions_type', 'sessions', ['type'])

    # 2) exercise_sets table, with date/type/bodyweight copied from the session
    op.create_table(
        'exercise_sets',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('session_id', sa.Integer(), sa.ForeignKey('sessions.id', ondelete='CASCADE'), nullable=False),
        sa.Column('exercise', sa.String(length=120), nullable=False),
        sa.Column('set_type', sa.String(length=60), nullable=False),
        sa.Column('load', sa.String(length=60), nullable=True),
        sa.Column('reps', sa.Integer(), nullable=True),
        sa.Column('rir', sa.Float(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('date', sa.String(length=10), nullable=False),
        sa.Column('type', sa.String(length=32), nullable=True),
        sa.Column('bodyweight', sa.Float(), nullable=True),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_exercise_sets_session_id', 'exercise_sets', ['session_id'])
    op.create_index('ix_exercise_sets_exercise', 'exercise_sets', ['exercise'])
    op.create_index('ix_exercise_sets_exercise_set_type', 'exercise_sets', ['exercise', 'set_type'])
    op.create_index('ix_exercise_sets_date', 'exercise_sets', ['date'])


def downgrade() -> None:
    # drop child table first
    op.drop_index('ix_exercise_sets_date', table_name='exercise_sets')
    op.drop_index('ix_exercise_sets_exercise_set_type', table_name='exercise_sets')
    op.drop_index('ix_exercise_sets_exercise', table_name='exercise_sets')
    op.drop_index('ix_exercise_sets_session_id', table_name='exercise_sets')
    op.drop_table('exercise_sets')

    op.drop_index('ix_sessions_type', table_name='sessions')
    op.drop_index('ix_sessions_date', table_name='sessions')
    op.drop_table('sessions')
