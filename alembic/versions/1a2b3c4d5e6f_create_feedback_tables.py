"""create_feedback_tables

Revision ID: 1a2b3c4d5e6f
Revises:
Create Date: 2026-10-19

Adds:
- users and sessions tables
- session_feedback table with a unique (session_id, user_id) pair

Feedback references its session and user without foreign keys so that
deleting either parent leaves the feedback in place.
"""
from alembic import op
import sqlalchemy as sa

revision = '1a2b3c4d5e6f'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'sessions',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'session_feedback',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('session_id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('comment', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('session_id', 'user_id', name='uq_session_feedback_session_user')
    )
    op.create_index('idx_session_feedback_session', 'session_feedback', ['session_id'], unique=False)
    op.create_index('idx_session_feedback_user', 'session_feedback', ['user_id'], unique=False)
    op.create_index('idx_session_feedback_rating', 'session_feedback', ['rating'], unique=False)


def downgrade() -> None:
    op.drop_index('idx_session_feedback_rating', table_name='session_feedback')
    op.drop_index('idx_session_feedback_user', table_name='session_feedback')
    op.drop_index('idx_session_feedback_session', table_name='session_feedback')
    op.drop_table('session_feedback')

    op.drop_table('sessions')
    op.drop_table('users')
