"""initial schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

LEVELS = ('BEGINNER', 'INTERMEDIATE', 'ADVANCED')


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_user_id', 'users', ['user_id'], unique=True)

    op.create_table('skills',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('categories', sa.JSON(), nullable=False),
        sa.Column('created_by', sa.String(length=255), nullable=True),
        sa.Column('is_public', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_skills_id', 'skills', ['id'])
    op.create_index('ix_skills_name', 'skills', ['name'])
    op.create_index('ix_skills_created_by', 'skills', ['created_by'])

    op.create_table('drills',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('skill_id', sa.Integer(), nullable=False),
        sa.Column('category', sa.String(length=100), nullable=False),
        sa.Column('difficulty', sa.Enum(*LEVELS, name='difficulty'), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('created_by', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.Index('ix_drills_skill_id_category', 'skill_id', 'category'),
    )
    op.create_index('ix_drills_id', 'drills', ['id'])
    op.create_index('ix_drills_skill_id', 'drills', ['skill_id'])
    op.create_index('ix_drills_created_by', 'drills', ['created_by'])

    op.create_table('drill_sessions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('drill_id', sa.Integer(), nullable=False),
        sa.Column('completed_at', sa.DateTime(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.Index('ix_drill_sessions_user_id_completed_at', 'user_id', 'completed_at'),
    )
    op.create_index('ix_drill_sessions_id', 'drill_sessions', ['id'])
    op.create_index('ix_drill_sessions_drill_id', 'drill_sessions', ['drill_id'])

    op.create_table('skill_drills',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('skill_name', sa.String(length=100), nullable=False),
        sa.Column('level', sa.Enum(*LEVELS, name='skill_drill_level'), nullable=False),
        sa.Column('drill_description', sa.Text(), nullable=False),
        sa.Column('assigned_date', sa.DateTime(), nullable=False),
        sa.Column('completed', sa.Boolean(), nullable=False),
        sa.Column('feedback', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_skill_drills_id', 'skill_drills', ['id'])
    op.create_index('ix_skill_drills_user_id', 'skill_drills', ['user_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('skill_drills')
    op.drop_table('drill_sessions')
    op.drop_table('drills')
    op.drop_table('skills')
    op.drop_table('users')
    sa.Enum(name='skill_drill_level').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='difficulty').drop(op.get_bind(), checkfirst=True)
