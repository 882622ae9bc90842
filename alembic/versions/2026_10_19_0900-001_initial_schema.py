"""Initial schema: users, clients, programs, assignments, sessions, check-ins, recommendation log

Revision ID: 001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

user_role = sa.Enum('TRAINER', 'CLIENT', name='userrole')
session_status = sa.Enum('SCHEDULED', 'COMPLETED', 'CANCELLED', 'NO_SHOW', name='sessionstatus')
confidence = sa.Enum('HIGH', 'MEDIUM', 'LOW', name='confidence')


def _timestamps() -> list:
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
    ]


def upgrade() -> None:
    """Create all FitCoach tables."""
    op.create_table('users', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('full_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('role', user_role, nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table('client_profiles', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('trainer_id', sa.Integer(), nullable=False),
        sa.Column('first_name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('last_name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('goal_description', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['trainer_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_client_profiles_user_id'), 'client_profiles', ['user_id'], unique=True)
    op.create_index(op.f('ix_client_profiles_trainer_id'), 'client_profiles', ['trainer_id'], unique=False)

    op.create_table('workout_programs', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('trainer_id', sa.Integer(), nullable=True),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(length=2000), nullable=True),
        sa.Column('sessions_per_week', sa.Integer(), nullable=False),
        sa.Column('duration_weeks', sa.Integer(), nullable=True),
        sa.Column('is_default', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
        sa.ForeignKeyConstraint(['trainer_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_workout_programs_trainer_id'), 'workout_programs', ['trainer_id'], unique=False)
    op.create_index(op.f('ix_workout_programs_is_default'), 'workout_programs', ['is_default'], unique=False)

    op.create_table('program_sessions', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('program_id', sa.Integer(), nullable=False),
        sa.Column('day_number', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('focus', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=True),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.ForeignKeyConstraint(['program_id'], ['workout_programs.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('program_id', 'day_number', name='uq_program_session_day'))
    op.create_index(op.f('ix_program_sessions_program_id'), 'program_sessions', ['program_id'], unique=False)

    op.create_table('client_programs', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('client_id', sa.Integer(), nullable=False),
        sa.Column('program_id', sa.Integer(), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('training_days', sa.JSON(), nullable=False),
        sa.Column('is_customized', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
        sa.ForeignKeyConstraint(['client_id'], ['client_profiles.id']),
        sa.ForeignKeyConstraint(['program_id'], ['workout_programs.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_client_programs_client_id'), 'client_programs', ['client_id'], unique=True)
    op.create_index(op.f('ix_client_programs_program_id'), 'client_programs', ['program_id'], unique=False)

    op.create_table('scheduled_sessions', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('client_id', sa.Integer(), nullable=False),
        sa.Column('trainer_id', sa.Integer(), nullable=False),
        sa.Column('session_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('session_type', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=True),
        sa.Column('start_at', sa.DateTime(), nullable=False),
        sa.Column('end_at', sa.DateTime(), nullable=True),
        sa.Column('status', session_status, nullable=False),
        sa.Column('auto_recommended', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('completed_at', sa.DateTime(), nullable=True),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['client_id'], ['client_profiles.id']),
        sa.ForeignKeyConstraint(['trainer_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('client_id', 'start_at', name='uq_scheduled_client_start'))
    op.create_index(op.f('ix_scheduled_sessions_client_id'), 'scheduled_sessions', ['client_id'], unique=False)
    op.create_index(op.f('ix_scheduled_sessions_trainer_id'), 'scheduled_sessions', ['trainer_id'], unique=False)
    op.create_index(op.f('ix_scheduled_sessions_start_at'), 'scheduled_sessions', ['start_at'], unique=False)
    op.create_index(op.f('ix_scheduled_sessions_status'), 'scheduled_sessions', ['status'], unique=False)

    op.create_table('daily_checkins', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('client_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('nutrition_score', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('pain_at_training', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('note', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['client_id'], ['client_profiles.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('client_id', 'date', name='uq_checkin_client_date'))
    op.create_index(op.f('ix_daily_checkins_client_id'), 'daily_checkins', ['client_id'], unique=False)
    op.create_index(op.f('ix_daily_checkins_date'), 'daily_checkins', ['date'], unique=False)

    op.create_table('program_recommendation_logs', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('client_id', sa.Integer(), nullable=False),
        sa.Column('recommended_program_id', sa.Integer(), nullable=False),
        sa.Column('score', sa.Float(), nullable=False),
        sa.Column('confidence', confidence, nullable=False),
        sa.Column('reasons', sa.JSON(), nullable=False),
        sa.Column('warnings', sa.JSON(), nullable=False),
        sa.Column('client_stats', sa.JSON(), nullable=False),
        sa.Column('trainer_accepted', sa.Boolean(), nullable=True),
        sa.Column('trainer_selected_program_id', sa.Integer(), nullable=True),
        sa.Column('trainer_feedback', sqlmodel.sql.sqltypes.AutoString(length=2000), nullable=True),
        sa.Column('action_taken_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['client_id'], ['client_profiles.id']),
        sa.ForeignKeyConstraint(['recommended_program_id'], ['workout_programs.id']),
        sa.ForeignKeyConstraint(['trainer_selected_program_id'], ['workout_programs.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_program_recommendation_logs_client_id'), 'program_recommendation_logs',
                    ['client_id'], unique=False)
    op.create_index(op.f('ix_program_recommendation_logs_trainer_accepted'), 'program_recommendation_logs',
                    ['trainer_accepted'], unique=False)
    op.create_index(op.f('ix_program_recommendation_logs_created_at'), 'program_recommendation_logs',
                    ['created_at'], unique=False)


def downgrade() -> None:
    """Drop all FitCoach tables."""
    op.drop_table('program_recommendation_logs')
    op.drop_table('daily_checkins')
    op.drop_table('scheduled_sessions')
    op.drop_table('client_programs')
    op.drop_table('program_sessions')
    op.drop_table('workout_programs')
    op.drop_table('client_profiles')
    op.drop_table('users')
    bind = op.get_bind()
    for enum in (confidence, session_status, user_role):
        enum.drop(bind, checkfirst=True)
