"""workouts, prescription groups and the session tracking tree

Revision ID: 4b1d2e7a9c30
Revises:
Create Date: 2026-10-19 10:12:41.218530

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# define the enum types once so we can drop them explicitly on postgres
prescription_type = sa.Enum(
    'straight', 'superset', 'circuit', 'drop_set', 'pyramid', 'amrap', name='prescription_type'
)
link_status = sa.Enum('pending', 'active', 'inactive', 'rejected', name='link_status')


# revision identifiers, used by Alembic.
revision: str = '4b1d2e7a9c30'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 1) identity + catalog lookups
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'exercises',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('slug', sa.String(length=120), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
    )
    op.create_index('ix_exercises_slug', 'exercises', ['slug'], unique=True)

    op.create_table(
        'rpe_scale_values',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('value', sa.Integer(), nullable=False),
        sa.Column('label', sa.String(length=60), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
    )

    # 2) trainer/client relationships
    op.create_table(
        'trainer_client_links',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('trainer_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('client_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('status', link_status, nullable=False, server_default='pending'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.UniqueConstraint('trainer_id', 'client_id', name='uq_trainer_client'),
    )

    # 3) authoring side
    op.create_table(
        'workouts',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('visibility', sa.String(length=20), nullable=False, server_default='private'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )

    op.create_table(
        'prescription_groups',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('workout_id', sa.Integer(), sa.ForeignKey('workouts.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('type', prescription_type, nullable=False),
        sa.Column('group_order', sa.Integer(), nullable=False),
        sa.Column('group_rounds', sa.Integer(), nullable=True),
        sa.Column('rest_between_sets', sa.Integer(), nullable=True),
        sa.Column('group_name', sa.String(length=255), nullable=True),
        sa.Column('group_notes', sa.Text(), nullable=True),
        sa.UniqueConstraint('workout_id', 'group_order', name='uq_group_order'),
    )

    op.create_table(
        'exercise_prescriptions',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('group_id', sa.Integer(), sa.ForeignKey('prescription_groups.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('exercises.id'), nullable=False, index=True),
        sa.Column('exercise_order', sa.Integer(), nullable=False),
        sa.Column('sets', sa.Integer(), nullable=True),
        sa.Column('reps', sa.Integer(), nullable=True),
        sa.Column('hold_seconds', sa.Integer(), nullable=True),
        sa.Column('target_weight_kg', sa.Float(), nullable=True),
        sa.Column('rpe_value_id', sa.Integer(), sa.ForeignKey('rpe_scale_values.id', ondelete='SET NULL'), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.UniqueConstraint('group_id', 'exercise_order', name='uq_exercise_order'),
    )

    # 4) tracking side
    op.create_table(
        'workout_sessions',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('created_by_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True, index=True),
        sa.Column('workout_id', sa.Integer(), sa.ForeignKey('workouts.id', ondelete='SET NULL'), nullable=True, index=True),
        sa.Column('started_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('ended_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('duration_seconds', sa.Integer(), nullable=True),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('perceived_intensity', sa.Integer(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
    )

    op.create_table(
        'session_blocks',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('session_id', sa.Integer(), sa.ForeignKey('workout_sessions.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('group_id', sa.Integer(), sa.ForeignKey('prescription_groups.id', ondelete='SET NULL'), nullable=True),
        sa.Column('block_order', sa.Integer(), nullable=False),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('skipped', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('perceived_exertion', sa.Integer(), nullable=True),
    )

    op.create_table(
        'session_exercise_logs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('block_id', sa.Integer(), sa.ForeignKey('session_blocks.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('prescription_id', sa.Integer(), sa.ForeignKey('exercise_prescriptions.id', ondelete='SET NULL'), nullable=True),
        sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('exercises.id'), nullable=False, index=True),
        sa.Column('exercise_order', sa.Integer(), nullable=False),
        sa.Column('skipped', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
    )

    op.create_table(
        'session_sets',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('exercise_log_id', sa.Integer(), sa.ForeignKey('session_exercise_logs.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('set_number', sa.Integer(), nullable=False),
        sa.Column('actual_reps', sa.Integer(), nullable=True),
        sa.Column('actual_weight_kg', sa.Float(), nullable=True),
        sa.Column('hold_seconds_actual', sa.Integer(), nullable=True),
        sa.Column('rpe_value_id', sa.Integer(), sa.ForeignKey('rpe_scale_values.id', ondelete='SET NULL'), nullable=True),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('was_failure', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('notes', sa.Text(), nullable=True),
    )


def downgrade() -> None:
    # drop in reverse dependency order
    op.drop_table('session_sets')
    op.drop_table('session_exercise_logs')
    op.drop_table('session_blocks')
    op.drop_table('workout_sessions')
    op.drop_table('exercise_prescriptions')
    op.drop_table('prescription_groups')
    op.drop_table('workouts')
    op.drop_table('trainer_client_links')
    op.drop_table('rpe_scale_values')
    op.drop_index('ix_exercises_slug', table_name='exercises')
    op.drop_table('exercises')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_index('ix_users_id', table_name='users')
    op.drop_table('users')

    # drop the enum types (no-op on backends without native enums)
    prescription_type.drop(op.get_bind(), checkfirst=True)
    link_status.drop(op.get_bind(), checkfirst=True)
