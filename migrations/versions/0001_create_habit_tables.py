"""Create habits, habit_schedule and records tables

Revision ID: 0001_create_habit_tables
Revises:
Create Date: 2025-01-01

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import sqlite

# revision identifiers, used by Alembic.
revision = '0001_create_habit_tables'
down_revision = None
branch_labels = None
depends_on = None

# "YYYY-MM-DD HH:MM:SS", seconds precision
TIMESTAMP = sa.DateTime().with_variant(
    sqlite.DATETIME(storage_format="%(year)04d-%(month)02d-%(day)02d %(hour)02d:%(minute)02d:%(second)02d"),
    "sqlite",
)


def upgrade():
    # Create habits table
    op.create_table('habits',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('frequency', sa.String(length=20), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('color', sa.String(length=32), nullable=False),
        sa.Column('created_at', TIMESTAMP, nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.CheckConstraint("frequency IN ('daily', 'weekly', 'monthly')", name='ck_habits_frequency'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_habits_id'), 'habits', ['id'], unique=False)

    # Create habit_schedule table
    op.create_table('habit_schedule',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('habit_id', sa.Integer(), nullable=False),
        sa.Column('day_of_week', sa.Integer(), nullable=True),
        sa.Column('day_of_month', sa.Integer(), nullable=True),
        sa.Column('created_at', TIMESTAMP, nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.ForeignKeyConstraint(['habit_id'], ['habits.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('habit_id', 'day_of_week', 'day_of_month', name='uq_habit_schedule_day')
    )
    op.create_index(op.f('ix_habit_schedule_habit_id'), 'habit_schedule', ['habit_id'], unique=False)

    # Create records table
    op.create_table('records',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('habit_id', sa.Integer(), nullable=False),
        sa.Column('record_date', sa.Date(), nullable=False),
        sa.Column('completed_at', TIMESTAMP, nullable=False),
        sa.Column('created_at', TIMESTAMP, nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.ForeignKeyConstraint(['habit_id'], ['habits.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('habit_id', 'record_date', name='uq_records_habit_date')
    )
    op.create_index(op.f('ix_records_habit_id'), 'records', ['habit_id'], unique=False)
    op.create_index(op.f('ix_records_record_date'), 'records', ['record_date'], unique=False)


def downgrade():
    op.drop_index(op.f('ix_records_record_date'), table_name='records')
    op.drop_index(op.f('ix_records_habit_id'), table_name='records')
    op.drop_table('records')
    op.drop_index(op.f('ix_habit_schedule_habit_id'), table_name='habit_schedule')
    op.drop_table('habit_schedule')
    op.drop_index(op.f('ix_habits_id'), table_name='habits')
    op.drop_table('habits')
