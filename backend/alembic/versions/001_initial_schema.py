"""Initial schema

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Users table
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)

    # Exercise catalog
    op.create_table(
        "exercises",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("category", sa.String(20), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_exercises_name"), "exercises", ["name"], unique=True)

    op.create_table(
        "exercise_muscle_groups",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("exercise_id", sa.Uuid(), nullable=False),
        sa.Column("muscle_group", sa.String(100), nullable=False),
        sa.ForeignKeyConstraint(["exercise_id"], ["exercises.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_exercise_muscle_groups_exercise_id"), "exercise_muscle_groups", ["exercise_id"]
    )

    # Plans and sessions
    op.create_table(
        "plans",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_plans_name"), "plans", ["name"], unique=True)

    op.create_table(
        "sessions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("plan_id", sa.Uuid(), nullable=True),
        sa.Column("order_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["plan_id"], ["plans.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("plan_id", "name", name="uq_session_plan_name"),
    )
    op.create_index(op.f("ix_sessions_plan_id"), "sessions", ["plan_id"])

    op.create_table(
        "exercise_executions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("session_id", sa.Uuid(), nullable=False),
        sa.Column("exercise_id", sa.Uuid(), nullable=False),
        sa.Column("planned_sets", sa.Integer(), nullable=False),
        sa.Column("planned_reps", sa.Integer(), nullable=False),
        sa.Column("planned_weight", sa.Integer(), nullable=False),
        sa.Column("order_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["session_id"], ["sessions.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["exercise_id"], ["exercises.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("session_id", "exercise_id", name="uq_execution_session_exercise"),
    )
    op.create_index(op.f("ix_exercise_executions_session_id"), "exercise_executions", ["session_id"])
    op.create_index(op.f("ix_exercise_executions_exercise_id"), "exercise_executions", ["exercise_id"])

    # Workout logs
    op.create_table(
        "session_logs",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("owner_id", sa.Uuid(), nullable=False),
        sa.Column("original_session_id", sa.Uuid(), nullable=False),
        sa.Column("session_name", sa.String(255), nullable=False),
        sa.Column("plan_name", sa.String(255), nullable=False),
        sa.Column("plan_description", sa.Text(), nullable=False),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("notes", sa.String(1000), nullable=True),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_session_logs_owner_id"), "session_logs", ["owner_id"])
    op.create_index(
        op.f("ix_session_logs_original_session_id"), "session_logs", ["original_session_id"]
    )

    op.create_table(
        "execution_logs",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("session_log_id", sa.Uuid(), nullable=False),
        sa.Column("exercise_execution_id", sa.Integer(), nullable=False),
        sa.Column("planned_sets", sa.Integer(), nullable=False),
        sa.Column("planned_reps", sa.Integer(), nullable=False),
        sa.Column("planned_weight", sa.Integer(), nullable=False),
        sa.Column("exercise_id", sa.Uuid(), nullable=True),
        sa.Column("exercise_name", sa.String(255), nullable=False),
        sa.Column("exercise_category", sa.String(20), nullable=False),
        sa.Column("exercise_description", sa.String(1000), nullable=True),
        sa.Column("actual_sets", sa.Integer(), nullable=False),
        sa.Column("actual_reps", sa.Integer(), nullable=False),
        sa.Column("actual_weight", sa.Integer(), nullable=False),
        sa.Column("completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["session_log_id"], ["session_logs.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_execution_logs_session_log_id"), "execution_logs", ["session_log_id"])

    op.create_table(
        "execution_log_muscle_groups",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("execution_log_id", sa.Uuid(), nullable=False),
        sa.Column("muscle_group", sa.String(100), nullable=False),
        sa.ForeignKeyConstraint(["execution_log_id"], ["execution_logs.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_execution_log_muscle_groups_execution_log_id"),
        "execution_log_muscle_groups",
        ["execution_log_id"],
    )


def downgrade() -> None:
    op.drop_table("execution_log_muscle_groups")
    op.drop_table("execution_logs")
    op.drop_table("session_logs")
    op.drop_table("exercise_executions")
    op.drop_table("sessions")
    op.drop_table("plans")
    op.drop_table("exercise_muscle_groups")
    op.drop_table("exercises")
    op.drop_table("users")
