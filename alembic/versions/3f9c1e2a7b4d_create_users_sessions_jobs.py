"""create users, sessions and jobs

Revision ID: 3f9c1e2a7b4d
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f9c1e2a7b4d"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    ]


def upgrade() -> None:
    """Create the account, session and job tables."""
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=20), nullable=False),
        sa.Column("last_name", sa.String(length=20), server_default="lastName", nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("location", sa.String(length=20), server_default="my city", nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)
    op.create_index(op.f("ix_users_created_at"), "users", ["created_at"], unique=False)

    op.create_table(
        "user_sessions",
        sa.Column("token", sa.String(length=128), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("token"),
    )
    op.create_index(op.f("ix_user_sessions_user_id"), "user_sessions", ["user_id"], unique=False)

    op.create_table(
        "jobs",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("position", sa.String(length=100), nullable=False),
        sa.Column("company", sa.String(length=50), nullable=False),
        sa.Column("job_location", sa.String(length=20), nullable=True),
        sa.Column("job_status", sa.String(length=20), server_default="pending", nullable=False),
        sa.Column("job_type", sa.String(length=20), server_default="full-time", nullable=False),
        sa.Column("recruiter", sa.String(length=30), nullable=True),
        sa.Column("recruiter_email", sa.String(length=255), nullable=True),
        sa.Column("salary_min", sa.Integer(), server_default="0", nullable=False),
        sa.Column("salary_max", sa.Integer(), server_default="0", nullable=False),
        sa.Column("interview_scheduled_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("priority", sa.String(length=10), server_default="Medium", nullable=False),
        sa.Column("priority_level", sa.Integer(), server_default="2", nullable=False),
        sa.Column("owner_id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    for column in ("position", "job_status", "job_type", "priority_level", "owner_id", "created_at"):
        op.create_index(op.f(f"ix_jobs_{column}"), "jobs", [column], unique=False)


def downgrade() -> None:
    """Drop the job, session and account tables."""
    for column in ("position", "job_status", "job_type", "priority_level", "owner_id", "created_at"):
        op.drop_index(op.f(f"ix_jobs_{column}"), table_name="jobs")
    op.drop_table("jobs")
    op.drop_index(op.f("ix_user_sessions_user_id"), table_name="user_sessions")
    op.drop_table("user_sessions")
    op.drop_index(op.f("ix_users_created_at"), table_name="users")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
