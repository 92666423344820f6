"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2026-02-28

Creates the users and service_requests tables. Deleting a creator is
restricted; deleting an assignee clears the assignment.
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # --- users ---
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),
    )

    # --- service_requests ---
    op.create_table(
        "service_requests",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("priority", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="Open"),
        sa.Column(
            "created_by_user_id",
            sa.Integer,
            sa.ForeignKey("users.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column(
            "assigned_to_user_id",
            sa.Integer,
            sa.ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_service_requests_created_by_user_id", "service_requests", ["created_by_user_id"])
    op.create_index("ix_service_requests_assigned_to_user_id", "service_requests", ["assigned_to_user_id"])


def downgrade() -> None:
    op.drop_index("ix_service_requests_assigned_to_user_id", table_name="service_requests")
    op.drop_index("ix_service_requests_created_by_user_id", table_name="service_requests")
    op.drop_table("service_requests")
    op.drop_table("users")
