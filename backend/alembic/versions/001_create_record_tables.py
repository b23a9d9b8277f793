"""Create volunteers, events and activities tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the three independent record tables.
How:   Generic UUID and timezone-aware DateTime types (PostgreSQL and SQLite).
       volunteers.email is UNIQUE; events.date and activities.date are
       indexed for the sorted list queries.

Rollback: downgrade() drops all three tables (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _record_columns():
    return [
        sa.Column("id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "volunteers",
        *_record_columns(),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("phone", sa.Text(), nullable=True),
        sa.Column("college", sa.Text(), nullable=True),
        sa.Column("hours_completed", sa.Float(), nullable=False, server_default=sa.text("0")),
        sa.Column("status", sa.Text(), nullable=False, server_default=sa.text("'Active'")),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_volunteers_email"),
    )

    op.create_table(
        "events",
        *_record_columns(),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("location", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", sa.Text(), nullable=False, server_default=sa.text("'Upcoming'")),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_events_date", "events", ["date"])

    op.create_table(
        "activities",
        *_record_columns(),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("hours", sa.Float(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", sa.Text(), nullable=False, server_default=sa.text("'Completed'")),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_activities_date", "activities", ["date"])


def downgrade() -> None:
    op.drop_index("idx_activities_date", table_name="activities")
    op.drop_table("activities")
    op.drop_index("idx_events_date", table_name="events")
    op.drop_table("events")
    op.drop_table("volunteers")
