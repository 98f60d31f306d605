"""Create notes table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `notes` table (integer id, text, date).
How:   Generic SQLAlchemy types, so the same revision runs on PostgreSQL
       (SERIAL / TIMESTAMPTZ) and SQLite.

Rollback: downgrade() drops the table entirely (all notes are lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the notes table and its date index; see notes_api/models/note.py."""
    op.create_table(
        "notes",
        sa.Column(
            "id",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="Unique identifier assigned on insert",
        ),
        sa.Column(
            "text",
            sa.Text(),
            nullable=False,
            comment="Note body",
        ),
        sa.Column(
            "date",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
            comment="Note timestamp (UTC)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_index("idx_notes_date", "notes", ["date"])


def downgrade() -> None:
    """Drop the notes table. Destructive: every note is deleted."""
    op.drop_index("idx_notes_date", table_name="notes")
    op.drop_table("notes")
