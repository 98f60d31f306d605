"""
Notes API — Note SQLAlchemy Model
===================================

What:  ORM model representing the `notes` table.
Why:   Maps Python objects to database rows for type-safe database operations.
How:   Inherits from the shared DeclarativeBase; Alembic reads it for migrations.
Who:   Used by SQLAlchemyNoteStore for CRUD operations.

Table Design:
    - id: integer primary key assigned by the database on insert
    - text: the note body (TEXT, no length limit)
    - date: timezone-aware timestamp, stored in UTC
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from notes_api.database import Base


class Note(Base):
    """
    A single note record.

    Lifecycle:
        1. Inserted by POST / (id assigned by the database)
        2. text/date replaced by PUT /{id}; id never changes
        3. Hard-deleted by DELETE /{id}
    """

    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Unique identifier assigned on insert",
    )

    text: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Note body",
    )

    # Generic DateTime(timezone=True) → TIMESTAMPTZ on PostgreSQL;
    # SQLite keeps the wall-clock value only, so everything is written in UTC
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
        comment="Note timestamp (UTC)",
    )

    __table_args__ = (
        Index("idx_notes_date", "date"),
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, date='{self.date}')>"
