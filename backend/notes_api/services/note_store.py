"""
Notes API — Abstract Note Store Interface
===========================================

What:  Abstract base class defining the persistence contract for notes.
Why:   The note service only needs six operations; keeping them behind an
       interface lets tests hand in a mock and keeps SQL out of the service.
How:   Concrete implementations inherit from NoteStore and implement every
       coroutine below.
Who:   Called by NoteService.

Failure contract:
    Every operation either completes or raises StoreError exactly once.
    The service never distinguishes between kinds of store failure.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from notes_api.models.note import Note
from notes_api.schemas.note import NoteDraft, PaginationParams


class NoteStore(ABC):
    """
    Abstract interface for note persistence.

    Implementations:
        - SQLAlchemyNoteStore: async SQLAlchemy session (PostgreSQL, SQLite)
    """

    @abstractmethod
    async def create(self, draft: NoteDraft) -> Note:
        """Insert a note and return it with its assigned id."""
        ...

    @abstractmethod
    async def get_by_id(self, note_id: int) -> Optional[Note]:
        """Return the note with this id, or None."""
        ...

    @abstractmethod
    async def get_by_text(self, text: str) -> Optional[Note]:
        """Return the first note whose text matches exactly, or None."""
        ...

    @abstractmethod
    async def list_paginated(self, params: PaginationParams) -> List[Note]:
        """Return one page of notes ordered by id, `params.offset` rows in."""
        ...

    @abstractmethod
    async def update(self, note_id: int, note: NoteDraft) -> None:
        """Replace text and date of an existing note; the id is unchanged."""
        ...

    @abstractmethod
    async def delete_by_id(self, note_id: int) -> None:
        """Hard-delete the note with this id."""
        ...
