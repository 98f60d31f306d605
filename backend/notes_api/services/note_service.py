"""
Notes API — Note Service (Outcome Orchestrator)
=================================================

What:  Runs each note operation against a NoteStore and turns the outcome
       into either a response model or one of our exceptions.
Why:   Keeps lookup / merge / error-mapping rules in one place, independent
       of HTTP concerns.
How:   Every method takes already-validated input plus the store to use.
Who:   Called by route handlers after validation succeeded.

Outcome Mapping:
    store returns None for the id  → NotFoundError  (404)
    store raises StoreError        → StoreError with a per-operation
                                     message         (500)
    duplicate text (opt-in)        → ConflictError  (409)
    otherwise                      → response model (200)

Design Decision:
    NoteService is stateless; it receives the store for each call, so a
    test can hand in an AsyncMock and no request shares anything with
    another.
"""

import logging
from datetime import datetime, timezone
from typing import List

from notes_api.config import settings
from notes_api.exceptions import ConflictError, NotFoundError, StoreError
from notes_api.models.note import Note
from notes_api.schemas.note import (
    NoteCreate,
    NoteDraft,
    NoteResponse,
    NoteUpdate,
    PaginationParams,
)
from notes_api.services.note_store import NoteStore

logger = logging.getLogger(__name__)


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - create_note(): draft with default date, optional duplicate check
        - get_note(): single lookup with not-found handling
        - update_note(): lookup, field-by-field merge, replace
        - delete_note(): lookup, hard delete
        - list_notes(): one page of notes
    """

    def __init__(self, prevent_duplicates: bool = False):
        self.prevent_duplicates = prevent_duplicates

    async def create_note(self, store: NoteStore, payload: NoteCreate) -> NoteResponse:
        """
        Create a note from a validated payload.

        `date` defaults to the current UTC time when the payload has none.

        Raises:
            ConflictError: duplicate check enabled and the text already exists
            StoreError: lookup or insert failed
        """
        if self.prevent_duplicates:
            try:
                existing = await store.get_by_text(payload.text)
            except StoreError as e:
                raise StoreError(
                    message="Error retrieving notes.", context=e.context
                ) from e
            if existing is not None:
                raise ConflictError(context={"note_id": existing.id})

        draft = NoteDraft(
            text=payload.text,
            date=payload.date or datetime.now(timezone.utc),
        )
        try:
            note = await store.create(draft)
        except StoreError as e:
            raise StoreError(
                message="Error in creating the note", context=e.context
            ) from e
        return NoteResponse.model_validate(note)

    async def get_note(self, store: NoteStore, note_id: int) -> NoteResponse:
        """
        Retrieve a single note by id.

        Raises:
            NotFoundError: no note with this id (→ 404)
            StoreError: query failed (→ 500)
        """
        note = await self._find(store, note_id)
        return NoteResponse.model_validate(note)

    async def update_note(
        self, store: NoteStore, note_id: int, changes: NoteUpdate
    ) -> NoteResponse:
        """
        Apply a partial update.

        Each field in `changes` replaces the stored one when present and
        keeps the stored one when None. The id never changes.
        """
        existing = await self._find(store, note_id)
        merged = NoteDraft(
            text=changes.text if changes.text is not None else existing.text,
            date=changes.date if changes.date is not None else existing.date,
        )
        try:
            await store.update(note_id, merged)
        except StoreError as e:
            raise StoreError(
                message="Error in updating the note", context=e.context
            ) from e
        return NoteResponse(id=note_id, text=merged.text, date=merged.date)

    async def delete_note(self, store: NoteStore, note_id: int) -> None:
        """Delete a note; missing ids raise NotFoundError every time."""
        await self._find(store, note_id)
        try:
            await store.delete_by_id(note_id)
        except StoreError as e:
            raise StoreError(
                message="Error in deleting the note", context=e.context
            ) from e

    async def list_notes(
        self, store: NoteStore, params: PaginationParams
    ) -> List[NoteResponse]:
        """
        Return one page of notes.

        A store failure is a 500 here too, same as every other operation.
        """
        try:
            notes = await store.list_paginated(params)
        except StoreError as e:
            raise StoreError(
                message="Error retrieving notes.", context=e.context
            ) from e
        logger.debug(
            "Listed %d notes (limit=%d, page=%d)", len(notes), params.limit, params.page
        )
        return [NoteResponse.model_validate(note) for note in notes]

    async def _find(self, store: NoteStore, note_id: int) -> Note:
        try:
            note = await store.get_by_id(note_id)
        except StoreError as e:
            raise StoreError(
                message="Error connecting to the database.", context=e.context
            ) from e
        if note is None:
            raise NotFoundError(resource="note", resource_id=str(note_id))
        return note


# ── Singleton Instance ────────────────────────────────────────────────────
# Stateless apart from the duplicate-check switch, which is fixed at startup
note_service = NoteService(prevent_duplicates=settings.prevent_duplicate_notes)
