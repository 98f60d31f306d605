"""
Notes API — SQLAlchemy Note Store
===================================

What:  NoteStore implementation on top of an async SQLAlchemy session.
Why:   The request's session (from get_db_session) is the only handle on
       the database; this class is the only place that builds SQL.
How:   Reads use select()/session.get(); mutations use update()/delete()
       statements or session.add(), and commit before returning so a failed
       commit reaches the caller as StoreError instead of surfacing after
       the response was chosen.
Who:   Built per request by get_note_store(); used by NoteService.

Query plans:
    get_by_id:       SELECT ... WHERE id = :id            (primary key)
    get_by_text:     SELECT ... WHERE text = :text LIMIT 1
    list_paginated:  SELECT ... ORDER BY id LIMIT :limit OFFSET :offset
"""

import logging
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from notes_api.database import get_db_session
from notes_api.exceptions import StoreError
from notes_api.models.note import Note
from notes_api.schemas.note import NoteDraft, PaginationParams
from notes_api.services.note_store import NoteStore

logger = logging.getLogger(__name__)


class SQLAlchemyNoteStore(NoteStore):
    """
    Note persistence through one AsyncSession.

    Error Handling Strategy:
        Any SQLAlchemyError is rolled back, logged with the operation name,
        and re-raised as StoreError chained to the original. Nothing about
        the driver error leaves this class except the exception type name
        in StoreError.context.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def _fail(self, operation: str, exc: Exception) -> StoreError:
        logger.error("Note store %s failed: %s", operation, exc, exc_info=True)
        try:
            await self._session.rollback()
        except SQLAlchemyError:
            logger.warning("Rollback after failed %s also failed", operation)
        return StoreError(
            context={"operation": operation, "original_error": type(exc).__name__},
        )

    async def create(self, draft: NoteDraft) -> Note:
        note = Note(text=draft.text, date=draft.date)
        try:
            self._session.add(note)
            await self._session.flush()  # Assigns the id
            await self._session.commit()
        except SQLAlchemyError as exc:
            raise await self._fail("create", exc) from exc
        logger.info("Note %s created", note.id)
        return note

    async def get_by_id(self, note_id: int) -> Optional[Note]:
        try:
            return await self._session.get(Note, note_id)
        except SQLAlchemyError as exc:
            raise await self._fail("get_by_id", exc) from exc

    async def get_by_text(self, text: str) -> Optional[Note]:
        try:
            result = await self._session.execute(
                select(Note).where(Note.text == text).order_by(Note.id).limit(1)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise await self._fail("get_by_text", exc) from exc

    async def list_paginated(self, params: PaginationParams) -> List[Note]:
        try:
            result = await self._session.execute(
                select(Note)
                .order_by(Note.id)
                .limit(params.limit)
                .offset(params.offset)
            )
            return list(result.scalars().all())
        except SQLAlchemyError as exc:
            raise await self._fail("list_paginated", exc) from exc

    async def update(self, note_id: int, note: NoteDraft) -> None:
        try:
            await self._session.execute(
                update(Note)
                .where(Note.id == note_id)
                .values(text=note.text, date=note.date)
            )
            await self._session.commit()
        except SQLAlchemyError as exc:
            raise await self._fail("update", exc) from exc
        logger.info("Note %s updated", note_id)

    async def delete_by_id(self, note_id: int) -> None:
        try:
            await self._session.execute(
                delete(Note)
                .where(Note.id == note_id)
            )
            await self._session.commit()
        except SQLAlchemyError as exc:
            raise await self._fail("delete_by_id", exc) from exc
        logger.info("Note %s deleted", note_id)


# ── FastAPI Dependency ────────────────────────────────────────────────────
async def get_note_store(
    session: AsyncSession = Depends(get_db_session),
) -> NoteStore:
    """
    Provide a NoteStore bound to the request's session.

    Tests override this dependency to inject a mock store.
    """
    return SQLAlchemyNoteStore(session)
