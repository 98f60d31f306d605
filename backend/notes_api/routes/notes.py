"""
Notes API — Notes Route Handlers
==================================

What:  CRUD endpoints for notes mounted at the application root.
Why:   The HTTP face of the service: raw path/query/body in, JSON envelope out.
How:   Each handler validates its raw input first (id before body), then
       delegates to NoteService with the request's NoteStore. Failures are
       raised as exceptions and shaped by the global handlers in main.py.

Route Inventory:
    POST   /        create a note           → {success, message, note}
    GET    /        list notes (limit,page) → {success, message, notes}
    GET    /{id}    fetch one note          → {success, message, note}
    PUT    /{id}    partial update          → {success, message, note}
    DELETE /{id}    hard delete             → {success, message}

Path ids and query values are taken as plain strings so that our
validators, not FastAPI's 422 machinery, decide what is malformed.
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, Query, Request

from notes_api.config import settings
from notes_api.exceptions import ValidationError
from notes_api.schemas.note import (
    ErrorResponse,
    MessageResponse,
    NoteEnvelope,
    NoteListEnvelope,
)
from notes_api.services.note_service import note_service
from notes_api.services.note_store import NoteStore
from notes_api.services.sql_note_store import get_note_store
from notes_api.validators import (
    validate_create_payload,
    validate_note_id,
    validate_pagination,
    validate_update_payload,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Notes"])

_ID_ERRORS = {
    400: {"description": "Invalid note id", "model": ErrorResponse},
    404: {"description": "Note not found", "model": ErrorResponse},
    500: {"description": "Store error", "model": ErrorResponse},
}


async def read_json_body(request: Request) -> Any:
    """
    Parse the request body as JSON.

    An empty or malformed body is a client error (400), not a crash.
    """
    try:
        return await request.json()
    except ValueError as e:
        # json.JSONDecodeError and UnicodeDecodeError are both ValueErrors
        logger.debug("Rejected request body: %s", e)
        raise ValidationError(message="Invalid JSON in the request", field="body")


@router.post(
    "/",
    response_model=NoteEnvelope,
    responses={
        400: {"description": "Invalid payload", "model": ErrorResponse},
        409: {"description": "Duplicate note text", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Create a note",
)
async def create_note(
    request: Request,
    store: NoteStore = Depends(get_note_store),
) -> NoteEnvelope:
    """
    Create a note from `{text, date?}`.

    `date` defaults to the current time when omitted.
    """
    payload = validate_create_payload(await read_json_body(request))
    note = await note_service.create_note(store, payload)
    return NoteEnvelope(message="successfully added the note", note=note)


@router.get(
    "/",
    response_model=NoteListEnvelope,
    responses={
        400: {"description": "Invalid pagination parameters", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="List notes page by page",
)
async def list_notes(
    limit: Optional[str] = Query(default=None, description="Items per page"),
    page: Optional[str] = Query(default=None, description="1-based page number"),
    store: NoteStore = Depends(get_note_store),
) -> NoteListEnvelope:
    """
    Example:
        GET /?limit=5&page=2  → notes 6..10 in id order
    """
    params = validate_pagination(
        {"limit": limit, "page": page},
        default_limit=settings.default_page_size,
        max_limit=settings.max_page_size,
        max_page=settings.max_page,
    )
    notes = await note_service.list_notes(store, params)
    return NoteListEnvelope(message="successfully retrieved", notes=notes)


@router.get(
    "/{note_id}",
    response_model=NoteEnvelope,
    responses=_ID_ERRORS,
    summary="Get a single note by id",
)
async def get_note(
    note_id: str,
    store: NoteStore = Depends(get_note_store),
) -> NoteEnvelope:
    nid = validate_note_id(note_id)
    note = await note_service.get_note(store, nid)
    return NoteEnvelope(message="A note found", note=note)


@router.put(
    "/{note_id}",
    response_model=NoteEnvelope,
    responses=_ID_ERRORS,
    summary="Update a note",
)
async def update_note(
    note_id: str,
    request: Request,
    store: NoteStore = Depends(get_note_store),
) -> NoteEnvelope:
    """
    Partial update from `{text?, date?}`.

    The id is validated before the body is even read.
    """
    nid = validate_note_id(note_id)
    changes = validate_update_payload(await read_json_body(request))
    note = await note_service.update_note(store, nid, changes)
    return NoteEnvelope(message="successfully updated", note=note)


@router.delete(
    "/{note_id}",
    response_model=MessageResponse,
    responses=_ID_ERRORS,
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    store: NoteStore = Depends(get_note_store),
) -> MessageResponse:
    nid = validate_note_id(note_id)
    await note_service.delete_note(store, nid)
    return MessageResponse(message="successfully deleted")
