"""
Notes API — Request Validators
================================

What:  Pure functions that turn untrusted request input into typed values.
Why:   Malformed input is an expected outcome, not a crash: every check ends
       either in a normalized value or in a ValidationError naming the first
       field that failed.
How:   Body payloads go through the Pydantic request models; path ids and
       query strings are checked by hand since they arrive as bare strings.
Who:   Called by the note routes before anything touches the store.

Pagination policy:
    absent or empty value        → default (limit=10, page=1)
    unparsable / <= 0 / too big  → ValidationError (400)
"""

import re
from typing import Any, Mapping, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from notes_api.exceptions import ValidationError
from notes_api.schemas.note import NoteCreate, NoteUpdate, PaginationParams

# Upper bound of the INTEGER id column
MAX_NOTE_ID = 2**31 - 1

DEFAULT_LIMIT = 10
DEFAULT_PAGE = 1
MAX_LIMIT = 100
MAX_PAGE = 100_000

_DIGITS = re.compile(r"[0-9]+")
_SIGNED_DIGITS = re.compile(r"[+-]?[0-9]+")
_MAX_PARAM_DIGITS = 10


def _first_error(exc: PydanticValidationError) -> ValidationError:
    """Convert Pydantic's error list into our single first-error form."""
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"]) or None
    message = error["msg"]
    if field:
        message = f"{field}: {message}"
    return ValidationError(message=message, field=field, context={"type": error["type"]})


def _validate_payload(model: type[BaseModel], raw: Any) -> Any:
    if not isinstance(raw, Mapping):
        raise ValidationError(message="Request body must be a JSON object", field="body")
    try:
        return model.model_validate(raw)
    except PydanticValidationError as exc:
        raise _first_error(exc) from exc


def validate_create_payload(raw: Any) -> NoteCreate:
    """
    Validate a POST / body.

    Requires a non-blank `text`; `date` is optional and must parse as a
    timestamp when present.

    Raises:
        ValidationError: body is not an object, or the first invalid field
    """
    return _validate_payload(NoteCreate, raw)


def validate_update_payload(raw: Any) -> NoteUpdate:
    """
    Validate a PUT /{id} body.

    Both fields are optional; absent (or null) means "keep the stored
    value", never "clear it".
    """
    return _validate_payload(NoteUpdate, raw)


def validate_note_id(raw: Any) -> int:
    """
    Validate a note id taken from the URL path.

    Only plain ASCII digits are accepted ("+1", " 1", "1.0" and "1_000"
    all fail even though int() would take some of them).

    Returns:
        The id as an int in 1..MAX_NOTE_ID
    """
    value = str(raw) if raw is not None else ""
    if not _DIGITS.fullmatch(value):
        raise ValidationError(message="id must be a positive integer", field="id")
    out_of_range = ValidationError(
        message=f"id must be between 1 and {MAX_NOTE_ID}",
        field="id",
    )
    # Length first: int() refuses very long digit strings
    if len(value.lstrip("0")) > len(str(MAX_NOTE_ID)):
        raise out_of_range
    note_id = int(value)
    if note_id < 1 or note_id > MAX_NOTE_ID:
        raise out_of_range
    return note_id


def _parse_int(field: str, raw: Union[str, int, None], default: int) -> int:
    if raw is None:
        return default
    if isinstance(raw, bool):
        raise ValidationError(message=f"{field} must be an integer", field=field)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        value = raw.strip()
        if not value:
            return default
        if _SIGNED_DIGITS.fullmatch(value):
            if len(value.lstrip("+-").lstrip("0")) > _MAX_PARAM_DIGITS:
                raise ValidationError(message=f"{field} is out of range", field=field)
            return int(value)
    raise ValidationError(message=f"{field} must be an integer", field=field)


def validate_pagination(
    raw: Mapping[str, Any],
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT,
    max_page: int = MAX_PAGE,
) -> PaginationParams:
    """
    Normalize `limit`/`page` query values into a PaginationParams window.

    `limit` is checked before `page`, so when both are bad the limit error
    is the one reported.
    """
    limit = _parse_int("limit", raw.get("limit"), default_limit)
    page = _parse_int("page", raw.get("page"), DEFAULT_PAGE)

    if limit < 1:
        raise ValidationError(message="limit must be greater than 0", field="limit")
    if limit > max_limit:
        raise ValidationError(
            message=f"limit must not exceed {max_limit}",
            field="limit",
            context={"max_limit": max_limit},
        )
    if page < 1:
        raise ValidationError(message="page must be greater than 0", field="page")
    if page > max_page:
        raise ValidationError(
            message=f"page must not exceed {max_page}",
            field="page",
            context={"max_page": max_page},
        )
    return PaginationParams(limit=limit, page=page)
