"""
Notes API — Pydantic Request/Response Schemas
===============================================

What:  Pydantic models defining the API contract.
Why:   Strict input validation, automatic serialization, and OpenAPI docs.
How:   Validators feed raw JSON into the request models; routes return the
       response envelopes; FastAPI serializes them.
Who:   validators.py (requests), routes/notes.py (responses).

Every response envelope carries `success` and `message` so clients can
branch on one flag regardless of the endpoint.
"""

from datetime import datetime, timezone
from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalize a datetime to UTC; naive values are taken to already be UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    try:
        return value.astimezone(timezone.utc)
    except OverflowError:
        # e.g. 9999-12-31T23:59:59-05:00 has no UTC equivalent
        raise PydanticCustomError("date_range", "date is out of range")


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What clients send in the body
# ══════════════════════════════════════════════════════════════════════════


def _require_visible_text(v: str) -> str:
    if not v.strip():
        raise PydanticCustomError("blank_text", "text must not be empty")
    return v


NoteText = Annotated[str, AfterValidator(_require_visible_text)]


class NoteCreate(BaseModel):
    """
    Body of POST /.

    `date` accepts ISO 8601 strings or unix timestamps; when omitted the
    service stamps the note with the current time.
    """
    text: NoteText = Field(description="Note body (required, non-blank)")
    date: Optional[datetime] = Field(default=None, description="Note timestamp (ISO 8601)")

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)


class NoteUpdate(BaseModel):
    """
    Body of PUT /{id}. Partial update: a missing or null field keeps the
    stored value.
    """
    text: Optional[NoteText] = Field(default=None, description="New note body")
    date: Optional[datetime] = Field(default=None, description="New note timestamp")

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)


class NoteDraft(BaseModel):
    """A fully-populated note that has not been assigned an id yet."""
    text: str
    date: datetime


# ══════════════════════════════════════════════════════════════════════════
# Query Parameter Models
# ══════════════════════════════════════════════════════════════════════════


class PaginationParams(BaseModel):
    """
    Normalized pagination window for GET /.

    Built by validators.validate_pagination; the store turns it into
    LIMIT/OFFSET.
    """
    limit: int = Field(ge=1, description="Items per page")
    page: int = Field(ge=1, description="1-based page number")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """Full representation of a stored note."""
    id: int = Field(description="Note identifier")
    text: str = Field(description="Note body")
    date: datetime = Field(description="Note timestamp (UTC ISO 8601)")

    model_config = {"from_attributes": True}

    @field_validator("date")
    @classmethod
    def tag_utc(cls, v: datetime) -> datetime:
        # SQLite hands back naive datetimes
        return as_utc(v)


class MessageResponse(BaseModel):
    """Acknowledgement for mutations that return no note (PUT, DELETE)."""
    success: bool = Field(default=True)
    message: str


class NoteEnvelope(MessageResponse):
    """Returned by POST / and GET /{id}."""
    note: NoteResponse


class NoteListEnvelope(MessageResponse):
    """Returned by GET /."""
    notes: List[NoteResponse]


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Error body produced by the global exception handlers.

    Example:
        {
            "success": false,
            "error": "not_found",
            "message": "note not found",
            "request_id": "1f2e3d4c"
        }
    """
    success: bool = Field(default=False)
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
