"""
Posts API — Pydantic Request/Response Schemas
==============================================

What:  Pydantic models defining the API contract for posts.
How:   Request schemas are applied by app.services.validation.validate_payload;
       response schemas serialize ORM rows and drive the OpenAPI docs.

Request rules (both schemas):
    - Object payloads only; unknown keys are rejected
    - title/body are strings of at least one character (no coercion)
    - tags is a list whose every element is a string
"""

from datetime import datetime, timezone
from typing import Annotated, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictStr,
    StringConstraints,
    field_validator,
)

# Non-empty, no coercion from numbers or booleans
NonEmptyStr = Annotated[StrictStr, StringConstraints(min_length=1)]


# ══════════════════════════════════════════════════════════════════════════
# Request Models: what the client sends
# ══════════════════════════════════════════════════════════════════════════


class PostCreate(BaseModel):
    """Body of POST /api/posts. Every field is required."""

    model_config = ConfigDict(extra="forbid")

    title: NonEmptyStr = Field(description="Post title")
    body: NonEmptyStr = Field(description="Post content")
    tags: List[StrictStr] = Field(description="Tags, in display order")


class PostUpdate(BaseModel):
    """
    Body of PATCH /api/posts/{id}.

    Every field is optional; absent fields are left untouched on the stored
    post. A field that is present must be valid; `null` is not accepted.
    """

    model_config = ConfigDict(extra="forbid")

    title: Optional[NonEmptyStr] = None
    body: Optional[NonEmptyStr] = None
    tags: Optional[List[StrictStr]] = None

    @field_validator("title", "body", "tags", mode="before")
    @classmethod
    def reject_null(cls, v):
        # Only runs for supplied values; defaults are not validated
        if v is None:
            raise ValueError("must not be null")
        return v


# ══════════════════════════════════════════════════════════════════════════
# Response Models: what the API returns
# ══════════════════════════════════════════════════════════════════════════


class PostResponse(BaseModel):
    """Full representation of a stored post."""

    id: str = Field(description="Store-assigned identifier (24 hex chars)")
    title: str
    body: str
    tags: List[str]
    published_date: datetime = Field(description="Creation time (UTC ISO 8601)")

    model_config = ConfigDict(from_attributes=True)

    @field_validator("published_date")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """Some backends (SQLite) hand back naive datetimes; they are UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Error body for 400 validation failures and 500 responses.

    Example:
        {
            "error": "validation_error",
            "message": "Request body failed validation",
            "details": {"errors": [{"path": ["title"], "message": "Field required",
                                    "type": "missing"}]},
            "request_id": "1f2e3d4c"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
