"""
Session domain models and schemas.

Dependencies: pydantic
System role: Session records and API contracts
"""

from datetime import datetime, timezone

from pydantic import Field

from askpdf.models.common import CamelModel


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SessionRecord(CamelModel):
    """Persisted session metadata."""

    id: str = Field(description="Opaque session identifier")
    name: str = Field(description="Display name derived from the uploaded filename")
    owner_id: str = Field(description="Caller identity the session counts against")
    chunk_count: int = Field(ge=0, description="Number of indexed passages")
    created_at: datetime = Field(default_factory=utc_now)
    last_activity: datetime = Field(default_factory=utc_now)


class SessionResponse(CamelModel):
    """Session as returned by the API."""

    id: str
    name: str
    chunks: int
    created_at: datetime
    last_activity: datetime

    @classmethod
    def from_record(cls, record: SessionRecord) -> "SessionResponse":
        return cls(
            id=record.id,
            name=record.name,
            chunks=record.chunk_count,
            created_at=record.created_at,
            last_activity=record.last_activity,
        )


class SessionListResponse(CamelModel):
    """Sessions owned by the caller."""

    sessions: list[SessionResponse]
