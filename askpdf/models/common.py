"""
Common response models and utilities.

Camel-case wire format shared by all API schemas, and the error body.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys, populated by either name."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(CamelModel):
    """Acknowledgement for session-scoped mutations."""

    message: str
    session_id: str


class ErrorResponse(CamelModel):
    """Error response schema."""

    message: str = Field(description="Error message")
    error: str = Field(description="Error category (exception class name)")
    details: dict[str, Any] | None = Field(default=None, description="Additional error context")
    fallback_answer: str | None = Field(
        default=None,
        description="Apology text the client may show in its transient transcript",
    )
