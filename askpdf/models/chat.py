"""
Chat domain models and schemas.

Conversation turns as stored in the session store, plus the search and
history request/response contracts.

Dependencies: pydantic
System role: Chat API contracts
"""

from datetime import datetime
from typing import Any, Literal

from pydantic import Field

from askpdf.models.common import CamelModel

TurnRole = Literal["human", "ai"]


class ChatTurn(CamelModel):
    """One stored conversation turn. Ordering is the stored sequence order."""

    type: TurnRole = Field(description="Turn role: 'human' or 'ai'")
    content: str = Field(description="Turn text")
    timestamp: datetime | None = Field(default=None, description="Advisory creation time")


class SearchRequest(CamelModel):
    """Request schema for a question against a session."""

    # Type checks happen in ChatService (400), not in request parsing.
    question: Any = Field(default=None, description="User question")
    session_id: Any = Field(default=None, description="Target session ID")


class SearchResponse(CamelModel):
    """Response schema for an answered question."""

    message: str = "Search successful"
    answer: str
    session_id: str
    conversation_length: int = Field(description="Stored history length after this answer")


class ChatHistoryResponse(CamelModel):
    """Response schema for chat history."""

    session_id: str
    history: list[ChatTurn]
