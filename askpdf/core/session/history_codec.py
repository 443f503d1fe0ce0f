"""
Chat history serialization.

Converts the stored JSON array of turns to typed ChatTurn objects and
LangChain messages. A stored role other than 'human' or 'ai' is storage
corruption and raises UnknownRoleError; it is never coerced.

Dependencies: langchain_core.messages, askpdf.models.chat
System role: History encoding, decoding and windowing
"""

import json
from collections.abc import Sequence

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage
from pydantic import ValidationError as PydanticValidationError

from askpdf.core.exceptions import StorageCorruptionError, UnknownRoleError
from askpdf.models.chat import ChatTurn

_ROLES = ("human", "ai")


def decode_history(raw: str | None, session_id: str | None = None) -> list[ChatTurn]:
    """
    Decode a stored history value.

    Args:
        raw: Stored JSON string, or None when the key is absent
        session_id: Session the value belongs to (error context only)

    Returns:
        list[ChatTurn]: Turns in stored order (empty for a missing key)

    Raises:
        StorageCorruptionError: When the value is not a JSON array of objects
        UnknownRoleError: When a turn's role is not 'human' or 'ai'
    """
    if raw is None:
        return []

    context = {"session_id": session_id} if session_id else {}
    try:
        items = json.loads(raw)
    except json.JSONDecodeError as e:
        raise StorageCorruptionError("Stored history is not valid JSON", context) from e

    if not isinstance(items, list):
        raise StorageCorruptionError("Stored history is not a list", context)

    turns = []
    for item in items:
        if not isinstance(item, dict):
            raise StorageCorruptionError("Stored history entry is not an object", context)
        role = item.get("type")
        if role not in _ROLES:
            raise UnknownRoleError(role, session_id)
        content = item.get("content")
        if not isinstance(content, str):
            raise StorageCorruptionError("Stored history entry has no text content", context)
        try:
            turns.append(ChatTurn(type=role, content=content, timestamp=item.get("timestamp")))
        except PydanticValidationError as e:
            raise StorageCorruptionError("Stored history entry has an invalid timestamp", context) from e
    return turns


def encode_history(turns: Sequence[ChatTurn]) -> str:
    """Encode turns as the stored JSON array."""
    return json.dumps([turn.model_dump(mode="json") for turn in turns])


def to_messages(turns: Sequence[ChatTurn]) -> list[BaseMessage]:
    """Convert turns to LangChain messages, preserving order."""
    return [
        HumanMessage(content=turn.content) if turn.type == "human" else AIMessage(content=turn.content)
        for turn in turns
    ]


def recent_window(turns: Sequence[ChatTurn], size: int) -> list[ChatTurn]:
    """Most recent `size` turns, oldest first."""
    if size <= 0:
        return []
    return list(turns[-size:])
