"""Session management business logic."""

from .history_codec import (
    decode_history,
    encode_history,
    recent_window,
    to_messages,
)
from .locks import SessionLockRegistry

__all__ = [
    "SessionLockRegistry",
    "decode_history",
    "encode_history",
    "recent_window",
    "to_messages",
]
