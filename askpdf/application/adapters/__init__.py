"""Storage adapters over the key-value store."""

from .chat_history_adapter import ChatHistoryAdapter
from .session_repository import SessionRepository

__all__ = ["ChatHistoryAdapter", "SessionRepository"]
