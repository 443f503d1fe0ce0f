"""Service orchestrators."""

from .chat_service import ChatService
from .document_service import DocumentService
from .session_service import SessionService

__all__ = [
    "ChatService",
    "DocumentService",
    "SessionService",
]
