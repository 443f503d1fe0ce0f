"""Dependency injection for API routes."""

from .dependencies import (
    ServiceContainer,
    get_chat_service,
    get_container,
    get_document_service,
    get_owner_id,
    get_session_service,
)

__all__ = [
    "ServiceContainer",
    "get_chat_service",
    "get_container",
    "get_document_service",
    "get_owner_id",
    "get_session_service",
]
