"""
Session API endpoints.

Routes:
- GET /sessions - List the caller's sessions
- DELETE /session/{session_id} - Delete a session (idempotent)

Dependencies: askpdf.application.services.session_service
System role: Session management HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from askpdf.api.deps import get_owner_id, get_session_service
from askpdf.application.services import SessionService
from askpdf.models.common import MessageResponse
from askpdf.models.session import SessionListResponse, SessionResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sessions"])


@router.get("/sessions", response_model=SessionListResponse)
async def list_sessions(
    owner_id: str = Depends(get_owner_id),
    session_service: SessionService = Depends(get_session_service),
) -> SessionListResponse:
    """List sessions owned by the caller in creation order."""
    records = await session_service.list_sessions(owner_id)
    return SessionListResponse(sessions=[SessionResponse.from_record(r) for r in records])


@router.delete("/session/{session_id}", response_model=MessageResponse)
async def delete_session(
    session_id: str,
    session_service: SessionService = Depends(get_session_service),
) -> MessageResponse:
    """
    Delete a session's history, indexed passages and record.

    Succeeds for unknown or already deleted sessions.
    """
    await session_service.delete_session(session_id)
    return MessageResponse(message="Session deleted", session_id=session_id)
