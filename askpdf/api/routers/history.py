"""
Chat history endpoints.

Routes:
- GET /history/{session_id} - Full stored history
- DELETE /history/{session_id} - Reset history, keep the session

Dependencies: askpdf.application.services.chat_service
System role: History HTTP API
"""

from fastapi import APIRouter, Depends

from askpdf.api.deps import get_chat_service
from askpdf.application.services import ChatService
from askpdf.models.chat import ChatHistoryResponse
from askpdf.models.common import MessageResponse

router = APIRouter(prefix="/history", tags=["history"])


@router.get("/{session_id}", response_model=ChatHistoryResponse)
async def get_history(
    session_id: str,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatHistoryResponse:
    """Stored turns in order; empty when none are recorded."""
    turns = await chat_service.get_history(session_id)
    return ChatHistoryResponse(session_id=session_id, history=turns)


@router.delete("/{session_id}", response_model=MessageResponse)
async def clear_history(
    session_id: str,
    chat_service: ChatService = Depends(get_chat_service),
) -> MessageResponse:
    """
    Reset a session's history.

    Raises:
        SessionNotFoundError (404): Unknown session
    """
    await chat_service.clear_history(session_id)
    return MessageResponse(message="Chat history cleared", session_id=session_id)
