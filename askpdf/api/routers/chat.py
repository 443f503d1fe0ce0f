"""
Chat API endpoint.

Routes:
- POST /search - Ask a question against a session

Dependencies: askpdf.application.services.chat_service
System role: Chat messaging HTTP API
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from askpdf.api.deps import get_chat_service
from askpdf.api.errors import error_response
from askpdf.application.services import ChatService
from askpdf.core.exceptions import AskPdfException
from askpdf.models.chat import SearchRequest, SearchResponse
from askpdf.models.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])

FALLBACK_ANSWER = "I'm sorry, I couldn't process your question right now. Please try again."


@router.post("/search", response_model=SearchResponse)
async def search(
    request: SearchRequest,
    chat_service: ChatService = Depends(get_chat_service),
):
    """
    Answer a question using the session's document and recent history.

    Server-side failures carry a fallbackAnswer the client may show; the
    failed turn is not stored.

    Raises:
        ValidationError (400): Missing or invalid question / sessionId
        SessionNotFoundError (404): Unknown session
    """
    try:
        result = await chat_service.ask(request.question, request.session_id)
    except AskPdfException as e:
        if e.status_code < 500:
            raise
        logger.error(
            "Search failed",
            exc_info=e,
            extra={"session_id": request.session_id, "error_type": type(e).__name__},
        )
        return error_response(e, fallback_answer=FALLBACK_ANSWER)
    except Exception as e:
        logger.exception(
            "Search failed unexpectedly",
            extra={"session_id": request.session_id, "error_type": type(e).__name__},
        )
        body = ErrorResponse(
            message="Error processing search",
            error=type(e).__name__,
            fallback_answer=FALLBACK_ANSWER,
        )
        return JSONResponse(
            status_code=500,
            content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
        )

    return SearchResponse(
        answer=result.answer,
        session_id=result.session_id,
        conversation_length=result.conversation_length,
    )
