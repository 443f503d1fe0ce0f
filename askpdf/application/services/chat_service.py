"""
Chat service for conversational Q&A with RAG.

Validates the question, then, under the session lock, confirms the session
exists, runs the conversation workflow and records activity. Also serves
history reads and clears.

Dependencies: askpdf.core.rag_query, askpdf.application.services.session_service
System role: Chat service orchestration layer
"""

import logging
from dataclasses import dataclass
from typing import Any

from askpdf.application.adapters import ChatHistoryAdapter
from askpdf.application.services.session_service import SessionService, session_lock_key
from askpdf.core.exceptions import ValidationError
from askpdf.core.rag_query import ConversationWorkflow
from askpdf.models.chat import ChatTurn
from askpdf.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChatResult:
    """Answer returned to the caller."""

    session_id: str
    answer: str
    conversation_length: int


def validate_question(question: Any) -> str:
    """Return the trimmed question or raise ValidationError."""
    if question is None:
        raise ValidationError("Missing 'question' in request body", field="question")
    if not isinstance(question, str):
        raise ValidationError("Question must be a string", field="question")
    question = question.strip()
    if not question:
        raise ValidationError("Invalid question", field="question")
    return question


def validate_session_id(session_id: Any) -> str:
    """Return the session id or raise ValidationError."""
    if not isinstance(session_id, str) or not session_id.strip():
        raise ValidationError("Missing or invalid 'sessionId' in request body", field="sessionId")
    return session_id.strip()


class ChatService:
    """
    Chat service for conversational Q&A.

    Coordinates session validation, workflow invocation and activity tracking
    for multi-turn conversations.
    """

    def __init__(
        self,
        sessions: SessionService,
        history: ChatHistoryAdapter,
        workflow: ConversationWorkflow,
    ) -> None:
        """
        Initialize chat service.

        Args:
            sessions: Session lifecycle service
            history: Chat history adapter
            workflow: Conversation workflow
        """
        self.sessions = sessions
        self.history = history
        self.workflow = workflow

    async def ask(self, question: Any, session_id: Any) -> ChatResult:
        """
        Answer a question against a session.

        Flow:
        1. Validate question and session id
        2. Acquire the session lock
        3. Confirm the session exists
        4. Run retrieve -> generate (persists history on success)
        5. Update last_activity

        Raises:
            ValidationError: Missing or invalid question / session id
            SessionNotFoundError: Unknown session
            UpstreamError: Retrieval or generation failure (history untouched)
        """
        question = validate_question(question)
        session_id = validate_session_id(session_id)

        logger.info(
            f"{__name__}:ask - START",
            extra={"session_id": session_id, "question_preview": safe_log_value(question, 80)},
        )

        async with self.sessions.locks.hold(session_lock_key(session_id)):
            await self.sessions.get_session(session_id)
            result = await self.workflow.run(question, session_id)
            await self.sessions.touch(session_id)

        logger.info(
            f"{__name__}:ask - END",
            extra={"session_id": session_id, "conversation_length": result.conversation_length},
        )
        return ChatResult(
            session_id=session_id,
            answer=result.answer,
            conversation_length=result.conversation_length,
        )

    async def get_history(self, session_id: str) -> list[ChatTurn]:
        """Full stored history; empty when none is recorded."""
        return await self.history.get_turns(session_id)

    async def clear_history(self, session_id: str) -> None:
        """
        Reset history to empty. Session and indexed chunks are kept.

        Raises:
            SessionNotFoundError: Unknown session
        """
        async with self.sessions.locks.hold(session_lock_key(session_id)):
            await self.sessions.get_session(session_id)
            await self.history.clear(session_id)
        logger.info("Chat history cleared", extra={"session_id": session_id})
