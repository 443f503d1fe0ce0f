"""
Document service orchestrator.

Turns an uploaded PDF on local disk into an indexed session:
parse -> chunk (with ceiling) -> SessionService.create_session.

Dependencies: askpdf.core.document_processing, askpdf.application.services.session_service
System role: Document upload orchestration
"""

import logging
import time

from fastapi.concurrency import run_in_threadpool

from askpdf.application.services.session_service import SessionService
from askpdf.core.document_processing import ChunkingTask, ParsingTask
from askpdf.core.exceptions import AskPdfException, DocumentProcessingError
from askpdf.models.session import SessionRecord

logger = logging.getLogger(__name__)


class DocumentService:
    """Document upload orchestrator."""

    def __init__(
        self,
        sessions: SessionService,
        parser: ParsingTask,
        chunker: ChunkingTask,
    ) -> None:
        self._sessions = sessions
        self._parser = parser
        self._chunker = chunker

    async def upload_document(
        self,
        owner_id: str,
        document_name: str,
        file_path: str,
    ) -> SessionRecord:
        """
        Process an uploaded PDF into a new session.

        The chunk ceiling is enforced before anything is written.

        Args:
            owner_id: Caller identity
            document_name: Original filename (session display name)
            file_path: Path of the temporary copy on disk

        Returns:
            SessionRecord: Created session including chunk count

        Raises:
            ParsingError: Unreadable PDF or no extractable text
            DocumentTooLargeError: Chunk ceiling exceeded
            SessionLimitExceededError: Owner at session limit
            DocumentProcessingError: Any other processing failure
        """
        start = time.perf_counter()
        try:
            pages = await run_in_threadpool(self._parser.parse, file_path, document_name)
            chunks = await run_in_threadpool(self._chunker.chunk, pages)
            record = await self._sessions.create_session(owner_id, document_name, chunks)
        except AskPdfException:
            raise
        except Exception as e:
            raise DocumentProcessingError(
                f"Document processing failed: {e}",
                document_name=document_name,
            ) from e

        logger.info(
            "Document processed",
            extra={
                "session_id": record.id,
                "document_name": document_name,
                "chunk_count": record.chunk_count,
                "processing_time_ms": round((time.perf_counter() - start) * 1000, 2),
            },
        )
        return record
