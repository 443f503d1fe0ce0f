"""
Test suite for DocumentService.

Parser is mocked; the real chunker and a mocked session service verify the
parse -> chunk -> create_session ordering and error mapping.

System role: Verification of document upload orchestration
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.documents import Document

from askpdf.application.services import DocumentService
from askpdf.core.document_processing import ChunkingTask
from askpdf.core.exceptions import (
    DocumentProcessingError,
    DocumentTooLargeError,
    ParsingError,
    SessionLimitExceededError,
)
from askpdf.models.session import SessionRecord


@pytest.fixture
def mock_parser() -> MagicMock:
    parser = MagicMock()
    parser.parse.return_value = [
        Document(page_content="Page one text.", metadata={"page": 0, "source": "doc.pdf"}),
        Document(page_content="Page two text.", metadata={"page": 1, "source": "doc.pdf"}),
    ]
    return parser


@pytest.fixture
def mock_sessions() -> MagicMock:
    sessions = MagicMock()
    sessions.create_session = AsyncMock(
        side_effect=lambda owner_id, name, chunks: SessionRecord(
            id="new-session", name=name, owner_id=owner_id, chunk_count=len(chunks)
        )
    )
    return sessions


class TestDocumentServiceUpload:
    """Test suite for DocumentService.upload_document."""

    async def test_parses_chunks_and_creates_session(self, mock_parser, mock_sessions) -> None:
        # Arrange
        service = DocumentService(sessions=mock_sessions, parser=mock_parser, chunker=ChunkingTask())

        # Act
        record = await service.upload_document("owner-1", "doc.pdf", "/tmp/askpdf_x/doc.pdf")

        # Assert
        mock_parser.parse.assert_called_once_with("/tmp/askpdf_x/doc.pdf", "doc.pdf")
        owner_id, name, chunks = mock_sessions.create_session.await_args.args
        assert (owner_id, name) == ("owner-1", "doc.pdf")
        assert [c.page_content for c in chunks] == ["Page one text.", "Page two text."]
        assert record.chunk_count == 2

    async def test_chunk_ceiling_rejects_before_session_creation(
        self, mock_parser, mock_sessions
    ) -> None:
        service = DocumentService(
            sessions=mock_sessions, parser=mock_parser, chunker=ChunkingTask(max_chunks=1)
        )

        with pytest.raises(DocumentTooLargeError):
            await service.upload_document("owner-1", "doc.pdf", "/tmp/doc.pdf")

        mock_sessions.create_session.assert_not_awaited()

    async def test_parsing_error_propagates(self, mock_parser, mock_sessions) -> None:
        mock_parser.parse.side_effect = ParsingError("PDF document contains no extractable text")
        service = DocumentService(sessions=mock_sessions, parser=mock_parser, chunker=ChunkingTask())

        with pytest.raises(ParsingError):
            await service.upload_document("owner-1", "doc.pdf", "/tmp/doc.pdf")

    async def test_session_limit_propagates(self, mock_parser, mock_sessions) -> None:
        mock_sessions.create_session.side_effect = SessionLimitExceededError("owner-1", 3)
        service = DocumentService(sessions=mock_sessions, parser=mock_parser, chunker=ChunkingTask())

        with pytest.raises(SessionLimitExceededError):
            await service.upload_document("owner-1", "doc.pdf", "/tmp/doc.pdf")

    async def test_unexpected_error_is_wrapped(self, mock_parser, mock_sessions) -> None:
        mock_parser.parse.side_effect = RuntimeError("loader crashed")
        service = DocumentService(sessions=mock_sessions, parser=mock_parser, chunker=ChunkingTask())

        with pytest.raises(DocumentProcessingError) as exc_info:
            await service.upload_document("owner-1", "doc.pdf", "/tmp/doc.pdf")

        assert exc_info.value.details["document_name"] == "doc.pdf"
