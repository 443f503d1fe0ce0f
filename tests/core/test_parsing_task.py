"""
Test suite for ParsingTask.

PyPDFLoader is patched; these tests cover file checks and error mapping.

System role: Verification of PDF parsing
"""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from langchain_core.documents import Document

from askpdf.core.document_processing import ParsingTask
from askpdf.core.exceptions import ParsingError

LOADER_PATH = "askpdf.core.document_processing.tasks.parsing_task.PyPDFLoader"


@pytest.fixture
def pdf_path(temp_dir: Path) -> Path:
    path = temp_dir / "notes.pdf"
    path.write_bytes(b"%PDF-1.4 placeholder")
    return path


class TestParsingTask:
    """Test suite for ParsingTask.parse."""

    def test_returns_pages_with_text(self, pdf_path: Path) -> None:
        # Arrange
        pages = [
            Document(page_content="Page one", metadata={"page": 0}),
            Document(page_content="   ", metadata={"page": 1}),
            Document(page_content="Page three", metadata={"page": 2}),
        ]
        with patch(LOADER_PATH) as mock_loader:
            mock_loader.return_value.load.return_value = pages

            # Act
            result = ParsingTask().parse(str(pdf_path))

        # Assert
        mock_loader.assert_called_once_with(str(pdf_path))
        assert [d.page_content for d in result] == ["Page one", "Page three"]

    def test_missing_file_raises(self) -> None:
        with pytest.raises(ParsingError, match="File not found"):
            ParsingTask().parse("/nonexistent/file.pdf")

    def test_non_pdf_suffix_raises(self, temp_dir: Path) -> None:
        # Arrange
        path = temp_dir / "notes.txt"
        path.write_text("plain text")

        # Act & Assert
        with pytest.raises(ParsingError, match="Unsupported file format") as exc_info:
            ParsingTask().parse(str(path))
        assert exc_info.value.details["file_type"] == ".txt"

    def test_loader_failure_is_wrapped(self, pdf_path: Path) -> None:
        with patch(LOADER_PATH) as mock_loader:
            mock_loader.return_value.load.side_effect = ValueError("EOF marker not found")

            with pytest.raises(ParsingError, match="Failed to load PDF") as exc_info:
                ParsingTask().parse(str(pdf_path), document_name="upload.pdf")

        assert exc_info.value.details["document_name"] == "upload.pdf"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_pdf_without_text_raises(self, pdf_path: Path) -> None:
        loader = MagicMock()
        loader.load.return_value = [Document(page_content="")]
        with patch(LOADER_PATH, return_value=loader):
            with pytest.raises(ParsingError, match="no extractable text"):
                ParsingTask().parse(str(pdf_path))
