"""
Document parsing task using LangChain PyPDFLoader.

Converts PDF documents into LangChain Documents, one per page.

Dependencies: langchain_community.document_loaders
System role: First stage of document ingestion pipeline
"""

import logging
from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader
from langchain_core.documents import Document

from askpdf.core.exceptions import ParsingError

logger = logging.getLogger(__name__)


class ParsingTask:
    """Parse PDF documents into LangChain Documents."""

    def parse(self, file_path: str, document_name: str | None = None) -> list[Document]:
        """
        Parse PDF document into LangChain Documents.

        Args:
            file_path: Path to PDF document
            document_name: Display name used in error context

        Returns:
            list[Document]: Parsed page documents in page order

        Raises:
            ParsingError: When the file is missing, not a PDF, or has no text
        """
        path = Path(file_path)
        name = document_name or path.name
        if not path.exists():
            raise ParsingError(f"File not found: {file_path}", name)

        if path.suffix.lower() != ".pdf":
            raise ParsingError(
                f"Unsupported file format: {path.suffix}. Only PDF files are supported.",
                name,
                file_type=path.suffix,
            )

        try:
            documents = PyPDFLoader(str(path)).load()
        except Exception as e:
            raise ParsingError(f"Failed to load PDF content: {e}", name, file_type="pdf") from e

        documents = [doc for doc in documents if doc.page_content.strip()]
        if not documents:
            raise ParsingError("PDF document contains no extractable text", name, file_type="pdf")

        logger.info(
            "Parsed PDF document",
            extra={"document_name": name, "page_count": len(documents)},
        )
        return documents
