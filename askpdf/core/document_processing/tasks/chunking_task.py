"""
Text chunking task using RecursiveCharacterTextSplitter.

Splits documents into retrievable chunks while preserving context, and
rejects documents whose chunk count exceeds the configured ceiling before
anything reaches the vector index.

Dependencies: langchain_text_splitters
System role: Second stage of document ingestion pipeline
"""

import logging

from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter

from askpdf.core.exceptions import DocumentTooLargeError, ParsingError

logger = logging.getLogger(__name__)


class ChunkingTask:
    """Split documents into chunks using RecursiveCharacterTextSplitter."""

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
        max_chunks: int = 5000,
    ) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks
            max_chunks: Ceiling on chunk count per document
        """
        self._max_chunks = max_chunks
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            add_start_index=True,
            length_function=len,
        )

    @property
    def max_chunks(self) -> int:
        return self._max_chunks

    def chunk(self, documents: list[Document]) -> list[Document]:
        """
        Split documents into chunks.

        Args:
            documents: LangChain Documents to split, in reading order

        Returns:
            list[Document]: Chunked documents with preserved metadata

        Raises:
            ParsingError: When documents list is empty
            DocumentTooLargeError: When chunk count exceeds max_chunks
        """
        if not documents:
            raise ParsingError("No documents to chunk")

        chunks = self._splitter.split_documents(documents)

        if len(chunks) > self._max_chunks:
            logger.warning(
                "Document rejected: chunk ceiling exceeded",
                extra={"chunk_count": len(chunks), "max_chunks": self._max_chunks},
            )
            raise DocumentTooLargeError(
                "File too large to process",
                limit=self._max_chunks,
                actual=len(chunks),
            )

        for index, chunk in enumerate(chunks):
            chunk.metadata["chunk_index"] = index

        return chunks
