"""
Session-scoped FAISS vector store.

Wraps LangChain FAISS so that chunks are always written with their owning
session id and every similarity search and delete is restricted to one
session. Optionally persists the index to a local directory.

Dependencies: langchain_community.vectorstores, langchain_core, tenacity
System role: Vector index adapter (tagged upsert, filtered search, filtered delete)
"""

import hashlib
import logging
import threading
from pathlib import Path

from langchain_community.vectorstores import FAISS
from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from askpdf.boundary.vdb.vector_schemas import VectorMetadata, VectorSearchResult
from askpdf.core.exceptions import VectorStoreError
from askpdf.core.retry_policy import is_transient_upstream_error

logger = logging.getLogger(__name__)

SESSION_KEY = "session_id"

_embedding_retry = retry(
    retry=retry_if_exception(is_transient_upstream_error),
    stop=stop_after_attempt(3),
    wait=wait_exponential_jitter(initial=0.5, max=5, jitter=0.5),
    before_sleep=lambda retry_state: logger.warning(
        f"{__name__}:embed - Retry {retry_state.attempt_number}/3 after transient failure"
    ),
    reraise=True,
)


def make_chunk_id(session_id: str, index: int, content: str) -> str:
    """Deterministic chunk ID from owning session, position and content."""
    digest = hashlib.sha256(f"{session_id}:{index}:{content}".encode("utf-8"))
    return digest.hexdigest()[:32]


class SessionVectorStore:
    """
    FAISS vector store with session-id tenancy.

    All public methods are synchronous and thread-safe; async callers run
    them through run_in_threadpool. Embedding provider calls happen outside
    the index lock.
    """

    def __init__(
        self,
        embeddings: Embeddings,
        persist_directory: str | None = None,
    ) -> None:
        """
        Initialize the store.

        Args:
            embeddings: Embedding provider used for chunks and queries
            persist_directory: Directory for index persistence (None = memory only)
        """
        self._embeddings = embeddings
        self._persist_dir = Path(persist_directory) if persist_directory else None
        self._lock = threading.RLock()
        self._index: FAISS | None = None
        self._load_index()

    def _load_index(self) -> None:
        """Load an existing index from the persist directory."""
        if self._persist_dir is None:
            return
        self._persist_dir.mkdir(parents=True, exist_ok=True)
        if (self._persist_dir / "index.faiss").exists():
            self._index = FAISS.load_local(
                str(self._persist_dir),
                self._embeddings,
                allow_dangerous_deserialization=True,
            )
            logger.info(
                "Loaded FAISS index",
                extra={"persist_directory": str(self._persist_dir), "vectors": self._count()},
            )

    def _save(self) -> None:
        if self._persist_dir is not None and self._index is not None:
            self._index.save_local(str(self._persist_dir))

    def _count(self) -> int:
        return self._index.index.ntotal if self._index is not None else 0

    def add_chunks(self, session_id: str, chunks: list[Document]) -> list[str]:
        """
        Index chunks tagged with session_id.

        The input documents are not mutated; tagged copies are indexed.

        Args:
            session_id: Owning session
            chunks: Chunk documents in document order

        Returns:
            list[str]: Chunk IDs in input order

        Raises:
            VectorStoreError: When embedding or indexing fails
        """
        if not chunks:
            return []

        texts = [chunk.page_content for chunk in chunks]
        metadatas: list[dict] = []
        ids: list[str] = []
        for index, chunk in enumerate(chunks):
            chunk_id = make_chunk_id(session_id, index, chunk.page_content)
            metadatas.append({**chunk.metadata, SESSION_KEY: session_id, "chunk_id": chunk_id})
            ids.append(chunk_id)

        try:
            vectors = self._embed_documents(texts)
            text_embeddings = list(zip(texts, vectors))
            with self._lock:
                if self._index is None:
                    self._index = FAISS.from_embeddings(
                        text_embeddings, self._embeddings, metadatas=metadatas, ids=ids
                    )
                else:
                    self._index.add_embeddings(text_embeddings, metadatas=metadatas, ids=ids)
                self._save()
        except Exception as e:
            raise VectorStoreError(
                f"Failed to index chunks: {e}",
                operation="upsert",
                details={"session_id": session_id, "chunk_count": len(chunks)},
            ) from e

        logger.info(
            "Indexed chunks",
            extra={"session_id": session_id, "chunk_count": len(ids)},
        )
        return ids

    @_embedding_retry
    def _embed_documents(self, texts: list[str]) -> list[list[float]]:
        return self._embeddings.embed_documents(texts)

    @_embedding_retry
    def _embed_query(self, query: str) -> list[float]:
        return self._embeddings.embed_query(query)

    def _search(self, query: str, k: int, session_id: str) -> list[tuple[Document, float]]:
        """Embed the query, then run the filtered search against the index."""
        with self._lock:
            if self._count() == 0:
                return []
        vector = self._embed_query(query)
        with self._lock:
            total = self._count()
            if total == 0:
                return []
            # Filter runs after the raw search; fetch_k spans the whole index.
            return self._index.similarity_search_with_score_by_vector(
                vector,
                k=k,
                filter={SESSION_KEY: session_id},
                fetch_k=total,
            )

    def similarity_search(self, query: str, session_id: str, k: int = 5) -> list[VectorSearchResult]:
        """
        Search chunks of one session.

        Args:
            query: Search query text
            session_id: Session whose chunks may be returned
            k: Number of results to return

        Returns:
            list[VectorSearchResult]: Results ordered by similarity (best first)

        Raises:
            VectorStoreError: When the search fails
        """
        try:
            results = self._search(query, k, session_id)
        except Exception as e:
            raise VectorStoreError(
                f"Similarity search failed: {e}",
                operation="query",
                details={"session_id": session_id},
            ) from e

        search_results = []
        for doc, score in results:
            metadata = doc.metadata
            if metadata.get(SESSION_KEY) != session_id:
                logger.error(
                    "Dropped chunk from foreign session",
                    extra={"session_id": session_id, "chunk_id": metadata.get("chunk_id")},
                )
                continue
            search_results.append(
                VectorSearchResult(
                    chunk_id=metadata.get("chunk_id", ""),
                    content=doc.page_content,
                    metadata=VectorMetadata(
                        session_id=session_id,
                        chunk_id=metadata.get("chunk_id", ""),
                        chunk_index=metadata.get("chunk_index"),
                        page=metadata.get("page"),
                        source=str(metadata.get("source", "")),
                    ),
                    distance=float(score),
                )
            )

        logger.info(
            f"{__name__}:similarity_search - Found {len(search_results)} results",
            extra={"session_id": session_id, "k": k},
        )
        return search_results

    def delete_by_session(self, session_id: str) -> int:
        """
        Delete all vectors tagged with session_id.

        A session with no vectors is a no-op.

        Args:
            session_id: Session to remove

        Returns:
            int: Number of vectors deleted

        Raises:
            VectorStoreError: When deletion fails
        """
        try:
            with self._lock:
                if self._index is None:
                    return 0
                ids_to_delete = [
                    doc_id
                    for doc_id, doc in self._index.docstore._dict.items()
                    if doc.metadata.get(SESSION_KEY) == session_id
                ]
                if ids_to_delete:
                    self._index.delete(ids_to_delete)
                    self._save()
        except Exception as e:
            raise VectorStoreError(
                f"Failed to delete session vectors: {e}",
                operation="delete",
                details={"session_id": session_id},
            ) from e

        logger.info(
            "Deleted session vectors",
            extra={"session_id": session_id, "deleted": len(ids_to_delete)},
        )
        return len(ids_to_delete)

    def count_session_chunks(self, session_id: str) -> int:
        """Number of indexed chunks tagged with session_id."""
        with self._lock:
            if self._index is None:
                return 0
            return sum(
                1
                for doc in self._index.docstore._dict.values()
                if doc.metadata.get(SESSION_KEY) == session_id
            )
