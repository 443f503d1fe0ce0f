"""
Test suite for SessionVectorStore.

Uses a real FAISS index with deterministic fake embeddings.

System role: Verification of session-scoped vector indexing
"""

import threading
import time
from unittest.mock import patch

import httpx
import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding

from askpdf.boundary.vdb.faiss_store import SessionVectorStore, make_chunk_id
from askpdf.core.exceptions import VectorStoreError


class TestAddChunks:
    """Test suite for SessionVectorStore.add_chunks."""

    def test_returns_ids_in_input_order(self, vector_store, make_chunks) -> None:
        chunks = make_chunks("first", "second")

        ids = vector_store.add_chunks("s1", chunks)

        assert ids == [make_chunk_id("s1", 0, "first"), make_chunk_id("s1", 1, "second")]
        assert vector_store.count_session_chunks("s1") == 2

    def test_input_documents_are_not_mutated(self, vector_store, make_chunks) -> None:
        chunks = make_chunks("first")

        vector_store.add_chunks("s1", chunks)

        assert "session_id" not in chunks[0].metadata

    def test_empty_chunk_list_is_noop(self, vector_store) -> None:
        assert vector_store.add_chunks("s1", []) == []
        assert vector_store.count_session_chunks("s1") == 0

    def test_embedding_failure_raises_vector_store_error(self, make_chunks) -> None:
        store = SessionVectorStore(embeddings=DeterministicFakeEmbedding(size=8))
        with patch.object(
            DeterministicFakeEmbedding, "embed_documents", side_effect=RuntimeError("provider down")
        ):
            with pytest.raises(VectorStoreError) as exc_info:
                store.add_chunks("s1", make_chunks("text"))

        assert exc_info.value.details["operation"] == "upsert"


class TestSimilaritySearch:
    """Test suite for SessionVectorStore.similarity_search."""

    def test_empty_index_returns_no_results(self, vector_store) -> None:
        assert vector_store.similarity_search("anything", "s1") == []

    def test_results_are_scoped_to_session(self, vector_store, make_chunks) -> None:
        # Arrange
        vector_store.add_chunks("s1", make_chunks("alpha one", "alpha two"))
        vector_store.add_chunks("s2", make_chunks(*[f"beta {i}" for i in range(20)]))

        # Act
        results = vector_store.similarity_search("alpha", "s1", k=5)

        # Assert
        assert len(results) == 2
        assert {r.metadata.session_id for r in results} == {"s1"}
        assert {r.content for r in results} == {"alpha one", "alpha two"}

    def test_returns_at_most_k_best_first(self, vector_store, make_chunks) -> None:
        vector_store.add_chunks("s1", make_chunks(*[f"passage {i}" for i in range(8)]))

        results = vector_store.similarity_search("passage 3", "s1", k=5)

        assert len(results) == 5
        assert results[0].content == "passage 3"
        distances = [r.distance for r in results]
        assert distances == sorted(distances)

    def test_result_carries_metadata(self, vector_store, make_chunks) -> None:
        vector_store.add_chunks("s1", make_chunks("only passage", source="manual.pdf"))

        (result,) = vector_store.similarity_search("only passage", "s1")

        assert result.chunk_id == make_chunk_id("s1", 0, "only passage")
        assert result.metadata.source == "manual.pdf"
        assert result.metadata.chunk_index == 0

    def test_transient_embedding_failure_is_retried(self, vector_store, make_chunks) -> None:
        # Arrange
        vector_store.add_chunks("s1", make_chunks("alpha"))
        real_embed_query = DeterministicFakeEmbedding.embed_query
        calls = {"n": 0}

        def flaky(self, text):
            calls["n"] += 1
            if calls["n"] == 1:
                raise httpx.ConnectError("connection refused")
            return real_embed_query(self, text)

        # Act
        with patch.object(DeterministicFakeEmbedding, "embed_query", flaky):
            results = vector_store.similarity_search("alpha", "s1")

        # Assert
        assert calls["n"] == 2
        assert len(results) == 1

    def test_permanent_embedding_failure_is_not_retried(self, vector_store, make_chunks) -> None:
        vector_store.add_chunks("s1", make_chunks("alpha"))

        with patch.object(
            DeterministicFakeEmbedding, "embed_query", side_effect=ValueError("bad request")
        ) as embed_query:
            with pytest.raises(VectorStoreError) as exc_info:
                vector_store.similarity_search("alpha", "s1")

        assert embed_query.call_count == 1
        assert exc_info.value.details["operation"] == "query"


class TestConcurrentSessions:
    """Test suite for cross-session concurrency."""

    def test_search_is_not_blocked_by_other_session_upload(self, vector_store, make_chunks) -> None:
        # Arrange
        vector_store.add_chunks("A", make_chunks("alpha one", "alpha two"))
        real_embed_documents = DeterministicFakeEmbedding.embed_documents
        upload_started = threading.Event()
        release_upload = threading.Event()

        def slow_embed_documents(self, texts):
            upload_started.set()
            release_upload.wait(timeout=5)
            return real_embed_documents(self, texts)

        with patch.object(DeterministicFakeEmbedding, "embed_documents", slow_embed_documents):
            upload = threading.Thread(
                target=vector_store.add_chunks, args=("B", make_chunks("beta one", "beta two"))
            )
            upload.start()
            try:
                assert upload_started.wait(timeout=5)

                # Act
                started = time.monotonic()
                results = vector_store.similarity_search("alpha", "A", k=5)
                elapsed = time.monotonic() - started
            finally:
                release_upload.set()
                upload.join(timeout=5)

        # Assert
        assert elapsed < 0.5
        assert {r.content for r in results} == {"alpha one", "alpha two"}
        assert vector_store.count_session_chunks("B") == 2


class TestDeleteBySession:
    """Test suite for SessionVectorStore.delete_by_session."""

    def test_removes_only_that_session(self, vector_store, make_chunks) -> None:
        # Arrange
        vector_store.add_chunks("s1", make_chunks("one", "two"))
        vector_store.add_chunks("s2", make_chunks("three"))

        # Act
        deleted = vector_store.delete_by_session("s1")

        # Assert
        assert deleted == 2
        assert vector_store.similarity_search("one", "s1") == []
        assert vector_store.count_session_chunks("s2") == 1

    def test_unknown_session_is_noop(self, vector_store, make_chunks) -> None:
        assert vector_store.delete_by_session("missing") == 0

        vector_store.add_chunks("s1", make_chunks("one"))

        assert vector_store.delete_by_session("missing") == 0
        assert vector_store.count_session_chunks("s1") == 1

    def test_second_delete_is_noop(self, vector_store, make_chunks) -> None:
        vector_store.add_chunks("s1", make_chunks("one"))

        vector_store.delete_by_session("s1")

        assert vector_store.delete_by_session("s1") == 0


class TestPersistence:
    """Test suite for index persistence."""

    def test_index_is_reloaded_from_disk(self, temp_dir, make_chunks) -> None:
        # Arrange
        embeddings = DeterministicFakeEmbedding(size=16)
        store = SessionVectorStore(embeddings=embeddings, persist_directory=str(temp_dir / "index"))
        store.add_chunks("s1", make_chunks("persisted passage"))

        # Act
        reloaded = SessionVectorStore(embeddings=embeddings, persist_directory=str(temp_dir / "index"))

        # Assert
        assert reloaded.count_session_chunks("s1") == 1
        assert reloaded.similarity_search("persisted passage", "s1")[0].content == "persisted passage"
