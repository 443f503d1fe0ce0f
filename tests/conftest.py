"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory SQL key-value store, deterministic fake embeddings with a
real FAISS index, fake chat models, chunk builders and test settings
Dependencies: pytest, sqlalchemy, aiosqlite, langchain_core, faiss
System role: Test infrastructure and fixture management
"""

import shutil
import tempfile
from pathlib import Path

import pytest
from langchain_core.documents import Document
from langchain_core.embeddings import DeterministicFakeEmbedding
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from askpdf.application.adapters import ChatHistoryAdapter, SessionRepository
from askpdf.boundary.db import create_engine
from askpdf.boundary.kv.sql_store import SqlKeyValueStore
from askpdf.boundary.vdb.faiss_store import SessionVectorStore
from askpdf.configs.conversation import ConversationSettings
from askpdf.configs.documents import DocumentSettings
from askpdf.configs.llm import LLMSettings
from askpdf.configs.session_store import SessionStoreSettings
from askpdf.configs.settings import Settings
from askpdf.configs.vector_store import VectorStoreSettings
from askpdf.core.session import SessionLockRegistry

IN_MEMORY_DB_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def kv_store():
    """
    In-memory SQLite key-value store.

    Yields:
        SqlKeyValueStore: Initialized store, disposed after the test
    """
    store = SqlKeyValueStore(create_engine(IN_MEMORY_DB_URL))
    await store.initialize()
    yield store
    await store.close()


@pytest.fixture
def fake_embeddings() -> DeterministicFakeEmbedding:
    """Embeddings where identical text always maps to the identical vector."""
    return DeterministicFakeEmbedding(size=32)


@pytest.fixture
def vector_store(fake_embeddings: DeterministicFakeEmbedding) -> SessionVectorStore:
    """Memory-only FAISS store backed by fake embeddings."""
    return SessionVectorStore(embeddings=fake_embeddings)


@pytest.fixture
def history(kv_store: SqlKeyValueStore) -> ChatHistoryAdapter:
    return ChatHistoryAdapter(kv_store)


@pytest.fixture
def repository(kv_store: SqlKeyValueStore) -> SessionRepository:
    return SessionRepository(kv_store)


@pytest.fixture
def locks() -> SessionLockRegistry:
    return SessionLockRegistry()


@pytest.fixture
def make_chunks():
    """Build chunk documents from plain strings."""

    def _make(*texts: str, source: str = "test.pdf") -> list[Document]:
        return [
            Document(page_content=text, metadata={"source": source, "page": 0, "chunk_index": i})
            for i, text in enumerate(texts)
        ]

    return _make


@pytest.fixture
def fake_chat_model() -> FakeListChatModel:
    """Chat model answering with a fixed string."""
    return FakeListChatModel(responses=["This is a test answer."])


@pytest.fixture
def test_settings() -> Settings:
    """Settings with the SQL backend, no index persistence and fast retries."""
    return Settings(
        vector_store=VectorStoreSettings(persist_directory=None),
        llm=LLMSettings(generation_timeout_seconds=5, max_retries=2, retry_backoff_seconds=0),
        session_store=SessionStoreSettings(backend="sql", database_url=IN_MEMORY_DB_URL),
        conversation=ConversationSettings(),
        documents=DocumentSettings(),
    )


@pytest.fixture
def temp_dir():
    """
    Create temporary directory with askpdf_ prefix.

    Yields:
        Path: Path to temporary directory
    """
    temp_path = Path(tempfile.mkdtemp(prefix="askpdf_"))
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)
