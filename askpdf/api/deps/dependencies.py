"""
Dependency injection container.

ServiceContainer lazily builds and caches the process-wide collaborators
(key-value store, vector index, chat model, services). One container lives
on app.state; route dependencies read from it.

Dependencies: askpdf.configs, askpdf.application, askpdf.boundary
System role: DI container for service injection
"""

import logging

from fastapi import Depends, Header, Request
from langchain_core.embeddings import Embeddings
from langchain_core.language_models.chat_models import BaseChatModel

from askpdf.application.adapters import ChatHistoryAdapter, SessionRepository
from askpdf.application.services import ChatService, DocumentService, SessionService
from askpdf.boundary.kv import KeyValueStore, create_kv_store
from askpdf.boundary.vdb.faiss_store import SessionVectorStore
from askpdf.configs import Settings, get_settings
from askpdf.core.document_processing import ChunkingTask, ParsingTask
from askpdf.core.rag_query import AnswerGenerator, ConversationWorkflow
from askpdf.core.session import SessionLockRegistry

logger = logging.getLogger(__name__)

DEFAULT_OWNER_ID = "anonymous"


class ServiceContainer:
    """Container for cached service instances."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        kv_store: KeyValueStore | None = None,
        embeddings: Embeddings | None = None,
        chat_model: BaseChatModel | None = None,
    ) -> None:
        """
        Initialize container. Explicit collaborators replace the configured ones.

        Args:
            settings: Application settings (defaults to get_settings())
            kv_store: Key-value store override
            embeddings: Embedding provider override
            chat_model: Chat model override
        """
        self.settings = settings or get_settings()
        self._kv_store = kv_store
        self._embeddings = embeddings
        self._chat_model = chat_model
        self._vector_store: SessionVectorStore | None = None
        self._locks = SessionLockRegistry()
        self._session_service: SessionService | None = None
        self._chat_service: ChatService | None = None
        self._document_service: DocumentService | None = None

    @property
    def kv_store(self) -> KeyValueStore:
        if self._kv_store is None:
            self._kv_store = create_kv_store(self.settings.session_store)
        return self._kv_store

    @property
    def embeddings(self) -> Embeddings:
        if self._embeddings is None:
            from askpdf.boundary.vdb.embeddings import create_embeddings

            self._embeddings = create_embeddings(self.settings.vector_store.embedding_model)
        return self._embeddings

    @property
    def chat_model(self) -> BaseChatModel:
        if self._chat_model is None:
            from askpdf.boundary.llm import create_chat_model

            self._chat_model = create_chat_model(self.settings.llm)
        return self._chat_model

    @property
    def vector_store(self) -> SessionVectorStore:
        """Get cached vector store."""
        if self._vector_store is None:
            self._vector_store = SessionVectorStore(
                embeddings=self.embeddings,
                persist_directory=self.settings.vector_store.persist_directory,
            )
        return self._vector_store

    @property
    def session_service(self) -> SessionService:
        if self._session_service is None:
            self._session_service = SessionService(
                repository=SessionRepository(self.kv_store),
                history=ChatHistoryAdapter(self.kv_store),
                vector_store=self.vector_store,
                locks=self._locks,
                max_sessions_per_owner=self.settings.conversation.max_sessions_per_owner,
            )
        return self._session_service

    @property
    def chat_service(self) -> ChatService:
        """Get cached chat service with its conversation workflow."""
        if self._chat_service is None:
            llm = self.settings.llm
            conversation = self.settings.conversation
            history = ChatHistoryAdapter(self.kv_store)
            generator = AnswerGenerator(
                self.chat_model,
                timeout_seconds=llm.generation_timeout_seconds,
                max_attempts=llm.max_retries,
                backoff_seconds=llm.retry_backoff_seconds,
            )
            workflow = ConversationWorkflow(
                vector_store=self.vector_store,
                history=history,
                generator=generator,
                retrieval_k=self.settings.vector_store.retrieval_k,
                history_window=conversation.history_window,
                history_retention=conversation.history_retention,
            )
            self._chat_service = ChatService(
                sessions=self.session_service,
                history=history,
                workflow=workflow,
            )
        return self._chat_service

    @property
    def document_service(self) -> DocumentService:
        if self._document_service is None:
            documents = self.settings.documents
            self._document_service = DocumentService(
                sessions=self.session_service,
                parser=ParsingTask(),
                chunker=ChunkingTask(
                    chunk_size=documents.chunk_size,
                    chunk_overlap=documents.chunk_overlap,
                    max_chunks=documents.max_chunks,
                ),
            )
        return self._document_service

    async def startup(self) -> None:
        """Open the key-value store and pre-warm the services."""
        await self.kv_store.initialize()
        _ = self.chat_service
        _ = self.document_service
        logger.info("Service container ready")

    async def shutdown(self) -> None:
        await self.kv_store.close()
        logger.info("Service container closed")


def get_container(request: Request) -> ServiceContainer:
    """Get the application's service container."""
    return request.app.state.container


def get_session_service(container: ServiceContainer = Depends(get_container)) -> SessionService:
    return container.session_service


def get_chat_service(container: ServiceContainer = Depends(get_container)) -> ChatService:
    return container.chat_service


def get_document_service(container: ServiceContainer = Depends(get_container)) -> DocumentService:
    return container.document_service


def get_owner_id(x_client_id: str | None = Header(default=None)) -> str:
    """
    Caller identity for session quotas.

    The header is advisory and unauthenticated: any client may send any value,
    so the per-owner session limit groups cooperating callers only.

    Args:
        x_client_id: X-Client-ID request header

    Returns:
        str: Trimmed header value, or 'anonymous' when absent
    """
    if x_client_id and x_client_id.strip():
        return x_client_id.strip()
    return DEFAULT_OWNER_ID
