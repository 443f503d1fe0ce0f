"""
Session lifecycle service.

Creates sessions (per-owner quota, saga across history store and vector
index), deletes them idempotently, lists an owner's sessions and records
activity.

Dependencies: askpdf.application.adapters, askpdf.boundary.vdb, askpdf.core.session
System role: Session lifecycle manager
"""

import logging
import uuid
from collections.abc import Sequence
from fastapi.concurrency import run_in_threadpool
from langchain_core.documents import Document

from askpdf.application.adapters import ChatHistoryAdapter, SessionRepository
from askpdf.boundary.vdb.faiss_store import SessionVectorStore
from askpdf.core.exceptions import (
    SessionLimitExceededError,
    SessionNotFoundError,
    ValidationError,
)
from askpdf.core.session import SessionLockRegistry
from askpdf.models.session import SessionRecord, utc_now

logger = logging.getLogger(__name__)


def session_lock_key(session_id: str) -> str:
    return f"session:{session_id}"


def owner_lock_key(owner_id: str) -> str:
    return f"owner:{owner_id}"


class SessionService:
    """Session lifecycle orchestrator."""

    def __init__(
        self,
        repository: SessionRepository,
        history: ChatHistoryAdapter,
        vector_store: SessionVectorStore,
        locks: SessionLockRegistry,
        max_sessions_per_owner: int = 3,
    ) -> None:
        """
        Initialize session service.

        Args:
            repository: Session record repository
            history: Chat history adapter
            vector_store: Session-scoped vector store
            locks: Shared lock registry
            max_sessions_per_owner: Concurrent sessions allowed per owner
        """
        self._repository = repository
        self._history = history
        self._vector_store = vector_store
        self._locks = locks
        self._max_sessions = max_sessions_per_owner

    @property
    def locks(self) -> SessionLockRegistry:
        return self._locks

    async def create_session(
        self,
        owner_id: str,
        name: str,
        chunks: Sequence[Document],
    ) -> SessionRecord:
        """
        Create a session from document chunks.

        Steps (under the owner lock):
        1. Enforce the per-owner session limit
        2. Write empty history
        3. Index chunks tagged with the new session id
        4. Save the session record and register it with the owner

        Any failure after step 2 removes whatever was written before
        re-raising, so no partial session stays observable.

        Args:
            owner_id: Caller identity
            name: Display name (uploaded filename)
            chunks: Chunk documents to index

        Returns:
            SessionRecord: Created session

        Raises:
            ValidationError: When there are no chunks
            SessionLimitExceededError: When the owner is at the limit
            UpstreamError: When a store write fails (after compensation)
        """
        if not chunks:
            raise ValidationError("Document produced no indexable content", field="document")

        async with self._locks.hold(owner_lock_key(owner_id)):
            existing = await self.list_sessions(owner_id)
            if len(existing) >= self._max_sessions:
                logger.warning(
                    "Session limit reached",
                    extra={"owner_id": owner_id, "limit": self._max_sessions},
                )
                raise SessionLimitExceededError(owner_id, self._max_sessions)

            record = SessionRecord(
                id=uuid.uuid4().hex,
                name=name,
                owner_id=owner_id,
                chunk_count=len(chunks),
            )

            try:
                await self._history.initialize(record.id)
                await run_in_threadpool(self._vector_store.add_chunks, record.id, list(chunks))
                await self._repository.save(record)
                await self._repository.add_to_owner(owner_id, record.id)
            except BaseException:
                logger.exception(
                    "Session creation failed, compensating",
                    extra={"session_id": record.id, "owner_id": owner_id},
                )
                await self._compensate(record)
                raise

        logger.info(
            "Session created",
            extra={"session_id": record.id, "owner_id": owner_id, "chunk_count": record.chunk_count},
        )
        return record

    async def _compensate(self, record: SessionRecord) -> None:
        """Undo every side of a partially created session."""
        steps = (
            ("history", self._history.delete(record.id)),
            ("vectors", run_in_threadpool(self._vector_store.delete_by_session, record.id)),
            ("owner_index", self._repository.remove_from_owner(record.owner_id, record.id)),
            ("record", self._repository.delete(record.id)),
        )
        for step, operation in steps:
            try:
                await operation
            except Exception:
                logger.exception(
                    "Compensation step failed",
                    extra={"session_id": record.id, "step": step},
                )

    async def get_session(self, session_id: str) -> SessionRecord:
        """
        Get session by ID.

        Raises:
            SessionNotFoundError: If session not found
        """
        record = await self._repository.get(session_id)
        if record is None:
            raise SessionNotFoundError(session_id)
        return record

    async def list_sessions(self, owner_id: str) -> list[SessionRecord]:
        """Owner's live sessions in creation order."""
        records = []
        for session_id in await self._repository.list_owner_session_ids(owner_id):
            record = await self._repository.get(session_id)
            if record is not None:
                records.append(record)
        return records

    async def delete_session(self, session_id: str) -> None:
        """
        Delete a session's history, vectors and record.

        Idempotent: deleting an unknown or already deleted session succeeds.
        Holds the session lock so an in-flight question finishes first.
        """
        async with self._locks.hold(session_lock_key(session_id)):
            record = await self._repository.get(session_id)
            history_removed = await self._history.delete(session_id)
            vectors_removed = await run_in_threadpool(self._vector_store.delete_by_session, session_id)
            if record is not None:
                async with self._locks.hold(owner_lock_key(record.owner_id)):
                    await self._repository.remove_from_owner(record.owner_id, session_id)
                await self._repository.delete(session_id)

        logger.info(
            "Session deleted",
            extra={
                "session_id": session_id,
                "record_found": record is not None,
                "history_removed": history_removed,
                "vectors_removed": vectors_removed,
            },
        )

    async def touch(self, session_id: str) -> SessionRecord:
        """
        Set last_activity to now. Caller holds the session lock.

        Raises:
            SessionNotFoundError: If session not found
        """
        record = await self.get_session(session_id)
        updated = record.model_copy(update={"last_activity": utc_now()})
        await self._repository.save(updated)
        return updated
