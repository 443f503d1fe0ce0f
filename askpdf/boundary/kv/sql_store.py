"""
SQL key-value store.

Stores each key as a row in the kv_entries table through SQLAlchemy async
sessions. Works with any async dialect (asyncpg in production, aiosqlite for
local runs and tests).

Dependencies: sqlalchemy, askpdf.boundary.db
System role: Relational session/history store
"""

import logging

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from askpdf.boundary.db import Base, KVEntryModel, create_session_factory
from askpdf.boundary.kv.base import KeyValueStore
from askpdf.core.exceptions import SessionStoreError

logger = logging.getLogger(__name__)


class SqlKeyValueStore(KeyValueStore):
    """Key-value store backed by a single SQL table."""

    def __init__(self, engine: AsyncEngine, key_prefix: str = "") -> None:
        super().__init__(key_prefix)
        self._engine = engine
        self._session_factory = create_session_factory(engine)

    async def initialize(self) -> None:
        """Create the kv_entries table when missing."""
        try:
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            raise SessionStoreError(f"Failed to initialize SQL store: {e}") from e
        logger.info("SQL key-value store initialized")

    async def get(self, key: str) -> str | None:
        try:
            async with self._session_factory() as session:
                entry = await session.get(KVEntryModel, self._full_key(key))
                return entry.value if entry else None
        except SQLAlchemyError as e:
            raise SessionStoreError(f"SQL get failed: {e}", {"key": key}) from e

    async def set(self, key: str, value: str) -> None:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    await session.merge(KVEntryModel(key=self._full_key(key), value=value))
        except SQLAlchemyError as e:
            raise SessionStoreError(f"SQL set failed: {e}", {"key": key}) from e

    async def delete(self, key: str) -> bool:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    result = await session.execute(
                        delete(KVEntryModel).where(KVEntryModel.key == self._full_key(key))
                    )
                return result.rowcount > 0
        except SQLAlchemyError as e:
            raise SessionStoreError(f"SQL delete failed: {e}", {"key": key}) from e

    async def close(self) -> None:
        await self._engine.dispose()
