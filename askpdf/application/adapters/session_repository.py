"""
Session record repository.

Session metadata lives under `session:{id}`; each owner's session ids are
kept as a JSON array under `owner_sessions:{owner_id}` in creation order.

Dependencies: askpdf.boundary.kv, askpdf.models.session
System role: Session metadata persistence
"""

import json
import logging

from pydantic import ValidationError as PydanticValidationError

from askpdf.boundary.kv import KeyValueStore
from askpdf.core.exceptions import StorageCorruptionError
from askpdf.models.session import SessionRecord

logger = logging.getLogger(__name__)


def session_key(session_id: str) -> str:
    return f"session:{session_id}"


def owner_key(owner_id: str) -> str:
    return f"owner_sessions:{owner_id}"


class SessionRepository:
    """CRUD for session records and the per-owner session index."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    async def get(self, session_id: str) -> SessionRecord | None:
        raw = await self._store.get(session_key(session_id))
        if raw is None:
            return None
        try:
            return SessionRecord.model_validate_json(raw)
        except PydanticValidationError as e:
            raise StorageCorruptionError(
                "Stored session record is malformed",
                {"session_id": session_id},
            ) from e

    async def save(self, record: SessionRecord) -> None:
        await self._store.set(session_key(record.id), record.model_dump_json())

    async def delete(self, session_id: str) -> bool:
        return await self._store.delete(session_key(session_id))

    async def list_owner_session_ids(self, owner_id: str) -> list[str]:
        raw = await self._store.get(owner_key(owner_id))
        if raw is None:
            return []
        try:
            ids = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageCorruptionError("Owner session index is not valid JSON", {"owner_id": owner_id}) from e
        if not isinstance(ids, list) or not all(isinstance(i, str) for i in ids):
            raise StorageCorruptionError("Owner session index is not a list of ids", {"owner_id": owner_id})
        return ids

    async def add_to_owner(self, owner_id: str, session_id: str) -> None:
        ids = await self.list_owner_session_ids(owner_id)
        if session_id not in ids:
            ids.append(session_id)
            await self._store.set(owner_key(owner_id), json.dumps(ids))

    async def remove_from_owner(self, owner_id: str, session_id: str) -> None:
        ids = await self.list_owner_session_ids(owner_id)
        if session_id in ids:
            ids.remove(session_id)
            if ids:
                await self._store.set(owner_key(owner_id), json.dumps(ids))
            else:
                await self._store.delete(owner_key(owner_id))
