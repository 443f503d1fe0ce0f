"""
Chat history adapter.

Stores each session's conversation as one JSON array under
`chat_history:{session_id}`.

Dependencies: askpdf.boundary.kv, askpdf.core.session
System role: Chat history persistence adapter
"""

from collections.abc import Sequence

from askpdf.boundary.kv import KeyValueStore
from askpdf.core.session import decode_history, encode_history
from askpdf.models.chat import ChatTurn

HISTORY_KEY_PREFIX = "chat_history:"


def history_key(session_id: str) -> str:
    return f"{HISTORY_KEY_PREFIX}{session_id}"


class ChatHistoryAdapter:
    """
    History persistence for all sessions.

    A missing key reads as an empty history; writers are expected to hold the
    session lock around read-modify-write sequences.
    """

    def __init__(self, store: KeyValueStore) -> None:
        """
        Initialize chat history adapter.

        Args:
            store: Key-value store holding history values
        """
        self._store = store

    async def get_turns(self, session_id: str) -> list[ChatTurn]:
        """
        Get the full stored history.

        Raises:
            UnknownRoleError: When a stored turn has an unrecognized role
            StorageCorruptionError: When the stored value is malformed
        """
        raw = await self._store.get(history_key(session_id))
        return decode_history(raw, session_id)

    async def save_turns(self, session_id: str, turns: Sequence[ChatTurn]) -> None:
        """Replace the stored history."""
        await self._store.set(history_key(session_id), encode_history(turns))

    async def initialize(self, session_id: str) -> None:
        """Write an empty history for a new session."""
        await self.save_turns(session_id, [])

    async def clear(self, session_id: str) -> None:
        """Reset history to an empty sequence."""
        await self.save_turns(session_id, [])

    async def delete(self, session_id: str) -> bool:
        """Remove the history key. Returns False when it was already absent."""
        return await self._store.delete(history_key(session_id))
