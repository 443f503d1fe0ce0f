"""
Key-value store interface.

Dependencies: abc
System role: Contract shared by all key-value backends
"""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Async string key-value store with optional key namespace."""

    def __init__(self, key_prefix: str = "") -> None:
        self._key_prefix = key_prefix

    def _full_key(self, key: str) -> str:
        return f"{self._key_prefix}{key}"

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Create or overwrite the value at key."""

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Remove key. Returns False when it was already absent."""

    async def initialize(self) -> None:
        """Prepare backend resources (tables, connections)."""

    async def close(self) -> None:
        """Release backend resources."""
