"""
Redis key-value store.

Wraps redis.asyncio with retry on connection-level failures.

Dependencies: redis, tenacity
System role: Production session/history store
"""

import logging

from redis import asyncio as aioredis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from askpdf.boundary.kv.base import KeyValueStore
from askpdf.core.exceptions import SessionStoreError

logger = logging.getLogger(__name__)

_transient_retry = retry(
    retry=retry_if_exception_type((RedisConnectionError, RedisTimeoutError)),
    stop=stop_after_attempt(3),
    wait=wait_exponential_jitter(initial=0.2, max=2, jitter=0.2),
    before_sleep=lambda retry_state: logger.warning(
        f"{__name__} - Retry {retry_state.attempt_number}/3 after Redis connection failure"
    ),
    reraise=True,
)


class RedisKeyValueStore(KeyValueStore):
    """Key-value store backed by a Redis server."""

    def __init__(
        self,
        client: aioredis.Redis | None = None,
        redis_url: str = "redis://localhost:6379/0",
        key_prefix: str = "",
    ) -> None:
        """
        Initialize Redis store.

        Args:
            client: Existing client (mainly for tests); created from redis_url if None
            redis_url: Redis connection URL
            key_prefix: Namespace prepended to every key
        """
        super().__init__(key_prefix)
        self._client = client or aioredis.Redis.from_url(redis_url, decode_responses=True)

    @_transient_retry
    async def _get(self, key: str):
        return await self._client.get(key)

    @_transient_retry
    async def _set(self, key: str, value: str) -> None:
        await self._client.set(key, value)

    @_transient_retry
    async def _delete(self, key: str) -> int:
        return await self._client.delete(key)

    async def get(self, key: str) -> str | None:
        try:
            value = await self._get(self._full_key(key))
        except RedisError as e:
            raise SessionStoreError(f"Redis get failed: {e}", {"key": key}) from e
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set(self, key: str, value: str) -> None:
        try:
            await self._set(self._full_key(key), value)
        except RedisError as e:
            raise SessionStoreError(f"Redis set failed: {e}", {"key": key}) from e

    async def delete(self, key: str) -> bool:
        try:
            removed = await self._delete(self._full_key(key))
        except RedisError as e:
            raise SessionStoreError(f"Redis delete failed: {e}", {"key": key}) from e
        return bool(removed)

    async def initialize(self) -> None:
        try:
            await self._client.ping()
            logger.info("Redis connection verified")
        except RedisError as e:
            raise SessionStoreError(f"Redis is unreachable: {e}") from e

    async def close(self) -> None:
        await self._client.aclose()
