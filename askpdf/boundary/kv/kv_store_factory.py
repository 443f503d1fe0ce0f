"""
Key-value store factory.

Selects the Redis or SQL backend from SessionStoreSettings.backend.

Dependencies: askpdf.boundary.kv, askpdf.configs
System role: Key-value store instantiation and selection
"""

import logging

from askpdf.boundary.kv.base import KeyValueStore
from askpdf.configs.session_store import SessionStoreSettings

logger = logging.getLogger(__name__)


def create_kv_store(settings: SessionStoreSettings) -> KeyValueStore:
    """
    Build the configured key-value store.

    Args:
        settings: Session store settings

    Returns:
        KeyValueStore: Redis or SQL backed store (not yet initialized)

    Raises:
        ValueError: If the backend name is invalid
    """
    backend = settings.backend.lower()

    if backend == "redis":
        from askpdf.boundary.kv.redis_store import RedisKeyValueStore

        logger.info(f"{__name__}:create_kv_store - Creating Redis key-value store")
        return RedisKeyValueStore(redis_url=settings.redis_url, key_prefix=settings.key_prefix)

    if backend == "sql":
        from askpdf.boundary.db import create_engine
        from askpdf.boundary.kv.sql_store import SqlKeyValueStore

        logger.info(f"{__name__}:create_kv_store - Creating SQL key-value store")
        engine = create_engine(settings.database_url, echo=settings.echo_sql)
        return SqlKeyValueStore(engine, key_prefix=settings.key_prefix)

    raise ValueError(
        f"Invalid SESSION_STORE_BACKEND: {backend}. Must be 'redis' or 'sql'."
    )
