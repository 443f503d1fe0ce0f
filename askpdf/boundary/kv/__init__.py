"""
Key-value store boundary.

String keys to string values, with Redis and SQL backends selected by
SessionStoreSettings.backend.
"""

from askpdf.boundary.kv.base import KeyValueStore
from askpdf.boundary.kv.kv_store_factory import create_kv_store

__all__ = ["KeyValueStore", "create_kv_store"]
