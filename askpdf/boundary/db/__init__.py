"""
SQL persistence boundary.

Declarative base, async engine factory and the key-value entry table used by
the SQL session store backend.
"""

from askpdf.boundary.db.base import Base, TimestampMixin
from askpdf.boundary.db.connection import create_engine, create_session_factory
from askpdf.boundary.db.kv_entry_model import KVEntryModel

__all__ = [
    "Base",
    "KVEntryModel",
    "TimestampMixin",
    "create_engine",
    "create_session_factory",
]
