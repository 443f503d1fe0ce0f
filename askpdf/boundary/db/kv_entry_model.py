"""
Key-value entry ORM model.

One row per key; values are opaque strings (JSON documents in practice).

Dependencies: sqlalchemy, askpdf.boundary.db.base
System role: Storage table for the SQL key-value backend
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from askpdf.boundary.db.base import Base, TimestampMixin


class KVEntryModel(Base, TimestampMixin):
    """Key-value row."""

    __tablename__ = "kv_entries"

    key: Mapped[str] = mapped_column(String(512), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<KVEntryModel(key={self.key!r}, size={len(self.value or '')})>"
