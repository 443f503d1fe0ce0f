"""
Session store configuration settings.

Selects the key-value backend holding chat history and session records.

Dependencies: pydantic, pydantic_settings
System role: Key-value store configuration
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from askpdf.configs.base import BaseSettings


class SessionStoreSettings(BaseSettings):
    """Key-value store backend configuration (Redis or SQL)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SESSION_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    backend: Literal["redis", "sql"] = Field(
        default="redis",
        description="Key-value backend: 'redis' or 'sql'",
    )
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL",
    )
    database_url: str = Field(
        default="sqlite+aiosqlite:///./askpdf.db",
        description="SQLAlchemy async URL for the SQL backend",
    )
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")
    key_prefix: str = Field(
        default="",
        description="Optional namespace prepended to every key",
    )
