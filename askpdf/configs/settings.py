"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from askpdf.configs.base import BaseSettings
from askpdf.configs.conversation import ConversationSettings
from askpdf.configs.documents import DocumentSettings
from askpdf.configs.llm import LLMSettings
from askpdf.configs.session_store import SessionStoreSettings
from askpdf.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    llm: LLMSettings = Field(default_factory=LLMSettings)
    session_store: SessionStoreSettings = Field(default_factory=SessionStoreSettings)
    conversation: ConversationSettings = Field(default_factory=ConversationSettings)
    documents: DocumentSettings = Field(default_factory=DocumentSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from askpdf.configs import get_settings
        settings = get_settings()
    """
    return Settings()
