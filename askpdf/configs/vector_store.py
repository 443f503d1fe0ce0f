"""
Vector store configuration settings.

Manages the FAISS index location, embedding model and retrieval depth.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG retrieval
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from askpdf.configs.base import BaseSettings


class VectorStoreSettings(BaseSettings):
    """FAISS vector index configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VECTOR_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    persist_directory: str | None = Field(
        default=".faiss_index",
        description="Directory for FAISS index persistence (None keeps the index in memory)",
    )
    embedding_model: str = Field(
        default="models/text-embedding-004",
        description="Google Generative AI embedding model ID",
    )
    retrieval_k: int = Field(
        default=5,
        ge=1,
        le=100,
        description="Number of passages retrieved per question",
    )
