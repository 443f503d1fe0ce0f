"""
Document ingestion settings.

Dependencies: pydantic, pydantic_settings
System role: Chunking and upload limits
"""

from pydantic import Field, model_validator
from pydantic_settings import SettingsConfigDict

from askpdf.configs.base import BaseSettings


class DocumentSettings(BaseSettings):
    """Chunking parameters and upload ceilings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DOCUMENT_",
        case_sensitive=False,
        extra="ignore",
    )

    chunk_size: int = Field(default=1000, gt=0, description="Maximum chunk size in characters")
    chunk_overlap: int = Field(default=200, ge=0, description="Overlap between consecutive chunks")
    max_chunks: int = Field(
        default=5000,
        gt=0,
        description="Hard ceiling on chunks per document, checked before indexing",
    )
    max_upload_bytes: int = Field(
        default=50 * 1024 * 1024,
        gt=0,
        description="Largest accepted upload in bytes",
    )
    temp_dir_prefix: str = Field(
        default="askpdf_",
        description="Prefix for per-upload temporary directories",
    )

    @model_validator(mode="after")
    def _check_overlap(self) -> "DocumentSettings":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError("chunk_overlap must be smaller than chunk_size")
        return self
