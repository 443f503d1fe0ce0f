"""
Vector database schemas.

Pydantic models for vector search results and chunk metadata.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from pydantic import BaseModel, Field


class VectorMetadata(BaseModel):
    """Metadata attached to each indexed chunk."""

    session_id: str = Field(description="Owning session ID (tenancy boundary)")
    chunk_id: str = Field(description="Deterministic chunk identifier")
    chunk_index: int | None = Field(default=None, description="Position of the chunk in the document")
    page: int | None = Field(default=None, description="Page number in source document")
    source: str = Field(default="", description="Source file path or name")


class VectorSearchResult(BaseModel):
    """Single result from vector search."""

    chunk_id: str = Field(description="Chunk identifier")
    content: str = Field(description="Chunk text content")
    metadata: VectorMetadata = Field(description="Chunk metadata")
    distance: float = Field(description="Index distance (lower is more similar)")
