"""
Vector database boundary layer.

Session-scoped FAISS index: every write is tagged with a session id and
every read is filtered on it.

Dependencies: langchain_community, langchain_google_genai
System role: Vector store adapter for RAG retrieval
"""

from askpdf.boundary.vdb.vector_schemas import VectorMetadata, VectorSearchResult

__all__ = ["VectorMetadata", "VectorSearchResult"]
