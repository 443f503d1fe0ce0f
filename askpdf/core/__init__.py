"""
Core business logic module.

Contains domain business logic, exception hierarchy, and core components.
All business rules and domain-specific logic reside here.
"""

from askpdf.core.exceptions import (
    AskPdfException,
    DocumentProcessingError,
    DocumentTooLargeError,
    GenerationError,
    GenerationTimeoutError,
    ParsingError,
    QuotaExceededError,
    RetrievalError,
    SessionLimitExceededError,
    SessionNotFoundError,
    SessionStoreError,
    StorageCorruptionError,
    UnknownRoleError,
    UpstreamError,
    ValidationError,
    VectorStoreError,
)

__all__ = [
    "AskPdfException",
    "DocumentProcessingError",
    "DocumentTooLargeError",
    "GenerationError",
    "GenerationTimeoutError",
    "ParsingError",
    "QuotaExceededError",
    "RetrievalError",
    "SessionLimitExceededError",
    "SessionNotFoundError",
    "SessionStoreError",
    "StorageCorruptionError",
    "UnknownRoleError",
    "UpstreamError",
    "ValidationError",
    "VectorStoreError",
]
