"""
Exception hierarchy for the AskPDF application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging, and
carry the HTTP status the API layer reports for them.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class AskPdfException(Exception):
    """Base exception for all AskPDF application errors."""

    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(AskPdfException):
    """Raised when input validation fails."""

    status_code = 400

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class SessionNotFoundError(AskPdfException):
    """Raised when a session cannot be found."""

    status_code = 404

    def __init__(self, session_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize session not found error.

        Args:
            session_id: ID of the missing session
            details: Additional context
        """
        details = details or {}
        details["session_id"] = session_id
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}", details)


class QuotaExceededError(AskPdfException):
    """Base exception for policy ceilings (chunk count, session count, upload size)."""

    status_code = 400


class DocumentTooLargeError(QuotaExceededError):
    """Raised when a document exceeds the byte or chunk ceiling."""

    def __init__(
        self,
        message: str,
        limit: int,
        actual: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details.update({"limit": limit, "actual": actual})
        self.limit = limit
        self.actual = actual
        super().__init__(message, details)


class SessionLimitExceededError(QuotaExceededError):
    """Raised when a caller already owns the maximum number of sessions."""

    status_code = 403

    def __init__(self, owner_id: str, limit: int) -> None:
        self.owner_id = owner_id
        self.limit = limit
        super().__init__(
            f"Session limit reached: at most {limit} sessions are allowed",
            {"owner_id": owner_id, "limit": limit},
        )


class DocumentProcessingError(AskPdfException):
    """Base exception for document processing errors."""

    def __init__(
        self,
        message: str,
        document_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document processing error.

        Args:
            message: Error message
            document_name: Name of the document that failed
            details: Additional context
        """
        details = details or {}
        if document_name:
            details["document_name"] = document_name
        super().__init__(message, details)


class ParsingError(DocumentProcessingError):
    """Raised when document parsing fails."""

    def __init__(
        self,
        message: str,
        document_name: str | None = None,
        file_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize parsing error.

        Args:
            message: Error message
            document_name: Name of the document
            file_type: Type of file that failed parsing
            details: Additional context
        """
        details = details or {}
        if file_type:
            details["file_type"] = file_type
        super().__init__(message, document_name, details)


class UpstreamError(AskPdfException):
    """Raised when an external provider (embedding, index, model, store) fails."""

    retryable: bool = False


class VectorStoreError(UpstreamError):
    """Raised when vector store operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (upsert, query, delete)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class RetrievalError(UpstreamError):
    """Raised when retrieval operations fail."""

    def __init__(
        self,
        message: str,
        session_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize retrieval error.

        Args:
            message: Error message
            session_id: Session ID for the failed retrieval
            details: Additional context
        """
        details = details or {}
        if session_id:
            details["session_id"] = session_id
        super().__init__(message, details)


class GenerationError(UpstreamError):
    """Raised when the text-generation provider rejects or fails a request."""


class GenerationTimeoutError(GenerationError):
    """Raised when a generation call exceeds its timeout."""

    retryable = True


class SessionStoreError(UpstreamError):
    """Raised when the key-value store is unreachable or fails."""


class StorageCorruptionError(AskPdfException):
    """Raised when persisted data cannot be interpreted."""


class UnknownRoleError(StorageCorruptionError):
    """Raised when a stored conversation turn has an unrecognized role."""

    def __init__(self, role: Any, session_id: str | None = None) -> None:
        details: dict[str, Any] = {"role": role}
        if session_id:
            details["session_id"] = session_id
        self.role = role
        super().__init__(f"Unknown message type: {role}", details)
