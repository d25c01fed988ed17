"""
Exception hierarchy for the profile RAG service.

Provides layered exception structure for ingestion, snapshot and retrieval errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class ProfileRagException(Exception):
    """Base exception for all profile RAG errors."""

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


class ValidationError(ProfileRagException):
    """Raised when input validation fails."""

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


class SourceDocumentInvalid(ProfileRagException):
    """Raised when the profile document is unreadable or malformed."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize source document error.

        Args:
            message: Error message
            path: Location of the offending document, when known
            details: Additional context
        """
        details = details or {}
        if path:
            details["path"] = path
        super().__init__(message, details)


class EmbeddingFailure(ProfileRagException):
    """Raised when the embedding provider cannot embed one input."""

    def __init__(
        self,
        message: str,
        identifier: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize embedding failure.

        Args:
            message: Error message
            identifier: Identifier of the input that failed (segment label, "query")
            details: Additional context
        """
        details = details or {}
        if identifier:
            details["identifier"] = identifier
        self.identifier = identifier
        super().__init__(message, details)


class CorpusBuildError(ProfileRagException):
    """Base exception for corpus build errors."""

    pass


class EmbeddingFailureThresholdExceeded(CorpusBuildError):
    """Raised when too many segments failed to embed during one build."""

    def __init__(self, failed: int, total: int, max_ratio: float) -> None:
        """
        Initialize threshold error.

        Args:
            failed: Number of segments whose embedding failed
            total: Number of segments submitted
            max_ratio: Configured maximum failure ratio
        """
        super().__init__(
            f"Embedding failed for {failed} of {total} segments",
            {"failed": failed, "total": total, "max_failure_ratio": max_ratio},
        )


class SnapshotError(ProfileRagException):
    """Base exception for snapshot cache errors."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if path:
            details["path"] = path
        super().__init__(message, details)


class SnapshotCorrupt(SnapshotError):
    """Raised when a persisted snapshot fails structural validation."""

    pass


class SnapshotWriteFailure(SnapshotError):
    """Raised when a snapshot cannot be written."""

    pass


class RetrievalError(ProfileRagException):
    """Base exception for query-time retrieval errors."""

    pass


class EngineNotReady(RetrievalError):
    """Raised when a query arrives before the first collection is installed."""

    def __init__(self, state: str) -> None:
        super().__init__("Vector store not initialized yet", {"state": state})


class QueryEmbeddingFailure(RetrievalError):
    """Raised when the question itself cannot be embedded."""

    pass


class RebuildFailed(ProfileRagException):
    """Raised when a forced rebuild fails; the previous collection stays live."""

    pass


class AnswerGenerationError(ProfileRagException):
    """Raised when the chat model fails to produce an answer."""

    pass
