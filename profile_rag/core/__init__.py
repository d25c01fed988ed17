"""
Core business logic module.

Contains the ingestion pipeline, the retrieval engine and the exception
hierarchy shared across layers.
"""

from profile_rag.core.exceptions import (
    ProfileRagException,
    ValidationError,
    SourceDocumentInvalid,
    EmbeddingFailure,
    CorpusBuildError,
    EmbeddingFailureThresholdExceeded,
    SnapshotError,
    SnapshotCorrupt,
    SnapshotWriteFailure,
    RetrievalError,
    EngineNotReady,
    QueryEmbeddingFailure,
    RebuildFailed,
    AnswerGenerationError,
)

__all__ = [
    "ProfileRagException",
    "ValidationError",
    "SourceDocumentInvalid",
    "EmbeddingFailure",
    "CorpusBuildError",
    "EmbeddingFailureThresholdExceeded",
    "SnapshotError",
    "SnapshotCorrupt",
    "SnapshotWriteFailure",
    "RetrievalError",
    "EngineNotReady",
    "QueryEmbeddingFailure",
    "RebuildFailed",
    "AnswerGenerationError",
]
