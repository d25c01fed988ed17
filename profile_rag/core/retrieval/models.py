"""
Retrieval result and engine status models.

Dependencies: pydantic
System role: Query-time contracts returned by the orchestrator
"""

from enum import Enum

from pydantic import BaseModel, Field


class EngineState(str, Enum):
    """Lifecycle of the retrieval engine."""

    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"


class RetrievedPassage(BaseModel):
    """Ranked passage returned for a question."""

    source_id: str = Field(description="Source label of the chunk")
    text: str = Field(description="Chunk text")
    score: float = Field(description="Cosine similarity to the question")


class EngineStatus(BaseModel):
    """Snapshot of the engine lifecycle for health reporting."""

    state: EngineState
    ready: bool = Field(description="A collection is installed and queries are served")
    chunk_count: int = Field(default=0, description="Chunks in the installed collection")
    rebuilding: bool = Field(default=False, description="A forced rebuild is in progress")
