"""
Health and debug API schemas.

Dependencies: pydantic
System role: Engine status contracts
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Engine health."""

    ok: bool
    state: str = Field(description="Engine lifecycle state")
    ready: bool
    chunks: int = Field(description="Chunks in the installed collection")
    rebuilding: bool = False


class StoreDebugResponse(BaseModel):
    """Per-source chunk listing of the installed collection."""

    chunks: int
    by_source: dict[str, int] = Field(default_factory=dict)


class RebuildResponse(BaseModel):
    """Result of a forced rebuild."""

    chunk_count: int
    failed_count: int
    entry_count: int
    elapsed_ms: float
