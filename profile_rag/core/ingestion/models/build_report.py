"""
Corpus build report model.

Dependencies: pydantic
System role: Summary returned by CorpusBuilder and the rebuild endpoint
"""

from pydantic import BaseModel, Field


class BuildReport(BaseModel):
    """Outcome counters of one corpus build."""

    entry_count: int = Field(description="Entries derived from the profile")
    segment_count: int = Field(description="Segments submitted for embedding")
    chunk_count: int = Field(description="Chunks retained in the collection")
    failed_count: int = Field(default=0, description="Segments dropped after embedding failure")
    elapsed_ms: float = Field(description="Total build time in milliseconds")
