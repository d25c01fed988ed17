"""
Chunk and Collection domain models.

A Chunk is a persisted, embedded unit of retrievable text. A Collection is the
immutable set of Chunks served by the similarity index.

Dependencies: pydantic
System role: Data structures shared by builder, snapshot cache and index
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, model_validator


class Chunk(BaseModel):
    """Embedded segment tied to its source label."""

    model_config = ConfigDict(frozen=True)

    source_id: str = Field(min_length=1, description="Source label of the originating entry")
    text: str = Field(min_length=1, description="Chunk text content")
    embedding: tuple[FiniteFloat, ...] = Field(min_length=1, description="Embedding vector (finite values only)")


class Collection(BaseModel):
    """Immutable, ordered set of chunks with a uniform embedding dimension."""

    model_config = ConfigDict(frozen=True)

    chunks: tuple[Chunk, ...] = Field(default=(), description="Chunks in build order")
    dimension: int = Field(ge=1, description="Embedding dimension shared by every chunk")
    embedding_model: str = Field(default="", description="Embedding model that produced the vectors")
    built_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the collection was built",
    )

    @model_validator(mode="after")
    def _check_dimensions(self) -> "Collection":
        for index, chunk in enumerate(self.chunks):
            if len(chunk.embedding) != self.dimension:
                raise ValueError(
                    f"chunk {index} ({chunk.source_id}) has dimension "
                    f"{len(chunk.embedding)}, expected {self.dimension}"
                )
        return self

    def __len__(self) -> int:
        return len(self.chunks)

    @property
    def is_empty(self) -> bool:
        return not self.chunks
