"""
In-memory similarity index.

Implements:
- Cosine similarity scoring with an epsilon guard for zero vectors
- Top-K retrieval by linear scan
- Deterministic ordering (ties keep collection order)

Linear scan is O(N·D) per query and targets collections of hundreds to low
thousands of chunks.

Dependencies: math
System role: Query-time ranking over one immutable Collection
"""

import logging
import math
from collections import Counter
from collections.abc import Sequence
from typing import NamedTuple

from profile_rag.core.ingestion.models import Chunk, Collection

logger = logging.getLogger(__name__)

EPSILON = 1e-8


def cosine_similarity(vec_a: Sequence[float], vec_b: Sequence[float]) -> float:
    """
    Compute cosine similarity between two vectors.

    Args:
        vec_a: First vector
        vec_b: Second vector

    Returns:
        float: dot(a, b) / (|a|·|b| + 1e-8); 0.0 for a zero vector

    Raises:
        ValueError: If vectors have different dimensions
    """
    if len(vec_a) != len(vec_b):
        raise ValueError(f"Vector dimensions must match: {len(vec_a)} != {len(vec_b)}")

    dot_product = sum(a * b for a, b in zip(vec_a, vec_b))
    magnitude_a = math.sqrt(sum(a * a for a in vec_a))
    magnitude_b = math.sqrt(sum(b * b for b in vec_b))

    return dot_product / (magnitude_a * magnitude_b + EPSILON)


class ScoredChunk(NamedTuple):
    """Search hit."""

    chunk: Chunk
    score: float


class SimilarityIndex:
    """Top-K cosine search over an immutable collection."""

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    @property
    def collection(self) -> Collection:
        return self._collection

    def __len__(self) -> int:
        return len(self._collection)

    def search(self, query_vector: Sequence[float], k: int) -> list[ScoredChunk]:
        """
        Return the k chunks most similar to the query vector.

        Args:
            query_vector: Query embedding (same dimension as the collection)
            k: Maximum number of results

        Returns:
            list[ScoredChunk]: min(k, N) hits by descending score

        Raises:
            ValueError: When k < 1 or the query dimension does not match
        """
        if k < 1:
            raise ValueError("k must be positive")
        if self._collection.is_empty:
            return []
        if len(query_vector) != self._collection.dimension:
            raise ValueError(
                f"Query dimension {len(query_vector)} does not match "
                f"collection dimension {self._collection.dimension}"
            )

        scored = [
            ScoredChunk(chunk, cosine_similarity(query_vector, chunk.embedding))
            for chunk in self._collection.chunks
        ]
        # sorted() is stable, so equal scores keep collection order
        ranked = sorted(scored, key=lambda hit: -hit.score)
        return ranked[:k]

    def source_counts(self) -> dict[str, int]:
        """Chunk counts per source_id, in first-seen order."""
        return dict(Counter(chunk.source_id for chunk in self._collection.chunks))
