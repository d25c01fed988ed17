"""
Embedding gateway.

Adapts arbitrary text to a fixed-dimension vector through a LangChain
Embeddings provider and owns the failure policy for that call: provider
errors, wrong-width vectors and NaN or infinite values become
EmbeddingFailure, never a zero vector.

Dependencies: langchain_core
System role: Single entry point to the embedding provider
"""

import logging
import math

from langchain_core.embeddings import Embeddings

from profile_rag.core.exceptions import EmbeddingFailure

logger = logging.getLogger(__name__)


class EmbeddingGateway:
    """Embed text with a fixed output dimension."""

    def __init__(self, embeddings: Embeddings, dimension: int, model_name: str = "") -> None:
        """
        Initialize gateway with a provider.

        Args:
            embeddings: LangChain embeddings provider
            dimension: Expected vector width D
            model_name: Provider model identifier, recorded in snapshots

        Raises:
            ValueError: When dimension is not positive
        """
        if dimension < 1:
            raise ValueError("dimension must be positive")
        self._embeddings = embeddings
        self.dimension = dimension
        self.model_name = model_name

    @property
    def embeddings(self) -> Embeddings:
        return self._embeddings

    async def embed(self, text: str, identifier: str | None = None) -> list[float]:
        """
        Embed one text.

        Args:
            text: Non-empty text to embed
            identifier: Label of the input, carried by EmbeddingFailure

        Returns:
            list[float]: Vector of length ``dimension``

        Raises:
            ValueError: When text is empty or whitespace
            EmbeddingFailure: When the provider fails or returns a wrong-width or
                non-finite vector
        """
        if not text or not text.strip():
            raise ValueError("Cannot embed empty text")

        try:
            vector = await self._embeddings.aembed_query(text)
        except Exception as e:
            raise EmbeddingFailure(
                f"Embedding provider failed: {e}",
                identifier=identifier,
                details={"error_type": type(e).__name__},
            ) from e

        if vector is None or len(vector) != self.dimension:
            raise EmbeddingFailure(
                "Embedding provider returned a vector of unexpected width",
                identifier=identifier,
                details={
                    "expected": self.dimension,
                    "actual": None if vector is None else len(vector),
                },
            )

        values = [float(value) for value in vector]
        if not all(math.isfinite(value) for value in values):
            raise EmbeddingFailure(
                "Embedding provider returned non-finite values",
                identifier=identifier,
            )
        return values
