"""Tests for the embedding gateway failure policy."""

import math

import pytest
from langchain_core.embeddings import Embeddings

from profile_rag.boundary.embeddings import EmbeddingGateway
from profile_rag.core.exceptions import EmbeddingFailure


class ConstantEmbeddings(Embeddings):
    """Provider that returns the same vector for every text."""

    def __init__(self, vector: list[float]) -> None:
        self.vector = vector

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [list(self.vector) for _ in texts]

    def embed_query(self, text: str) -> list[float]:
        return list(self.vector)


class TestEmbeddingGateway:
    """Provider adaptation."""

    @pytest.mark.asyncio
    async def test_returns_vector_of_configured_width(self, gateway: EmbeddingGateway) -> None:
        """Should pass through a vector of the expected dimension."""
        vector = await gateway.embed("hello world")

        assert len(vector) == gateway.dimension
        assert all(isinstance(value, float) for value in vector)

    @pytest.mark.asyncio
    async def test_wrong_width_is_a_failure(self, keyword_embeddings) -> None:
        """Should refuse vectors whose width differs from the configured dimension."""
        gateway = EmbeddingGateway(keyword_embeddings, dimension=4)

        with pytest.raises(EmbeddingFailure) as exc_info:
            await gateway.embed("hello", identifier="project:Alpha#0")

        assert exc_info.value.identifier == "project:Alpha#0"
        assert exc_info.value.details["actual"] == 9

    @pytest.mark.asyncio
    async def test_provider_error_becomes_failure(self, make_gateway) -> None:
        """Should wrap provider exceptions and keep the cause."""
        gateway = make_gateway(fail_on=("boom",))

        with pytest.raises(EmbeddingFailure) as exc_info:
            await gateway.embed("boom", identifier="query")

        assert exc_info.value.identifier == "query"
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "  \n "])
    async def test_empty_text_rejected(self, gateway: EmbeddingGateway, text: str) -> None:
        """Should reject empty input before calling the provider."""
        with pytest.raises(ValueError):
            await gateway.embed(text)
        assert gateway.embeddings.calls == []

    @pytest.mark.asyncio
    async def test_same_text_same_vector(self, gateway: EmbeddingGateway) -> None:
        """Should be deterministic for a deterministic provider."""
        assert await gateway.embed("python data") == await gateway.embed("python data")

    def test_non_positive_dimension_rejected(self, keyword_embeddings) -> None:
        """Should refuse a dimension below one."""
        with pytest.raises(ValueError):
            EmbeddingGateway(keyword_embeddings, dimension=0)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad_value", [math.nan, math.inf, -math.inf])
    async def test_non_finite_vector_is_a_failure(self, bad_value: float) -> None:
        """Should refuse vectors containing NaN or infinite values."""
        gateway = EmbeddingGateway(ConstantEmbeddings([0.5, bad_value, 1.0]), dimension=3)

        with pytest.raises(EmbeddingFailure) as exc_info:
            await gateway.embed("alpha", identifier="project:Alpha#0")

        assert exc_info.value.identifier == "project:Alpha#0"
