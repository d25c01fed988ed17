"""
Embedding gateway factory.

Dependencies: profile_rag.configs, langchain_google_genai
System role: Builds the configured embedding gateway
"""

from profile_rag.boundary.embeddings.embedding_gateway import EmbeddingGateway
from profile_rag.configs import EmbeddingSettings


def get_embedding_gateway(settings: EmbeddingSettings | None = None) -> EmbeddingGateway:
    """
    Create the embedding gateway backed by Gemini embeddings.

    Args:
        settings: Embedding settings (loaded from environment if None)

    Returns:
        EmbeddingGateway: Gateway with the configured model and dimension
    """
    from profile_rag.boundary.embeddings.fixed_dimension_embeddings import (
        FixedDimensionEmbeddings,
    )

    settings = settings or EmbeddingSettings()
    embeddings = FixedDimensionEmbeddings(
        model=settings.model,
        output_dimensionality=settings.dimension,
    )
    return EmbeddingGateway(
        embeddings=embeddings,
        dimension=settings.dimension,
        model_name=settings.model,
    )
