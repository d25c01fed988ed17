"""
Embedding provider boundary.

Exports: EmbeddingGateway, get_embedding_gateway
"""

from profile_rag.boundary.embeddings.embedding_gateway import EmbeddingGateway
from profile_rag.boundary.embeddings.embeddings_factory import get_embedding_gateway

__all__ = ["EmbeddingGateway", "get_embedding_gateway"]
