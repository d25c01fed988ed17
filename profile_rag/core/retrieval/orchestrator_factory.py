"""
Retrieval orchestrator factory.

Wires the corpus builder, snapshot cache and embedding gateway from settings.

Dependencies: profile_rag.configs, profile_rag.boundary, profile_rag.core.ingestion
System role: Retrieval engine instantiation
"""

import functools
import logging

from profile_rag.boundary.embeddings import EmbeddingGateway, get_embedding_gateway
from profile_rag.boundary.snapshot import SnapshotCache
from profile_rag.boundary.source import read_profile_document
from profile_rag.configs import Settings, get_settings
from profile_rag.core.ingestion import CorpusBuilder

from .orchestrator import RetrievalOrchestrator

logger = logging.getLogger(__name__)


def create_orchestrator(
    settings: Settings | None = None,
    gateway: EmbeddingGateway | None = None,
) -> RetrievalOrchestrator:
    """
    Create a retrieval orchestrator from configuration.

    Args:
        settings: Application settings (loaded from environment if None)
        gateway: Embedding gateway override (Gemini gateway if None)

    Returns:
        RetrievalOrchestrator: Unstarted orchestrator
    """
    settings = settings or get_settings()
    retrieval = settings.retrieval
    gateway = gateway or get_embedding_gateway(settings.embedding)

    builder = CorpusBuilder(
        gateway=gateway,
        window_size=retrieval.window_size,
        overlap=retrieval.overlap,
        concurrency=retrieval.embedding_concurrency,
        max_failure_ratio=retrieval.max_failure_ratio,
        max_logged_failures=retrieval.max_logged_failures,
    )
    snapshot_cache = SnapshotCache(
        path=retrieval.snapshot_path,
        dimension=gateway.dimension,
        embedding_model=gateway.model_name,
    )

    logger.info(
        f"{__name__}:create_orchestrator - profile={retrieval.profile_path}, "
        f"snapshot={retrieval.snapshot_path}, force_rebuild={retrieval.force_rebuild}"
    )
    return RetrievalOrchestrator(
        builder=builder,
        snapshot_cache=snapshot_cache,
        gateway=gateway,
        document_loader=functools.partial(read_profile_document, retrieval.profile_path),
        top_k=retrieval.top_k,
        force_rebuild=retrieval.force_rebuild,
        build_timeout_seconds=retrieval.build_timeout_seconds,
    )
