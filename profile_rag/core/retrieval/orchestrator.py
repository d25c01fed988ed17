"""
Retrieval orchestrator.

Owns the live Collection: loads it from the snapshot or builds it at startup,
rebuilds on demand, and serves query-time retrieval. The live index is
replaced by a single reference assignment, so a query sees either the old or
the new collection in full.

States: UNINITIALIZED -> LOADING -> READY, and READY -> LOADING -> READY for
forced rebuilds. Queries are answered whenever a collection is installed;
before the first one they raise EngineNotReady.

Dependencies: asyncio, profile_rag.core.ingestion, profile_rag.boundary
System role: Lifecycle and query coordination for the retrieval engine
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from profile_rag.boundary.embeddings import EmbeddingGateway
from profile_rag.boundary.snapshot import SnapshotCache
from profile_rag.core.exceptions import (
    EmbeddingFailure,
    EngineNotReady,
    QueryEmbeddingFailure,
    RebuildFailed,
    SnapshotWriteFailure,
    ValidationError,
)
from profile_rag.core.ingestion import BuildReport, Collection, CorpusBuilder
from profile_rag.observability.log_utils import log_exception_with_context

from .models import EngineState, EngineStatus, RetrievedPassage
from .similarity_index import SimilarityIndex

logger = logging.getLogger(__name__)


class RetrievalOrchestrator:
    """Coordinate load-or-build, forced rebuilds and retrieval."""

    def __init__(
        self,
        builder: CorpusBuilder,
        snapshot_cache: SnapshotCache,
        gateway: EmbeddingGateway,
        document_loader: Callable[[], Any],
        top_k: int = 6,
        force_rebuild: bool = False,
        build_timeout_seconds: float | None = None,
    ) -> None:
        """
        Initialize orchestrator with its collaborators.

        Args:
            builder: Corpus builder for fresh collections
            snapshot_cache: Snapshot storage for the collection
            gateway: Embedding gateway for questions
            document_loader: Callable returning the raw profile document
            top_k: Default number of passages per query
            force_rebuild: Skip the snapshot at startup
            build_timeout_seconds: Optional wall-clock limit for one build
        """
        self._builder = builder
        self._snapshot_cache = snapshot_cache
        self._gateway = gateway
        self._document_loader = document_loader
        self._top_k = top_k
        self._force_rebuild = force_rebuild
        self._build_timeout = build_timeout_seconds

        self._state = EngineState.UNINITIALIZED
        self._index: SimilarityIndex | None = None
        self._rebuild_lock = asyncio.Lock()
        self._rebuilding = False

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._index is not None

    @property
    def index(self) -> SimilarityIndex | None:
        """Currently installed index (None before the first load/build)."""
        return self._index

    def status(self) -> EngineStatus:
        index = self._index
        return EngineStatus(
            state=self._state,
            ready=index is not None,
            chunk_count=len(index) if index is not None else 0,
            rebuilding=self._rebuilding,
        )

    async def start(self) -> None:
        """
        Install the initial collection from the snapshot or a fresh build.

        Raises:
            SourceDocumentInvalid: When the profile cannot be read (fatal at startup)
            CorpusBuildError: When the build is aborted
        """
        if self._state is not EngineState.UNINITIALIZED:
            raise RuntimeError(f"Orchestrator already started (state={self._state.value})")

        self._state = EngineState.LOADING
        async with self._rebuild_lock:
            collection = None
            if self._force_rebuild:
                logger.info(f"{__name__}:start - Force rebuild requested, ignoring snapshot")
            else:
                collection = await asyncio.to_thread(self._snapshot_cache.load)

            if collection is None:
                logger.info(f"{__name__}:start - Building new collection from profile")
                try:
                    collection, _ = await self._build()
                except Exception:
                    self._state = EngineState.UNINITIALIZED
                    logger.exception(f"{__name__}:start - Initial build failed")
                    raise
                self._install(collection)
                await self._persist(collection)
            else:
                self._install(collection)

        logger.info(f"{__name__}:start - Ready with {len(collection)} chunks")

    async def force_rebuild(self) -> BuildReport:
        """
        Rebuild the collection from the profile and swap it in.

        The previous collection keeps serving queries until the swap. If the
        build fails the previous collection stays installed.

        Returns:
            BuildReport: Counters of the successful build

        Raises:
            RebuildFailed: When the build fails
        """
        async with self._rebuild_lock:
            previous_state = self._state
            self._state = EngineState.LOADING
            self._rebuilding = True
            try:
                collection, report = await self._build()
            except Exception as e:
                self._state = EngineState.READY if self._index is not None else previous_state
                log_exception_with_context(
                    logger,
                    f"{__name__}:force_rebuild - Rebuild failed, keeping previous collection",
                    e,
                    previous_state=previous_state.value,
                )
                raise RebuildFailed(
                    f"Rebuild failed: {e}",
                    details={"error_type": type(e).__name__},
                ) from e
            finally:
                self._rebuilding = False

            self._install(collection)
            await self._persist(collection)

        logger.info(f"{__name__}:force_rebuild - Installed {report.chunk_count} chunks")
        return report

    async def retrieve(self, question: str, k: int | None = None) -> list[RetrievedPassage]:
        """
        Retrieve the passages most relevant to a question.

        Args:
            question: Natural-language question
            k: Number of passages (defaults to configured top_k)

        Returns:
            list[RetrievedPassage]: Ranked passages, possibly low-scoring

        Raises:
            ValidationError: When question is empty or k < 1
            EngineNotReady: When no collection has been installed yet
            QueryEmbeddingFailure: When the question cannot be embedded
        """
        if not question or not question.strip():
            raise ValidationError("question required", field="question")
        k = self._top_k if k is None else k
        if k < 1:
            raise ValidationError("k must be positive", field="k")

        # Capture once so a concurrent swap cannot change the index mid-query
        index = self._index
        if index is None:
            raise EngineNotReady(self._state.value)
        if index.collection.is_empty:
            return []

        try:
            query_vector = await self._gateway.embed(question, identifier="query")
        except EmbeddingFailure as e:
            raise QueryEmbeddingFailure(
                "Failed to embed question",
                details={"error": e.message},
            ) from e

        hits = index.search(query_vector, k)
        return [
            RetrievedPassage(source_id=hit.chunk.source_id, text=hit.chunk.text, score=hit.score)
            for hit in hits
        ]

    async def _build(self) -> tuple[Collection, BuildReport]:
        document = await asyncio.to_thread(self._document_loader)
        build = self._builder.build_with_report(document)
        if self._build_timeout is not None:
            return await asyncio.wait_for(build, timeout=self._build_timeout)
        return await build

    def _install(self, collection: Collection) -> None:
        self._index = SimilarityIndex(collection)
        self._state = EngineState.READY

    async def _persist(self, collection: Collection) -> None:
        try:
            await asyncio.to_thread(self._snapshot_cache.save, collection)
        except SnapshotWriteFailure as e:
            logger.error(f"{__name__}:_persist - Snapshot not saved, serving in-memory collection: {e}")
