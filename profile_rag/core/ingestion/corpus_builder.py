"""
Corpus builder.

Coordinates normalization, entry derivation, segmentation and concurrent
embedding, then assembles the searchable Collection. Segments whose embedding
fails are dropped; the build only aborts when the failure ratio exceeds the
configured threshold.

Dependencies: asyncio, profile_rag.boundary.embeddings
System role: Pipeline orchestration for ingestion (coordinates only)
"""

import asyncio
import logging
import time
from typing import Any

from profile_rag.boundary.embeddings import EmbeddingGateway
from profile_rag.core.exceptions import EmbeddingFailure, EmbeddingFailureThresholdExceeded
from profile_rag.observability.log_utils import log_with_context

from .entry_builder import derive_entries
from .models import BuildReport, Chunk, Collection, Segment
from .profile_normalizer import normalize_document
from .segmenter import Segmenter

logger = logging.getLogger(__name__)


class CorpusBuilder:
    """Build a Collection from a profile document: normalize -> entries -> segments -> embed."""

    def __init__(
        self,
        gateway: EmbeddingGateway,
        window_size: int = 800,
        overlap: int = 120,
        concurrency: int = 8,
        max_failure_ratio: float = 1.0,
        max_logged_failures: int = 5,
    ) -> None:
        """
        Initialize builder with its embedding gateway and policies.

        Args:
            gateway: Embedding gateway used for every segment
            window_size: Words per segment window
            overlap: Words shared by consecutive windows
            concurrency: Maximum in-flight embedding calls (0 = unbounded)
            max_failure_ratio: Abort when failed/total exceeds this ratio
            max_logged_failures: Individual failures logged before summarising

        Raises:
            ValueError: When the window policy or concurrency is invalid
        """
        if concurrency < 0:
            raise ValueError("concurrency must be non-negative")
        self._gateway = gateway
        self._segmenter = Segmenter(window_size=window_size, overlap=overlap)
        self._concurrency = concurrency
        self._max_failure_ratio = max_failure_ratio
        self._max_logged_failures = max_logged_failures

    async def build(self, document: Any) -> Collection:
        """
        Build a collection from a raw or normalized profile document.

        Raises:
            SourceDocumentInvalid: When the document is malformed
            EmbeddingFailureThresholdExceeded: When too many segments fail
        """
        collection, _ = await self.build_with_report(document)
        return collection

    async def build_with_report(self, document: Any) -> tuple[Collection, BuildReport]:
        """
        Build a collection and report its counters.

        Args:
            document: Parsed profile document (mapping) or ProfileDocument

        Returns:
            tuple[Collection, BuildReport]: Built collection and build summary
        """
        start_time = time.perf_counter()

        profile = normalize_document(document)
        entries = derive_entries(profile)
        segments = [
            segment
            for entry in entries
            for segment in self._segmenter.split(entry)
        ]

        logger.info(
            f"{__name__}:build - {len(entries)} entries split into {len(segments)} segments"
        )

        vectors = await self._embed_all(segments)

        chunks = []
        failures: list[EmbeddingFailure] = []
        for segment, vector in zip(segments, vectors):
            if isinstance(vector, EmbeddingFailure):
                failures.append(vector)
                continue
            chunks.append(
                Chunk(source_id=segment.source_id, text=segment.text, embedding=tuple(vector))
            )

        self._report_failures(failures, len(segments))

        collection = Collection(
            chunks=tuple(chunks),
            dimension=self._gateway.dimension,
            embedding_model=self._gateway.model_name,
        )
        report = BuildReport(
            entry_count=len(entries),
            segment_count=len(segments),
            chunk_count=len(chunks),
            failed_count=len(failures),
            elapsed_ms=(time.perf_counter() - start_time) * 1000,
        )
        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:build - Embedded {report.chunk_count}/{report.segment_count} segments "
            f"in {report.elapsed_ms:.0f}ms",
            entry_count=report.entry_count,
            failed_count=report.failed_count,
        )
        return collection, report

    async def _embed_all(self, segments: list[Segment]) -> list[list[float] | EmbeddingFailure]:
        """
        Embed every segment concurrently.

        Results are returned in segment order regardless of completion order;
        a failed segment yields its EmbeddingFailure in place of a vector.
        """
        semaphore = asyncio.Semaphore(self._concurrency) if self._concurrency else None

        async def embed_one(index: int, segment: Segment) -> list[float] | EmbeddingFailure:
            identifier = f"{segment.source_id}#{index}"
            try:
                if semaphore is None:
                    return await self._gateway.embed(segment.text, identifier=identifier)
                async with semaphore:
                    return await self._gateway.embed(segment.text, identifier=identifier)
            except EmbeddingFailure as e:
                return e

        return await asyncio.gather(
            *(embed_one(index, segment) for index, segment in enumerate(segments))
        )

    def _report_failures(self, failures: list[EmbeddingFailure], total: int) -> None:
        if not failures:
            return

        for failure in failures[:self._max_logged_failures]:
            logger.warning(f"{__name__}:build - Dropped segment: {failure}")
        if len(failures) > self._max_logged_failures:
            logger.warning(
                f"{__name__}:build - {len(failures) - self._max_logged_failures} "
                f"further embedding failures not logged individually"
            )
        logger.warning(
            f"{__name__}:build - Embedding failed for {len(failures)} of {total} segments"
        )

        if total and len(failures) / total > self._max_failure_ratio:
            raise EmbeddingFailureThresholdExceeded(
                failed=len(failures),
                total=total,
                max_ratio=self._max_failure_ratio,
            )
