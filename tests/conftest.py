"""
Shared test fixtures and configuration for entire test suite.

Provides: deterministic fake embedding providers, gateways, builders,
sample profile documents, snapshot paths
Dependencies: pytest, langchain_core
System role: Test infrastructure and fixture management
"""

import asyncio
import json
from pathlib import Path

import pytest
from langchain_core.embeddings import Embeddings

from profile_rag.boundary.embeddings import EmbeddingGateway
from profile_rag.boundary.snapshot import SnapshotCache
from profile_rag.core.ingestion import CorpusBuilder
from profile_rag.core.retrieval import RetrievalOrchestrator

VOCABULARY = ["python", "alpha", "beta", "remote", "university", "engineer", "search", "data"]
DIMENSION = len(VOCABULARY) + 1


class KeywordEmbeddings(Embeddings):
    """
    Bag-of-keywords embeddings.

    One dimension per vocabulary word plus a constant bias dimension so that
    no vector is all zeros. Texts containing a word from ``fail_on`` raise.
    ``delays`` maps a word to the latency of texts containing it.
    """

    def __init__(
        self,
        fail_on: tuple[str, ...] = (),
        delay: float = 0.0,
        delays: dict[str, float] | None = None,
    ) -> None:
        self.fail_on = tuple(word.lower() for word in fail_on)
        self.delay = delay
        self.delays = {word.lower(): seconds for word, seconds in (delays or {}).items()}
        self.calls: list[str] = []
        self.completed: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    def _vector(self, text: str) -> list[float]:
        lowered = text.lower()
        if any(word in lowered for word in self.fail_on):
            raise RuntimeError(f"provider rejected: {text[:20]}")
        return [float(lowered.count(word)) for word in VOCABULARY] + [1.0]

    def _delay_for(self, text: str) -> float:
        lowered = text.lower()
        matches = [seconds for word, seconds in self.delays.items() if word in lowered]
        return max(matches) if matches else self.delay

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [self._vector(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        self.calls.append(text)
        return self._vector(text)

    async def aembed_query(self, text: str) -> list[float]:
        self.calls.append(text)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            delay = self._delay_for(text)
            if delay:
                await asyncio.sleep(delay)
            vector = self._vector(text)
            self.completed.append(text)
            return vector
        finally:
            self.in_flight -= 1


@pytest.fixture
def keyword_embeddings() -> KeywordEmbeddings:
    """Provide a fresh keyword embeddings provider."""
    return KeywordEmbeddings()


@pytest.fixture
def gateway(keyword_embeddings: KeywordEmbeddings) -> EmbeddingGateway:
    """Provide an embedding gateway over keyword embeddings."""
    return EmbeddingGateway(keyword_embeddings, dimension=DIMENSION, model_name="keyword-test")


@pytest.fixture
def make_gateway():
    """Factory for gateways over customised keyword embeddings."""
    def _make(**kwargs) -> EmbeddingGateway:
        return EmbeddingGateway(
            KeywordEmbeddings(**kwargs),
            dimension=DIMENSION,
            model_name="keyword-test",
        )
    return _make


@pytest.fixture
def builder(gateway: EmbeddingGateway) -> CorpusBuilder:
    """Provide a corpus builder with default window policy."""
    return CorpusBuilder(gateway=gateway)


@pytest.fixture
def snapshot_path(tmp_path: Path) -> Path:
    """Provide a snapshot location inside a temporary directory."""
    return tmp_path / "cache" / "store.cache.json"


@pytest.fixture
def snapshot_cache(snapshot_path: Path) -> SnapshotCache:
    """Provide a snapshot cache matching the test gateway."""
    return SnapshotCache(snapshot_path, dimension=DIMENSION, embedding_model="keyword-test")


@pytest.fixture
def sample_profile() -> dict:
    """Provide a profile document using several field-name variants."""
    return {
        "profile": {
            "full_name": "Rina Pratama",
            "headline": "Backend Engineer",
            "summary": "Python engineer focused on search and data.",
            "Achievement": "Hackathon finalist",
            "Hard_Skills": ["Python", "FastAPI"],
            "Soft_Skills:": "Mentoring",
            "Language": ["Indonesian", "English"],
        },
        "projects": [
            {"name": "Alpha", "description": "Alpha search service", "tech_stack": ["Python"]},
            {"name": "Beta", "description": "Beta data pipeline"},
        ],
        "experiences": [
            {"role": "Engineer", "organization": "Acme", "start_date": "2021", "highlights": ["Built search"]},
        ],
        "Education": [
            {"institution": "Example University", "degree": "B.Sc.", "start_date": "2017", "end_date": "2021"},
        ],
        "faqs": [{"q": "Open to remote work?", "a": "Yes, remote is fine."}],
    }


@pytest.fixture
def profile_file(tmp_path: Path, sample_profile: dict) -> Path:
    """Write the sample profile to disk."""
    path = tmp_path / "profile.json"
    path.write_text(json.dumps(sample_profile), encoding="utf-8")
    return path


@pytest.fixture
def make_orchestrator(builder: CorpusBuilder, snapshot_cache: SnapshotCache, gateway: EmbeddingGateway, sample_profile: dict):
    """Factory for orchestrators over the sample profile and test gateway."""
    def _make(document_loader=None, **kwargs) -> RetrievalOrchestrator:
        return RetrievalOrchestrator(
            builder=kwargs.pop("builder", builder),
            snapshot_cache=kwargs.pop("snapshot_cache", snapshot_cache),
            gateway=kwargs.pop("gateway", gateway),
            document_loader=document_loader or (lambda: sample_profile),
            **kwargs,
        )
    return _make
