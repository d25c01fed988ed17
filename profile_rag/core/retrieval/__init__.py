"""
Retrieval engine: similarity index and its lifecycle owner.

Exports: RetrievalOrchestrator, SimilarityIndex, cosine_similarity
"""

from .models import EngineState, EngineStatus, RetrievedPassage
from .orchestrator import RetrievalOrchestrator
from .orchestrator_factory import create_orchestrator
from .similarity_index import ScoredChunk, SimilarityIndex, cosine_similarity

__all__ = [
    "RetrievalOrchestrator",
    "create_orchestrator",
    "SimilarityIndex",
    "ScoredChunk",
    "cosine_similarity",
    "EngineState",
    "EngineStatus",
    "RetrievedPassage",
]
