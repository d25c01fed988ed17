"""
Ingestion pipeline: profile document to searchable collection.

Dependencies: pydantic, langchain_core
System role: Corpus building (normalize, derive entries, segment, embed)
"""

from .corpus_builder import CorpusBuilder
from .entry_builder import derive_entries
from .models import BuildReport, Chunk, Collection, Entry, Segment
from .profile_normalizer import ProfileDocument, normalize_document
from .segmenter import Segmenter, segment

__all__ = [
    "CorpusBuilder",
    "derive_entries",
    "normalize_document",
    "ProfileDocument",
    "Segmenter",
    "segment",
    "Entry",
    "Segment",
    "Chunk",
    "Collection",
    "BuildReport",
]
