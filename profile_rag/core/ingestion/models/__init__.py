"""
Models for the ingestion pipeline.

Exports: Entry, Segment, Chunk, Collection, BuildReport
"""

from .build_report import BuildReport
from .chunk import Chunk, Collection
from .entry import Entry, Segment

__all__ = [
    "Entry",
    "Segment",
    "Chunk",
    "Collection",
    "BuildReport",
]
