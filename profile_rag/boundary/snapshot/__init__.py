"""Collection snapshot persistence."""

from profile_rag.boundary.snapshot.snapshot_cache import SnapshotCache

__all__ = ["SnapshotCache"]
