"""
Local JSON snapshot cache for built collections.

Persists a whole Collection to one JSON file so restarts skip re-embedding.
Writes go to a temp file in the same directory followed by os.replace, so a
reader never observes a half-written snapshot. Loads validate structure and
treat any corruption as a cache miss.

Dependencies: json, pathlib, pydantic
System role: Durable storage of the searchable collection
"""

import json
import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from profile_rag.core.exceptions import SnapshotCorrupt, SnapshotWriteFailure
from profile_rag.core.ingestion.models import Chunk, Collection

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1


class SnapshotCache:
    """Load and save collections at a fixed path."""

    def __init__(self, path: str | Path, dimension: int, embedding_model: str = "") -> None:
        """
        Initialize snapshot cache.

        Args:
            path: Snapshot file location
            dimension: Embedding dimension every stored chunk must have
            embedding_model: Model name; snapshots built by another model are stale
        """
        self._path = Path(path)
        self.dimension = dimension
        self.embedding_model = embedding_model

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def load(self) -> Collection | None:
        """
        Load the persisted collection.

        Returns:
            Collection | None: The collection, or None when the snapshot is
            missing or fails validation
        """
        if not self.exists():
            logger.info(f"{__name__}:load - No snapshot at {self._path}")
            return None

        try:
            collection = self.read()
        except SnapshotCorrupt as e:
            logger.warning(f"{__name__}:load - Ignoring corrupt snapshot: {e}")
            return None

        logger.info(
            f"{__name__}:load - Loaded {len(collection)} chunks from {self._path}"
        )
        return collection

    def read(self) -> Collection:
        """
        Read and validate the snapshot file.

        Raises:
            SnapshotCorrupt: When the file is unreadable or structurally invalid
        """
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise SnapshotCorrupt(f"Unreadable snapshot: {e}", path=str(self._path)) from e

        return self._deserialize(payload)

    def save(self, collection: Collection) -> str:
        """
        Write the full collection atomically.

        Args:
            collection: Collection to persist

        Returns:
            str: Path of the written snapshot

        Raises:
            SnapshotWriteFailure: When the snapshot cannot be written
        """
        payload = self._serialize(collection)

        tmp_path = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self._path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise SnapshotWriteFailure(
                f"Failed to write snapshot: {e}", path=str(self._path)
            ) from e

        logger.info(f"{__name__}:save - Saved {len(collection)} chunks to {self._path}")
        return str(self._path)

    def clear(self) -> None:
        """Delete the snapshot file if present."""
        if self.exists():
            self._path.unlink()

    def _serialize(self, collection: Collection) -> dict[str, Any]:
        return {
            "version": SNAPSHOT_VERSION,
            "embedding_model": collection.embedding_model or self.embedding_model,
            "dimension": collection.dimension,
            "created_at": datetime.now(timezone.utc).isoformat(),
            "chunk_count": len(collection),
            "chunks": [
                {
                    "source_id": chunk.source_id,
                    "text": chunk.text,
                    "embedding": list(chunk.embedding),
                }
                for chunk in collection.chunks
            ],
        }

    def _deserialize(self, payload: Any) -> Collection:
        path = str(self._path)
        if not isinstance(payload, dict):
            raise SnapshotCorrupt("Snapshot root must be an object", path=path)
        if payload.get("version") != SNAPSHOT_VERSION:
            raise SnapshotCorrupt(
                "Unsupported snapshot version",
                path=path,
                details={"version": payload.get("version")},
            )
        if payload.get("dimension") != self.dimension:
            raise SnapshotCorrupt(
                "Snapshot dimension does not match configured dimension",
                path=path,
                details={"expected": self.dimension, "actual": payload.get("dimension")},
            )
        stored_model = payload.get("embedding_model", "")
        if self.embedding_model and stored_model != self.embedding_model:
            raise SnapshotCorrupt(
                "Snapshot was built with a different embedding model",
                path=path,
                details={"expected": self.embedding_model, "actual": stored_model},
            )

        raw_chunks = payload.get("chunks")
        if not isinstance(raw_chunks, list):
            raise SnapshotCorrupt("Snapshot 'chunks' must be a list", path=path)
        if payload.get("chunk_count", len(raw_chunks)) != len(raw_chunks):
            raise SnapshotCorrupt("Snapshot chunk_count does not match chunks", path=path)

        chunks = []
        for index, raw in enumerate(raw_chunks):
            if not isinstance(raw, dict):
                raise SnapshotCorrupt(f"Chunk {index} must be an object", path=path)
            if not str(raw.get("source_id") or "").strip() or not str(raw.get("text") or "").strip():
                raise SnapshotCorrupt(f"Chunk {index} has empty source_id or text", path=path)
            try:
                chunks.append(Chunk.model_validate(raw))
            except PydanticValidationError as e:
                raise SnapshotCorrupt(
                    f"Chunk {index} failed validation",
                    path=path,
                    details={"errors": e.error_count()},
                ) from e

        try:
            return Collection(
                chunks=tuple(chunks),
                dimension=self.dimension,
                embedding_model=stored_model,
            )
        except PydanticValidationError as e:
            raise SnapshotCorrupt(
                "Snapshot chunks have inconsistent dimensions",
                path=path,
                details={"errors": e.error_count()},
            ) from e
