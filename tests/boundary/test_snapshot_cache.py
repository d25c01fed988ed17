"""Tests for the JSON snapshot cache.

Covers the round trip, validation of damaged snapshots, and atomic writes.
"""

import json
from pathlib import Path

import pytest

from profile_rag.boundary.snapshot import SnapshotCache
from profile_rag.boundary.snapshot.snapshot_cache import SNAPSHOT_VERSION
from profile_rag.core.exceptions import SnapshotCorrupt, SnapshotWriteFailure
from profile_rag.core.ingestion.models import Chunk, Collection


@pytest.fixture
def collection(snapshot_cache: SnapshotCache) -> Collection:
    """Provide a small collection matching the cache dimension."""
    dimension = snapshot_cache.dimension
    return Collection(
        chunks=(
            Chunk(source_id="project:Alpha", text="Alpha\nAlpha desc", embedding=(1.0,) * dimension),
            Chunk(source_id="faq:Remote?", text="Remote?\nYes.", embedding=(0.5,) * dimension),
        ),
        dimension=dimension,
        embedding_model="keyword-test",
    )


def _write(path: Path, payload) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), encoding="utf-8")


class TestSaveAndLoad:
    """Persistence round trip."""

    def test_load_returns_saved_chunks(self, snapshot_cache: SnapshotCache, collection: Collection) -> None:
        """Should restore the same chunks in the same order."""
        snapshot_cache.save(collection)

        loaded = snapshot_cache.load()

        assert loaded.chunks == collection.chunks
        assert loaded.dimension == collection.dimension
        assert loaded.embedding_model == "keyword-test"

    def test_envelope_fields(self, snapshot_cache: SnapshotCache, collection: Collection) -> None:
        """Should write version, model, dimension and chunk count."""
        snapshot_cache.save(collection)

        payload = json.loads(snapshot_cache.path.read_text(encoding="utf-8"))

        assert payload["version"] == SNAPSHOT_VERSION
        assert payload["embedding_model"] == "keyword-test"
        assert payload["dimension"] == snapshot_cache.dimension
        assert payload["chunk_count"] == 2
        assert payload["created_at"]
        assert payload["chunks"][0]["source_id"] == "project:Alpha"

    def test_missing_snapshot_is_a_miss(self, snapshot_cache: SnapshotCache) -> None:
        """Should return None when nothing was saved."""
        assert snapshot_cache.load() is None

    def test_empty_collection_round_trips(self, snapshot_cache: SnapshotCache) -> None:
        """Should persist and restore an empty collection."""
        snapshot_cache.save(Collection(dimension=snapshot_cache.dimension))

        loaded = snapshot_cache.load()

        assert loaded is not None
        assert loaded.is_empty

    def test_save_replaces_previous_snapshot(self, snapshot_cache: SnapshotCache, collection: Collection) -> None:
        """Should overwrite the whole snapshot on every save."""
        snapshot_cache.save(collection)
        snapshot_cache.save(Collection(chunks=collection.chunks[:1], dimension=collection.dimension))

        assert len(snapshot_cache.load()) == 1

    def test_no_temp_files_left_behind(self, snapshot_cache: SnapshotCache, collection: Collection) -> None:
        """Should leave only the snapshot file in its directory."""
        snapshot_cache.save(collection)

        assert [p.name for p in snapshot_cache.path.parent.iterdir()] == [snapshot_cache.path.name]

    def test_clear_removes_snapshot(self, snapshot_cache: SnapshotCache, collection: Collection) -> None:
        """Should delete the snapshot file."""
        snapshot_cache.save(collection)
        snapshot_cache.clear()

        assert not snapshot_cache.exists()


class TestCorruptSnapshots:
    """Validation on load."""

    @pytest.mark.parametrize(
        "payload",
        [
            [],
            {"version": 99, "dimension": 9, "chunks": []},
            {"version": 1, "dimension": 3, "chunks": []},
            {"version": 1, "dimension": 9, "embedding_model": "other-model", "chunks": []},
            {"version": 1, "dimension": 9, "embedding_model": "keyword-test", "chunks": {}},
            {"version": 1, "dimension": 9, "embedding_model": "keyword-test", "chunk_count": 2, "chunks": []},
            {
                "version": 1, "dimension": 9, "embedding_model": "keyword-test",
                "chunks": [{"source_id": "", "text": "t", "embedding": [1.0] * 9}],
            },
            {
                "version": 1, "dimension": 9, "embedding_model": "keyword-test",
                "chunks": [{"source_id": "s", "text": "t", "embedding": [1.0] * 4}],
            },
            {
                "version": 1, "dimension": 9, "embedding_model": "keyword-test",
                "chunks": [{"source_id": "s", "text": "t", "embedding": ["x"] * 9}],
            },
        ],
    )
    def test_invalid_payload_is_rejected(self, snapshot_cache: SnapshotCache, payload) -> None:
        """Should raise SnapshotCorrupt on read and miss on load."""
        _write(snapshot_cache.path, payload)

        with pytest.raises(SnapshotCorrupt):
            snapshot_cache.read()
        assert snapshot_cache.load() is None

    @pytest.mark.parametrize("bad_value", ["NaN", "Infinity"])
    def test_non_finite_vector_is_a_miss(self, snapshot_cache: SnapshotCache, bad_value: str) -> None:
        """Should reject a snapshot whose vectors hold NaN or infinite values."""
        dimension = snapshot_cache.dimension
        _write(snapshot_cache.path, {
            "version": 1,
            "dimension": dimension,
            "embedding_model": "keyword-test",
            "chunk_count": 2,
            "chunks": [
                {"source_id": "a", "text": "a", "embedding": [1.0] * dimension},
                {"source_id": "nan", "text": "nan", "embedding": [float(bad_value)] * dimension},
            ],
        })

        with pytest.raises(SnapshotCorrupt):
            snapshot_cache.read()
        assert snapshot_cache.load() is None

    def test_truncated_file_is_a_miss(self, snapshot_cache: SnapshotCache, collection: Collection) -> None:
        """Should treat a half-written file as corrupt."""
        snapshot_cache.save(collection)
        content = snapshot_cache.path.read_text(encoding="utf-8")
        snapshot_cache.path.write_text(content[: len(content) // 2], encoding="utf-8")

        assert snapshot_cache.load() is None

    def test_unconfigured_model_accepts_any(self, snapshot_path: Path, snapshot_cache: SnapshotCache, collection: Collection) -> None:
        """Should skip the model check when no model is configured."""
        snapshot_cache.save(collection)
        permissive = SnapshotCache(snapshot_path, dimension=snapshot_cache.dimension)

        assert len(permissive.load()) == 2


class TestWriteFailure:
    """Write errors."""

    def test_unwritable_location_raises(self, tmp_path: Path, collection: Collection, snapshot_cache: SnapshotCache) -> None:
        """Should raise SnapshotWriteFailure when the directory cannot be created."""
        blocker = tmp_path / "blocker"
        blocker.write_text("file", encoding="utf-8")
        cache = SnapshotCache(blocker / "store.cache.json", dimension=snapshot_cache.dimension)

        with pytest.raises(SnapshotWriteFailure):
            cache.save(collection)

    def test_failed_write_keeps_previous_snapshot(
        self, snapshot_cache: SnapshotCache, collection: Collection, monkeypatch
    ) -> None:
        """Should leave the old snapshot intact and remove the temp file."""
        snapshot_cache.save(collection)

        def broken_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr("profile_rag.boundary.snapshot.snapshot_cache.os.replace", broken_replace)
        with pytest.raises(SnapshotWriteFailure):
            snapshot_cache.save(Collection(dimension=collection.dimension))

        monkeypatch.undo()
        assert len(snapshot_cache.load()) == 2
        assert [p.name for p in snapshot_cache.path.parent.iterdir()] == [snapshot_cache.path.name]
