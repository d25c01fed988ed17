"""Tests for reading the profile document from disk."""

from pathlib import Path

import pytest

from profile_rag.boundary.source import read_profile_document
from profile_rag.core.exceptions import SourceDocumentInvalid


class TestReadProfileDocument:
    """File access and parsing."""

    def test_reads_json(self, profile_file: Path, sample_profile: dict) -> None:
        """Should return the parsed document."""
        assert read_profile_document(profile_file) == sample_profile

    def test_missing_file(self, tmp_path: Path) -> None:
        """Should raise SourceDocumentInvalid with the path in details."""
        missing = tmp_path / "nope.json"

        with pytest.raises(SourceDocumentInvalid) as exc_info:
            read_profile_document(missing)

        assert exc_info.value.details["path"] == str(missing)

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Should raise SourceDocumentInvalid for unparseable content."""
        broken = tmp_path / "profile.json"
        broken.write_text("{ profile: ", encoding="utf-8")

        with pytest.raises(SourceDocumentInvalid):
            read_profile_document(broken)
