"""Profile document source."""

from profile_rag.boundary.source.profile_reader import read_profile_document

__all__ = ["read_profile_document"]
