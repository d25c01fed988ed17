"""
Entry and Segment models for corpus building.

An Entry is one logical fact derived from the profile document; a Segment is
one bounded word window of an Entry. Neither is persisted.

Dependencies: pydantic
System role: Intermediate records of the ingestion pipeline
"""

from pydantic import BaseModel, ConfigDict, Field


class Entry(BaseModel):
    """Labeled text derived from one profile section record."""

    model_config = ConfigDict(frozen=True)

    source_id: str = Field(description="Section tag plus discriminator, e.g. 'project:Alpha'")
    text: str = Field(description="Entry text before segmentation")


class Segment(BaseModel):
    """Word window of an Entry, ready for embedding."""

    model_config = ConfigDict(frozen=True)

    source_id: str = Field(description="source_id of the originating Entry")
    text: str = Field(min_length=1, description="Window text (never empty)")
