"""
Retrieval engine configuration settings.

Manages source/snapshot locations, segmentation policy, build fan-out and
query defaults for the in-memory similarity index.

Dependencies: pydantic, pydantic_settings
System role: Ingestion and retrieval configuration
"""

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RetrievalSettings(BaseSettings):
    """Corpus build and retrieval configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RETRIEVAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    profile_path: str = Field(
        default="data/profile.json",
        description="Path to the source profile JSON document",
    )
    snapshot_path: str = Field(
        default="data/store.cache.json",
        description="Path to the persisted collection snapshot",
    )
    force_rebuild: bool = Field(
        default=False,
        validation_alias=AliasChoices("RETRIEVAL_FORCE_REBUILD", "REBUILD_STORE"),
        description="Ignore the snapshot at startup and rebuild from the profile",
    )

    # Segmentation
    window_size: int = Field(default=800, ge=1, description="Words per segment window")
    overlap: int = Field(default=120, ge=0, description="Words shared by consecutive windows")

    # Build fan-out
    embedding_concurrency: int = Field(
        default=8,
        ge=0,
        description="Maximum in-flight embedding calls during a build (0 = unbounded)",
    )
    max_failure_ratio: float = Field(
        default=1.0,
        ge=0.0,
        le=1.0,
        description="Abort the build when failed/total segments exceeds this ratio",
    )
    max_logged_failures: int = Field(
        default=5,
        ge=0,
        description="Individual embedding failures logged per build before summarising",
    )
    build_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Optional wall-clock limit for a whole corpus build",
    )

    background_startup: bool = Field(
        default=False,
        description="Serve HTTP while the initial load/build runs (queries get 503 until ready)",
    )

    # Query
    top_k: int = Field(default=6, ge=1, description="Default number of passages to retrieve")

    @model_validator(mode="after")
    def _check_overlap(self) -> "RetrievalSettings":
        if self.overlap >= self.window_size:
            raise ValueError("overlap must be less than window_size")
        return self
