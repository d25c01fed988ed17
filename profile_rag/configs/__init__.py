"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from profile_rag.configs.embedding import EmbeddingSettings
from profile_rag.configs.generation import GenerationSettings
from profile_rag.configs.retrieval import RetrievalSettings
from profile_rag.configs.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "RetrievalSettings",
    "EmbeddingSettings",
    "GenerationSettings",
]
