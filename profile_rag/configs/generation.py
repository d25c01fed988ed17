"""
Answer generation configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Chat model configuration for grounded answers
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GenerationSettings(BaseSettings):
    """Chat model configuration."""

    model_config = SettingsConfigDict(
        env_prefix="GENERATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    model: str = Field(default="gemini-2.5-flash", description="Google Gemini chat model ID")
    temperature: float = Field(default=0.2, ge=0.0, le=2.0, description="Sampling temperature")
