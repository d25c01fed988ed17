"""
Google Generative AI Embeddings wrapper with fixed output dimensionality.

Wraps GoogleGenerativeAIEmbeddings so query embedding, sync or async, requests
the configured dimension. The gateway embeds both segments and questions as
queries, so they share one width.

Dependencies: langchain_google_genai, langchain_core, python-dotenv (GOOGLE_API_KEY)
System role: Default embedding provider
"""

import logging
from typing import List

from dotenv import load_dotenv
from langchain_core.runnables.config import run_in_executor
from langchain_google_genai import GoogleGenerativeAIEmbeddings

load_dotenv()

logger = logging.getLogger(__name__)


class FixedDimensionEmbeddings(GoogleGenerativeAIEmbeddings):
    """
    GoogleGenerativeAIEmbeddings wrapper with fixed output dimensionality.

    The base class ignores output_dimensionality in the constructor, so the
    configured value is forwarded on every call instead.
    """

    _output_dimensionality: int = 3072

    def __init__(
        self,
        model: str = "models/gemini-embedding-001",
        output_dimensionality: int = 3072,
        **kwargs,
    ) -> None:
        """
        Initialize embeddings with fixed output dimensionality.

        Args:
            model: Google embedding model ID
            output_dimensionality: Fixed dimension for all embeddings
            **kwargs: Additional arguments for GoogleGenerativeAIEmbeddings
        """
        super().__init__(model=model, **kwargs)
        self._output_dimensionality = output_dimensionality
        logger.info(
            f"{__name__}:__init__ - Initialized with model={model}, "
            f"output_dimensionality={output_dimensionality}"
        )

    def embed_query(
        self,
        text: str,
        task_type: str | None = None,
        title: str | None = None,
        output_dimensionality: int | None = None,
    ) -> List[float]:
        """Embed a query with the configured dimension unless overridden."""
        dim = output_dimensionality or self._output_dimensionality
        return super().embed_query(
            text,
            task_type=task_type,
            title=title,
            output_dimensionality=dim,
        )

    async def aembed_query(self, text: str, **kwargs) -> List[float]:
        """Async query embedding routed through the fixed-dimension sync path."""
        return await run_in_executor(None, self.embed_query, text, **kwargs)
