"""
Chat and retrieval API schemas.

Dependencies: pydantic
System role: Request/response contracts for query endpoints
"""

from pydantic import BaseModel, Field

from profile_rag.core.retrieval import RetrievedPassage


class RetrieveRequest(BaseModel):
    """Request schema for raw passage retrieval."""

    question: str = Field(description="User question")
    k: int | None = Field(default=None, ge=1, le=50, description="Passages to return")


class RetrieveResponse(BaseModel):
    """Ranked passages for a question."""

    passages: list[RetrievedPassage]


class ChatRequest(BaseModel):
    """Request schema for grounded chat."""

    question: str = Field(default="", description="User question")


class ChatResponse(BaseModel):
    """Generated answer with the passages used as context."""

    answer: str
    sources: list[RetrievedPassage] = Field(default_factory=list)
