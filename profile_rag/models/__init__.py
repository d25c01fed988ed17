"""
API schemas.

Exports: request/response models for chat, retrieval, health and admin endpoints
"""

from .chat import ChatRequest, ChatResponse, RetrieveRequest, RetrieveResponse
from .common import ErrorResponse
from .health import HealthResponse, RebuildResponse, StoreDebugResponse

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "RetrieveRequest",
    "RetrieveResponse",
    "ErrorResponse",
    "HealthResponse",
    "RebuildResponse",
    "StoreDebugResponse",
]
