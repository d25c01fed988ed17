"""API routers."""

from .admin import router as admin_router
from .chat import router as chat_router
from .health import router as health_router
from .retrieval import router as retrieval_router

__all__ = [
    "admin_router",
    "chat_router",
    "health_router",
    "retrieval_router",
]
