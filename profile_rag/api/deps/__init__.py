"""FastAPI dependencies."""

from .dependencies import get_answer_service, get_orchestrator

__all__ = ["get_answer_service", "get_orchestrator"]
