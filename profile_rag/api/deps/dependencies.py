"""
Dependency injection functions.

Resolve the shared engine objects created during application lifespan.

Dependencies: fastapi, profile_rag.core.retrieval, profile_rag.application
System role: DI for route handlers
"""

from fastapi import Request

from profile_rag.application.services import AnswerService
from profile_rag.core.retrieval import RetrievalOrchestrator


def get_orchestrator(request: Request) -> RetrievalOrchestrator:
    """
    Get the retrieval orchestrator owned by the application.

    Args:
        request: Incoming request (gives access to app.state)

    Returns:
        RetrievalOrchestrator: Orchestrator installed at startup
    """
    return request.app.state.orchestrator


def get_answer_service(request: Request) -> AnswerService:
    """
    Get the answer service owned by the application.

    Args:
        request: Incoming request (gives access to app.state)

    Returns:
        AnswerService: Service installed at startup
    """
    return request.app.state.answer_service
