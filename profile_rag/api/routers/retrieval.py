"""
Retrieval API endpoint.

Routes: POST /retrieve

Dependencies: profile_rag.core.retrieval
System role: Query-time passage retrieval HTTP API
"""

from fastapi import APIRouter, Depends

from profile_rag.api.deps import get_orchestrator
from profile_rag.api.routers.router_utils import handle_retrieval_errors
from profile_rag.core.retrieval import RetrievalOrchestrator
from profile_rag.models.chat import RetrieveRequest, RetrieveResponse

router = APIRouter(tags=["retrieval"])


@router.post("/retrieve", response_model=RetrieveResponse)
@handle_retrieval_errors
async def retrieve(
    request: RetrieveRequest,
    orchestrator: RetrievalOrchestrator = Depends(get_orchestrator),
) -> RetrieveResponse:
    """
    Return the passages most similar to the question.

    An empty passage list means nothing relevant was found; an engine that is
    still starting answers 503 instead.
    """
    passages = await orchestrator.retrieve(request.question, request.k)
    return RetrieveResponse(passages=passages)
