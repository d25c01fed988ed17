"""
Administrative API endpoints.

Routes: POST /admin/rebuild

Dependencies: profile_rag.core.retrieval
System role: On-demand corpus rebuild
"""

from fastapi import APIRouter, Depends

from profile_rag.api.deps import get_orchestrator
from profile_rag.api.routers.router_utils import handle_retrieval_errors
from profile_rag.core.retrieval import RetrievalOrchestrator
from profile_rag.models.health import RebuildResponse

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/rebuild", response_model=RebuildResponse)
@handle_retrieval_errors
async def rebuild(
    orchestrator: RetrievalOrchestrator = Depends(get_orchestrator),
) -> RebuildResponse:
    """Rebuild the collection from the profile; the old one serves until the swap."""
    report = await orchestrator.force_rebuild()
    return RebuildResponse(
        chunk_count=report.chunk_count,
        failed_count=report.failed_count,
        entry_count=report.entry_count,
        elapsed_ms=report.elapsed_ms,
    )
