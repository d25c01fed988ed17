"""
Health and debug API endpoints.

Routes: GET /health, GET /debug/store

Dependencies: profile_rag.core.retrieval
System role: Engine status HTTP API
"""

from fastapi import APIRouter, Depends

from profile_rag.api.deps import get_orchestrator
from profile_rag.core.retrieval import RetrievalOrchestrator
from profile_rag.models.health import HealthResponse, StoreDebugResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    orchestrator: RetrievalOrchestrator = Depends(get_orchestrator),
) -> HealthResponse:
    """Report engine state and installed chunk count."""
    status = orchestrator.status()
    return HealthResponse(
        ok=True,
        state=status.state.value,
        ready=status.ready,
        chunks=status.chunk_count,
        rebuilding=status.rebuilding,
    )


@router.get("/debug/store", response_model=StoreDebugResponse)
async def debug_store(
    orchestrator: RetrievalOrchestrator = Depends(get_orchestrator),
) -> StoreDebugResponse:
    """List chunk counts per source_id of the installed collection."""
    index = orchestrator.index
    if index is None:
        return StoreDebugResponse(chunks=0)
    return StoreDebugResponse(chunks=len(index), by_source=index.source_counts())
