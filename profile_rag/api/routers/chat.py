"""
Chat API endpoint.

Routes: POST /chat

Dependencies: profile_rag.application.services.answer_service
System role: Grounded question answering HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from profile_rag.api.deps import get_answer_service
from profile_rag.api.routers.router_utils import handle_retrieval_errors
from profile_rag.application.services import AnswerService
from profile_rag.models.chat import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


@router.post("/chat", response_model=ChatResponse)
@handle_retrieval_errors
async def chat(
    request: ChatRequest,
    answer_service: AnswerService = Depends(get_answer_service),
) -> ChatResponse:
    """
    Answer a question from the candidate profile.

    Raises:
        HTTPException(400): Empty question
        HTTPException(503): Engine initializing or question embedding failed
        HTTPException(500): Generation error
    """
    result = await answer_service.answer(request.question)
    return ChatResponse(answer=result.answer, sources=result.sources)
