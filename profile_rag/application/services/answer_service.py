"""
Grounded answer service.

Retrieves passages through the orchestrator, renders them into the career
prompt and asks the chat model for an answer.

Dependencies: langchain_core, profile_rag.core.retrieval
System role: Consumer of retrieval output for the chat endpoint
"""

import logging

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from pydantic import BaseModel, Field

from profile_rag.core.exceptions import AnswerGenerationError
from profile_rag.core.retrieval import RetrievalOrchestrator, RetrievedPassage

from .answer_prompt import ANSWER_PROMPT, format_context

logger = logging.getLogger(__name__)

NO_ANSWER = "No answer."


class AnswerResult(BaseModel):
    """Generated answer with the passages it was grounded on."""

    answer: str
    sources: list[RetrievedPassage] = Field(default_factory=list)


class AnswerService:
    """Answer questions from retrieved profile passages."""

    def __init__(self, orchestrator: RetrievalOrchestrator, chat_model: BaseChatModel) -> None:
        self._orchestrator = orchestrator
        self._chain = ANSWER_PROMPT | chat_model | StrOutputParser()

    async def answer(self, question: str, k: int | None = None) -> AnswerResult:
        """
        Answer a question.

        Args:
            question: User question
            k: Passages to retrieve (orchestrator default if None)

        Returns:
            AnswerResult: Answer text and its source passages

        Raises:
            ValidationError, EngineNotReady, QueryEmbeddingFailure: From retrieval
            AnswerGenerationError: When the chat model call fails
        """
        passages = await self._orchestrator.retrieve(question, k)
        logger.info(
            f"{__name__}:answer - Retrieved {len(passages)} passages, question_len={len(question)}"
        )

        try:
            answer = await self._chain.ainvoke({
                "context": format_context(passages),
                "question": question,
            })
        except Exception as e:
            raise AnswerGenerationError(
                f"Answer generation failed: {e}",
                details={"error_type": type(e).__name__},
            ) from e

        return AnswerResult(answer=answer.strip() or NO_ANSWER, sources=passages)


def create_chat_model(model: str, temperature: float) -> BaseChatModel:
    """Create the Gemini chat model used for answers."""
    from dotenv import load_dotenv
    from langchain_google_genai import ChatGoogleGenerativeAI

    load_dotenv()

    return ChatGoogleGenerativeAI(model=model, temperature=temperature)
