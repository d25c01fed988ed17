"""Service orchestrators."""

from .answer_service import AnswerResult, AnswerService, create_chat_model

__all__ = ["AnswerService", "AnswerResult", "create_chat_model"]
