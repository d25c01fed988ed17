"""
Retrieval error handling utilities.

Provides a decorator that maps engine exceptions onto HTTP responses so that
"service initializing" and "temporary failure" stay distinct from an empty
result.

Dependencies: fastapi, profile_rag.core.exceptions
System role: Consistent error responses across query and admin endpoints
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from profile_rag.core.exceptions import (
    AnswerGenerationError,
    EngineNotReady,
    QueryEmbeddingFailure,
    RebuildFailed,
    ValidationError,
)
from profile_rag.models.common import ErrorResponse

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

RETRY_AFTER_SECONDS = "5"


def _error(
    status_code: int,
    message: str,
    retryable: bool = False,
    details: dict | None = None,
    headers: dict[str, str] | None = None,
) -> HTTPException:
    body = ErrorResponse(error=message, retryable=retryable, details=details or None)
    return HTTPException(status_code=status_code, detail=body.model_dump(), headers=headers)


def handle_retrieval_errors(func: F) -> F:
    """
    Decorator to transform engine errors into HTTPExceptions.

    - ValidationError -> 400
    - EngineNotReady -> 503 "Service initializing" (retryable)
    - QueryEmbeddingFailure -> 503 "Temporary failure" (retryable)
    - RebuildFailed, AnswerGenerationError, anything else -> 500
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except ValidationError as e:
            logger.warning("Invalid request", extra={"error": str(e)})
            raise _error(status.HTTP_400_BAD_REQUEST, e.message, details=e.details)

        except EngineNotReady as e:
            logger.info("Query rejected while engine initializing", extra={"error": str(e)})
            raise _error(
                status.HTTP_503_SERVICE_UNAVAILABLE,
                "Service initializing. Please retry shortly.",
                retryable=True,
                details=e.details,
                headers={"Retry-After": RETRY_AFTER_SECONDS},
            )

        except QueryEmbeddingFailure as e:
            logger.warning("Question embedding failed", extra={"error": str(e)})
            raise _error(
                status.HTTP_503_SERVICE_UNAVAILABLE,
                "Temporary failure. Please retry.",
                retryable=True,
                headers={"Retry-After": RETRY_AFTER_SECONDS},
            )

        except RebuildFailed as e:
            logger.error("Forced rebuild failed", extra={"error": str(e)})
            raise _error(status.HTTP_500_INTERNAL_SERVER_ERROR, e.message, details=e.details)

        except AnswerGenerationError as e:
            logger.error("Answer generation failed", extra={"error": str(e)})
            raise _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Answer generation failed")

        except Exception as e:
            logger.exception("Unexpected failure in retrieval operation", extra={"error": str(e)})
            raise _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "server error")

    return wrapper  # type: ignore
