"""
Structured logging helpers.

Context values are flattened to short strings before they reach a record's
``extra`` so that embedding vectors and chunk texts never flood the log.

Dependencies: logging (stdlib)
System role: Logging helper functions for build and rebuild reporting
"""

import logging
from typing import Any

MAX_VALUE_LENGTH = 500


def safe_log_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """
    Render a context value for logging.

    Sequences and mappings are summarised by size; long strings are cut.

    Args:
        value: Value to render
        max_length: Length above which the text is truncated

    Returns:
        str: Log-safe representation
    """
    if value is None:
        return "None"
    if isinstance(value, (list, tuple)):
        text = f"{type(value).__name__}({len(value)} items)"
    elif isinstance(value, dict):
        text = f"dict({len(value)} keys)"
    else:
        text = str(value)

    if len(text) > max_length:
        return f"{text[:max_length]}... (truncated, {len(text)} total)"
    return text


def _extra(context: dict[str, Any]) -> dict[str, str]:
    return {key: safe_log_value(value) for key, value in context.items()}


def log_with_context(logger: logging.Logger, level: int, message: str, **context) -> None:
    """Log ``message`` at ``level`` with rendered context attached as record attributes."""
    logger.log(level, message, extra=_extra(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context,
) -> None:
    """
    Log a caught exception with its traceback and rendered context.

    Args:
        logger: Target logger
        message: Log message
        exc: Exception being reported
        **context: Additional record attributes
    """
    extra = _extra(context)
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(exc)
    logger.error(message, exc_info=exc, extra=extra)
