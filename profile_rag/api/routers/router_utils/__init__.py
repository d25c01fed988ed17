"""Shared router helpers."""

from .error_handling import handle_retrieval_errors

__all__ = ["handle_retrieval_errors"]
