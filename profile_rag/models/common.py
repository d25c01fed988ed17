"""
Common response models.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema."""

    success: bool = False
    error: str = Field(description="Error message")
    retryable: bool = Field(default=False, description="Client may retry the request later")
    details: dict | None = Field(default=None, description="Additional error context")
