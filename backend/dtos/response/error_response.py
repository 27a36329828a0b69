"""
Error Response DTO

Every failed request is rendered in this shape by the handlers in main.py.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from dtos.base import CamelModel


class FieldError(CamelModel):
    """A single validation failure."""

    field: str = Field(description="Field that failed validation")
    message: str = Field(description="Validation error message")


class ErrorResponse(CamelModel):
    """Standard error response format."""

    message: str = Field(description="Error message")
    status: int = Field(description="HTTP status code")
    timestamp: datetime = Field(default_factory=datetime.now, description="Error timestamp")
    path: Optional[str] = Field(None, description="Request path that caused the error")
    errors: List[FieldError] = Field(default_factory=list, description="Validation errors (if applicable)")
