"""
Error envelope produced by the handlers in `dashkit.core.errors`.
"""
from typing import Any, Optional
from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """A single field-level validation error."""
    field: str
    message: str
    type: Optional[str] = None


class ErrorResponse(BaseModel):
    """Standard error envelope returned for all 4xx/5xx responses."""
    code: str
    message: str
    details: Optional[dict[str, Any]] = None
