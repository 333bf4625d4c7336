"""
API response models shared by the routers.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ErrorDetail(BaseModel):
    """Detailed error information"""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    details: Optional[Any] = Field(None, description="Additional error details")


class ErrorResponse(BaseModel):
    """Standardized error response"""

    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail = Field(..., description="Error details")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")
    timestamp: datetime = Field(default_factory=_utcnow, description="Check timestamp")


def error_body(code: str, message: str, details: Any = None) -> dict:
    """JSON-ready error payload for exception handlers"""
    return ErrorResponse(
        error=ErrorDetail(code=code, message=message, details=details)
    ).model_dump(mode="json", exclude_none=True)


UNAUTHORIZED = {401: {"model": ErrorResponse, "description": "Missing session cookie"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Meal not found"}}
BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid request body"}}
