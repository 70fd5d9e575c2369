"""Pydantic models for API request/response validation.

Defines data structures for all API endpoints.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from core.config import MAX_PASSWORD_INPUT_LENGTH
from strength_classifier import StrengthLabel


class PasswordRequest(BaseModel):
    """Request model carrying the current field value.

    An empty password is accepted: it is a validation result, not a bad request.
    """
    password: str = Field(
        ...,
        max_length=MAX_PASSWORD_INPUT_LENGTH,
        description="Current value of the password field",
    )


class ClassifyResponse(BaseModel):
    """Response model for strength classification."""
    strength: Optional[StrengthLabel] = None
    message: Optional[str] = None


class ValidateResponse(BaseModel):
    """Response model for full field validation."""
    valid: bool
    errors: Optional[dict[str, Any]] = None
    strength: Optional[StrengthLabel] = None
    message: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    version: str
