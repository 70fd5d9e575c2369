"""Password strength endpoints.

Public endpoints the password input calls on every change.
"""

from fastapi import APIRouter

from api.models import ClassifyResponse, PasswordRequest, ValidateResponse
from core.events import log_strength_event
from core.field import PasswordField
from strength_classifier import classify, strength_message


router = APIRouter(tags=["Password Strength"])


@router.post("/classify", response_model=ClassifyResponse)
async def classify_password(request: PasswordRequest):
    """Classify password strength from its character classes."""
    label = classify(request.password)
    log_strength_event(
        label.value if label else None,
        len(request.password),
        source="api",
    )
    return ClassifyResponse(strength=label, message=strength_message(label))


@router.post("/validate", response_model=ValidateResponse)
async def validate_password_field(request: PasswordRequest):
    """Run all field validators and return the merged errors and message."""
    field = PasswordField(request.password)
    return ValidateResponse(
        valid=field.valid,
        errors=field.errors,
        strength=field.strength,
        message=field.message,
    )
