"""Headless password field model.

Holds the value of a password input together with its visibility flag, runs
the field validators on every change, and derives the single message a UI
shows under the input.
"""

import logging
from typing import Optional

from core.config import MIN_PASSWORD_LENGTH
from core.events import log_strength_event
from core.validators import (
    PASSWORD_VALIDATORS,
    ValidationErrors,
    ValidatorFn,
    compose,
    is_blocking,
)
from strength_classifier import StrengthLabel, classify, strength_message


logger = logging.getLogger(__name__)

MASK_CHAR = "•"

REQUIRED_MESSAGE = "Password is required"
MIN_LENGTH_MESSAGE = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"


class PasswordField:
    """Password input state: value, visibility and validation results."""

    def __init__(self, value: str = "", validators: Optional[list[ValidatorFn]] = None):
        self._validator = compose(PASSWORD_VALIDATORS if validators is None else validators)
        self.show_password = False
        self.value = ""
        self.errors: Optional[ValidationErrors] = None
        self.strength: Optional[StrengthLabel] = None
        self.set_value(value)

    def set_value(self, value: Optional[str]) -> Optional[ValidationErrors]:
        """Store a new value and re-run validation.

        Args:
            value: New field value; None is treated as empty

        Returns:
            The merged validation errors, or None
        """
        self.value = value or ""
        self.errors = self._validator(self.value)

        previous = self.strength
        self.strength = classify(self.value)
        if self.strength != previous:
            logger.debug("Strength changed from %s to %s", previous, self.strength)
            log_strength_event(
                self.strength.value if self.strength else None,
                len(self.value),
                source="field",
                event_type="strength_change",
            )

        return self.errors

    def toggle_visibility(self) -> bool:
        """Flip between showing and hiding the password; return the new state."""
        self.show_password = not self.show_password
        return self.show_password

    @property
    def display_value(self) -> str:
        if self.show_password:
            return self.value
        return MASK_CHAR * len(self.value)

    @property
    def input_type(self) -> str:
        return "text" if self.show_password else "password"

    @property
    def valid(self) -> bool:
        return not is_blocking(self.errors)

    @property
    def message(self) -> Optional[str]:
        """Message for the field: baseline errors first, then strength."""
        errors = self.errors or {}
        if "required" in errors:
            return REQUIRED_MESSAGE
        if "minlength" in errors:
            return MIN_LENGTH_MESSAGE
        return strength_message(self.strength)

    def __repr__(self) -> str:
        strength = self.strength.value if self.strength else None
        return f"PasswordField(length={len(self.value)}, strength={strength!r}, visible={self.show_password})"
