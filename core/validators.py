"""Composable password field validators.

A validator takes the field value and returns an error entry (a dict with a
single key) or None. compose() merges the entries of several validators into
one error map, the shape a form layer renders messages from.
"""

from typing import Callable, Iterable, Optional

from core.config import MIN_PASSWORD_LENGTH
from strength_classifier import (
    StrengthLabel,
    STRENGTH_MESSAGES,
    is_easy,
    is_medium,
    is_strong,
)


ValidationErrors = dict
ValidatorFn = Callable[[Optional[str]], Optional[ValidationErrors]]

# Errors that make the field invalid, as opposed to informational strength entries
BLOCKING_ERRORS = ("required", "minlength")


def required() -> ValidatorFn:
    """Validator that fails on a missing or empty value."""
    def validator(value: Optional[str]) -> Optional[ValidationErrors]:
        if not value:
            return {"required": True}
        return None
    return validator


def min_length(length: int) -> ValidatorFn:
    """Validator that fails when a non-empty value is shorter than length.

    Empty values pass, leaving them to required().
    """
    def validator(value: Optional[str]) -> Optional[ValidationErrors]:
        if not value or len(value) >= length:
            return None
        return {"minlength": {"requiredLength": length, "actualLength": len(value)}}
    return validator


def _strength_check(key: str, label: StrengthLabel, predicate: Callable[[str], bool]) -> ValidatorFn:
    def validator(value: Optional[str]) -> Optional[ValidationErrors]:
        if predicate(value or ""):
            return {key: STRENGTH_MESSAGES[label]}
        return None
    return validator


def check_easy_strength() -> ValidatorFn:
    """Validator reporting an easy password: letters, digits or symbols only."""
    return _strength_check("easyStrength", StrengthLabel.EASY, is_easy)


def check_medium_strength() -> ValidatorFn:
    """Validator reporting a medium password: two classes mixed."""
    return _strength_check("mediumStrength", StrengthLabel.MEDIUM, is_medium)


def check_strong_strength() -> ValidatorFn:
    """Validator reporting a strong password: letters, digits and symbols."""
    return _strength_check("strongStrength", StrengthLabel.STRONG, is_strong)


def compose(validators: Iterable[ValidatorFn]) -> ValidatorFn:
    """Combine validators into one that merges their error entries.

    Every validator runs on every value. Later entries win on key clashes.
    """
    validators = list(validators)

    def validator(value: Optional[str]) -> Optional[ValidationErrors]:
        errors = {}
        for check in validators:
            result = check(value)
            if result:
                errors.update(result)
        return errors or None
    return validator


PASSWORD_VALIDATORS = [
    required(),
    min_length(MIN_PASSWORD_LENGTH),
    check_easy_strength(),
    check_medium_strength(),
    check_strong_strength(),
]

validate_password = compose(PASSWORD_VALIDATORS)
validate_password.__doc__ = "Run the default password validators on value."


def is_blocking(errors: Optional[ValidationErrors]) -> bool:
    """True if errors contain a required or minimum length failure."""
    if not errors:
        return False
    return any(key in errors for key in BLOCKING_ERRORS)
