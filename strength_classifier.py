"""Password strength classification.

Maps a password to a strength tier from the character classes it is made of.
Letters are Latin or Cyrillic, digits are 0-9, and symbols are anything that
is neither of those nor whitespace. Whitespace belongs to no class, so any
password containing it matches no tier.
"""

import re
from enum import Enum
from typing import Optional

from core.config import MIN_PASSWORD_LENGTH


class StrengthLabel(str, Enum):
    """Strength tiers reported for a password."""
    INVALID = "invalid"
    EASY = "easy"
    MEDIUM = "medium"
    STRONG = "strong"


class CharacterClass(str, Enum):
    LETTER = "letter"
    DIGIT = "digit"
    SYMBOL = "symbol"


# character set bodies, shared by every pattern below
LETTERS = "a-zA-Zа-яА-Я"
DIGITS = "0-9"
NOT_SYMBOL = LETTERS + DIGITS + r"\s"

LETTER_RE = re.compile(f"[{LETTERS}]")
DIGIT_RE = re.compile(f"[{DIGITS}]")
WHITESPACE_RE = re.compile(r"\s")

# All patterns are used with fullmatch against the whole password
EASY_PATTERNS = {
    "letters": re.compile(f"[{LETTERS}]+"),
    "digits": re.compile(f"[{DIGITS}]+"),
    "symbols": re.compile(f"[^{NOT_SYMBOL}]+"),
}

MEDIUM_PATTERNS = {
    "letters_and_digits": re.compile(
        f"(?=.*[{DIGITS}])(?=.*[{LETTERS}])[{LETTERS}{DIGITS}]+"
    ),
    "letters_and_symbols": re.compile(
        f"(?=.*[{LETTERS}])(?=.*[^{NOT_SYMBOL}])[^{DIGITS}\\s]+"
    ),
    "digits_and_symbols": re.compile(
        f"(?=.*[{DIGITS}])(?=.*[^{NOT_SYMBOL}])[^{LETTERS}\\s]+"
    ),
}

STRONG_PATTERN = re.compile(
    f"(?=.*[{DIGITS}])(?=.*[{LETTERS}])(?=.*[^{NOT_SYMBOL}])\\S+"
)

STRENGTH_MESSAGES = {
    StrengthLabel.EASY: "Password is easy",
    StrengthLabel.MEDIUM: "Password is medium",
    StrengthLabel.STRONG: "Password is strong",
}


def _require_str(password) -> str:
    if not isinstance(password, str):
        raise TypeError(f"password must be a str, not {type(password).__name__}")
    return password


def character_class(char: str) -> Optional[CharacterClass]:
    """Return the class of a single character, or None for whitespace."""
    if WHITESPACE_RE.fullmatch(char):
        return None
    if LETTER_RE.fullmatch(char):
        return CharacterClass.LETTER
    if DIGIT_RE.fullmatch(char):
        return CharacterClass.DIGIT
    return CharacterClass.SYMBOL


def character_classes(password: str) -> Optional[frozenset]:
    """Return the set of classes present in password.

    Returns:
        Frozenset of CharacterClass members, or None if the password
        contains whitespace.
    """
    classes = set()
    for char in _require_str(password):
        cls = character_class(char)
        if cls is None:
            return None
        classes.add(cls)
    return frozenset(classes)


def is_easy(password: str) -> bool:
    """True if the whole password is letters only, digits only or symbols only."""
    password = _require_str(password)
    return any(p.fullmatch(password) for p in EASY_PATTERNS.values())


def is_medium(password: str) -> bool:
    """True if the password mixes exactly two classes and nothing else."""
    password = _require_str(password)
    return any(p.fullmatch(password) for p in MEDIUM_PATTERNS.values())


def is_strong(password: str) -> bool:
    """True if the password has a letter, a digit and a symbol, and no whitespace."""
    return STRONG_PATTERN.fullmatch(_require_str(password)) is not None


def classify(password: str) -> Optional[StrengthLabel]:
    """Classify a password into a strength tier.

    Rules are applied in order: too short (or empty) is INVALID, then EASY,
    MEDIUM and STRONG. A password that matches none of them, i.e. one that
    contains whitespace, has no tier.

    Args:
        password: The password to classify

    Returns:
        StrengthLabel, or None when no tier applies
    """
    password = _require_str(password)

    if len(password) < MIN_PASSWORD_LENGTH:
        return StrengthLabel.INVALID
    if is_easy(password):
        return StrengthLabel.EASY
    if is_medium(password):
        return StrengthLabel.MEDIUM
    if is_strong(password):
        return StrengthLabel.STRONG
    return None


def strength_message(label: Optional[StrengthLabel]) -> Optional[str]:
    """Message shown for a strength label; None for INVALID or no tier."""
    if label is None:
        return None
    return STRENGTH_MESSAGES.get(label)
