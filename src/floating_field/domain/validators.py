"""Pre-built validation rules for common field types. Pure, no I/O."""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from typing import TYPE_CHECKING
from urllib.parse import urlparse

from floating_field.domain.rules import ValidationRule

if TYPE_CHECKING:
    from floating_field.config.models import RuleConfig

# All patterns are applied with fullmatch: a matching substring is not enough.
EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,64}")
ALPHANUMERIC_RE = re.compile(r"[A-Za-z0-9]+")
ALPHABETIC_RE = re.compile(r"[A-Za-z\s]+")
PHONE_RE = re.compile(r"[+]?[1-9]?[0-9]{7,15}")
DIGIT_RE = re.compile(r"[0-9]")

SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?"


def _matches(compiled: re.Pattern[str]) -> Callable[[str], bool]:
    return lambda text: compiled.fullmatch(text) is not None


def custom(
    predicate: Callable[[str], bool],
    message: str,
    applies_while_editing: bool = True,
) -> ValidationRule:
    """Wrap an arbitrary predicate. The predicate must be pure and must not raise."""
    return ValidationRule(
        predicate=predicate,
        message=message,
        applies_while_editing=applies_while_editing,
    )


def required(message: str | None = None) -> ValidationRule:
    """Text must contain something other than whitespace."""
    return custom(lambda text: bool(text.strip()), message or "This field is required")


def email(message: str | None = None) -> ValidationRule:
    return custom(_matches(EMAIL_RE), message or "Please enter a valid email address")


def min_length(length: int, message: str | None = None) -> ValidationRule:
    return custom(
        lambda text: len(text) >= length,
        message or f"Must be at least {length} characters long",
    )


def max_length(length: int, message: str | None = None) -> ValidationRule:
    return custom(
        lambda text: len(text) <= length,
        message or f"Must be no more than {length} characters long",
    )


def alphanumeric(message: str | None = None) -> ValidationRule:
    return custom(_matches(ALPHANUMERIC_RE), message or "Only letters and numbers are allowed")


def alphabetic(message: str | None = None) -> ValidationRule:
    """Letters and whitespace only."""
    return custom(_matches(ALPHABETIC_RE), message or "Only letters are allowed")


def is_number(text: str) -> bool:
    """
    True if text is a finite decimal literal: sign, fraction and exponent allowed.
    Non-ASCII digits, surrounding whitespace, digit separators, nan and inf are rejected.
    """
    if not text or not text.isascii() or text != text.strip() or "_" in text:
        return False
    try:
        value = float(text)
    except ValueError:
        return False
    return math.isfinite(value)


def numeric(message: str | None = None) -> ValidationRule:
    return custom(is_number, message or "Only numbers are allowed")


def phone_number(message: str | None = None) -> ValidationRule:
    return custom(_matches(PHONE_RE), message or "Please enter a valid phone number")


def is_url(text: str) -> bool:
    """Syntactic check: a scheme and a host, no whitespace, a valid port if one is given."""
    if not text or any(ch.isspace() for ch in text):
        return False
    try:
        parsed = urlparse(text)
        parsed.port  # raises on a malformed port
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.hostname)


def url(message: str | None = None) -> ValidationRule:
    return custom(is_url, message or "Please enter a valid URL")


def password_message(min_len: int, require_numbers: bool, require_special_chars: bool) -> str:
    parts = [f"Password must be at least {min_len} characters long"]
    if require_numbers:
        parts.append(", include numbers")
    if require_special_chars:
        parts.append(", and include special characters")
    return "".join(parts)


def password(
    min_length: int = 8,
    require_numbers: bool = True,
    require_special_chars: bool = True,
    message: str | None = None,
) -> ValidationRule:
    """Length plus optional digit and special-character requirements, checked as one rule."""

    def check(text: str) -> bool:
        if len(text) < min_length:
            return False
        if require_numbers and not DIGIT_RE.search(text):
            return False
        if require_special_chars and not any(ch in SPECIAL_CHARACTERS for ch in text):
            return False
        return True

    return custom(
        check,
        message or password_message(min_length, require_numbers, require_special_chars),
    )


def pattern(regex: str, message: str | None = None) -> ValidationRule:
    """Full match against a caller-supplied regex. Raises ValueError if it does not compile."""
    try:
        compiled = re.compile(regex)
    except re.error as e:
        raise ValueError(f"Invalid pattern {regex!r}: {e}") from e
    return custom(_matches(compiled), message or "Invalid format")


def _require_value(config: RuleConfig) -> int:
    if config.value is None:
        raise ValueError(f"Rule '{config.kind}' needs a 'value'")
    return config.value


def build_rule(config: RuleConfig) -> ValidationRule:
    """Dispatch a declarative rule config to the matching catalog function."""
    kind = config.kind
    msg = config.message
    if kind == "required":
        rule = required(msg)
    elif kind == "email":
        rule = email(msg)
    elif kind == "min_length":
        rule = min_length(_require_value(config), msg)
    elif kind == "max_length":
        rule = max_length(_require_value(config), msg)
    elif kind == "alphanumeric":
        rule = alphanumeric(msg)
    elif kind == "alphabetic":
        rule = alphabetic(msg)
    elif kind == "numeric":
        rule = numeric(msg)
    elif kind == "phone_number":
        rule = phone_number(msg)
    elif kind == "url":
        rule = url(msg)
    elif kind == "password":
        rule = password(
            min_length=config.value if config.value is not None else 8,
            require_numbers=config.require_numbers,
            require_special_chars=config.require_special_chars,
            message=msg,
        )
    elif kind == "pattern":
        if config.pattern is None:
            raise ValueError("Rule 'pattern' needs a 'pattern'")
        rule = pattern(config.pattern, msg)
    else:
        raise ValueError(f"Unknown rule kind: {kind}")

    if config.applies_while_editing:
        return rule
    return rule.model_copy(update={"applies_while_editing": False})
