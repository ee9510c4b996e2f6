"""Primitive Validators: string, number, integer, boolean, plus the optional wrapper.

Invariants:
    - Every factory returns a PURE closure: one generic value in, typed value out or raise
    - Coercion is opt-in per validator; only STRING inputs are ever coerced
    - Numeric coercion is a strict full-string parse over ASCII digits ("3abc", " 3", "nan", "1_0", "٣" all fail)
    - Number ranges are inclusive and NaN never passes; ints past float range are range-checked exactly
    - integer() is number() plus a zero-fraction check, so bounds and coercion never drift
    - optional() maps None to ABSENT without calling the inner validator

Design Decisions:
    - Closures over classes: validators are values that compose (ADR: single-method capability)
    - Construction errors (bad bounds, bad pattern) raise ValueError/TypeError immediately:
      programmer errors surface at startup, not per request
"""

import math
import re
from typing import Any

from validize.core.domain_types import ABSENT, Validator, ValueKind
from validize.core.errors import (
    InvalidBooleanError,
    InvalidIntegerError,
    InvalidNumberError,
    InvalidStringError,
)
from validize.core.generic_value import classify

# ASCII decimal real literal: no whitespace, sign optional, exponent optional.
_NUMBER_LITERAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_BOOLEAN_LITERALS = {"true": True, "false": False}


def parse_number(text: str) -> float | None:
    """Strictly parse a decimal real number. Returns None if text is not one."""
    if not _NUMBER_LITERAL.fullmatch(text):
        return None
    return float(text)


def _is_nan(value: float) -> bool:
    # ints past float range overflow math.isnan; they are never NaN
    return isinstance(value, float) and math.isnan(value)


# ─── String ──────────────────────────────────────────────────────

def string(pattern: str | re.Pattern[str]) -> Validator[str]:
    """Accept a string whose whole text matches pattern."""
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    if not isinstance(compiled, re.Pattern):
        raise TypeError(f"pattern must be str or re.Pattern, got {type(pattern).__name__}")

    def validate_string(value: Any) -> str:
        if classify(value) is ValueKind.STRING and compiled.fullmatch(value):
            return value
        raise InvalidStringError()

    return validate_string


# ─── Number / Integer ────────────────────────────────────────────

def number(
    min_value: float, max_value: float, coerce: bool = False,
) -> Validator[float]:
    """Accept a number in [min_value, max_value]; with coerce, also a numeric string."""
    if math.isnan(min_value) or math.isnan(max_value) or min_value > max_value:
        raise ValueError(f"invalid number range [{min_value}, {max_value}]")

    def validate_number(value: Any) -> float:
        kind = classify(value)
        result: float | None = None
        if kind is ValueKind.NUMBER:
            result = value
        elif coerce and kind is ValueKind.STRING:
            result = parse_number(value)

        if result is None or _is_nan(result) or not (min_value <= result <= max_value):
            raise InvalidNumberError()
        return result

    return validate_number


def integer(
    min_value: float, max_value: float, coerce: bool = False,
) -> Validator[int]:
    """Accept an integral number in [min_value, max_value]."""
    validate_float = number(min_value, max_value, coerce)

    def validate_integer(value: Any) -> int:
        result = validate_float(value)
        if isinstance(result, int):
            return result
        if not result.is_integer():
            raise InvalidIntegerError()
        return int(result)

    return validate_integer


# ─── Boolean ─────────────────────────────────────────────────────

def boolean(coerce: bool = False) -> Validator[bool]:
    """Accept a bool; with coerce, also exactly "true" or "false"."""

    def validate_boolean(value: Any) -> bool:
        kind = classify(value)
        if kind is ValueKind.BOOLEAN:
            return value
        if coerce and kind is ValueKind.STRING and value in _BOOLEAN_LITERALS:
            return _BOOLEAN_LITERALS[value]
        raise InvalidBooleanError()

    return validate_boolean


# ─── Optional ────────────────────────────────────────────────────

def optional(inner: Validator[Any] | None = None) -> Validator[Any]:
    """Accept absence. Present values go to inner, or pass through unchecked."""

    def validate_optional(value: Any) -> Any:
        if value is None:
            return ABSENT
        if inner is None:
            return value
        return inner(value)

    return validate_optional
