"""Primitive Validators: string, number, integer, boolean and optional.

Tests cover:
    - string matches the whole text against its pattern, no coercion
    - number/integer enforce inclusive bounds, reject NaN, coerce only when asked
    - coercion is a strict full-string parse
    - boolean coercion accepts exactly "true"/"false"
    - optional maps None to ABSENT and delegates otherwise
"""

import math
import re

import pytest

from validize.core.domain_types import ABSENT
from validize.core.errors import (
    InvalidBooleanError,
    InvalidIntegerError,
    InvalidNumberError,
    InvalidStringError,
    ValidizeValidationError,
)
from validize.core.validators import (
    boolean,
    integer,
    number,
    optional,
    parse_number,
    string,
)

NON_SCALARS = [None, {}, [], True]


# ─── string ──────────────────────────────────────────────────────

def test_string_accepts_matching_text():
    validate = string(re.compile(r"^[a-z]*$", re.IGNORECASE))
    assert validate("abc") == "abc"
    assert validate("aBc") == "aBc"


def test_string_rejects_non_matching_text():
    validate = string(re.compile(r"^[a-z]*$", re.IGNORECASE))
    with pytest.raises(InvalidStringError):
        validate("aB1c")


@pytest.mark.parametrize("value", [None, 3, {}, True, ["abc"]])
def test_string_rejects_non_strings(value):
    validate = string(r"^[a-z]*$")
    with pytest.raises(InvalidStringError):
        validate(value)


def test_string_requires_full_match_without_anchors():
    validate = string(r"[a-z]+")
    assert validate("abc") == "abc"
    with pytest.raises(InvalidStringError):
        validate("abc1")


def test_string_rejects_trailing_newline_even_with_dollar_anchor():
    validate = string(r"^[a-z]+$")
    with pytest.raises(InvalidStringError):
        validate("abc\n")


def test_string_rejects_invalid_pattern_type():
    with pytest.raises(TypeError):
        string(42)


# ─── number ──────────────────────────────────────────────────────

def test_number_exact_accepts_numbers_in_range():
    validate = number(1, 3)
    assert validate(1) == 1
    assert validate(1.5) == 1.5
    assert validate(3) == 3


def test_number_exact_rejects_out_of_range():
    with pytest.raises(InvalidNumberError):
        number(1, 3)(4)


def test_number_without_coercion_rejects_numeric_string():
    with pytest.raises(InvalidNumberError):
        number(1, 3)("2")


@pytest.mark.parametrize("value", NON_SCALARS)
def test_number_rejects_non_numbers(value):
    with pytest.raises(InvalidNumberError):
        number(1, 3)(value)


def test_number_rejects_nan():
    with pytest.raises(InvalidNumberError):
        number(-math.inf, math.inf)(math.nan)


def test_number_coerced_parses_strings():
    validate = number(1, 3, coerce=True)
    assert validate(1) == 1
    assert validate(1.5) == 1.5
    assert validate("2.9") == 2.9
    assert validate("3") == 3


def test_number_coerced_still_checks_range():
    with pytest.raises(InvalidNumberError):
        number(1, 3, coerce=True)(4)
    with pytest.raises(InvalidNumberError):
        number(1, 3, coerce=True)("4")


@pytest.mark.parametrize("text", [
    "3abc", " 2", "2 ", "", "nan", "inf", "1_0", "0x2", "2.5.1", "٣", "２", "٢.٥",
])
def test_number_coerced_rejects_non_literal_strings(text):
    with pytest.raises(InvalidNumberError):
        number(-1e9, 1e9, coerce=True)(text)


@pytest.mark.parametrize("validator", [number(1, 3), integer(1, 3), number(1, 3, coerce=True)])
def test_integer_beyond_float_range_is_out_of_range(validator):
    with pytest.raises(InvalidNumberError):
        validator(10**400)


def test_integer_beyond_float_range_accepted_by_unbounded_number():
    assert number(-math.inf, math.inf)(10**400) == 10**400


def test_number_rejects_bad_range():
    with pytest.raises(ValueError):
        number(3, 1)


def test_parse_number_accepts_exponents_and_signs():
    assert parse_number("-1.5e2") == -150.0
    assert parse_number(".5") == 0.5
    assert parse_number("+7") == 7.0
    assert parse_number("7.") == 7.0
    assert parse_number("e5") is None


# ─── integer ─────────────────────────────────────────────────────

def test_integer_exact():
    validate = integer(1, 3)
    assert validate(1) == 1
    assert validate(3) == 3


@pytest.mark.parametrize("value", [4, "2", "2.9", None, {}, True])
def test_integer_exact_rejects(value):
    with pytest.raises(ValidizeValidationError):
        integer(1, 3)(value)


def test_integer_rejects_fraction_with_integer_error():
    with pytest.raises(InvalidIntegerError):
        integer(1, 3)(1.5)


def test_integer_coerced():
    validate = integer(1, 3, coerce=True)
    assert validate(1) == 1
    assert validate("2") == 2
    assert isinstance(validate("2"), int)
    assert validate(2.0) == 2


def test_integer_coerced_rejects_non_integral_strings():
    with pytest.raises(InvalidIntegerError):
        integer(1, 3, coerce=True)("2.9")


@pytest.mark.parametrize("value", [1.5, 4, None, {}, True])
def test_integer_coerced_rejects(value):
    with pytest.raises(ValidizeValidationError):
        integer(1, 3, coerce=True)(value)


# ─── boolean ─────────────────────────────────────────────────────

def test_boolean_exact():
    validate = boolean()
    assert validate(True) is True
    assert validate(False) is False
    with pytest.raises(InvalidBooleanError):
        validate("true")


def test_boolean_coerced_accepts_exact_literals():
    validate = boolean(coerce=True)
    assert validate("true") is True
    assert validate("false") is False


@pytest.mark.parametrize("value", ["yes", "True", "1", 1, 0, None, "", {}])
def test_boolean_coerced_rejects_aliases(value):
    with pytest.raises(InvalidBooleanError):
        boolean(coerce=True)(value)


# ─── optional ────────────────────────────────────────────────────

def test_optional_maps_none_to_absent():
    assert optional(string(r"[a-f]+"))(None) is ABSENT


def test_optional_does_not_call_inner_on_absence():
    calls = []

    def inner(value):
        calls.append(value)
        return value

    optional(inner)(None)
    assert calls == []


def test_optional_delegates_present_values():
    validate = optional(string(r"[a-f]+"))
    assert validate("abc") == "abc"
    with pytest.raises(InvalidStringError):
        validate("xyz")


def test_optional_without_inner_passes_value_through():
    validate = optional()
    assert validate(5) == 5
    assert validate({"a": 1}) == {"a": 1}
    assert validate(None) is ABSENT


def test_absent_is_falsy_and_not_none():
    assert not ABSENT
    assert ABSENT is not None
