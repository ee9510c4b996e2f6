"""Shape Validator: closed, recursive object validation from a field-to-validator map.

Invariants:
    - Input must classify as OBJECT; every other variant raises InvalidTypeError
    - Declared fields are validated in declaration order; a missing key is passed as None
    - First failing field aborts the whole shape (fail-fast, no aggregation)
    - ABSENT results are omitted from the output
    - Undeclared input fields raise ExtraneousFieldError, after declared fields pass
    - Output is a NEW dict; the input mapping is never mutated

Design Decisions:
    - A shape is just another validator: nesting is composition, no special case
    - Validator map copied at construction: caller mutations cannot reshape a live validator
    - Failing field name pushed onto the error context: nested failures log as "inner.i"
"""

from typing import Any

from validize.core.domain_types import ABSENT, Validator, ValidatorMap
from validize.core.errors import (
    ExtraneousFieldError,
    InvalidTypeError,
    ValidizeError,
)
from validize.core.generic_value import is_object


def shape(validators: ValidatorMap) -> Validator[dict[str, Any]]:
    """Build a validator for objects with exactly the declared fields."""
    fields = dict(validators)
    for name, validator in fields.items():
        if not isinstance(name, str):
            raise TypeError(f"field names must be str, got {name!r}")
        if not callable(validator):
            raise TypeError(f"validator for field '{name}' is not callable")

    def validate_shape(value: Any) -> dict[str, Any]:
        if not is_object(value):
            raise InvalidTypeError()

        result: dict[str, Any] = {}
        for name, validator in fields.items():
            try:
                validated = validator(value.get(name))
            except ValidizeError as exc:
                exc.at_field(name)
                raise
            if validated is not ABSENT:
                result[name] = validated

        for name in value:
            if name not in fields:
                raise ExtraneousFieldError(name).at_field(name)

        return result

    return validate_shape


EMPTY_SHAPE = shape({})
