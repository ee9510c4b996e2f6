"""Generic Value Decode: explicit variant classification of untrusted input.

Invariants:
    - classify() is PURE: inspects, never converts or mutates
    - bool is BOOLEAN, never NUMBER (bool subclasses int in Python)
    - Only dict with all-str keys is OBJECT; list and tuple are ARRAY
    - Anything outside the JSON data model classifies as None (undecodable)

Design Decisions:
    - One dispatch point for "what is this value" instead of isinstance checks
      scattered across validators (ADR: no ad hoc duck-typing of untrusted input)
"""

from collections.abc import Mapping
from typing import Any

from validize.core.domain_types import ValueKind


def classify(value: Any) -> ValueKind | None:
    """Return the variant of a JSON-like value, or None if it is not one."""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, Mapping) and all(isinstance(k, str) for k in value):
        return ValueKind.OBJECT
    return None


def is_object(value: Any) -> bool:
    return classify(value) is ValueKind.OBJECT
