"""Domain Types: the vocabulary shared by validators, shapes and the dispatcher.

Invariants:
    - ValueKind enumerates every variant an untrusted JSON-like value can take
    - ABSENT is a singleton: identity comparison (`is ABSENT`) is the only valid test
    - ABSENT is falsy and distinct from None, so "null" and "not present" never collide
    - Request is frozen: built once per dispatch, never mutated

Design Decisions:
    - Validator as a plain Callable alias over an ABC: validators are closures that compose
      (ADR: no inheritance needed for a single-method capability)
    - str Enum for ValueKind: readable in logs without custom encoders
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

T = TypeVar("T")


# ─── Generic Value Kinds ─────────────────────────────────────────

class ValueKind(str, Enum):
    """Variants of a decoded JSON-like value."""
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


# ─── Absent Marker ───────────────────────────────────────────────

class _Absent:
    """Type of the ABSENT sentinel."""
    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


# ─── Validator Types ─────────────────────────────────────────────

Validator = Callable[[Any], T]
ValidatorMap = Mapping[str, Validator[Any]]


# ─── Request Record ──────────────────────────────────────────────

@dataclass(frozen=True)
class Request:
    """Validated inputs handed to a processing function."""
    parameters: dict[str, Any]
    query: dict[str, Any]
    body: dict[str, Any]
