"""Error Hierarchy: typed, categorized exceptions for every validation and processing failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error maps to exactly one http_status (400, 404; anything unclassified is 500)
    - Severity picks the log level wherever the error is logged
    - Error messages are for server-side logs only, never for response bodies

Design Decisions:
    - Single hierarchy with ValidizeError base: dispatcher catches one type (ADR: uniform error shape)
    - ValidizeValidationError groups every 400-level failure so processing functions can
      re-raise a validator failure and still get a 400
    - ErrorContext holds the failing field path without coupling errors to logging
"""

import logging
from dataclasses import dataclass, field
from enum import Enum


class ErrorSeverity(str, Enum):
    """How loudly a failure is logged."""
    WARNING = "warning"
    ERROR = "error"

    @property
    def log_level(self) -> int:
        return logging.WARNING if self is ErrorSeverity.WARNING else logging.ERROR


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"


@dataclass
class ErrorContext:
    """Where in the input the failure happened."""
    field_path: list[str] = field(default_factory=list)

    @property
    def dotted_field(self) -> str | None:
        """Dotted path of the failing field, outermost first."""
        return ".".join(self.field_path) if self.field_path else None


class ValidizeError(Exception):
    """Base exception for all Validize errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def at_field(self, name: str) -> "ValidizeError":
        """Prefix the field path with an enclosing field name. Returns self."""
        self.context.field_path.insert(0, name)
        return self

    def to_log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {
            "error_code": self.code,
            "status_code": self.http_status,
            "field": self.context.dotted_field,
            "severity": self.severity.value,
        }

    def __str__(self) -> str:
        if self.context.dotted_field:
            return f"{self.message} (field: {self.context.dotted_field})"
        return self.message


# ─── Validation Errors (400) ─────────────────────────────────────

class ValidizeValidationError(ValidizeError):
    """Input did not satisfy its declared validator."""
    def __init__(
        self,
        message: str,
        code: str = "VALIDATION_ERROR",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class InvalidTypeError(ValidizeValidationError):
    """Value has the wrong variant, e.g. a shape given something other than an object."""
    def __init__(self, message: str = "Not an object", context: ErrorContext | None = None):
        super().__init__(message, "INVALID_TYPE", context)


class InvalidStringError(ValidizeValidationError):
    def __init__(self, message: str = "Invalid string", context: ErrorContext | None = None):
        super().__init__(message, "INVALID_STRING", context)


class InvalidNumberError(ValidizeValidationError):
    def __init__(self, message: str = "Invalid number", context: ErrorContext | None = None):
        super().__init__(message, "INVALID_NUMBER", context)


class InvalidIntegerError(ValidizeValidationError):
    def __init__(self, message: str = "Invalid integer", context: ErrorContext | None = None):
        super().__init__(message, "INVALID_INTEGER", context)


class InvalidBooleanError(ValidizeValidationError):
    def __init__(self, message: str = "Invalid boolean", context: ErrorContext | None = None):
        super().__init__(message, "INVALID_BOOLEAN", context)


class ExtraneousFieldError(ValidizeValidationError):
    """Object carries a field its shape does not declare."""
    def __init__(self, field_name: str, context: ErrorContext | None = None):
        super().__init__(
            f"Extraneous field '{field_name}'", "EXTRANEOUS_FIELD", context,
        )
        self.field_name = field_name


class ValidationFailedError(ValidizeValidationError):
    """Raised by processing functions that reject input after validation passed."""
    def __init__(self, message: str = "Validation failed", context: ErrorContext | None = None):
        super().__init__(message, "VALIDATION_FAILED", context)


class MalformedBodyError(ValidizeValidationError):
    """Request body bytes could not be decoded as JSON."""
    def __init__(self, message: str = "Malformed request body", context: ErrorContext | None = None):
        super().__init__(message, "MALFORMED_BODY", context)


# ─── Processing Errors ───────────────────────────────────────────

class NotFoundError(ValidizeError):
    """Requested resource does not exist."""
    def __init__(self, message: str = "Not found", context: ErrorContext | None = None):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )
