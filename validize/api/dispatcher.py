"""Request Dispatcher: validate, then process, then translate the outcome to a status code.

Invariants:
    - Parameters, query and body are validated BEFORE process runs; any failure → 400
      and process is never invoked
    - Exactly one DispatchResult per call: 200, 400, 404 or 500
    - Every failure result has an empty body; error detail never leaves the server
    - process may be sync or async; awaitables are awaited to completion
    - trace is injected at construction and only decides whether failures are logged;
      a logged failure uses its error severity, and every 500 logs at error level

Design Decisions:
    - Status mapping by exception type in one place (ADR: dispatcher is the single
      catch point, nothing below it recovers)
    - Default validators are EMPTY_SHAPE: undeclared input must be empty
    - Serialization inside the guarded block: an unserializable result is a 500,
      never a half-written response
"""

import inspect
import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from validize.core.domain_types import Request, Validator
from validize.core.errors import (
    NotFoundError,
    ValidizeError,
    ValidizeValidationError,
)
from validize.core.shape import EMPTY_SHAPE

logger = logging.getLogger(__name__)

# Returns the response value, None, or an awaitable of either
ProcessFunction = Callable[[Request], Any]

HTTP_OK = 200
HTTP_BAD_REQUEST = 400
HTTP_NOT_FOUND = 404
HTTP_INTERNAL_ERROR = 500


@dataclass(frozen=True)
class DispatchResult:
    """Status code and serialized body handed back to the HTTP layer."""
    status_code: int
    body: str = ""


def status_for(exc: BaseException) -> int:
    """Map a processing failure to its HTTP status."""
    if isinstance(exc, NotFoundError):
        return HTTP_NOT_FOUND
    if isinstance(exc, ValidizeValidationError):
        return HTTP_BAD_REQUEST
    return HTTP_INTERNAL_ERROR


def serialize(value: Any) -> str:
    """Serialize a processing result. Empty string for None."""
    if value is None:
        return ""
    return json.dumps(value, ensure_ascii=False, allow_nan=False)


class Dispatcher:
    """Wraps one processing function with input validation and error translation."""

    def __init__(
        self,
        process: ProcessFunction,
        *,
        validate_parameters: Validator[dict[str, Any]] | None = None,
        validate_query: Validator[dict[str, Any]] | None = None,
        validate_body: Validator[dict[str, Any]] | None = None,
        trace: bool = False,
    ):
        if not callable(process):
            raise TypeError("process must be callable")
        self._process = process
        self._validate_parameters = validate_parameters or EMPTY_SHAPE
        self._validate_query = validate_query or EMPTY_SHAPE
        self._validate_body = validate_body or EMPTY_SHAPE
        self.trace = trace

    async def handle(
        self, parameters: Any, query: Any, body: Any,
    ) -> DispatchResult:
        """Run one request through validation and processing."""
        try:
            request = Request(
                parameters=self._validate_parameters(parameters),
                query=self._validate_query(query),
                body=self._validate_body(body),
            )
        except ValidizeValidationError as exc:
            self._log_failure("Request rejected", exc, HTTP_BAD_REQUEST)
            return DispatchResult(HTTP_BAD_REQUEST)
        except Exception as exc:
            self._log_failure("Validator crashed", exc, HTTP_INTERNAL_ERROR)
            return DispatchResult(HTTP_INTERNAL_ERROR)

        try:
            result = self._process(request)
            if inspect.isawaitable(result):
                result = await result
            return DispatchResult(HTTP_OK, serialize(result))
        except Exception as exc:
            status_code = status_for(exc)
            self._log_failure("Processing failed", exc, status_code)
            return DispatchResult(status_code)

    __call__ = handle

    def _log_failure(self, what: str, exc: Exception, status_code: int) -> None:
        """Trace-only diagnostic line. Never influences the response."""
        if not self.trace:
            return
        if status_code >= HTTP_INTERNAL_ERROR:
            extra = exc.to_log_extra() if isinstance(exc, ValidizeError) else {}
            extra["status_code"] = status_code
            logger.error(f"{what}: {exc}", extra=extra, exc_info=exc)
            return
        extra = exc.to_log_extra()
        extra["status_code"] = status_code
        logger.log(exc.severity.log_level, f"{what}: {exc}", extra=extra)


def dispatch(
    process: ProcessFunction,
    *,
    validate_parameters: Validator[dict[str, Any]] | None = None,
    validate_query: Validator[dict[str, Any]] | None = None,
    validate_body: Validator[dict[str, Any]] | None = None,
    trace: bool = False,
) -> Dispatcher:
    """Build a Dispatcher for process."""
    return Dispatcher(
        process,
        validate_parameters=validate_parameters,
        validate_query=validate_query,
        validate_body=validate_body,
        trace=trace,
    )
