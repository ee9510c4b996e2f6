"""Dispatch Routes: binds Dispatchers to FastAPI routers.

Invariants:
    - Route parameters arrive as a str-valued dict (Starlette path_params)
    - Query keys seen once map to str, repeated keys map to list[str]
    - An empty request body is treated as {} so EMPTY_SHAPE accepts body-less requests
    - Malformed JSON bodies → 400 with empty body; the dispatcher is not invoked
    - Empty DispatchResult bodies produce responses with no content

Design Decisions:
    - Endpoint receives the raw Starlette Request, not FastAPI-parsed params: validation
      belongs to the dispatcher, not to FastAPI's signature introspection
    - Body decoded for any content type (text/plain JSON included): clients posting JSON
      without a header still work
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import Response

from validize.api.dispatcher import HTTP_BAD_REQUEST, Dispatcher, DispatchResult
from validize.core.errors import MalformedBodyError

logger = logging.getLogger(__name__)


def collect_query(request: Request) -> dict[str, Any]:
    """Flatten query params: single values as str, repeated keys as list[str]."""
    query: dict[str, Any] = {}
    for key, value in request.query_params.multi_items():
        if key not in query:
            query[key] = value
        elif isinstance(query[key], list):
            query[key].append(value)
        else:
            query[key] = [query[key], value]
    return query


async def read_body(request: Request) -> Any:
    """Decode the JSON body. Empty body → {}."""
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise MalformedBodyError(f"Malformed request body: {exc}") from exc


def to_response(result: DispatchResult) -> Response:
    if not result.body:
        return Response(status_code=result.status_code)
    return Response(
        content=result.body,
        status_code=result.status_code,
        media_type="application/json",
    )


def add_dispatch_route(
    router: APIRouter | FastAPI,
    path: str,
    dispatcher: Dispatcher,
    methods: list[str] | None = None,
    name: str | None = None,
) -> None:
    """Register dispatcher as the handler for path on router."""

    async def endpoint(request: Request) -> Response:
        try:
            body = await read_body(request)
        except MalformedBodyError as exc:
            if dispatcher.trace:
                logger.warning(
                    f"Request rejected: {exc}",
                    extra={**exc.to_log_extra(), "path": request.url.path},
                )
            return Response(status_code=HTTP_BAD_REQUEST)

        result = await dispatcher.handle(
            dict(request.path_params), collect_query(request), body,
        )
        return to_response(result)

    router.add_api_route(
        path, endpoint, methods=methods or ["GET"], name=name,
    )
