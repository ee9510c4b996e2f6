"""Example Routes: route parameters, query strings and bodies validated by shapes.

Invariants:
    - GET  /paramsonly/{name}: name is lowercase letters only
    - GET  /queryonly?option=N: N is an integer in [1, 3] (coerced, query values are strings)
    - POST /post/{name}: body {i: integer in [1, 3], s?: string of a-f}
    - Shapes are module-level values, built once and shared by every request

Design Decisions:
    - build_router takes trace explicitly: dispatchers never read settings themselves
    - Route and query values are always strings, so numeric fields there need coerce=True;
      body values are already typed JSON, so body fields stay strict
"""

from fastapi import APIRouter

from validize.api.dispatcher import dispatch
from validize.api.routes import add_dispatch_route
from validize.core.domain_types import Request
from validize.core.shape import shape
from validize.core.validators import integer, optional, string


# ─── Shapes ──────────────────────────────────────────────────────

NAME_PARAMETERS = shape({
    "name": string(r"^[a-z]+$"),
})

OPTION_QUERY = shape({
    "option": integer(1, 3, coerce=True),
})

POST_BODY = shape({
    "i": integer(1, 3),
    "s": optional(string(r"^[a-f]+$")),
})


# ─── Processing Functions ────────────────────────────────────────

async def greet(request: Request) -> str:
    return f"Name was {request.parameters['name']}"


async def choose_option(request: Request) -> dict:
    return {"chosenOption": request.query["option"]}


async def echo_post(request: Request) -> dict:
    response = {
        "name": request.parameters["name"],
        "i": request.body["i"],
    }
    if "s" in request.body:
        response["s"] = request.body["s"]
    return response


def build_router(trace: bool = False) -> APIRouter:
    """Router with the example routes, each behind its own Dispatcher."""
    router = APIRouter(tags=["examples"])
    add_dispatch_route(
        router, "/paramsonly/{name}",
        dispatch(greet, validate_parameters=NAME_PARAMETERS, trace=trace),
        methods=["GET"], name="params_only",
    )
    add_dispatch_route(
        router, "/queryonly",
        dispatch(choose_option, validate_query=OPTION_QUERY, trace=trace),
        methods=["GET"], name="query_only",
    )
    add_dispatch_route(
        router, "/post/{name}",
        dispatch(
            echo_post,
            validate_parameters=NAME_PARAMETERS,
            validate_body=POST_BODY,
            trace=trace,
        ),
        methods=["POST"], name="post",
    )
    return router
