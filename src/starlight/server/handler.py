"""The per-request pipeline.

Builds the Request, runs it through the middleware around route dispatch,
turns errors into responses and sends the result.
"""

import logging
import traceback

from starlight._types import Receive, Scope, Send
from starlight.errors import ConfigurationError, HTTPError
from starlight.http.request import Request
from starlight.http.response import Response
from starlight.middleware.protocol import Middleware, Next
from starlight.routing.router import Router
from starlight.server.sender import send_response

logger = logging.getLogger("starlight.server")


def build_chain(router: Router, middleware: tuple[Middleware, ...]) -> Next:
    """Wrap route dispatch in *middleware*, first entry outermost."""

    async def dispatch(request: Request) -> Response:
        route = router.match(request.method, request.path)
        response = await route.handler(request)
        if not isinstance(response, Response):
            name = route.handler.__qualname__
            msg = f"{name} returned {type(response).__name__}, not Response"
            raise ConfigurationError(msg)
        return response

    chain: Next = dispatch
    for mw in reversed(middleware):

        async def step(request: Request, mw: Middleware = mw, rest: Next = chain) -> Response:
            return await mw(request, rest)

        chain = step
    return chain


def error_response(exc: HTTPError) -> Response:
    response = Response(exc.detail, status=exc.status)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def crash_response(request: Request, debug: bool) -> Response:
    """500 for an unexpected exception. Must be called from its ``except`` block."""
    logger.exception("Unhandled error in %s %s", request.method, request.path)
    body = traceback.format_exc() if debug else "Internal Server Error"
    return Response(body, status=500)


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    chain: Next,
    debug: bool = False,
) -> None:
    request = Request.from_scope(scope, receive)
    try:
        response = await chain(request)
    except HTTPError as exc:
        response = error_response(exc)
    except Exception:
        response = crash_response(request, debug)
    await send_response(response, send)
