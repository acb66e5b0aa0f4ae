"""The shape every middleware has.

A middleware receives the request and the rest of the chain, and returns
the response the chain produced (or one of its own)::

    async def stamp(request: Request, next: Next) -> Response:
        return (await next(request)).with_header("X-Served-By", "starlight")
"""

from collections.abc import Awaitable, Callable
from typing import Protocol, TypeAlias

from starlight.http.request import Request
from starlight.http.response import Response

Next: TypeAlias = Callable[[Request], Awaitable[Response]]


class Middleware(Protocol):
    async def __call__(self, request: Request, next: Next) -> Response: ...
