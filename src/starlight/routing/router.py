"""Exact-path route table.

Lookups go path first, then method, so the pipeline can tell a path
nobody serves (404) from a method the path does not accept (405).
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from starlight.errors import ConfigurationError, MethodNotAllowed, NotFound
from starlight.http.request import Request
from starlight.http.response import Response

Handler = Callable[[Request], Awaitable[Response]]


@dataclass(frozen=True, slots=True)
class Route:
    path: str
    handler: Handler
    methods: frozenset[str]
    name: str | None = None


def canonical_path(path: str) -> str:
    """``/hey/`` and ``//hey`` both become ``/hey``."""
    return "/" + "/".join(segment for segment in path.split("/") if segment)


class Router:
    """Maps (method, path) to the one route that serves it."""

    __slots__ = ("_by_path", "_routes")

    def __init__(self, routes: tuple[Route, ...] = ()) -> None:
        self._routes: list[Route] = []
        self._by_path: dict[str, dict[str, Route]] = {}
        for route in routes:
            self.add(route)

    def add(self, route: Route) -> None:
        if not route.methods:
            msg = f"{route.path!r} is registered without any method"
            raise ConfigurationError(msg)
        slots = self._by_path.setdefault(canonical_path(route.path), {})
        taken = sorted(route.methods & slots.keys())
        if taken:
            other = slots[taken[0]].handler.__qualname__
            msg = f"{taken[0]} {route.path!r} is already handled by {other}"
            raise ConfigurationError(msg)
        slots.update(dict.fromkeys(route.methods, route))
        self._routes.append(route)

    @property
    def routes(self) -> tuple[Route, ...]:
        """Routes in registration order."""
        return tuple(self._routes)

    def match(self, method: str, path: str) -> Route:
        """Return the route for *method* on *path*.

        Raises ``NotFound`` for an unknown path and ``MethodNotAllowed``
        when the path is known under other methods only.
        """
        slots = self._by_path.get(canonical_path(path))
        if slots is None:
            raise NotFound(f"Nothing is served at {path}")
        route = slots.get(method.upper())
        if route is None:
            raise MethodNotAllowed(method.upper(), frozenset(slots))
        return route
