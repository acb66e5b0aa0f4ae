"""The App: routes and middleware, served over ASGI."""

import logging
import threading
from collections.abc import Callable, Iterable

from starlight._types import Receive, Scope, Send
from starlight.config import AppConfig
from starlight.errors import ConfigurationError
from starlight.middleware.protocol import Middleware, Next
from starlight.routing.router import Handler, Route, Router
from starlight.server.handler import build_chain, handle_request

logger = logging.getLogger("starlight.app")


class App:
    """An ASGI application assembled from routes and middleware.

    Registration happens up front. The first request, the lifespan startup,
    ``routes`` or ``run()`` compiles what was registered into a Router and
    a middleware chain, exactly once and under a lock. A compiled app
    rejects further registration.
    """

    __slots__ = ("_chain", "_lock", "_middleware", "_pending", "_router", "config")

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or AppConfig()
        self._pending: list[Route] = []
        self._middleware: list[Middleware] = []
        self._lock = threading.Lock()
        self._router: Router | None = None
        self._chain: Next | None = None

    def route(
        self,
        path: str,
        *,
        methods: Iterable[str] = ("GET",),
        name: str | None = None,
    ) -> Callable[[Handler], Handler]:
        """Decorator form of :meth:`add_route`."""

        def register(handler: Handler) -> Handler:
            self.add_route(path, handler, methods=methods, name=name)
            return handler

        return register

    def add_route(
        self,
        path: str,
        handler: Handler,
        *,
        methods: Iterable[str] = ("GET",),
        name: str | None = None,
    ) -> None:
        self._refuse_if_compiled()
        verbs = frozenset(method.upper() for method in methods)
        self._pending.append(Route(path, handler, verbs, name or handler.__name__))

    def add_middleware(self, middleware: Middleware) -> None:
        """Append *middleware*; the first one added sees the request first."""
        self._refuse_if_compiled()
        self._middleware.append(middleware)

    @property
    def compiled(self) -> bool:
        return self._router is not None

    @property
    def routes(self) -> tuple[Route, ...]:
        return self.compile().routes

    def compile(self) -> Router:
        """Build the router and the middleware chain, once."""
        if self._router is None:
            with self._lock:
                if self._router is None:
                    router = Router(tuple(self._pending))
                    self._chain = build_chain(router, tuple(self._middleware))
                    self._router = router
                    logger.debug("Compiled %d routes", len(router.routes))
        assert self._router is not None
        return self._router

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Serve the app with uvicorn, by default on the configured address."""
        from starlight.log import configure_logging
        from starlight.server.runner import run_server

        self.compile()
        configure_logging(self.config.log_level)
        run_server(
            self,
            self.config.host if host is None else host,
            self.config.port if port is None else port,
            log_level=self.config.log_level,
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await self._lifespan(receive, send)
        elif scope["type"] == "http":
            self.compile()
            assert self._chain is not None
            await handle_request(scope, receive, send, chain=self._chain, debug=self.config.debug)

    async def _lifespan(self, receive: Receive, send: Send) -> None:
        """Compile at startup so a broken route table stops the server early."""
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                try:
                    self.compile()
                except ConfigurationError as exc:
                    logger.error("Startup failed: %s", exc)
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    def _refuse_if_compiled(self) -> None:
        if self.compiled:
            msg = "Routes and middleware must be registered before the app is served"
            raise RuntimeError(msg)
