"""Starlight: a three-route demonstration HTTP service on a small ASGI core.

::

    from starlight import App, Request, Response

    app = App()

    @app.route("/")
    async def index(request: Request) -> Response:
        return Response("Hello world!")

    app.run()

The demo service itself is ``starlight.service:app``.
"""

import importlib

__version__ = "0.1.0"

# Public name -> defining module, imported on first access
_LAZY_IMPORTS: dict[str, str] = {
    "App": "starlight.app",
    "AppConfig": "starlight.config",
    "ConfigurationError": "starlight.errors",
    "HTTPError": "starlight.errors",
    "MethodNotAllowed": "starlight.errors",
    "Middleware": "starlight.middleware.protocol",
    "Next": "starlight.middleware.protocol",
    "NotFound": "starlight.errors",
    "Request": "starlight.http.request",
    "RequestLogger": "starlight.middleware.logging",
    "Response": "starlight.http.response",
    "StarlightError": "starlight.errors",
    "create_app": "starlight.service",
}

__all__ = sorted(_LAZY_IMPORTS)


def __getattr__(name: str) -> object:
    try:
        module = _LAZY_IMPORTS[name]
    except KeyError:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg) from None
    return getattr(importlib.import_module(module), name)
