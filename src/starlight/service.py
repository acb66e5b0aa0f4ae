"""The demo service: three fixed routes.

==========  =======  ===========================
Method      Path     Response body
==========  =======  ===========================
GET         /        ``Hello world!``
POST        /echo    the request body, unchanged
GET         /hey     ``Hey there!``
==========  =======  ===========================

``starlight run`` serves ``starlight.service:app`` on ``0.0.0.0:8090``.
"""

from starlight.app import App
from starlight.config import AppConfig
from starlight.http.request import Request
from starlight.http.response import Response
from starlight.middleware.logging import RequestLogger

HELLO_BODY = "Hello world!"
HEY_BODY = "Hey there!"


async def handle_root(request: Request) -> Response:
    return Response(HELLO_BODY)


async def handle_echo(request: Request) -> Response:
    # Raw bytes, so any payload round-trips
    return Response(await request.body())


async def handle_hey(request: Request) -> Response:
    return Response(HEY_BODY)


def create_app(config: AppConfig | None = None) -> App:
    """The service app, with access logging in front of the routes."""
    app = App(config)
    app.add_middleware(RequestLogger())

    app.route("/", methods=["GET"], name="root")(handle_root)
    app.route("/echo", methods=["POST"], name="echo")(handle_echo)
    app.add_route("/hey", handle_hey, methods=["GET"], name="hey")
    return app


app = create_app()
