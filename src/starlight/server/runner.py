"""Serve an app with uvicorn.

uvicorn owns the socket, the connections and the event loop; this module
only configures it and reports a failed start.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import uvicorn

if TYPE_CHECKING:
    from starlight.app import App

logger = logging.getLogger("starlight.server")


def run_server(app: App, host: str, port: int, *, log_level: str = "info") -> None:
    """Serve *app* on ``host:port`` until the process is interrupted.

    Raises:
        SystemExit: status 1 when uvicorn never finished starting, most
            often because the port is already taken.
    """
    config = uvicorn.Config(app, host=host, port=port, log_level=log_level, lifespan="on")
    server = uvicorn.Server(config)

    logger.info("Starting starlight on %s:%d", host, port)
    try:
        server.run()
    except SystemExit as exc:
        # uvicorn exits by itself when startup fails
        if server.started or not exc.code:
            raise
    if not server.started:
        logger.error("Could not start listening on %s:%d", host, port)
        raise SystemExit(1)
