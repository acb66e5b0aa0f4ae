"""Implementations of ``starlight run`` and ``starlight routes``."""

import argparse
import importlib
import sys

from starlight.app import App
from starlight.errors import ConfigurationError
from starlight.log import configure_logging
from starlight.server import runner


def load_app(target: str) -> App:
    """Import ``module:attribute`` (attribute defaults to ``app``) and compile it.

    Prints the reason and exits with status 1 when the target cannot be
    loaded or is not an App.
    """
    module_name, _, attribute = target.partition(":")
    try:
        app = getattr(importlib.import_module(module_name), attribute or "app")
        if not isinstance(app, App):
            msg = f"{target} is a {type(app).__name__}, not a starlight App"
            raise TypeError(msg)
        app.compile()
    except (ImportError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    return app


def run_command(args: argparse.Namespace) -> None:
    app = load_app(args.app)
    config = app.config
    log_level = args.log_level or config.log_level
    configure_logging(log_level)
    runner.run_server(
        app,
        config.host if args.host is None else args.host,
        config.port if args.port is None else args.port,
        log_level=log_level,
    )


def routes_command(args: argparse.Namespace) -> None:
    """One ``METHODS PATH HANDLER`` line per route."""
    for route in load_app(args.app).routes:
        methods = ",".join(sorted(route.methods))
        print(f"{methods:<10} {route.path:<20} {route.handler.__qualname__}")
