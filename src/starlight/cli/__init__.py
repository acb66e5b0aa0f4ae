"""The ``starlight`` command.

::

    starlight run [APP] [--host HOST] [--port PORT] [--log-level LEVEL]
    starlight routes [APP]

``APP`` is a ``module:attribute`` import string and defaults to the demo
service. Without flags, ``run`` serves the app's configured address.
"""

import argparse
import sys

DEFAULT_APP = "starlight.service:app"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="starlight", description="Serve a starlight app.")
    commands = parser.add_subparsers(dest="command")

    run = commands.add_parser("run", help="serve an app with uvicorn")
    run.add_argument("app", nargs="?", default=DEFAULT_APP, help=f"default: {DEFAULT_APP}")
    run.add_argument("--host", help="bind address instead of the configured one")
    run.add_argument("--port", type=int, help="bind port instead of the configured one")
    run.add_argument(
        "--log-level",
        choices=["critical", "error", "warning", "info", "debug"],
        help="log level instead of the configured one",
    )

    routes = commands.add_parser("routes", help="list an app's routes")
    routes.add_argument("app", nargs="?", default=DEFAULT_APP, help=f"default: {DEFAULT_APP}")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from starlight.cli import _commands

    if args.command == "run":
        _commands.run_command(args)
    else:
        _commands.routes_command(args)
