"""Exact-path routing."""

from starlight.routing.router import Handler, Route, Router

__all__ = ["Handler", "Route", "Router"]
