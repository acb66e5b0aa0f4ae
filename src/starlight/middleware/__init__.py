"""Request middleware."""

from starlight.middleware.logging import RequestLogger
from starlight.middleware.protocol import Middleware, Next

__all__ = ["Middleware", "Next", "RequestLogger"]
