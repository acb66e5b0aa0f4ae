"""Request and response types handed to and returned by handlers."""

from starlight.http.request import Request
from starlight.http.response import TEXT_PLAIN, Response

__all__ = ["TEXT_PLAIN", "Request", "Response"]
