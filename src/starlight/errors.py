"""Errors raised by the app, the router and the request pipeline."""

from http import HTTPStatus


class StarlightError(Exception):
    """Base class for every starlight error."""


class ConfigurationError(StarlightError):
    """A route table or app setup that cannot be served."""


class HTTPError(StarlightError):
    """A request that ends in an HTTP error status.

    The pipeline turns it into a plain-text response carrying ``detail``
    and any extra ``headers``.
    """

    status: int = 500

    def __init__(self, detail: str = "", headers: tuple[tuple[str, str], ...] = ()) -> None:
        self.detail = detail or HTTPStatus(self.status).phrase
        self.headers = headers
        super().__init__(self.detail)


class NotFound(HTTPError):  # noqa: N818
    status = 404


class MethodNotAllowed(HTTPError):  # noqa: N818
    """The path is routed, but not for the request method."""

    status = 405

    def __init__(self, method: str, allowed: frozenset[str]) -> None:
        allow = ", ".join(sorted(allowed))
        super().__init__(f"{method} is not allowed here; use {allow}", (("Allow", allow),))
