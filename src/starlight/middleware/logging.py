"""Access log: one line per request on ``starlight.access``."""

import logging
import time

from starlight.errors import HTTPError
from starlight.http.request import Request
from starlight.http.response import Response
from starlight.middleware.protocol import Next

access_logger = logging.getLogger("starlight.access")


class RequestLogger:
    """Log ``METHOD PATH STATUS ELAPSEDms`` for each request.

    HTTP errors are logged with their status at INFO; anything else that
    escapes the handler is logged at WARNING. Both are re-raised for the
    pipeline to answer.
    """

    __slots__ = ("logger",)

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or access_logger

    async def __call__(self, request: Request, next: Next) -> Response:
        started = time.perf_counter()
        status: int | None = None
        try:
            response = await next(request)
            status = response.status
            return response
        except HTTPError as exc:
            status = exc.status
            raise
        finally:
            elapsed = (time.perf_counter() - started) * 1000
            method, path = request.method, request.path
            if status is None:
                self.logger.warning("%s %s failed after %.1fms", method, path, elapsed)
            else:
                self.logger.info("%s %s %d %.1fms", method, path, status, elapsed)
