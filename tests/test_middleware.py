"""Tests for starlight.middleware.logging.RequestLogger."""

import logging

import pytest

from starlight.errors import NotFound
from starlight.http.request import Request
from starlight.http.response import Response
from starlight.middleware import RequestLogger


async def _never(request: Request) -> Response:
    raise AssertionError


def make_request() -> Request:
    return Request.from_scope({"method": "GET", "path": "/hey"}, _never)


class TestRequestLogger:
    async def test_logs_status(self, caplog: pytest.LogCaptureFixture) -> None:
        async def ok(request: Request) -> Response:
            return Response("Hey there!")

        with caplog.at_level(logging.INFO, logger="starlight.access"):
            response = await RequestLogger()(make_request(), ok)
        assert response.text == "Hey there!"
        (record,) = caplog.records
        assert record.levelno == logging.INFO
        assert record.getMessage().startswith("GET /hey 200 ")
        assert record.getMessage().endswith("ms")

    async def test_http_error_logged_and_reraised(self, caplog: pytest.LogCaptureFixture) -> None:
        async def missing(request: Request) -> Response:
            raise NotFound()

        with caplog.at_level(logging.INFO, logger="starlight.access"):
            with pytest.raises(NotFound):
                await RequestLogger()(make_request(), missing)
        assert caplog.records[0].getMessage().startswith("GET /hey 404 ")

    async def test_crash_logged_at_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        async def crash(request: Request) -> Response:
            raise RuntimeError("nope")

        with caplog.at_level(logging.INFO, logger="starlight.access"):
            with pytest.raises(RuntimeError):
                await RequestLogger()(make_request(), crash)
        (record,) = caplog.records
        assert record.levelno == logging.WARNING
        assert "GET /hey failed after" in record.getMessage()

    async def test_custom_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        async def ok(request: Request) -> Response:
            return Response()

        with caplog.at_level(logging.INFO, logger="audit"):
            await RequestLogger(logging.getLogger("audit"))(make_request(), ok)
        assert caplog.records[0].name == "audit"
