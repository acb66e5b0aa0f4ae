"""Tests for starlight.server.sender."""

from typing import Any

import pytest

from starlight.http.response import Response
from starlight.server.sender import send_response


async def sent(response: Response) -> list[dict[str, Any]]:
    messages: list[dict[str, Any]] = []

    async def send(message: dict[str, Any]) -> None:
        messages.append(message)

    await send_response(response, send)
    return messages


class TestSendResponse:
    async def test_start_then_body(self) -> None:
        start, body = await sent(Response("Hey there!"))
        assert start["type"] == "http.response.start"
        assert start["status"] == 200
        assert start["headers"] == [
            (b"content-type", b"text/plain; charset=utf-8"),
            (b"content-length", b"10"),
        ]
        assert body == {"type": "http.response.body", "body": b"Hey there!"}

    async def test_extra_headers_lowercased(self) -> None:
        start, _ = await sent(Response(status=405).with_header("Allow", "GET"))
        assert (b"allow", b"GET") in start["headers"]

    async def test_bytes_length(self) -> None:
        start, body = await sent(Response("ü"))
        assert (b"content-length", b"2") in start["headers"]
        assert body["body"] == "ü".encode()

    @pytest.mark.parametrize("status", [101, 204, 304])
    async def test_bodiless_statuses(self, status: int) -> None:
        start, body = await sent(Response("dropped", status=status))
        assert (b"content-length", b"0") in start["headers"]
        assert body["body"] == b""
