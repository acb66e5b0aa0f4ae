"""Incoming request: method, path and a lazily read body."""

from __future__ import annotations

from dataclasses import dataclass, field

from starlight._types import Receive, Scope


@dataclass(frozen=True, slots=True)
class Request:
    """One HTTP request as seen by a handler.

    The body stays on the ASGI channel until ``body()`` is awaited; the
    bytes are kept so later calls do not read the channel again.
    """

    method: str
    path: str
    _receive: Receive = field(repr=False, compare=False)
    _body: list[bytes] = field(default_factory=list, repr=False, compare=False)

    @classmethod
    def from_scope(cls, scope: Scope, receive: Receive) -> Request:
        return cls(method=scope["method"].upper(), path=scope["path"], _receive=receive)

    async def body(self) -> bytes:
        """The complete request body, however many messages it arrived in."""
        if not self._body:
            chunks = bytearray()
            while True:
                message = await self._receive()
                if message["type"] == "http.disconnect":
                    break
                chunks += message.get("body", b"")
                if not message.get("more_body", False):
                    break
            self._body.append(bytes(chunks))
        return self._body[0]
