"""Write a Response out as ASGI messages."""

from starlight._types import Send
from starlight.http.response import Response

# Statuses that never carry a body
BODILESS = frozenset({204, 304}) | frozenset(range(100, 200))


def encode_headers(response: Response, content_length: int) -> list[tuple[bytes, bytes]]:
    pairs = [("content-type", response.content_type), *response.headers]
    pairs.append(("content-length", str(content_length)))
    return [(name.lower().encode("latin-1"), value.encode("latin-1")) for name, value in pairs]


async def send_response(response: Response, send: Send) -> None:
    """Send the status line and headers, then the whole body in one message."""
    body = b"" if response.status in BODILESS else response.body_bytes
    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": encode_headers(response, len(body)),
        }
    )
    await send({"type": "http.response.body", "body": body})
