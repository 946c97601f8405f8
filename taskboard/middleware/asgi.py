"""Raw ASGI helpers shared by the middleware in this package."""

import json
from typing import Any, Callable


def get_header(scope: dict, name: str) -> str | None:
    """Return first header value for name (case-insensitive). Headers are (bytes, bytes)."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


def with_response_header(send: Callable, name: str, value: str) -> Callable:
    """Wrap send so that the response start message carries name: value."""

    async def send_wrapper(message: dict) -> None:
        if message["type"] == "http.response.start":
            headers = list(message.get("headers", []))
            headers.append((name.encode(), value.encode()))
            message["headers"] = headers
        await send(message)

    return send_wrapper


async def send_json_error(
    send: Callable,
    status: int,
    error: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> None:
    """Send a complete JSON error response in the same shape as the exception handlers."""
    body = json.dumps(
        {"error": error, "message": message, "details": details or {}}
    ).encode()
    await send({
        "type": "http.response.start",
        "status": status,
        "headers": [(b"content-type", b"application/json")],
    })
    await send({
        "type": "http.response.body",
        "body": body,
        "more_body": False,
    })
