"""Request ID and correlation ID middleware.

RequestIDMiddleware generates or forwards X-Request-ID; CorrelationIDMiddleware
forwards X-Correlation-ID or falls back to the request id. Both echo the value
on the response. Client-provided request ids are sanitized (length + character
set) to prevent log injection. Raw ASGI (no BaseHTTPMiddleware).
"""

import re
import uuid
from typing import Callable

from taskboard.middleware.asgi import get_header, with_response_header

# Safe for logging: alphanumeric, hyphen, underscore; max length to avoid abuse.
REQUEST_ID_MAX_LENGTH = 64
REQUEST_ID_ALLOWED_PATTERN = re.compile(
    r"^[a-zA-Z0-9_-]{1," + str(REQUEST_ID_MAX_LENGTH) + r"}$"
)


def _sanitize_request_id(raw: str | None) -> str:
    """Return raw if valid and safe; otherwise return a new UUID."""
    if not raw or not REQUEST_ID_ALLOWED_PATTERN.match(raw.strip()):
        return str(uuid.uuid4())
    return raw.strip()


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Add or forward the request id on each request and response."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = _sanitize_request_id(get_header(scope, header_name))
        scope.setdefault("state", {})["request_id"] = request_id
        await app(scope, receive, with_response_header(send, header_name, request_id))

    return asgi_app


def CorrelationIDMiddleware(
    app: Callable, header_name: str = "X-Correlation-ID"
) -> Callable:
    """Add or forward the correlation id; must sit inside RequestIDMiddleware to reuse its id."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        correlation_id = _sanitize_request_id(
            get_header(scope, header_name) or scope.get("state", {}).get("request_id")
        )
        scope.setdefault("state", {})["correlation_id"] = correlation_id
        await app(scope, receive, with_response_header(send, header_name, correlation_id))

    return asgi_app
