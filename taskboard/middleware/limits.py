"""Request limit middleware: wall-clock timeout and body size.

TimeoutMiddleware cancels a request that runs longer than the configured
timeout (504). RequestSizeLimitMiddleware rejects bodies over max_bytes (413),
checking Content-Length up front and counting bytes for chunked uploads.
Raw ASGI (no BaseHTTPMiddleware).
"""

import asyncio
import logging
from typing import Callable

from taskboard.middleware.asgi import get_header, send_json_error

logger = logging.getLogger(__name__)


def TimeoutMiddleware(app: Callable, timeout_seconds: int) -> Callable:
    """Cancel request after timeout_seconds.

    Sends 504 when nothing has been sent yet; a response already in flight
    is ended with an empty final body chunk instead.
    """

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        started = False
        finished = False

        async def tracking_send(message: dict) -> None:
            nonlocal started, finished
            if message["type"] == "http.response.start":
                started = True
            elif message["type"] == "http.response.body" and not message.get(
                "more_body", False
            ):
                finished = True
            await send(message)

        try:
            await asyncio.wait_for(
                app(scope, receive, tracking_send),
                timeout=float(timeout_seconds),
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Request timed out after %s seconds: %s %s (response started: %s)",
                timeout_seconds,
                scope.get("method", ""),
                scope.get("path", ""),
                started,
            )
            if not started:
                await send_json_error(
                    send,
                    504,
                    "GATEWAY_TIMEOUT",
                    f"Request timed out after {timeout_seconds} seconds",
                    {"timeout_seconds": timeout_seconds},
                )
            elif not finished:
                await send({"type": "http.response.body", "body": b"", "more_body": False})

    return asgi_app


def _replayer(chunks: list[bytes], receive: Callable) -> Callable:
    """Return a receive callable that replays buffered chunks, then defers to receive."""
    pending = list(chunks)

    async def replay() -> dict:
        if pending:
            body = pending.pop(0)
            return {"type": "http.request", "body": body, "more_body": bool(pending)}
        return await receive()

    return replay


def RequestSizeLimitMiddleware(app: Callable, max_bytes: int) -> Callable:
    """Reject requests whose body exceeds max_bytes (Content-Length or streamed)."""

    async def too_large(send: Callable, actual: int) -> None:
        await send_json_error(
            send,
            413,
            "PAYLOAD_TOO_LARGE",
            f"Request body must be at most {max_bytes} bytes",
            {"max_bytes": max_bytes, "content_length": actual},
        )

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        content_length = get_header(scope, "content-length")
        if content_length is not None:
            try:
                length = int(content_length)
            except ValueError:
                length = 0
            if length > max_bytes:
                await too_large(send, length)
                return
            await app(scope, receive, send)
            return

        # No Content-Length (e.g. chunked): buffer and count, then replay.
        chunks: list[bytes] = []
        total = 0
        while True:
            message = await receive()
            if message["type"] != "http.request":
                return
            body = message.get("body", b"")
            total += len(body)
            if total > max_bytes:
                await too_large(send, total)
                return
            chunks.append(body)
            if not message.get("more_body", False):
                break

        await app(scope, _replayer(chunks, receive), send)

    return asgi_app
