"""Security headers middleware.

Adds common security-related response headers (CSP, HSTS, X-Content-Type-Options, etc.).
The interactive API docs load scripts and styles from a CDN, so their paths get
no Content-Security-Policy. Raw ASGI (no BaseHTTPMiddleware).
"""

from typing import Callable

DEFAULT_HEADERS = {
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
}

DOCS_PATHS = ("/docs", "/redoc", "/openapi.json")


def SecurityHeadersMiddleware(
    app: Callable,
    headers: dict[str, str] | None = None,
    docs_paths: tuple[str, ...] = DOCS_PATHS,
) -> Callable:
    """Set security headers on all responses; skip the CSP for API docs."""
    resolved = headers if headers is not None else DEFAULT_HEADERS.copy()
    header_list = [(k.encode(), v.encode()) for k, v in resolved.items()]
    docs_header_list = [
        (name_b, value_b)
        for name_b, value_b in header_list
        if name_b.lower() != b"content-security-policy"
    ]

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        path = scope.get("path", "")
        to_add = (
            docs_header_list
            if any(path.startswith(p) for p in docs_paths)
            else header_list
        )

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                existing = list(message.get("headers", []))
                seen = {h[0].lower() for h in existing}
                for name_b, value_b in to_add:
                    if name_b.lower() not in seen:
                        existing.append((name_b, value_b))
                message["headers"] = existing
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
