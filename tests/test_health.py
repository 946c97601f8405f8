"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200, status ok and the active backend."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data.get("status") == "ok"
    assert data.get("backend") == "memory"


async def test_response_carries_request_id(client: AsyncClient) -> None:
    """A valid client request id is echoed back; correlation id falls back to it."""
    response = await client.get(
        "/api/v1/health", headers={"X-Request-ID": "req-123_abc"}
    )
    assert response.headers.get("x-request-id") == "req-123_abc"
    assert response.headers.get("x-correlation-id") == "req-123_abc"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    """A request id with spaces and semicolons is replaced by a generated one."""
    response = await client.get(
        "/api/v1/health", headers={"X-Request-ID": "bad id; drop table"}
    )
    echoed = response.headers.get("x-request-id")
    assert echoed
    assert "bad" not in echoed


async def test_security_headers_present(client: AsyncClient) -> None:
    """API responses carry the default security headers."""
    response = await client.get("/api/v1/health")
    assert response.headers.get("x-content-type-options") == "nosniff"
    assert response.headers.get("x-frame-options") == "DENY"
    assert "default-src 'none'" in response.headers.get("content-security-policy", "")


async def test_docs_have_no_csp(client: AsyncClient) -> None:
    """Swagger UI is served without the restrictive CSP."""
    response = await client.get("/docs")
    assert response.status_code == 200
    assert "content-security-policy" not in response.headers
