import pytest
from httpx import AsyncClient

# Mark all tests in this module as async
pytestmark = pytest.mark.asyncio


async def test_health_check(app_client: AsyncClient):
    response = await app_client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_version(app_client: AsyncClient):
    response = await app_client.get("/version")
    assert response.status_code == 200
    assert response.json() == {"version": "1.0.0", "schema_version": "v1"}


async def test_responses_carry_timing_and_request_id_headers(app_client: AsyncClient):
    response = await app_client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"
    assert float(response.headers["X-Process-Time"]) >= 0
