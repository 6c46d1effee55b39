"""
Fixtures for API tests.

The app runs against the per-test SQLite session, and the auth and storage
clients talk to ``httpx.MockTransport`` handlers instead of real services.
Bearer tokens map to users through ``MOCK_USERS``; the default client sends
Alice's token.
"""

import json
from typing import AsyncGenerator, Dict, List

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from expressfix.server.services.auth import AuthClient
from expressfix.server.services.storage import StorageClient
from test.settings import test_settings

ALICE_TOKEN = "alice-token"
BOB_TOKEN = "bob-token"

MOCK_USERS: Dict[str, dict] = {
    ALICE_TOKEN: {
        "id": "user-alice",
        "email": "alice@example.com",
        "user_metadata": {"full_name": "Alice Designer"},
        "role": "authenticated",
    },
    BOB_TOKEN: {
        "id": "user-bob",
        "email": "bob@example.com",
        "user_metadata": {},
        "role": "authenticated",
    },
}


def _bearer(request: httpx.Request) -> str:
    return request.headers.get("authorization", "").removeprefix("Bearer ").strip()


def mock_auth_handler(calls: List[httpx.Request]):
    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        path = request.url.path
        if path == "/auth/v1/user":
            user = MOCK_USERS.get(_bearer(request))
            if user is None:
                return httpx.Response(401, json={"msg": "invalid JWT"})
            return httpx.Response(200, json=user)
        if path == "/auth/v1/signup":
            body = json.loads(request.content)
            if body["email"] == "taken@example.com":
                return httpx.Response(422, json={"msg": "User already registered"})
            return httpx.Response(
                200, json={"id": "user-new", "email": body["email"], "user_metadata": body.get("data") or {}}
            )
        if path == "/auth/v1/token":
            body = json.loads(request.content)
            if request.url.params.get("grant_type") != "password" or body.get("password") != "correct-password":
                return httpx.Response(400, json={"error": "invalid_grant"})
            return httpx.Response(
                200,
                json={"access_token": ALICE_TOKEN, "token_type": "bearer", "user": MOCK_USERS[ALICE_TOKEN]},
            )
        if path == "/auth/v1/logout":
            if _bearer(request) not in MOCK_USERS:
                return httpx.Response(401, json={"msg": "invalid JWT"})
            return httpx.Response(204)
        return httpx.Response(404)

    return handler


def mock_storage_handler(calls: List[httpx.Request]):
    prefix = "/storage/v1/object/upload/sign/"

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if request.method == "POST" and request.url.path.startswith(prefix):
            object_path = request.url.path[len(prefix):]
            return httpx.Response(200, json={"url": f"/object/upload/sign/{object_path}?token=signed-token"})
        return httpx.Response(404)

    return handler


@pytest.fixture
def auth_calls() -> List[httpx.Request]:
    return []


@pytest.fixture
def storage_calls() -> List[httpx.Request]:
    return []


@pytest_asyncio.fixture
async def auth_client(auth_calls) -> AsyncGenerator[AuthClient, None]:
    client = AuthClient(
        test_settings.services.auth_url,
        api_key=test_settings.services.service_key,
        client=httpx.AsyncClient(transport=httpx.MockTransport(mock_auth_handler(auth_calls))),
    )
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def storage_client(storage_calls) -> AsyncGenerator[StorageClient, None]:
    client = StorageClient(
        test_settings.services.storage_url,
        api_key=test_settings.services.service_key,
        client=httpx.AsyncClient(transport=httpx.MockTransport(mock_storage_handler(storage_calls))),
    )
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def app_client(
    session: AsyncSession, auth_client: AuthClient, storage_client: StorageClient
) -> AsyncGenerator[AsyncClient, None]:
    """Unauthenticated HTTP client with overridden dependencies."""
    from expressfix.core.database import get_session
    from expressfix.server.main import app
    from expressfix.server.services.auth import get_auth_client
    from expressfix.server.services.storage import get_storage_client

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_auth_client] = lambda: auth_client
    app.dependency_overrides[get_storage_client] = lambda: storage_client

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def client(app_client: AsyncClient) -> AsyncClient:
    """HTTP client authenticated as Alice."""
    app_client.headers["Authorization"] = f"Bearer {ALICE_TOKEN}"
    return app_client


@pytest.fixture
def bob_headers() -> Dict[str, str]:
    return {"Authorization": f"Bearer {BOB_TOKEN}"}
