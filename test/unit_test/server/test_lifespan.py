"""
Unit tests for FastAPI application lifespan management.

Startup must create the schema (or log why it could not) and shutdown must
release the shared HTTP clients and the database pool.
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI

MAIN = "expressfix.server.main"


@pytest.fixture
def lifespan_mocks():
    with (
        patch(f"{MAIN}.init_db", new_callable=AsyncMock) as init_db,
        patch(f"{MAIN}.close_auth_client", new_callable=AsyncMock) as close_auth,
        patch(f"{MAIN}.close_storage_client", new_callable=AsyncMock) as close_storage,
        patch(f"{MAIN}.dispose_engine", new_callable=AsyncMock) as dispose,
    ):
        yield {"init_db": init_db, "close_auth": close_auth, "close_storage": close_storage, "dispose": dispose}


class TestLifespan:
    async def test_startup_initializes_database(self, lifespan_mocks):
        from expressfix.server.main import lifespan

        async with lifespan(FastAPI()):
            lifespan_mocks["init_db"].assert_awaited_once()
            lifespan_mocks["dispose"].assert_not_awaited()

    async def test_shutdown_releases_resources(self, lifespan_mocks):
        from expressfix.server.main import lifespan

        async with lifespan(FastAPI()):
            pass

        lifespan_mocks["close_auth"].assert_awaited_once()
        lifespan_mocks["close_storage"].assert_awaited_once()
        lifespan_mocks["dispose"].assert_awaited_once()

    async def test_startup_survives_database_failure(self, lifespan_mocks):
        from expressfix.server.main import lifespan

        lifespan_mocks["init_db"].side_effect = ConnectionRefusedError("db down")

        with patch(f"{MAIN}.logger") as mock_logger:
            async with lifespan(FastAPI()):
                pass

        assert "Database initialization failed" in mock_logger.error.call_args[0][0]
        lifespan_mocks["dispose"].assert_awaited_once()


class TestInitDb:
    async def test_creates_tables_when_enabled(self):
        from expressfix.core.database import session as session_module

        with (
            patch.object(session_module.settings, "auto_create_tables", True),
            patch.object(session_module, "create_all", new_callable=AsyncMock) as create_all,
        ):
            await session_module.init_db()
        create_all.assert_awaited_once_with(session_module.engine)

    async def test_skips_when_disabled(self):
        from expressfix.core.database import session as session_module

        with (
            patch.object(session_module.settings, "auto_create_tables", False),
            patch.object(session_module, "create_all", new_callable=AsyncMock) as create_all,
        ):
            await session_module.init_db()
        create_all.assert_not_awaited()


class TestAppWiring:
    def test_routers_are_mounted(self):
        from expressfix.server.main import app

        paths = app.openapi()["paths"]
        for path in (
            "/health",
            "/version",
            "/api/v1/auth/me",
            "/api/v1/profiles/me",
            "/api/v1/uploads",
            "/api/v1/uploads/{upload_id}",
            "/api/v1/analysis",
            "/api/v1/analysis/history",
            "/api/v1/enhancements",
            "/api/v1/brand-guidelines",
            "/api/v1/brand-guidelines/{guideline_id}",
            "/api/v1/exports",
            "/api/v1/exports/{export_id}/preview",
            "/api/v1/notifications",
            "/api/v1/analytics",
        ):
            assert path in paths, path

    def test_main_runs_uvicorn(self):
        from expressfix.server import main as main_module

        with patch.object(main_module.uvicorn, "run") as run:
            main_module.main()

        args, kwargs = run.call_args
        assert args[0] == "expressfix.server.main:app"
        assert kwargs["port"] == main_module.settings.server_port
