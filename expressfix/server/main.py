"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request tracing), registers exception handlers and includes all API routers.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from expressfix.core.database import dispose_engine, init_db
from expressfix.core.logging_config import get_logger, setup_logging
from expressfix.core.monitoring import initialize_logfire

from .api.v1 import (
    analysis,
    analytics,
    auth,
    brand_guidelines,
    enhancements,
    exports,
    health,
    notifications,
    profiles,
    uploads,
)
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware
from .services.auth import close_auth_client
from .services.storage import close_storage_client

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Startup creates missing tables (when enabled); shutdown closes the shared
    HTTP clients and the database pool.
    """
    try:
        logger.info("Starting up ExpressFix Server...")
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    logger.info("Shutting down ExpressFix Server...")
    await close_auth_client()
    await close_storage_client()
    await dispose_engine()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    ExpressFix Server API

    Backend of the ExpressFix design review tools: design uploads, Smart Fix,
    Brand Checker, Typography Guide and AI Suggestions analyses, AI enhancement,
    exports, notifications and user analytics.
    """,
    version=constant.API_VERSION,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

initialize_logfire(app)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(LogfireMiddleware)

setup_exception_handlers(app)

app.include_router(health.router, tags=["health"])
app.include_router(auth.router, prefix=f"{constant.API_V1_STR}/auth", tags=["auth"])
app.include_router(profiles.router, prefix=f"{constant.API_V1_STR}/profiles", tags=["profiles"])
app.include_router(uploads.router, prefix=f"{constant.API_V1_STR}/uploads", tags=["uploads"])
app.include_router(analysis.router, prefix=f"{constant.API_V1_STR}/analysis", tags=["analysis"])
app.include_router(enhancements.router, prefix=f"{constant.API_V1_STR}/enhancements", tags=["enhancements"])
app.include_router(
    brand_guidelines.router, prefix=f"{constant.API_V1_STR}/brand-guidelines", tags=["brand-guidelines"]
)
app.include_router(exports.router, prefix=f"{constant.API_V1_STR}/exports", tags=["exports"])
app.include_router(notifications.router, prefix=f"{constant.API_V1_STR}/notifications", tags=["notifications"])
app.include_router(analytics.router, prefix=f"{constant.API_V1_STR}/analytics", tags=["analytics"])


def main() -> None:
    """Run the API server with uvicorn."""
    uvicorn.run(
        "expressfix.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )
