"""
Centralized database layer for ExpressFix.

This package provides a unified location for all database entities and repositories,
organized by table.

Structure:
- entities/: SQLModel table models
- repositories/: Owner-scoped data access per table
- session.py: Global engine and session factory management
- utils.py: Engine, session factory and schema helpers
"""

from .base import Base, new_id, utc_now
from .session import (
    async_session_maker,
    dispose_engine,
    engine,
    get_session,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
)

__all__ = [
    "Base",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "dispose_engine",
    "engine",
    "get_session",
    "init_db",
    "new_id",
    "utc_now",
]
