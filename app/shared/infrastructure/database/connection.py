# 📄 File: app/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Opens and closes the connection to the document database and checks that it is alive.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy engine management: engine creation from DATABASE_URL, schema creation
# for the document table, health checks and disposal.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine, declarative base)
# - asyncpg / aiosqlite (async drivers, chosen by URL)
#
# 🔄 Connected Modules / Calls From:
# - app/shared/infrastructure/database/session.py (session management)
# - app/shared/infrastructure/database/document_store.py (table definition uses Base)
# - app/main.py (startup/shutdown)

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.shared.core.exceptions import DatabaseError
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    pass


class DatabaseConnectionManager:
    """
    Owns the async engine for the document database.
    """

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self._engine: Optional[AsyncEngine] = None
        self._health_check_query = text("SELECT 1")

    def _build_connection_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {"url": self.database_url, "echo": self.echo}
        if not self.database_url.startswith("sqlite"):
            params.update(pool_pre_ping=True, pool_recycle=3600)
        return params

    async def initialize(self, create_schema: bool = True) -> None:
        """Create the engine and, optionally, the document table."""
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        try:
            logger.info("Initializing database engine...")
            self._engine = create_async_engine(**self._build_connection_params())
            if create_schema:
                # the table module must be imported before create_all
                from app.shared.infrastructure.database import document_store  # noqa: F401
                async with self._engine.begin() as conn:
                    await conn.run_sync(Base.metadata.create_all)
            logger.info("Database engine initialized successfully")
        except Exception as e:
            logger.error(f"Failed to initialize database connection: {e}")
            raise DatabaseError(f"Database initialization failed: {e}", operation="initialize")

    async def health_check(self) -> dict:
        """
        Perform database health check and return structured status.
        """
        timestamp = datetime.now(timezone.utc).isoformat()
        if self._engine is None:
            return {"status": "unhealthy", "error": "Database engine not initialized", "timestamp": timestamp}

        try:
            async with self._engine.connect() as conn:
                await conn.execute(self._health_check_query)
        except Exception as e:
            logger.warning(f"Database health check failed: {e}")
            return {"status": "unhealthy", "error": str(e), "timestamp": timestamp}
        return {"status": "healthy", "timestamp": timestamp}

    async def close(self) -> None:
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        logger.info("Database connection closed successfully")

    @property
    def engine(self) -> Optional[AsyncEngine]:
        return self._engine

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None
