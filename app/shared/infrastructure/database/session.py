# 📄 File: app/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Gives every database operation its own short conversation with the database, saving the
# changes when everything went well and undoing them when something failed.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy session factory with commit-on-success, rollback-on-error semantics.
# SQLAlchemy errors are wrapped in DatabaseError; domain exceptions pass through unchanged.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - app/shared/infrastructure/database/connection.py (database engine)
#
# 🔄 Connected Modules / Calls From:
# - app/shared/infrastructure/database/document_store.py
# - app/modules/principal/presentation/dependencies.py (wiring)

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import exc
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.shared.core.exceptions import DatabaseError
from app.shared.infrastructure.database.connection import DatabaseConnectionManager
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


class DatabaseSessionManager:
    """
    Manages database sessions with transaction handling and automatic cleanup.
    """

    def __init__(self, connection_manager: DatabaseConnectionManager):
        self.connection_manager = connection_manager
        self._session_factory: Optional[async_sessionmaker] = None

    def _factory(self) -> async_sessionmaker:
        if self._session_factory is None:
            engine = self.connection_manager.engine
            if engine is None:
                raise DatabaseError("Session manager not initialized")
            self._session_factory = async_sessionmaker(
                engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=True,
            )
        return self._session_factory

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get an async database session with automatic transaction management.

        Yields:
            AsyncSession: Database session

        Raises:
            DatabaseError: If a SQLAlchemy operation fails
        """
        session: AsyncSession = self._factory()()
        try:
            yield session
            await session.commit()
        except exc.SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database error occurred, transaction rolled back: {e}")
            raise DatabaseError(f"Database operation failed: {e}")
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
