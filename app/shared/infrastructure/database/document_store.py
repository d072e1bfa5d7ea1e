# 📄 File: app/shared/infrastructure/database/document_store.py
# 🧭 Purpose (Layman Explanation):
# Stores every user, group, machine and invite as a JSON document in one database table,
# filed under its collection name and id.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of DocumentRepository: a single "documents" table keyed by
# (collection, id) with a JSON body. Predicates run in Python over the decoded models,
# mirroring a document store queried by LINQ-style filters.
# 🔗 Dependencies:
# sqlalchemy (ORM, async sessions), pydantic (model (de)serialization)
# 🔄 Connected Modules / Calls From:
# repository.RepositoryFactory, connection.DatabaseConnectionManager (schema creation)

from datetime import datetime, timezone
from typing import List, Optional, Type
from uuid import UUID, uuid4

from sqlalchemy import JSON, DateTime, String, delete, select
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.core.exceptions import DocumentNotFoundError
from app.shared.infrastructure.database.connection import Base
from app.shared.infrastructure.database.repository import DocumentRepository, Predicate, T
from app.shared.infrastructure.database.session import DatabaseSessionManager
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


class DocumentRecord(Base):
    """One stored document."""
    __tablename__ = "documents"

    collection: Mapped[str] = mapped_column(String(100), primary_key=True)
    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    body: Mapped[dict] = mapped_column(JSON, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )


class SqlDocumentRepository(DocumentRepository[T]):
    """Document repository backed by the shared documents table."""

    def __init__(self, model_cls: Type[T], session_manager: DatabaseSessionManager):
        super().__init__(model_cls)
        self.session_manager = session_manager

    def _to_model(self, record: DocumentRecord) -> T:
        return self.model_cls.model_validate(record.body)

    async def get_item(self, item_id: UUID) -> Optional[T]:
        async with self.session_manager.get_session() as session:
            record = await session.get(DocumentRecord, (self.collection, str(item_id)))
            return self._to_model(record) if record is not None else None

    async def get_items(self, predicate: Optional[Predicate] = None) -> List[T]:
        async with self.session_manager.get_session() as session:
            result = await session.execute(
                select(DocumentRecord).where(DocumentRecord.collection == self.collection)
            )
            items = [self._to_model(record) for record in result.scalars()]
        if predicate is None:
            return items
        return [item for item in items if predicate(item)]

    async def create_item(self, item: T) -> T:
        stored = item.model_copy(deep=True)
        if stored.id is None:
            stored.id = uuid4()
        async with self.session_manager.get_session() as session:
            session.add(DocumentRecord(
                collection=self.collection,
                id=str(stored.id),
                body=stored.model_dump(mode="json"),
            ))
        logger.debug(f"Created {self.collection} document {stored.id}")
        return stored

    async def update_item(self, item_id: UUID, item: T) -> T:
        stored = item.model_copy(deep=True)
        stored.id = item_id
        async with self.session_manager.get_session() as session:
            record = await session.get(DocumentRecord, (self.collection, str(item_id)))
            if record is None:
                raise DocumentNotFoundError(self.collection, item_id)
            record.body = stored.model_dump(mode="json")
        return stored

    async def delete_item(self, item_id: UUID) -> None:
        async with self.session_manager.get_session() as session:
            result = await session.execute(
                delete(DocumentRecord).where(
                    DocumentRecord.collection == self.collection,
                    DocumentRecord.id == str(item_id),
                )
            )
            if result.rowcount == 0:
                raise DocumentNotFoundError(self.collection, item_id)
        logger.debug(f"Deleted {self.collection} document {item_id}")
