# 📄 File: app/shared/infrastructure/database/repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for saving, finding, updating and deleting documents (users, groups,
# machines, invites) without caring which database actually stores them, plus a simple
# in-memory version used for tests and local runs.
# 🧪 Purpose (Technical Summary):
# Generic async document repository interface keyed by UUID, with predicate queries,
# store-assigned ids on create and DocumentNotFoundError on update/delete of missing
# documents. Includes the in-memory implementation and a factory choosing the backend.
# 🔗 Dependencies:
# pydantic (document models), abc, asyncio, copy, uuid
# 🔄 Connected Modules / Calls From:
# Domain services (user, invite, group, machine), document_store.py (SQL implementation),
# presentation dependencies (wiring)

import asyncio
from abc import ABC, abstractmethod
from typing import Callable, Dict, Generic, List, Optional, Type, TypeVar
from uuid import UUID, uuid4

from pydantic import BaseModel

from app.shared.core.exceptions import DocumentNotFoundError
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)
Predicate = Callable[[T], bool]


def collection_name(model_cls: Type[BaseModel]) -> str:
    """Collection a model is stored in; defaults to the class name."""
    return getattr(model_cls, "__collection__", None) or model_cls.__name__


class DocumentRepository(ABC, Generic[T]):
    """
    Repository interface for one collection of documents.

    Implementation Notes:
    - Documents are pydantic models with an optional ``id: UUID`` field
    - Methods return copies; mutating a returned document does not change the store
    - All operations are async for non-blocking I/O
    """

    def __init__(self, model_cls: Type[T]):
        self.model_cls = model_cls
        self.collection = collection_name(model_cls)

    @abstractmethod
    async def get_item(self, item_id: UUID) -> Optional[T]:
        """
        Get a document by id.

        Returns:
            The document if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_items(self, predicate: Optional[Predicate] = None) -> List[T]:
        """
        Get every document matching predicate (all documents when None).
        """
        pass

    @abstractmethod
    async def create_item(self, item: T) -> T:
        """
        Store a new document. A missing id is assigned by the store.

        Returns:
            The stored document, id populated
        """
        pass

    @abstractmethod
    async def update_item(self, item_id: UUID, item: T) -> T:
        """
        Replace the document stored under item_id.

        Raises:
            DocumentNotFoundError: If no document has that id
        """
        pass

    @abstractmethod
    async def delete_item(self, item_id: UUID) -> None:
        """
        Delete the document stored under item_id.

        Raises:
            DocumentNotFoundError: If no document has that id
        """
        pass


class InMemoryDocumentRepository(DocumentRepository[T]):
    """Dictionary-backed repository. Stores and returns deep copies."""

    def __init__(self, model_cls: Type[T]):
        super().__init__(model_cls)
        self._items: Dict[UUID, T] = {}
        self._lock = asyncio.Lock()

    async def get_item(self, item_id: UUID) -> Optional[T]:
        item = self._items.get(item_id)
        return item.model_copy(deep=True) if item is not None else None

    async def get_items(self, predicate: Optional[Predicate] = None) -> List[T]:
        return [
            item.model_copy(deep=True)
            for item in self._items.values()
            if predicate is None or predicate(item)
        ]

    async def create_item(self, item: T) -> T:
        async with self._lock:
            stored = item.model_copy(deep=True)
            if stored.id is None:
                stored.id = uuid4()
            self._items[stored.id] = stored
        logger.debug(f"Created {self.collection} document {stored.id}")
        return stored.model_copy(deep=True)

    async def update_item(self, item_id: UUID, item: T) -> T:
        async with self._lock:
            if item_id not in self._items:
                raise DocumentNotFoundError(self.collection, item_id)
            stored = item.model_copy(deep=True)
            stored.id = item_id
            self._items[item_id] = stored
        return stored.model_copy(deep=True)

    async def delete_item(self, item_id: UUID) -> None:
        async with self._lock:
            if self._items.pop(item_id, None) is None:
                raise DocumentNotFoundError(self.collection, item_id)
        logger.debug(f"Deleted {self.collection} document {item_id}")


class RepositoryFactory:
    """
    Hands out one repository per document model.

    Uses the SQL document store when a session manager is supplied,
    the in-memory store otherwise.
    """

    def __init__(self, session_manager=None):
        self.session_manager = session_manager
        self._repositories: Dict[str, DocumentRepository] = {}

    def create_repository(self, model_cls: Type[T]) -> DocumentRepository[T]:
        name = collection_name(model_cls)
        if name not in self._repositories:
            if self.session_manager is not None:
                from app.shared.infrastructure.database.document_store import SqlDocumentRepository
                self._repositories[name] = SqlDocumentRepository(model_cls, self.session_manager)
            else:
                self._repositories[name] = InMemoryDocumentRepository(model_cls)
        return self._repositories[name]
