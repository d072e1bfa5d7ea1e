from .connection import Base, DatabaseConnectionManager
from .document_store import DocumentRecord, SqlDocumentRepository
from .repository import DocumentRepository, InMemoryDocumentRepository, RepositoryFactory, collection_name
from .session import DatabaseSessionManager

__all__ = [
    "Base",
    "DatabaseConnectionManager",
    "DatabaseSessionManager",
    "DocumentRecord",
    "DocumentRepository",
    "InMemoryDocumentRepository",
    "RepositoryFactory",
    "SqlDocumentRepository",
    "collection_name",
]
