"""Tests for the in-memory and SQL document repositories."""

import uuid

import pytest
import pytest_asyncio

from _helpers import make_user

from app.modules.principal.domain.models import Group, User
from app.shared.core.exceptions import DocumentNotFoundError
from app.shared.infrastructure.database import (
    DatabaseConnectionManager,
    DatabaseSessionManager,
    InMemoryDocumentRepository,
    RepositoryFactory,
    SqlDocumentRepository,
)


@pytest_asyncio.fixture
async def connection(tmp_path):
    manager = DatabaseConnectionManager(f"sqlite+aiosqlite:///{tmp_path / 'documents.db'}")
    await manager.initialize()
    yield manager
    await manager.close()


@pytest_asyncio.fixture(params=["memory", "sql"])
async def repo_for(request, tmp_path):
    """Builds a repository for a model on each backend."""
    if request.param == "memory":
        yield InMemoryDocumentRepository
        return

    manager = DatabaseConnectionManager(f"sqlite+aiosqlite:///{tmp_path / 'store.db'}")
    await manager.initialize()
    sessions = DatabaseSessionManager(manager)
    yield lambda model_cls: SqlDocumentRepository(model_cls, sessions)
    await manager.close()


@pytest.mark.asyncio
async def test_create_assigns_id_and_round_trips(repo_for):
    users = repo_for(User)

    created = await users.create_item(make_user())
    fetched = await users.get_item(created.id)

    assert created.id is not None
    assert fetched == created
    assert await users.get_item(uuid.uuid4()) is None


@pytest.mark.asyncio
async def test_predicate_query(repo_for):
    users = repo_for(User)
    tenant_id = uuid.uuid4()
    await users.create_item(make_user(tenant_id=tenant_id))
    await users.create_item(make_user(user_name="other", tenant_id=uuid.uuid4()))

    matched = await users.get_items(lambda u: u.tenant_id == tenant_id)

    assert [u.user_name for u in matched] == ["ada.lovelace"]
    assert len(await users.get_items()) == 2


@pytest.mark.asyncio
async def test_collections_are_separate(repo_for):
    users = repo_for(User)
    groups = repo_for(Group)
    await users.create_item(make_user())

    assert await groups.get_items() == []


@pytest.mark.asyncio
async def test_update_replaces_document(repo_for):
    users = repo_for(User)
    created = await users.create_item(make_user())

    updated = await users.update_item(created.id, make_user(last_name="Byron"))

    assert updated.id == created.id
    assert (await users.get_item(created.id)).last_name == "Byron"


@pytest.mark.asyncio
async def test_update_and_delete_missing_raise(repo_for):
    users = repo_for(User)

    with pytest.raises(DocumentNotFoundError):
        await users.update_item(uuid.uuid4(), make_user())
    with pytest.raises(DocumentNotFoundError):
        await users.delete_item(uuid.uuid4())


@pytest.mark.asyncio
async def test_delete_removes_document(repo_for):
    users = repo_for(User)
    created = await users.create_item(make_user())

    await users.delete_item(created.id)

    assert await users.get_item(created.id) is None


@pytest.mark.asyncio
async def test_returned_documents_are_copies():
    users = InMemoryDocumentRepository(User)
    created = await users.create_item(make_user())

    created.first_name = "Changed"

    assert (await users.get_item(created.id)).first_name == "Ada"


def test_factory_reuses_repositories_per_collection():
    factory = RepositoryFactory()

    assert factory.create_repository(User) is factory.create_repository(User)
    assert isinstance(factory.create_repository(Group), InMemoryDocumentRepository)


@pytest.mark.asyncio
async def test_connection_health(connection):
    assert (await connection.health_check())["status"] == "healthy"

    await connection.close()

    assert (await connection.health_check())["status"] == "unhealthy"
