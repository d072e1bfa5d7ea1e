"""Tests for the group and machine workflows."""

import uuid

import pytest

from app.modules.principal.domain.models import Group, Machine
from app.shared.core.exceptions import NotFoundError, ValidationFailedError


# --------------------------------------------------------------------------- #
# Groups                                                                      #
# --------------------------------------------------------------------------- #


@pytest.mark.asyncio
async def test_create_and_get_group(group_service, publisher, tenant_id):
    created = await group_service.create_group(Group(name="Operators"), tenant_id)

    fetched = await group_service.get_group(created.id)

    assert fetched.name == "Operators"
    assert fetched.tenant_id == tenant_id
    assert len(publisher.events_of_type("GroupCreated")) == 1


@pytest.mark.asyncio
async def test_duplicate_group_name_in_tenant(group_service, tenant_id):
    await group_service.create_group(Group(name="Operators"), tenant_id)

    with pytest.raises(ValidationFailedError) as exc_info:
        await group_service.create_group(Group(name="Operators"), tenant_id)

    assert exc_info.value.messages == ["A group with that Group name already exists."]


@pytest.mark.asyncio
async def test_same_group_name_in_other_tenant(group_service, tenant_id):
    await group_service.create_group(Group(name="Operators"), tenant_id)

    other = await group_service.create_group(Group(name="Operators"), uuid.uuid4())

    assert other.id is not None


@pytest.mark.asyncio
async def test_group_name_rules(group_service, tenant_id):
    with pytest.raises(ValidationFailedError) as exc_info:
        await group_service.create_group(Group(name=""), tenant_id)
    assert exc_info.value.messages == ["The Group Name property must not be empty"]

    with pytest.raises(ValidationFailedError) as exc_info:
        await group_service.create_group(Group(name="g" * 101), tenant_id)
    assert exc_info.value.messages == ["The Group Name must be less than 100 characters long"]


@pytest.mark.asyncio
async def test_get_missing_group(group_service):
    with pytest.raises(NotFoundError):
        await group_service.get_group(uuid.uuid4())


@pytest.mark.asyncio
async def test_delete_group_is_idempotent(group_service, publisher, tenant_id):
    created = await group_service.create_group(Group(name="Operators"), tenant_id)

    assert await group_service.delete_group(created.id) == created.id
    assert await group_service.delete_group(created.id) is None
    assert len(publisher.events_of_type("GroupDeleted")) == 1


# --------------------------------------------------------------------------- #
# Machines                                                                    #
# --------------------------------------------------------------------------- #


@pytest.mark.asyncio
async def test_create_machine_stamps_dates(machine_service, publisher, tenant_id):
    created = await machine_service.create_machine(
        Machine(machine_key="KEY-1", location="Lab 1", tenant_id=tenant_id)
    )

    assert created.date_created is not None
    assert created.date_modified == created.date_created
    assert (await machine_service.get_machine(created.id)).machine_key == "KEY-1"
    assert len(publisher.events_of_type("MachineCreated")) == 1


@pytest.mark.asyncio
async def test_machine_key_and_location_uniqueness(machine_service, tenant_id):
    await machine_service.create_machine(Machine(machine_key="KEY-1", location="Lab 1", tenant_id=tenant_id))

    with pytest.raises(ValidationFailedError) as exc_info:
        await machine_service.create_machine(Machine(machine_key="KEY-1", location="Lab 1", tenant_id=tenant_id))

    assert exc_info.value.messages == ["Machine Key was not unique", "Location was not unique"]


@pytest.mark.asyncio
async def test_location_only_unique_within_tenant(machine_service, tenant_id):
    await machine_service.create_machine(Machine(machine_key="KEY-1", location="Lab 1", tenant_id=tenant_id))

    other = await machine_service.create_machine(
        Machine(machine_key="KEY-2", location="Lab 1", tenant_id=uuid.uuid4())
    )

    assert other.id is not None


@pytest.mark.asyncio
async def test_machine_requires_key_and_location(machine_service):
    with pytest.raises(ValidationFailedError) as exc_info:
        await machine_service.create_machine(Machine())

    assert [e.field for e in exc_info.value.errors] == ["MachineKey", "Location"]


@pytest.mark.asyncio
async def test_delete_machine_is_idempotent(machine_service, tenant_id):
    created = await machine_service.create_machine(
        Machine(machine_key="KEY-1", location="Lab 1", tenant_id=tenant_id)
    )

    await machine_service.delete_machine(created.id)
    await machine_service.delete_machine(created.id)

    with pytest.raises(NotFoundError):
        await machine_service.get_machine(created.id)
