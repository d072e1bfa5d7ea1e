"""Tests for the user workflow."""

import uuid

import pytest
import pytest_asyncio

from _helpers import make_create_request, make_user

from app.modules.principal.domain.models import (
    BASIC_USER_GROUP_NAME,
    ORG_ADMIN_GROUP_NAME,
    GetUsersParams,
    Group,
    IdpFilter,
    SortOrder,
)
from app.modules.principal.domain.services import UserService
from app.shared.core.exceptions import NotFoundError, ValidationFailedError
from license_manager import (
    FailedToConnectToLicenseServiceException,
    LicenseResponse,
    LicenseResponseResultCode,
    LicenseType,
)


@pytest.mark.asyncio
async def test_create_then_get_round_trip(user_service, tenant_id):
    creator = uuid.uuid4()
    created = await user_service.create_user(make_create_request(first_name="  Ada "), tenant_id, creator)

    fetched = await user_service.get_user(created.id)

    assert fetched.id == created.id
    assert fetched.first_name == "Ada"
    assert fetched.tenant_id == tenant_id
    assert fetched.created_by == creator
    assert fetched.created_date is not None
    assert fetched.is_locked is False


@pytest.mark.asyncio
async def test_secrets_are_scrubbed(user_service, user_repo, tenant_id):
    created = await user_service.create_user(make_create_request(), tenant_id, None)

    assert created.password_hash is None
    assert created.password_salt is None
    fetched = await user_service.get_user(created.id)
    assert fetched.password_hash is None

    stored = await user_repo.get_item(created.id)
    assert stored.password_hash == "hash"
    assert stored.password_salt == "salt"


@pytest.mark.asyncio
async def test_duplicate_user_name_and_email_reported_together(user_service, user_repo, tenant_id):
    await user_repo.create_item(make_user(tenant_id=tenant_id))

    with pytest.raises(ValidationFailedError) as exc_info:
        await user_service.create_user(make_create_request(), tenant_id, None)

    assert exc_info.value.messages == [
        "A user with that UserName already exists.",
        "A user with that email address already exists.",
    ]


@pytest.mark.asyncio
async def test_duplicate_ldap_id_adds_third_error(user_service, user_repo, tenant_id):
    await user_repo.create_item(make_user(tenant_id=tenant_id, ldap_id="CN=ada"))

    with pytest.raises(ValidationFailedError) as exc_info:
        await user_service.create_user(make_create_request(ldap_id="CN=ada"), tenant_id, None)

    assert len(exc_info.value.errors) == 3
    assert exc_info.value.errors[2].field == "LdapId"


@pytest.mark.asyncio
async def test_structural_and_uniqueness_errors_accumulate(user_service, user_repo, tenant_id, license_api):
    await user_repo.create_item(make_user(tenant_id=tenant_id))

    request = make_create_request(first_name="", password_hash=None)
    with pytest.raises(ValidationFailedError) as exc_info:
        await user_service.create_user(request, tenant_id, None)

    fields = [e.field for e in exc_info.value.errors]
    assert fields == ["FirstName", "PasswordHash", "UserName", "Email"]
    license_api.assign_user_license.assert_not_awaited()
    assert len(await user_repo.get_items()) == 1


@pytest.mark.asyncio
async def test_email_uniqueness_is_exact_match(user_service, user_repo, tenant_id):
    await user_repo.create_item(make_user(user_name="someone.else", email="ada@acme.com"))

    created = await user_service.create_user(make_create_request(email="Ada@acme.com"), tenant_id, None)

    assert created.email == "Ada@acme.com"


@pytest.mark.asyncio
async def test_on_prem_provisioning_tenant_rejected(user_repo, group_repo, license_api, email_api, publisher):
    provisioning = uuid.uuid4()
    service = UserService(
        user_repo, group_repo, license_api, email_api, publisher,
        on_prem_deployment=True, built_in_tenant_ids=[provisioning],
    )

    with pytest.raises(ValidationFailedError) as exc_info:
        await service.create_user(make_create_request(), provisioning, None)

    assert exc_info.value.messages == ["Users cannot be created under provisioning tenant"]


@pytest.mark.asyncio
async def test_license_request_uses_tenant_and_type(user_service, license_api, tenant_id):
    created = await user_service.create_user(
        make_create_request(license_type=LicenseType.TRIAL_LICENSE), tenant_id, None
    )

    dto = license_api.assign_user_license.await_args.args[0]
    assert dto.account_id == str(tenant_id)
    assert dto.user_id == str(created.id)
    assert dto.license_type == "TrialLicense"


@pytest.mark.asyncio
async def test_default_license_type(user_service, license_api, tenant_id):
    await user_service.create_user(make_create_request(), tenant_id, None)

    dto = license_api.assign_user_license.await_args.args[0]
    assert dto.license_type == "Default"


@pytest.mark.asyncio
async def test_licensed_user_gets_welcome_email(user_service, email_api, publisher, tenant_id):
    created = await user_service.create_user(make_create_request(), tenant_id, None)

    email_api.send_welcome_email.assert_awaited_once_with("ada@acme.com", "Ada")
    events = publisher.events_of_type("UserCreated")
    assert len(events) == 1
    assert events[0].data["user_id"] == str(created.id)


@pytest.mark.asyncio
async def test_welcome_email_failure_does_not_fail_creation(user_service, email_api, tenant_id):
    email_api.send_welcome_email.side_effect = RuntimeError("smtp down")

    created = await user_service.create_user(make_create_request(), tenant_id, None)

    assert created.is_locked is False


@pytest.mark.asyncio
async def test_license_failure_locks_user(user_service, user_repo, license_api, email_api, tenant_id):
    license_api.assign_user_license.side_effect = FailedToConnectToLicenseServiceException()

    created = await user_service.create_user(make_create_request(), tenant_id, None)

    assert created.is_locked is True
    stored = await user_repo.get_item(created.id)
    assert stored.is_locked is True
    email_api.send_welcome_email.assert_not_awaited()


@pytest.mark.asyncio
async def test_unsuccessful_license_response_locks_user(user_service, license_api, tenant_id):
    license_api.assign_user_license.return_value = LicenseResponse(
        result_code=LicenseResponseResultCode.ACCOUNT_CANNOT_BE_LICENSED
    )

    created = await user_service.create_user(make_create_request(), tenant_id, None)

    assert created.is_locked is True


@pytest.mark.asyncio
async def test_locked_user_notifies_org_admins(user_service, user_repo, group_repo, license_api, email_api, tenant_id):
    admins = await group_repo.create_item(Group(name=ORG_ADMIN_GROUP_NAME, tenant_id=tenant_id, is_locked=True))
    await user_repo.create_item(make_user(
        user_name="admin", email="admin@acme.com", tenant_id=tenant_id, groups=[admins.id]
    ))
    license_api.assign_user_license.side_effect = RuntimeError("license service exploded")

    await user_service.create_user(
        make_create_request(user_name="new.user", email="new@acme.com"), tenant_id, None
    )

    email_api.send_user_locked_mail.assert_awaited_once()
    org_admins, full_name, user_email = email_api.send_user_locked_mail.await_args.args
    assert [a.email for a in org_admins] == ["admin@acme.com"]
    assert full_name == "Ada Lovelace"
    assert user_email == "new@acme.com"


@pytest.mark.asyncio
async def test_new_user_joins_basic_user_group(user_service, group_repo, tenant_id):
    basic = await group_repo.create_item(Group(name=BASIC_USER_GROUP_NAME, tenant_id=tenant_id, is_locked=True))

    created = await user_service.create_user(make_create_request(), tenant_id, None)

    assert created.groups == [basic.id]


@pytest.mark.asyncio
async def test_requested_groups_are_ignored_on_create(user_service, user_repo, group_repo, tenant_id):
    basic = await group_repo.create_item(Group(name=BASIC_USER_GROUP_NAME, tenant_id=tenant_id, is_locked=True))
    admins = await group_repo.create_item(Group(name=ORG_ADMIN_GROUP_NAME, tenant_id=tenant_id, is_locked=True))

    created = await user_service.create_user(make_create_request(groups=[admins.id]), tenant_id, None)

    stored = await user_repo.get_item(created.id)
    assert stored.groups == [basic.id]


@pytest.mark.asyncio
async def test_no_basic_user_group_leaves_user_without_groups(user_service, tenant_id):
    created = await user_service.create_user(make_create_request(groups=[uuid.uuid4()]), tenant_id, None)

    assert created.groups == []


# --------------------------------------------------------------------------- #
# Get, update, delete                                                         #
# --------------------------------------------------------------------------- #


@pytest.mark.asyncio
async def test_get_missing_user_raises(user_service, publisher):
    missing = uuid.uuid4()

    with pytest.raises(NotFoundError):
        await user_service.get_user(missing)

    retrieved = publisher.events_of_type("UserRetrieved")
    assert [e.data["user_id"] for e in retrieved] == [str(missing)]


@pytest.mark.asyncio
async def test_get_nil_id_fails_validation(user_service):
    with pytest.raises(ValidationFailedError) as exc_info:
        await user_service.get_user(uuid.UUID(int=0))
    assert exc_info.value.errors[0].field == "UserId"


@pytest.mark.asyncio
async def test_update_missing_user_returns_none(user_service):
    assert await user_service.update_user(uuid.uuid4(), make_user()) is None


@pytest.mark.asyncio
async def test_update_accumulates_id_and_model_errors(user_service):
    with pytest.raises(ValidationFailedError) as exc_info:
        await user_service.update_user(uuid.UUID(int=0), make_user(last_name=""))

    assert [e.field for e in exc_info.value.errors] == ["UserId", "LastName"]


@pytest.mark.asyncio
async def test_update_existing_user(user_service, tenant_id):
    created = await user_service.create_user(make_create_request(), tenant_id, None)

    updated = await user_service.update_user(created.id, make_user(last_name="Byron", tenant_id=tenant_id))

    assert updated.last_name == "Byron"
    assert updated.password_hash is None
    assert (await user_service.get_user(created.id)).last_name == "Byron"


@pytest.mark.asyncio
async def test_delete_is_idempotent(user_service, publisher, tenant_id):
    created = await user_service.create_user(make_create_request(), tenant_id, None)

    await user_service.delete_user(created.id)
    await user_service.delete_user(created.id)

    with pytest.raises(NotFoundError):
        await user_service.get_user(created.id)
    assert len(publisher.events_of_type("UserDeleted")) == 1


@pytest.mark.asyncio
async def test_deleting_unknown_user_publishes_nothing(user_service, publisher):
    await user_service.delete_user(uuid.uuid4())

    assert publisher.events_of_type("UserDeleted") == []


@pytest.mark.asyncio
async def test_publish_failure_does_not_break_workflow(user_service, publisher, tenant_id):
    def explode(event):
        raise RuntimeError("bus down")

    publisher.subscribe("UserCreated", explode)

    created = await user_service.create_user(make_create_request(), tenant_id, None)

    assert created.id is not None
    assert publisher.failed_count == 1


# --------------------------------------------------------------------------- #
# Listing                                                                     #
# --------------------------------------------------------------------------- #


@pytest_asyncio.fixture
async def populated(user_repo, tenant_id):
    rows = [
        ("Carol", "Zeta", "carol@acme.com", "carol", True),
        ("alice", "Young", "alice@acme.com", "alice", False),
        ("Bob", "Xavier", "bob@acme.com", "bob", None),
    ]
    for first, last, email, user_name, idp in rows:
        await user_repo.create_item(make_user(
            first_name=first, last_name=last, email=email, user_name=user_name,
            is_idp_user=idp, tenant_id=tenant_id,
        ))
    await user_repo.create_item(make_user(user_name="outsider", email="x@other.com", tenant_id=uuid.uuid4()))


@pytest.mark.asyncio
async def test_listing_sorts_by_first_name_by_default(user_service, populated, tenant_id):
    page = await user_service.get_users_for_tenant(tenant_id, GetUsersParams())

    assert [u.first_name for u in page.users] == ["alice", "Bob", "Carol"]
    assert page.total_count == 3
    assert page.current_count == 3
    assert all(u.password_hash is None for u in page.users)


@pytest.mark.asyncio
async def test_listing_sort_descending_by_last_name(user_service, populated, tenant_id):
    params = GetUsersParams(sort_column="LastName", sort_order=SortOrder.DESCENDING)

    page = await user_service.get_users_for_tenant(tenant_id, params)

    assert [u.last_name for u in page.users] == ["Zeta", "Young", "Xavier"]


@pytest.mark.asyncio
async def test_listing_search_and_paging(user_service, populated, tenant_id):
    page = await user_service.get_users_for_tenant(tenant_id, GetUsersParams(search_value="ACME", page_size=2, page_number=2))

    assert page.current_count == 3
    assert [u.first_name for u in page.users] == ["Carol"]

    page = await user_service.get_users_for_tenant(tenant_id, GetUsersParams(search_value="bob x"))
    assert [u.user_name for u in page.users] == ["bob"]


@pytest.mark.asyncio
@pytest.mark.parametrize("idp_filter, expected", [
    (IdpFilter.IDP_USERS, ["carol"]),
    (IdpFilter.LOCAL_USERS, ["alice"]),
    (IdpFilter.NOT_SET, ["bob"]),
])
async def test_listing_idp_filter(user_service, populated, tenant_id, idp_filter, expected):
    page = await user_service.get_users_for_tenant(tenant_id, GetUsersParams(idp_filter=idp_filter))

    assert [u.user_name for u in page.users] == expected
    assert page.total_count == 3
