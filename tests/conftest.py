"""Shared fixtures: in-memory document stores and mocked sibling services."""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("FREE_EMAIL_DOMAINS", "gmail.com,yahoo.com,hotmail.com,outlook.com")

import uuid
from unittest.mock import AsyncMock

import pytest

from app.modules.principal.domain.models import Group, Machine, User, UserInvite
from app.modules.principal.domain.services import (
    GroupService,
    InviteClassifier,
    MachineService,
    UserInviteService,
    UserService,
)
from app.shared.events.publisher import InMemoryEventPublisher
from app.shared.infrastructure.database.repository import InMemoryDocumentRepository
from license_manager import LicenseResponse, LicenseResponseResultCode

from _helpers import ALLOWED_DOMAINS, FREE_DOMAINS


@pytest.fixture
def tenant_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def user_repo():
    return InMemoryDocumentRepository(User)


@pytest.fixture
def group_repo():
    return InMemoryDocumentRepository(Group)


@pytest.fixture
def invite_repo():
    return InMemoryDocumentRepository(UserInvite)


@pytest.fixture
def machine_repo():
    return InMemoryDocumentRepository(Machine)


@pytest.fixture
def publisher():
    return InMemoryEventPublisher()


@pytest.fixture
def email_api():
    api = AsyncMock()
    api.send_user_invite.return_value = True
    api.send_welcome_email.return_value = True
    api.send_user_locked_mail.return_value = True
    return api


@pytest.fixture
def tenant_api():
    api = AsyncMock()
    api.get_tenant_domains.return_value = list(ALLOWED_DOMAINS)
    return api


@pytest.fixture
def license_api():
    api = AsyncMock()
    api.assign_user_license.return_value = LicenseResponse(result_code=LicenseResponseResultCode.SUCCESS)
    return api


@pytest.fixture
def user_service(user_repo, group_repo, license_api, email_api, publisher):
    return UserService(user_repo, group_repo, license_api, email_api, publisher)


@pytest.fixture
def invite_service(invite_repo, user_repo, email_api, tenant_api):
    return UserInviteService(invite_repo, user_repo, email_api, tenant_api, InviteClassifier(FREE_DOMAINS))


@pytest.fixture
def group_service(group_repo, publisher):
    return GroupService(group_repo, publisher)


@pytest.fixture
def machine_service(machine_repo, publisher):
    return MachineService(machine_repo, publisher)
