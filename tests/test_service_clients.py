"""Tests for the sibling-service HTTP client and the email/tenant wrappers."""

import uuid
from unittest.mock import AsyncMock

import aiohttp
import pytest

from _helpers import FakeResponse, FakeSession, make_invite, make_user

from app.modules.principal.infrastructure.external import EmailApi, TenantApi
from app.shared.core.exceptions import ExternalServiceError
from app.shared.infrastructure.external_apis import ServiceClient


def _client(*outcomes, max_retries=3) -> ServiceClient:
    return ServiceClient(
        "http://email:8080/", "email",
        max_retries=max_retries, backoff_min=0, backoff_max=0,
        session=FakeSession(*outcomes),
    )


# --------------------------------------------------------------------------- #
# ServiceClient                                                               #
# --------------------------------------------------------------------------- #


@pytest.mark.asyncio
async def test_json_body_is_decoded():
    client = _client(FakeResponse(200, {"ok": True}))

    assert await client.get("/v1/things", params={"page": 1}) == {"ok": True}
    method, url, _ = client.session.requests[0]
    assert (method, url) == ("GET", "http://email:8080/v1/things")
    assert client.get_stats()["successful_requests"] == 1


@pytest.mark.asyncio
async def test_empty_body_returns_none():
    client = _client(FakeResponse(204))

    assert await client.post("v1/things", data={"a": 1}) is None
    assert client.session.requests[0][2] == {"a": 1}


@pytest.mark.asyncio
async def test_error_status_is_not_retried():
    client = _client(FakeResponse(400, text="bad request"))

    with pytest.raises(ExternalServiceError) as exc_info:
        await client.post("v1/things", data={})

    assert exc_info.value.details["status_code"] == 400
    assert exc_info.value.details["service_response"] == "bad request"
    assert len(client.session.requests) == 1


@pytest.mark.asyncio
async def test_transport_failures_are_retried():
    client = _client(
        aiohttp.ClientConnectionError("reset"),
        FakeResponse(200, ["x"]),
    )

    assert await client.get("v1/things") == ["x"]
    assert len(client.session.requests) == 2


@pytest.mark.asyncio
async def test_exhausted_retries_raise_unavailable():
    client = _client(*[aiohttp.ClientConnectionError("down")] * 2, max_retries=2)

    with pytest.raises(ExternalServiceError) as exc_info:
        await client.get("v1/things")

    assert "status_code" not in exc_info.value.details
    assert exc_info.value.details["service"] == "email"


# --------------------------------------------------------------------------- #
# EmailApi                                                                    #
# --------------------------------------------------------------------------- #


@pytest.fixture
def service_client():
    return AsyncMock(spec=ServiceClient)


@pytest.mark.asyncio
async def test_invites_are_sent_as_one_batch(service_client):
    api = EmailApi(service_client)

    sent = await api.send_user_invite([make_invite("a@acme.com"), make_invite("b@acme.com", "Alan", "Turing")])

    assert sent is True
    endpoint = service_client.post.await_args.args[0]
    payload = service_client.post.await_args.kwargs["data"]
    assert endpoint == "v1/userinvites"
    assert [p["email"] for p in payload] == ["a@acme.com", "b@acme.com"]
    assert payload[1]["first_name"] == "Alan"


@pytest.mark.asyncio
async def test_rejected_email_returns_false(service_client):
    service_client.post.side_effect = ExternalServiceError("email returned 500", details={"status_code": 500})

    assert await EmailApi(service_client).send_welcome_email("a@acme.com", "Ada") is False


@pytest.mark.asyncio
async def test_unreachable_email_service_raises(service_client):
    service_client.post.side_effect = ExternalServiceError("email service is unavailable", service="email")

    with pytest.raises(ExternalServiceError):
        await EmailApi(service_client).send_welcome_email("a@acme.com", "Ada")


@pytest.mark.asyncio
async def test_locked_mail_payload(service_client):
    admin = make_user(email="boss@acme.com", first_name="Grace")

    await EmailApi(service_client).send_user_locked_mail([admin], "Ada Lovelace", "ada@acme.com")

    payload = service_client.post.await_args.kwargs["data"]
    assert payload["user_full_name"] == "Ada Lovelace"
    assert payload["org_admins"][0]["email"] == "boss@acme.com"


# --------------------------------------------------------------------------- #
# TenantApi                                                                   #
# --------------------------------------------------------------------------- #


@pytest.mark.asyncio
async def test_tenant_domains_are_resolved_and_lowercased(service_client):
    tenant_id = uuid.uuid4()
    responses = {
        f"v1/tenantsdomain/domainIds/{tenant_id}": ["d1", "d2", "d3"],
        "v1/tenantsdomain/d1": {"domain": "Acme.COM"},
        "v1/tenantsdomain/d2": {"Domain": "acme.io"},
        "v1/tenantsdomain/d3": {},
    }
    service_client.get.side_effect = lambda endpoint: responses[endpoint]

    domains = await TenantApi(service_client).get_tenant_domains(tenant_id)

    assert domains == ["acme.com", "acme.io"]


@pytest.mark.asyncio
async def test_tenant_without_domain_ids(service_client):
    service_client.get.return_value = None

    assert await TenantApi(service_client).get_tenant_domains(uuid.uuid4()) == []
