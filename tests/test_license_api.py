"""Tests for the license service client."""

import uuid

import aiohttp
import pytest

from _helpers import FakeResponse, FakeSession

from license_manager import (
    FailedToConnectToLicenseServiceException,
    LicenseApi,
    LicenseApiException,
    LicenseApiHttpError,
    LicenseResponseResultCode,
    LicenseType,
    ResultCode,
    UserLicenseDto,
)


def _client(*outcomes) -> LicenseApi:
    return LicenseApi("http://license:8080/", session=FakeSession(*outcomes))


@pytest.mark.asyncio
async def test_assign_posts_wire_body_and_unwraps_payload():
    account_id = str(uuid.uuid4())
    api = _client(FakeResponse(200, {
        "ResultCode": 1,
        "Payload": {"ResultCode": 0, "AccountId": account_id, "Message": "ok"},
    }))
    dto = UserLicenseDto(account_id=account_id, user_id="u-1", license_type=LicenseType.USER_LICENSE.wire_name)

    response = await api.assign_user_license(dto)

    assert response.is_success
    assert response.result_code == LicenseResponseResultCode.SUCCESS
    assert response.account_id == account_id
    method, url, body = api._session.requests[0]
    assert method == "POST"
    assert url == "http://license:8080/api/v2/license/assignments"
    assert body == {"AccountId": account_id, "UserId": "u-1", "LicenseType": "UserLicense"}


@pytest.mark.asyncio
async def test_get_routes_include_account_and_user():
    account_id, user_id = uuid.uuid4(), uuid.uuid4()
    api = _client(FakeResponse(200, {"ResultCode": 1, "Payload": {"ResultCode": 0}}))

    await api.get_user_license_details(account_id, user_id)

    method, url, body = api._session.requests[0]
    assert method == "GET"
    assert url.endswith(f"/api/v2/license/assignments/{account_id}/{user_id}")
    assert body is None


@pytest.mark.asyncio
async def test_license_types_payload_is_a_list():
    api = _client(FakeResponse(200, {"ResultCode": 1, "Payload": [1, 3]}))

    types = await api.get_account_user_license_types(uuid.uuid4())

    assert types == [LicenseType.USER_LICENSE, LicenseType.TRIAL_LICENSE]


@pytest.mark.asyncio
async def test_unauthorized_maps_to_api_exception():
    api = _client(FakeResponse(401, text="nope"))

    with pytest.raises(LicenseApiException) as exc_info:
        await api.get_account_license_details(uuid.uuid4())

    assert exc_info.value.result_code == ResultCode.UNAUTHORIZED


@pytest.mark.asyncio
async def test_other_http_failures_map_to_http_error():
    api = _client(FakeResponse(503, text="down"))

    with pytest.raises(LicenseApiHttpError) as exc_info:
        await api.refresh_licenses("acct")

    assert exc_info.value.status == 503
    assert exc_info.value.route.endswith("/refresh")


@pytest.mark.asyncio
async def test_non_success_envelope_carries_service_message():
    api = _client(FakeResponse(200, {"ResultCode": 1002, "Message": "no such account"}))

    with pytest.raises(LicenseApiException) as exc_info:
        await api.get_account_license_summary(uuid.uuid4())

    assert exc_info.value.result_code == ResultCode.RECORD_NOT_FOUND
    assert exc_info.value.client_message == "no such account"
    assert "Result code 1002" in str(exc_info.value)


@pytest.mark.asyncio
async def test_connection_failure():
    api = _client(aiohttp.ClientConnectionError("refused"))

    with pytest.raises(FailedToConnectToLicenseServiceException):
        await api.release_user_license(UserLicenseDto(user_id="u-1"))


@pytest.mark.asyncio
async def test_close_leaves_injected_session_open():
    api = _client()
    session = api._session

    await api.close()

    assert session.closed is False
