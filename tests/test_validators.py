"""Tests for request validators and validation primitives."""

import uuid

import pytest

from _helpers import make_user

from app.modules.principal.domain.validators import CreateUserRequestValidator
from app.shared.utils.validators import IdValidator, ValidationResult, email_host, is_valid_email_address


def test_valid_user_passes():
    result = CreateUserRequestValidator().validate(make_user())
    assert result.is_valid
    assert result.errors == []


def test_all_user_failures_are_collected():
    user = make_user(first_name=" ", last_name="x" * 101, email="nope", user_name="bad name!",
                     password_hash=None, password_salt="")

    result = CreateUserRequestValidator().validate(user)

    assert not result.is_valid
    assert [(e.field, e.message) for e in result.errors] == [
        ("FirstName", "The FirstName property must not be empty"),
        ("LastName", "The LastName must be less than 100 characters long"),
        ("Email", "Invalid email address"),
        ("UserName", "Username may only contain alpha-numeric characters as well . @ _ -"),
        ("PasswordHash", "Password Hash and Salt can not be null"),
        ("PasswordSalt", "Password Hash and Salt can not be null"),
    ]


@pytest.mark.parametrize("user_name", ["ada", "ada.lovelace", "ada@acme.com", "a-b_c"])
def test_user_name_alphabet(user_name):
    assert CreateUserRequestValidator().validate(make_user(user_name=user_name)).is_valid


def test_quoted_local_part_is_a_valid_address():
    assert is_valid_email_address('"ada"@acme.com')
    assert not is_valid_email_address(None)


@pytest.mark.parametrize("value", [None, "", "not-a-uuid", uuid.UUID(int=0)])
def test_id_validator_rejects(value):
    result = IdValidator("GroupId").validate(value)
    assert not result.is_valid
    assert result.errors[0].message == "The GroupId must not be empty"


def test_id_validator_accepts_uuid_and_string():
    assert IdValidator().validate(uuid.uuid4()).is_valid
    assert IdValidator().validate(str(uuid.uuid4())).is_valid


def test_result_extend_merges_errors():
    first = ValidationResult()
    first.add_error("A", "one")
    second = ValidationResult()
    second.add_error("B", "two")

    first.extend(second)

    assert [e.field for e in first.errors] == ["A", "B"]
    assert not first.is_valid


def test_email_host_uses_last_at_sign():
    assert email_host('"a@b"@Example.COM') == "example.com"
