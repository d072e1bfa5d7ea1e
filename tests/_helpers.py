"""Builders shared by the test modules."""

import json

from app.modules.principal.domain.models import CreateUserRequest, User, UserInvite

FREE_DOMAINS = ["gmail.com", "yahoo.com", "hotmail.com", "outlook.com"]
ALLOWED_DOMAINS = ["acme.com", "acme.io"]


def user_fields(**overrides) -> dict:
    fields = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@acme.com",
        "user_name": "ada.lovelace",
        "password_hash": "hash",
        "password_salt": "salt",
    }
    fields.update(overrides)
    return fields


def make_user(**overrides) -> User:
    return User(**user_fields(**overrides))


def make_create_request(**overrides) -> CreateUserRequest:
    return CreateUserRequest(**user_fields(**overrides))


def make_invite(email, first_name="Grace", last_name="Hopper") -> UserInvite:
    return UserInvite(email=email, first_name=first_name, last_name=last_name)


class FakeResponse:
    """Stands in for an aiohttp response inside ``async with session.request(...)``."""

    def __init__(self, status=200, payload=None, text=None):
        self.status = status
        self._payload = payload
        if text is None:
            text = "" if payload is None else json.dumps(payload)
        self._text = text

    async def text(self):
        return self._text

    async def json(self, content_type="application/json"):
        return json.loads(self._text) if self._text else None

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False


class FakeSession:
    """Replays queued responses (or raises queued exceptions) and records each request."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.requests = []
        self.closed = False

    def request(self, method, url, **kwargs):
        self.requests.append((method, url, kwargs.get("json")))
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    async def close(self):
        self.closed = True
