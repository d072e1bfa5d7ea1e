"""Tests for invite email classification."""

import pytest

from _helpers import ALLOWED_DOMAINS, FREE_DOMAINS, make_invite

from app.modules.principal.domain.models import InviteUserStatus
from app.modules.principal.domain.services import InviteClassifier


@pytest.fixture
def classifier() -> InviteClassifier:
    return InviteClassifier(FREE_DOMAINS)


@pytest.mark.parametrize("email", [
    "plain@acme.com",
    "first.last@acme.com",
    "o'brien+tag@acme.io",
    "UPPER@ACME.COM",
])
def test_valid_addresses_in_allowed_domains(classifier, email):
    assert classifier.classify(email, ALLOWED_DOMAINS) is None


@pytest.mark.parametrize("email", [
    None,
    "",
    "no-at-sign.acme.com",
    '"quoted"@acme.com',
    "josé@acme.com",
    "double..dot@acme.com",
    "trailing@acme.c0m1",
    "@acme.com",
])
def test_malformed_addresses(classifier, email):
    assert classifier.classify(email, ALLOWED_DOMAINS) == InviteUserStatus.USER_EMAIL_FORMAT_INVALID


def test_free_domain_wins_over_allowed_domain(classifier):
    # gmail.com is both free and (misconfigured as) allowed; free is reported
    status = classifier.classify("someone@gmail.com", ALLOWED_DOMAINS + ["gmail.com"])
    assert status == InviteUserStatus.USER_EMAIL_DOMAIN_FREE


def test_domain_comparison_is_case_insensitive(classifier):
    assert classifier.classify("a@GMAIL.com", ALLOWED_DOMAINS) == InviteUserStatus.USER_EMAIL_DOMAIN_FREE
    assert classifier.classify("a@Acme.Com", ["ACME.COM"]) is None


def test_unknown_domain_not_allowed(classifier):
    status = classifier.classify("someone@elsewhere.org", ALLOWED_DOMAINS)
    assert status == InviteUserStatus.USER_EMAIL_NOT_DOMAIN_ALLOWED


def test_empty_allowed_list_rejects_every_domain(classifier):
    assert classifier.classify("someone@acme.com", []) == InviteUserStatus.USER_EMAIL_NOT_DOMAIN_ALLOWED


def test_partition_keeps_input_order_and_sets_statuses(classifier):
    invites = [
        make_invite("one@acme.com"),
        make_invite("bad-address"),
        make_invite("free@yahoo.com"),
        make_invite("two@acme.io"),
        make_invite("other@elsewhere.org"),
    ]

    result = classifier.partition(invites, ALLOWED_DOMAINS)

    assert [i.email for i in result.valid] == ["one@acme.com", "two@acme.io"]
    assert [i.email for i in result.format_invalid] == ["bad-address"]
    assert [i.email for i in result.domain_invalid] == ["free@yahoo.com", "other@elsewhere.org"]
    assert [i.status for i in result.domain_invalid] == [
        InviteUserStatus.USER_EMAIL_DOMAIN_FREE,
        InviteUserStatus.USER_EMAIL_NOT_DOMAIN_ALLOWED,
    ]
    assert all(i.status is None for i in result.valid)
