# 📄 File: app/shared/utils/validators.py
# 🧭 Purpose (Layman Explanation):
# Small reusable checkers that look at incoming data and collect every problem they
# find, like "this email address is not valid" or "this id is empty".
# 🧪 Purpose (Technical Summary):
# Validation primitives shared by all modules: ValidationFailure/ValidationResult
# accumulators, the Validator base class, and email/UUID helpers built on
# email-validator and the strict bulk-upload email pattern.
# 🔗 Dependencies:
# re, uuid, email-validator
# 🔄 Connected Modules / Calls From:
# app.modules.principal.domain.validators, invite_classifier, app.shared.core.exceptions

import re
import uuid
from abc import ABC, abstractmethod
from typing import Any, Generic, List, NamedTuple, Optional, TypeVar

from email_validator import EmailNotValidError, validate_email

T = TypeVar("T")

# Bulk uploads reject quoted local parts and non-ASCII characters that a
# general-purpose address parser would accept.
_LOCAL_ATOM = r"[a-z0-9!#$%&'*+\-/=?^_`{|}~]+"
_DOMAIN_LABEL = r"(?:[a-z0-9]|[a-z0-9][a-z0-9\-._~]*[a-z0-9])"
_TOP_LABEL = r"(?:[a-z]|[a-z][a-z0-9\-._~]*[a-z])"
BULK_UPLOAD_EMAIL_PATTERN = re.compile(
    rf"{_LOCAL_ATOM}(?:\.{_LOCAL_ATOM})*@(?:{_DOMAIN_LABEL}\.)+{_TOP_LABEL}\.?",
    re.IGNORECASE | re.ASCII,
)


class ValidationFailure(NamedTuple):
    """A single failed rule: the offending field and a human readable message."""
    field: str
    message: str


class ValidationResult:
    """Result object for validation operations"""
    def __init__(self, is_valid: bool = True, errors: Optional[List[ValidationFailure]] = None):
        self.errors: List[ValidationFailure] = list(errors or [])
        self.is_valid = is_valid and not self.errors

    def add_error(self, field: str, message: str):
        """Add validation error"""
        self.errors.append(ValidationFailure(field, message))
        self.is_valid = False

    def extend(self, other: "ValidationResult") -> "ValidationResult":
        """Merge the failures of another result into this one"""
        for error in other.errors:
            self.add_error(error.field, error.message)
        return self


class Validator(ABC, Generic[T]):
    """Synchronous rule set evaluated against one object."""

    @abstractmethod
    def validate(self, obj: T) -> ValidationResult:
        pass


# ==============================================================================
# EMAIL AND IDENTIFIER VALIDATION
# ==============================================================================

def is_valid_email_address(email: Optional[str]) -> bool:
    """
    Check an address with email-validator, without DNS lookups.

    Quoted local parts are allowed here; bulk uploads use the stricter
    is_bulk_upload_email instead.
    """
    if not email or not isinstance(email, str):
        return False
    try:
        validate_email(email, check_deliverability=False, allow_quoted_local=True)
    except EmailNotValidError:
        return False
    return True


def is_bulk_upload_email(email: Optional[str]) -> bool:
    """Check an address against the bulk-upload pattern (case-insensitive, ASCII only)."""
    if not email:
        return False
    return BULK_UPLOAD_EMAIL_PATTERN.fullmatch(email) is not None


def email_host(email: str) -> str:
    """Return the lower-cased part after the last '@'."""
    return email.rsplit("@", 1)[-1].lower()


def is_valid_id(value: Any) -> bool:
    """True when value is (or parses as) a UUID other than the nil UUID."""
    if value is None:
        return False
    if not isinstance(value, uuid.UUID):
        try:
            value = uuid.UUID(str(value))
        except ValueError:
            return False
    return value != uuid.UUID(int=0)


class IdValidator(Validator[Any]):
    """Rejects missing, malformed and nil identifiers."""

    def __init__(self, field: str = "Id"):
        self.field = field

    def validate(self, obj: Any) -> ValidationResult:
        result = ValidationResult()
        if not is_valid_id(obj):
            result.add_error(self.field, f"The {self.field} must not be empty")
        return result
