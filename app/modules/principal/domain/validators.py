# 📄 File: app/modules/principal/domain/validators.py
# 🧭 Purpose (Layman Explanation):
# The rule books for incoming users, groups and machines: names must be filled in and not
# too long, emails must look real, user names may only use certain characters.
# 🧪 Purpose (Technical Summary):
# Typed Validator implementations for the principal requests. Each returns a
# ValidationResult listing every failed rule (field + message); services merge these with
# their own uniqueness checks before raising a single ValidationFailedError.
# 🔗 Dependencies:
# app.shared.utils.validators (primitives, email-validator helpers), re
# 🔄 Connected Modules / Calls From:
# user_service.py, group_service.py, machine_service.py, user_invite_service.py

import re
from typing import Optional

from app.shared.utils.validators import (
    IdValidator,
    ValidationResult,
    Validator,
    is_valid_email_address,
)

from .models import Group, Machine, User

NAME_MAX_LENGTH = 100
USER_NAME_PATTERN = re.compile(r"^[0-9a-zA-Z@\-._]{1,100}$")


def _check_text(
    result: ValidationResult,
    field: str,
    value: Optional[str],
    empty_message: str,
    max_length: Optional[int] = None,
    length_message: Optional[str] = None,
) -> bool:
    """Add empty/too-long failures; True when the value passed both."""
    if not value or not value.strip():
        result.add_error(field, empty_message)
        return False
    if max_length is not None and len(value) > max_length:
        result.add_error(field, length_message)
        return False
    return True


class CreateUserRequestValidator(Validator[User]):
    """Structural rules for a new or updated user."""

    def validate(self, obj: User) -> ValidationResult:
        result = ValidationResult()

        _check_text(result, "FirstName", obj.first_name,
                    "The FirstName property must not be empty",
                    NAME_MAX_LENGTH, "The FirstName must be less than 100 characters long")
        _check_text(result, "LastName", obj.last_name,
                    "The LastName property must not be empty",
                    NAME_MAX_LENGTH, "The LastName must be less than 100 characters long")

        if _check_text(result, "Email", obj.email,
                       "The Email property must not be empty",
                       NAME_MAX_LENGTH, "The Email must be less than 100 characters long"):
            if not is_valid_email_address(obj.email):
                result.add_error("Email", "Invalid email address")

        if _check_text(result, "UserName", obj.user_name,
                       "The UserName property must not be empty",
                       NAME_MAX_LENGTH, "The UserName must be less than 100 characters long"):
            if not USER_NAME_PATTERN.match(obj.user_name):
                result.add_error("UserName", "Username may only contain alpha-numeric characters as well . @ _ -")

        if not obj.password_hash:
            result.add_error("PasswordHash", "Password Hash and Salt can not be null")
        if not obj.password_salt:
            result.add_error("PasswordSalt", "Password Hash and Salt can not be null")

        return result


class CreateGroupRequestValidator(Validator[Group]):

    def validate(self, obj: Group) -> ValidationResult:
        result = ValidationResult()
        _check_text(result, "Name", obj.name,
                    "The Group Name property must not be empty",
                    NAME_MAX_LENGTH, "The Group Name must be less than 100 characters long")
        return result


class CreateMachineRequestValidator(Validator[Machine]):

    def validate(self, obj: Machine) -> ValidationResult:
        result = ValidationResult()
        _check_text(result, "MachineKey", obj.machine_key,
                    "The MachineKey property must not be empty")
        _check_text(result, "Location", obj.location,
                    "The Location property must not be empty")
        return result


class PrincipalValidators:
    """
    The validators a principal service needs, bundled for injection.

    Tests substitute individual members; production code uses the defaults.
    """

    def __init__(
        self,
        create_user: Optional[Validator[User]] = None,
        create_group: Optional[Validator[Group]] = None,
        create_machine: Optional[Validator[Machine]] = None,
    ):
        self.create_user = create_user or CreateUserRequestValidator()
        self.create_group = create_group or CreateGroupRequestValidator()
        self.create_machine = create_machine or CreateMachineRequestValidator()
        self.user_id = IdValidator("UserId")
        self.tenant_id = IdValidator("TenantId")
        self.group_id = IdValidator("GroupId")
        self.machine_id = IdValidator("MachineId")


__all__ = [
    "CreateGroupRequestValidator",
    "CreateMachineRequestValidator",
    "CreateUserRequestValidator",
    "PrincipalValidators",
    "USER_NAME_PATTERN",
]
