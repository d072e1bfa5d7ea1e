# 📄 File: license_manager/models.py
# 🧭 Purpose (Layman Explanation):
# The shapes of the messages exchanged with the license service: who gets which license,
# how many licenses an account owns, and the standard reply envelope.
# 🧪 Purpose (Technical Summary):
# Pydantic DTOs and enums for the license service wire format. Fields serialize with
# PascalCase aliases; enums use the service's integer codes.
# 🔗 Dependencies:
# pydantic, enum
# 🔄 Connected Modules / Calls From:
# license_manager.api, app.modules.principal.domain.services.user_service

from datetime import datetime
from enum import IntEnum
from typing import Generic, List, Optional, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal

P = TypeVar("P")


class ResultCode(IntEnum):
    """Envelope result codes returned by every license service call."""
    FAILED = 0
    SUCCESS = 1
    REDIS_CONNECTION_FAILED = 1000
    REDIS_DATA_TYPE_MISMATCH = 1001
    RECORD_NOT_FOUND = 1002
    ARGUMENT_NULL = 1003
    INSUFFICIENT_PERMISSIONS = 1004
    UNAUTHORIZED = 1005
    ACCESS_DENIED_TO_SYSTEM_SETTING = 1007
    INVALID_CLIENT_CERTIFICATE = 1008
    VALID_CLIENT_CERTIFICATE = 1009


class LicenseType(IntEnum):
    DEFAULT = 0
    USER_LICENSE = 1
    LEGACY_LICENSE = 2
    TRIAL_LICENSE = 3
    GUEST_LICENSE = 4
    ON_PREM_LICENSE = 5

    @property
    def wire_name(self) -> str:
        """Name as the service spells it, e.g. ``UserLicense``."""
        return to_pascal(self.name.lower())


class LicenseResponseResultCode(IntEnum):
    SUCCESS = 0
    FAILED = 1
    LICENSE_EXPIRED = 2
    LICENSE_DOES_NOT_EXIST = 3
    ACCOUNT_CANNOT_BE_LICENSED = 4
    NON_LICENSED_USER = 5


class UserLicenseResponseResultCode(IntEnum):
    SUCCESS = 0
    FAILED = 1
    NO_LICENSED_USERS = 2
    USER_LICENSE_NOT_AVAILABLE = 3


class LicenseModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class UserLicenseDto(LicenseModel):
    """One user's license assignment within an account."""
    user_id: Optional[str] = None
    account_id: Optional[str] = None
    version: Optional[str] = None
    license_type: Optional[str] = None
    expiration: Optional[datetime] = None


class BulkLicenseDto(LicenseModel):
    account_id: UUID
    user_id_list: List[UUID]
    license_type: LicenseType


class LicenseDto(LicenseModel):
    account_id: UUID
    license_name: str
    expiration: Optional[datetime] = None
    feature_count: int = 0
    version: Optional[str] = None
    perpetual: bool = False
    un_counted: bool = False
    serial_number: Optional[str] = None
    start_date: Optional[datetime] = None
    vendor_string: Optional[str] = None
    notice: Optional[str] = None


class LicenseSummaryDto(LicenseModel):
    license_name: str
    version: Optional[str] = None
    total_purchased: int = 0
    total_allocated: int = 0
    total_available: int = 0


class LicenseResponse(LicenseModel):
    message: Optional[str] = None
    result_code: LicenseResponseResultCode = LicenseResponseResultCode.FAILED
    licenses: Optional[List[LicenseDto]] = None
    purchases_last_updated: Optional[datetime] = None
    user_id: Optional[str] = None
    account_id: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.result_code == LicenseResponseResultCode.SUCCESS


class UserLicenseResponse(LicenseModel):
    message: Optional[str] = None
    account_id: Optional[str] = None
    result_code: UserLicenseResponseResultCode = UserLicenseResponseResultCode.FAILED
    license_assignments: Optional[List[UserLicenseDto]] = None


class ServiceResult(LicenseModel, Generic[P]):
    """Envelope wrapping every license service payload."""
    result_code: ResultCode = ResultCode.FAILED
    message: Optional[str] = None
    payload: Optional[P] = None
