# 📄 File: app/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines all the special error types the Principal Service uses to say
# what went wrong (bad input, missing records, sibling services down) in a clear way.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, and proper serialization for API responses and error handling.
# 🔗 Dependencies:
# FastAPI HTTPException, typing, HTTP status constants
# 🔄 Connected Modules / Calls From:
# Domain services, document repositories, external API clients, app.main exception handlers

from typing import Any, Dict, List, Optional
from fastapi import HTTPException, status

from app.shared.utils.validators import ValidationFailure


class PrincipalServiceException(Exception):
    """
    Base exception class for the Principal Service.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code
            }
        }

    def to_http_exception(self) -> HTTPException:
        """Convert to FastAPI HTTPException."""
        return HTTPException(
            status_code=self.status_code,
            detail=self.to_dict()["error"]
        )


# =============================================================================
# VALIDATION & DATA EXCEPTIONS
# =============================================================================

class ValidationFailedError(PrincipalServiceException):
    """
    Exception raised when one or more validation rules fail.

    Every failure found for a request is carried at once so the caller
    can report all of them in a single response.
    """

    def __init__(
        self,
        errors: List[ValidationFailure],
        message: str = "Validation failed",
        details: Optional[Dict[str, Any]] = None
    ):
        self.errors = list(errors)
        if not details:
            details = {}
        details["errors"] = [
            {"field": error.field, "message": error.message}
            for error in self.errors
        ]

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="VALIDATION_FAILED"
        )

    @property
    def messages(self) -> List[str]:
        return [error.message for error in self.errors]


class NotFoundError(PrincipalServiceException):
    """
    Exception raised when requested resource is not found.
    Used for missing users, groups, machines and invites.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND"
        )


class DocumentNotFoundError(NotFoundError):
    """
    Raised by document repositories when an update or delete targets
    a document that does not exist.
    """

    def __init__(self, collection: str, document_id: Any):
        super().__init__(
            message=f"Document {document_id} not found in {collection}",
            resource_type=collection,
            resource_id=str(document_id),
        )
        self.error_code = "DOCUMENT_NOT_FOUND"


# =============================================================================
# EXTERNAL SERVICE EXCEPTIONS
# =============================================================================

class ExternalServiceError(PrincipalServiceException):
    """
    Exception raised when external service calls fail.
    Used for the email, tenant and license services.
    """

    def __init__(
        self,
        message: str = "External service error",
        service: Optional[str] = None,
        service_response: Optional[str] = None,
        retry_after: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if service:
            details["service"] = service
        if service_response:
            details["service_response"] = service_response
        if retry_after:
            details["retry_after"] = retry_after

        super().__init__(
            message=message,
            status_code=status.HTTP_502_BAD_GATEWAY,
            details=details,
            error_code="EXTERNAL_SERVICE_ERROR"
        )


# =============================================================================
# DATABASE & INFRASTRUCTURE EXCEPTIONS
# =============================================================================

class DatabaseError(PrincipalServiceException):
    """
    Exception raised for database operation failures.
    Used for connection issues, query failures, etc.
    """

    def __init__(
        self,
        message: str = "Database error",
        operation: Optional[str] = None,
        table: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if table:
            details["table"] = table

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="DATABASE_ERROR"
        )


# =============================================================================
# EXCEPTION UTILITIES
# =============================================================================

def is_client_error(exception: Exception) -> bool:
    """
    Check if exception represents a client error (4xx).

    Args:
        exception: Exception to check

    Returns:
        bool: True if client error, False otherwise
    """
    if isinstance(exception, PrincipalServiceException):
        return 400 <= exception.status_code < 500

    if isinstance(exception, HTTPException):
        return 400 <= exception.status_code < 500

    return False
