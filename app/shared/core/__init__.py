"""
Core package for the Principal Service.
Provides the exception hierarchy shared by every layer.
"""

from .exceptions import (
    DatabaseError,
    DocumentNotFoundError,
    ExternalServiceError,
    NotFoundError,
    PrincipalServiceException,
    ValidationFailedError,
    is_client_error,
)

__all__ = [
    "DatabaseError",
    "DocumentNotFoundError",
    "ExternalServiceError",
    "NotFoundError",
    "PrincipalServiceException",
    "ValidationFailedError",
    "is_client_error",
]
