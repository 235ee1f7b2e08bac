"""Exceptions raised by the job board's builders, repositories and services.

Hierarchy:
- ServiceError: base, carries an error code, HTTP status and correlation ID
- ValidationError, EmptyInputError: the caller sent something unusable (400)
- ResourceNotFoundError: JobNotFoundError, CompanyNotFoundError (404)

Storage integrity violations (unknown company handle, duplicate handle or
name, violated check constraint) are not wrapped: ``sqlalchemy.exc.IntegrityError``
propagates unmodified and is only translated into a response body here, at
the HTTP boundary.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union
from http import HTTPStatus

from sqlalchemy.exc import IntegrityError


class ErrorSeverity(Enum):
    """How loudly an error should be logged and monitored."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ErrorCategory(Enum):
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    SYSTEM = "system"


class ServiceError(Exception):
    """Base exception for errors the API reports to its clients.

    Attributes:
        message: Internal message, e.g. ``"No job: 3"``
        error_code: Machine-readable code, e.g. ``JOB_NOT_FOUND``
        correlation_id: Request correlation ID for tracing
        details: Extra context, only rendered on request
        user_message: Message shown to the client
        severity: Logging severity
        category: Error classification
        http_status: Status code of the response
    """

    def __init__(
        self,
        message: str,
        error_code: str = "SERVICE_ERROR",
        correlation_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        user_message: Optional[str] = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.SYSTEM,
        http_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.correlation_id = correlation_id
        self.details = details or {}
        self.user_message = user_message or message
        self.severity = severity
        self.category = category
        self.http_status = http_status

    def to_dict(self, include_details: bool = False) -> Dict[str, Any]:
        """Render the error as the ``error`` object of a response body."""
        result = {
            "error_code": self.error_code,
            "message": self.user_message,
            "severity": self.severity.value,
            "category": self.category.value,
            "http_status": self.http_status.value
        }

        if self.correlation_id:
            result["correlation_id"] = self.correlation_id

        if include_details and self.details:
            result["details"] = self.details
            result["internal_message"] = self.message

        return result

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"


# =============================================================================
# CLIENT INPUT ERRORS
# =============================================================================

class ValidationError(ServiceError):
    """Request input (query filters, service wiring) is invalid."""

    def __init__(
        self,
        field: str,
        message: str,
        correlation_id: Optional[str] = None,
        validation_errors: Optional[List[Dict[str, Any]]] = None
    ):
        details = {"field": field, "validation_message": message}
        if validation_errors:
            details["validation_errors"] = validation_errors

        super().__init__(
            message=f"Validation failed for {field}: {message}",
            error_code="VALIDATION_ERROR",
            correlation_id=correlation_id,
            details=details,
            user_message=f"Invalid {field}: {message}",
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.VALIDATION,
            http_status=HTTPStatus.BAD_REQUEST
        )


class EmptyInputError(ServiceError):
    """An update was requested with no fields to change.

    A usage error, never transient: callers should not retry it.
    """

    def __init__(self, correlation_id: Optional[str] = None):
        super().__init__(
            message="No data",
            error_code="EMPTY_INPUT",
            correlation_id=correlation_id,
            user_message="No data provided. Supply at least one field to update.",
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.VALIDATION,
            http_status=HTTPStatus.BAD_REQUEST
        )


# =============================================================================
# MISSING RECORDS
# =============================================================================

class ResourceNotFoundError(ServiceError):
    """No record has the requested id or handle."""

    def __init__(
        self,
        resource_type: str,
        resource_id: Union[int, str],
        correlation_id: Optional[str] = None
    ):
        super().__init__(
            message=f"No {resource_type.lower()}: {resource_id}",
            error_code=f"{resource_type.upper()}_NOT_FOUND",
            correlation_id=correlation_id,
            details={"resource_type": resource_type, "resource_id": resource_id},
            user_message=f"{resource_type} not found.",
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.RESOURCE_NOT_FOUND,
            http_status=HTTPStatus.NOT_FOUND
        )
        self.resource_id = resource_id


class JobNotFoundError(ResourceNotFoundError):
    def __init__(self, job_id: int, correlation_id: Optional[str] = None):
        super().__init__(
            resource_type="Job",
            resource_id=job_id,
            correlation_id=correlation_id
        )


class CompanyNotFoundError(ResourceNotFoundError):
    def __init__(self, handle: str, correlation_id: Optional[str] = None):
        super().__init__(
            resource_type="Company",
            resource_id=handle,
            correlation_id=correlation_id
        )


# =============================================================================
# RESPONSE HELPERS
# =============================================================================

def create_error_response(
    error: Union[ServiceError, IntegrityError],
    correlation_id: Optional[str] = None,
    include_details: bool = False
) -> Dict[str, Any]:
    """Build the ``error`` object of a response body.

    ``correlation_id`` fills in the ID when the error does not carry one.
    """
    if isinstance(error, IntegrityError):
        result = {
            "error_code": "INTEGRITY_ERROR",
            "message": "The request conflicts with existing data or references a missing record.",
            "severity": ErrorSeverity.LOW.value,
            "category": ErrorCategory.CONFLICT.value,
            "http_status": HTTPStatus.BAD_REQUEST.value,
        }
        if correlation_id:
            result["correlation_id"] = correlation_id
        return result

    if not error.correlation_id:
        error.correlation_id = correlation_id
    return error.to_dict(include_details=include_details)


def get_http_status_for_error(error: Exception) -> HTTPStatus:
    if isinstance(error, ServiceError):
        return error.http_status
    if isinstance(error, IntegrityError):
        return HTTPStatus.BAD_REQUEST
    return HTTPStatus.INTERNAL_SERVER_ERROR
