"""
Domain Exceptions

The closed set of error kinds the search service exposes to its callers.
Collaborator-level failures live in ``shared.resilience.exceptions`` and are
translated into these before they cross the aggregation boundary.
"""

from enum import Enum
from typing import Any

import structlog

logger = structlog.get_logger(__name__)


class ErrorCode(str, Enum):
    """Standard error codes for domain exceptions."""

    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    INVALID_REQUEST = "INVALID_REQUEST"
    COLLABORATOR_UNAVAILABLE = "COLLABORATOR_UNAVAILABLE"
    COLLABORATOR_TIMEOUT = "COLLABORATOR_TIMEOUT"


class DomainException(Exception):
    """
    Base class for all domain exceptions.

    Provides structured error information with error codes and context.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        status_code: int = 500,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            error_code: Standard error code
            status_code: HTTP status code (default: 500)
            context: Additional context data
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.context = context or {}
        self.cause = cause

        logger.warning(
            "Domain exception raised",
            error_code=error_code.value,
            message=message,
            status_code=status_code,
            context=self.context,
            exception_type=type(self).__name__,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        result = {
            "error": self.error_code.value,
            "message": self.message,
            "type": type(self).__name__,
        }
        if self.context:
            result["context"] = self.context
        return result


class ResourceNotFoundError(DomainException):
    """Raised when a requested root or a required nested entity does not exist."""

    def __init__(
        self,
        entity_type: str,
        entity_id: Any | None = None,
        **kwargs
    ):
        message = kwargs.pop("message", None) or f"{entity_type} not found"
        if entity_id is not None:
            message += f" (ID: {entity_id})"

        context = dict(kwargs.pop("context", None) or {})
        context["entity_type"] = entity_type
        if entity_id is not None:
            context["entity_id"] = str(entity_id)

        super().__init__(
            message=message,
            error_code=ErrorCode.ENTITY_NOT_FOUND,
            status_code=404,
            context=context,
            **kwargs
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


class InvalidRequestError(DomainException):
    """Raised when the caller supplies a malformed or out-of-range identifier."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any | None = None,
        **kwargs
    ):
        context = dict(kwargs.pop("context", None) or {})
        if field:
            context["field"] = field
        if value is not None:
            context["value"] = str(value)

        super().__init__(
            message=message,
            error_code=ErrorCode.INVALID_REQUEST,
            status_code=400,
            context=context,
            **kwargs
        )


class CollaboratorUnavailableError(DomainException):
    """Raised when a collaborator cannot be reached, times out, or answers with garbage."""

    def __init__(
        self,
        service_name: str,
        entity_type: str,
        entity_id: Any | None = None,
        timeout: bool = False,
        reason: str | None = None,
        **kwargs
    ):
        error_code = ErrorCode.COLLABORATOR_TIMEOUT if timeout else ErrorCode.COLLABORATOR_UNAVAILABLE
        message = kwargs.pop("message", None) or (
            f"{service_name} service {'timed out' if timeout else 'is unavailable'} "
            f"while fetching {entity_type}"
        )
        if entity_id is not None:
            message += f" (ID: {entity_id})"

        context = dict(kwargs.pop("context", None) or {})
        context["service_name"] = service_name
        context["entity_type"] = entity_type
        context["timeout"] = timeout
        if entity_id is not None:
            context["entity_id"] = str(entity_id)
        if reason:
            context["reason"] = reason

        super().__init__(
            message=message,
            error_code=error_code,
            status_code=503,
            context=context,
            **kwargs
        )
        self.service_name = service_name
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.timeout = timeout
