"""
Collaborator-level exceptions.

Raised by service clients and lookups. These never cross the aggregation
engine boundary; the resolvers translate them into domain exceptions.
"""

from typing import Any


class CollaboratorError(Exception):
    """Base class for failures reported while talking to a collaborator."""

    def __init__(
        self,
        service_name: str,
        message: str,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.service_name = service_name
        self.message = message
        self.cause = cause


class ExternalResourceNotFoundError(CollaboratorError):
    """The collaborator answered, and the requested resource does not exist."""

    def __init__(self, service_name: str, path: str, **kwargs: Any):
        super().__init__(
            service_name=service_name,
            message=kwargs.pop("message", None) or f"{service_name} has no resource at {path}",
            **kwargs,
        )
        self.path = path


class ExternalServiceError(CollaboratorError):
    """Transport failure, timeout, or unexpected status from a collaborator."""

    def __init__(
        self,
        service_name: str,
        message: str | None = None,
        timeout: bool = False,
        status_code: int | None = None,
        **kwargs: Any,
    ):
        default_message = f"{service_name} service {'timed out' if timeout else 'returned an error'}"
        super().__init__(service_name=service_name, message=message or default_message, **kwargs)
        self.timeout = timeout
        self.status_code = status_code


class CircuitBreakerOpenError(ExternalServiceError):
    """Raised when the circuit breaker is open and the request is rejected."""

    def __init__(self, service_name: str):
        super().__init__(
            service_name=service_name,
            message=f"Circuit breaker is open for {service_name}. Service is temporarily unavailable.",
        )


class MalformedPayloadError(CollaboratorError):
    """The collaborator answered with a body that does not match the expected model."""
