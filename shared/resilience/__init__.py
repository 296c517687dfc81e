"""
Resilience

Circuit breaker, resilient HTTP client and collaborator-level exceptions.
"""

from shared.resilience.circuit_breaker import (
    CircuitBreaker,
    CircuitBreakerConfig,
    CircuitState,
    circuit_breaker_manager,
)
from shared.resilience.exceptions import (
    CircuitBreakerOpenError,
    CollaboratorError,
    ExternalResourceNotFoundError,
    ExternalServiceError,
    MalformedPayloadError,
)
from shared.resilience.service_client import ResilientServiceClient

__all__ = [
    "CircuitBreaker",
    "CircuitBreakerConfig",
    "CircuitState",
    "circuit_breaker_manager",
    "CircuitBreakerOpenError",
    "CollaboratorError",
    "ExternalResourceNotFoundError",
    "ExternalServiceError",
    "MalformedPayloadError",
    "ResilientServiceClient",
]
