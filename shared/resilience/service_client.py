"""
Service Client with Circuit Breaker

Resilient HTTP client for calling collaborator services with:
- Circuit breaker pattern
- Timeout handling
- Typed failures (not found vs. unavailable)
"""

from typing import Any

import httpx
import structlog

from shared.resilience.circuit_breaker import (
    CircuitBreaker,
    CircuitBreakerConfig,
    circuit_breaker_manager,
)
from shared.resilience.exceptions import (
    CircuitBreakerOpenError,
    ExternalResourceNotFoundError,
    ExternalServiceError,
    MalformedPayloadError,
)

logger = structlog.get_logger(__name__)


class ResilientServiceClient:
    """
    HTTP client with circuit breaker.

    Automatically handles:
    - Circuit breaker pattern
    - Timeouts
    - Mapping of 404 to ExternalResourceNotFoundError and every other
      failure to ExternalServiceError
    """

    def __init__(
        self,
        service_name: str,
        base_url: str,
        timeout: float = 10.0,
        circuit_breaker_config: CircuitBreakerConfig | None = None,
        circuit_breaker: CircuitBreaker | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize resilient service client.

        Args:
            service_name: Name of the service (for circuit breaker)
            base_url: Base URL of the service
            timeout: Request timeout in seconds
            circuit_breaker_config: Optional circuit breaker configuration
            circuit_breaker: Explicit breaker, bypassing the global manager
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.service_name = service_name
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport
        self.circuit_breaker = circuit_breaker or circuit_breaker_manager.get_breaker(
            service_name,
            circuit_breaker_config,
        )

    async def call(self, method: str, path: str, **kwargs: Any) -> Any:
        """
        Make HTTP request through the circuit breaker.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: URL path (will be appended to base_url)
            **kwargs: Additional arguments for httpx request

        Returns:
            Decoded JSON body, or None for an empty body

        Raises:
            ExternalResourceNotFoundError: If the service answers 404
            ExternalServiceError: On timeout, connection failure or error status
            CircuitBreakerOpenError: If circuit breaker is open
            MalformedPayloadError: If the body is not valid JSON
        """
        url = f"{self.base_url}{path}"

        async def _make_request() -> httpx.Response:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.request(method, url, **kwargs)
                if response.status_code == httpx.codes.NOT_FOUND:
                    raise ExternalResourceNotFoundError(service_name=self.service_name, path=path)
                response.raise_for_status()
                return response

        try:
            response = await self.circuit_breaker.call(_make_request)

        except (CircuitBreakerOpenError, ExternalResourceNotFoundError):
            raise

        except httpx.TimeoutException as e:
            logger.warning(
                "Service request timed out",
                service=self.service_name,
                path=path,
                error=str(e),
            )
            raise ExternalServiceError(
                service_name=self.service_name,
                message=f"Request to {path} timed out",
                timeout=True,
                cause=e,
            ) from e

        except httpx.HTTPStatusError as e:
            logger.warning(
                "Service returned error status",
                service=self.service_name,
                path=path,
                status_code=e.response.status_code,
            )
            raise ExternalServiceError(
                service_name=self.service_name,
                message=f"Service returned {e.response.status_code}",
                status_code=e.response.status_code,
                cause=e,
            ) from e

        except httpx.HTTPError as e:
            logger.warning(
                "Service request failed (transport)",
                service=self.service_name,
                path=path,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise ExternalServiceError(
                service_name=self.service_name,
                message=f"Request to {path} failed: {e}",
                cause=e,
            ) from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise MalformedPayloadError(
                service_name=self.service_name,
                message=f"{path} returned a non-JSON body",
                cause=e,
            ) from e

    async def get(self, path: str, **kwargs: Any) -> Any:
        """Make GET request."""
        return await self.call("GET", path, **kwargs)
