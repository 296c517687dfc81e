"""
Base class for HTTP collaborator lookups.

Wraps a ``ResilientServiceClient`` and validates every payload against the
raw entity model it is supposed to carry.
"""

from typing import Any, TypeVar

import httpx
import structlog
from pydantic import BaseModel, TypeAdapter, ValidationError

from shared.resilience.circuit_breaker import CircuitBreaker, CircuitBreakerConfig
from shared.resilience.exceptions import MalformedPayloadError
from shared.resilience.service_client import ResilientServiceClient

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


class CollaboratorClient:
    """Typed GET access to one collaborator service."""

    service_name: str = "collaborator"

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        circuit_breaker_config: CircuitBreakerConfig | None = None,
        circuit_breaker: CircuitBreaker | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.client = ResilientServiceClient(
            service_name=self.service_name,
            base_url=base_url,
            timeout=timeout,
            circuit_breaker_config=circuit_breaker_config,
            circuit_breaker=circuit_breaker,
            transport=transport,
        )

    async def get_one(self, model: type[M], path: str, **kwargs: Any) -> M:
        payload = await self.client.get(path, **kwargs)
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise self._malformed(path, e) from e

    async def get_many(self, model: type[M], path: str, **kwargs: Any) -> list[M]:
        payload = await self.client.get(path, **kwargs)
        try:
            return TypeAdapter(list[model]).validate_python(payload or [])
        except ValidationError as e:
            raise self._malformed(path, e) from e

    def _malformed(self, path: str, error: ValidationError) -> MalformedPayloadError:
        logger.warning(
            "Collaborator payload failed validation",
            service=self.service_name,
            path=path,
            error_count=error.error_count(),
        )
        return MalformedPayloadError(
            service_name=self.service_name,
            message=f"{path} returned a payload that does not match the expected model",
            cause=error,
        )
