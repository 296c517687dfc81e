"""
Resolver plumbing.

``fetch`` is the single place where a collaborator lookup is awaited: it
applies the per-call timeout and translates collaborator failures into the
domain error kinds. ``Resolver.each`` resolves a list of siblings, in order,
either one after another or as concurrent tasks.
"""

import asyncio
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import Any, TypeVar

import structlog

from shared.domain.exceptions import CollaboratorUnavailableError, ResourceNotFoundError
from shared.resilience.exceptions import (
    ExternalResourceNotFoundError,
    ExternalServiceError,
    MalformedPayloadError,
)

logger = structlog.get_logger(__name__)

S = TypeVar("S")
T = TypeVar("T")


@dataclass(frozen=True)
class ResolutionOptions:
    """Knobs shared by every resolver of one engine."""

    lookup_timeout: float = 10.0
    concurrent_siblings: bool = False


async def fetch(
    call: Awaitable[T],
    *,
    service_name: str,
    entity_type: str,
    entity_id: Any,
    timeout: float,
) -> T:
    """
    Await a collaborator lookup with a timeout.

    Args:
        call: The pending lookup
        service_name: Collaborator name, for error context
        entity_type: Kind of entity being fetched
        entity_id: Identifier(s) being fetched
        timeout: Seconds before the lookup counts as unavailable

    Returns:
        Whatever the lookup returned

    Raises:
        ResourceNotFoundError: The collaborator has no such entity
        CollaboratorUnavailableError: Transport failure, timeout, error status
            or malformed payload
    """
    logger.debug("Collaborator lookup", service=service_name, entity_type=entity_type, entity_id=entity_id)
    try:
        return await asyncio.wait_for(call, timeout)
    except ExternalResourceNotFoundError as e:
        raise ResourceNotFoundError(entity_type, entity_id, cause=e) from e
    except asyncio.TimeoutError as e:
        raise CollaboratorUnavailableError(
            service_name, entity_type, entity_id, timeout=True, cause=e
        ) from e
    except ExternalServiceError as e:
        raise CollaboratorUnavailableError(
            service_name, entity_type, entity_id, timeout=e.timeout, reason=e.message, cause=e
        ) from e
    except MalformedPayloadError as e:
        raise CollaboratorUnavailableError(
            service_name, entity_type, entity_id, reason=e.message, cause=e
        ) from e


async def resolve_each(
    items: Iterable[S],
    resolve: Callable[[S], Awaitable[T]],
    concurrent: bool = False,
) -> list[T]:
    """
    Resolve every item, returning results in input order.

    Sequential mode stops at the first failure. Concurrent mode cancels the
    remaining siblings on the first failure and re-raises it.
    """
    if not concurrent:
        return [await resolve(item) for item in items]

    tasks = [asyncio.ensure_future(resolve(item)) for item in items]
    try:
        return list(await asyncio.gather(*tasks))
    except Exception:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


class Resolver:
    """Common base for the entity resolvers."""

    def __init__(self, options: ResolutionOptions):
        self.options = options

    async def fetch(self, service_name: str, entity_type: str, entity_id: Any, call: Awaitable[T]) -> T:
        return await fetch(
            call,
            service_name=service_name,
            entity_type=entity_type,
            entity_id=entity_id,
            timeout=self.options.lookup_timeout,
        )

    async def each(self, items: Iterable[S], resolve: Callable[[S], Awaitable[T]]) -> list[T]:
        return await resolve_each(items, resolve, self.options.concurrent_siblings)
