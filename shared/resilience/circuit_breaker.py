"""
Circuit Breaker Pattern Implementation

Keeps a failing collaborator from being hammered by every aggregation call
and lets it recover before traffic resumes.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, TypeVar

import structlog

from shared.resilience.exceptions import CircuitBreakerOpenError, ExternalResourceNotFoundError

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class CircuitState(str, Enum):
    """Circuit breaker states."""

    CLOSED = "closed"  # Normal operation
    OPEN = "open"  # Failing, reject requests
    HALF_OPEN = "half_open"  # Probing whether the collaborator recovered


@dataclass(frozen=True)
class CircuitBreakerConfig:
    """Configuration for circuit breaker."""

    failure_threshold: int = 5  # Consecutive failures before opening
    success_threshold: int = 2  # Successes in half-open before closing
    reset_timeout_seconds: float = 60.0  # Time in open before probing


@dataclass
class CircuitBreakerStats:
    """Statistics for circuit breaker."""

    state: CircuitState = CircuitState.CLOSED
    failure_count: int = 0
    success_count: int = 0
    total_requests: int = 0
    total_failures: int = 0
    total_successes: int = 0
    opened_at: float | None = None
    last_failure_at: datetime | None = None
    last_success_at: datetime | None = None


class CircuitBreaker:
    """
    Circuit breaker for collaborator calls.

    - CLOSED: requests pass through
    - OPEN: too many consecutive failures, requests are rejected immediately
    - HALF_OPEN: reset timeout elapsed, requests are let through as probes

    A "not found" answer is a healthy response from the collaborator and
    counts as a success.
    """

    def __init__(
        self,
        name: str,
        config: CircuitBreakerConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize circuit breaker.

        Args:
            name: Name of the circuit breaker (usually service name)
            config: Circuit breaker configuration
            clock: Monotonic time source, in seconds
        """
        self.name = name
        self.config = config or CircuitBreakerConfig()
        self.stats = CircuitBreakerStats()
        self._clock = clock
        self._lock = asyncio.Lock()

    @property
    def state(self) -> CircuitState:
        return self.stats.state

    async def call(self, func: Callable[[], Awaitable[T]]) -> T:
        """
        Execute an async call with circuit breaker protection.

        Raises:
            CircuitBreakerOpenError: If circuit is open
            Exception: Original exception from the call
        """
        async with self._lock:
            if self.stats.state == CircuitState.OPEN:
                elapsed = self._clock() - (self.stats.opened_at or 0.0)
                if elapsed < self.config.reset_timeout_seconds:
                    raise CircuitBreakerOpenError(service_name=self.name)
                logger.info(
                    "Circuit breaker transitioning to half-open",
                    circuit_name=self.name,
                    elapsed_seconds=round(elapsed, 3),
                )
                self.stats.state = CircuitState.HALF_OPEN
                self.stats.success_count = 0
            self.stats.total_requests += 1

        try:
            result = await func()
        except ExternalResourceNotFoundError:
            await self._record_success()
            raise
        except asyncio.CancelledError:
            # Cancelled by the caller's lookup timeout; a hung call is a failure.
            await self._record_failure()
            raise
        except Exception:
            await self._record_failure()
            raise

        await self._record_success()
        return result

    async def _record_success(self) -> None:
        async with self._lock:
            self.stats.total_successes += 1
            self.stats.last_success_at = datetime.now(timezone.utc)

            if self.stats.state == CircuitState.HALF_OPEN:
                self.stats.success_count += 1
                if self.stats.success_count >= self.config.success_threshold:
                    logger.info(
                        "Circuit breaker closing",
                        circuit_name=self.name,
                        success_count=self.stats.success_count,
                    )
                    self.stats.state = CircuitState.CLOSED
                    self.stats.failure_count = 0
                    self.stats.success_count = 0
                    self.stats.opened_at = None
            else:
                self.stats.failure_count = 0

    async def _record_failure(self) -> None:
        async with self._lock:
            self.stats.total_failures += 1
            self.stats.failure_count += 1
            self.stats.last_failure_at = datetime.now(timezone.utc)

            if self.stats.state == CircuitState.HALF_OPEN:
                logger.warning("Circuit breaker opening (failure in half-open)", circuit_name=self.name)
                self._open()
            elif self.stats.failure_count >= self.config.failure_threshold:
                logger.warning(
                    "Circuit breaker opening (failure threshold exceeded)",
                    circuit_name=self.name,
                    failure_count=self.stats.failure_count,
                    threshold=self.config.failure_threshold,
                )
                self._open()

    def _open(self) -> None:
        self.stats.state = CircuitState.OPEN
        self.stats.opened_at = self._clock()
        self.stats.success_count = 0

    def get_stats(self) -> dict[str, Any]:
        """Get current circuit breaker statistics."""
        return {
            "name": self.name,
            "state": self.stats.state.value,
            "failure_count": self.stats.failure_count,
            "success_count": self.stats.success_count,
            "total_requests": self.stats.total_requests,
            "total_failures": self.stats.total_failures,
            "total_successes": self.stats.total_successes,
            "last_failure_at": self.stats.last_failure_at.isoformat() if self.stats.last_failure_at else None,
            "last_success_at": self.stats.last_success_at.isoformat() if self.stats.last_success_at else None,
        }


class CircuitBreakerManager:
    """Registry of circuit breakers, one per collaborator."""

    def __init__(self):
        self._breakers: dict[str, CircuitBreaker] = {}

    def get_breaker(
        self,
        name: str,
        config: CircuitBreakerConfig | None = None,
    ) -> CircuitBreaker:
        """
        Get or create a circuit breaker.

        Args:
            name: Circuit breaker name
            config: Configuration used if the breaker is created

        Returns:
            Circuit breaker instance
        """
        breaker = self._breakers.get(name)
        if breaker is None:
            breaker = CircuitBreaker(name, config)
            self._breakers[name] = breaker
        return breaker

    def get_all_stats(self) -> dict[str, dict[str, Any]]:
        """Get statistics for all circuit breakers."""
        return {name: breaker.get_stats() for name, breaker in self._breakers.items()}


# Global circuit breaker manager
circuit_breaker_manager = CircuitBreakerManager()
