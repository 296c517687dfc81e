"""
Health check endpoints with circuit breaker status.
"""

from fastapi import APIRouter

from shared.resilience.circuit_breaker import circuit_breaker_manager

router = APIRouter()


@router.get("")
async def health_check() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "healthy", "service": "search-service"}


@router.get("/circuit-breakers")
async def get_circuit_breaker_status():
    """
    Get status of all collaborator circuit breakers.

    Returns:
        Dictionary of circuit breaker statistics
    """
    return circuit_breaker_manager.get_all_stats()
