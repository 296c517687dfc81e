"""
Search Service Main Application

FastAPI service that aggregates campus, employee, work order and batch data
into fully resolved views.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import settings
from shared.domain.exceptions import DomainException
from shared.logging import configure_logging
from shared.resilience.circuit_breaker import CircuitBreakerConfig
from services.search_service.api import buildings, campuses, health, people, rooms
from services.search_service.clients import (
    BatchServiceClient,
    CampusServiceClient,
    EmployeeServiceClient,
    WorkOrderServiceClient,
)
from services.search_service.engine import AggregationEngine

logger = structlog.get_logger(__name__)


def build_engine() -> AggregationEngine:
    """Create the collaborator clients and the engine from settings."""
    breaker_config = CircuitBreakerConfig(
        failure_threshold=settings.circuit_failure_threshold,
        success_threshold=settings.circuit_success_threshold,
        reset_timeout_seconds=settings.circuit_reset_timeout_seconds,
    )
    timeout = settings.lookup_timeout_seconds

    return AggregationEngine.from_settings(
        settings,
        employees=EmployeeServiceClient(settings.employee_service_url, timeout, breaker_config),
        campuses=CampusServiceClient(settings.campus_service_url, timeout, breaker_config),
        work_orders=WorkOrderServiceClient(settings.work_order_service_url, timeout, breaker_config),
        batches=BatchServiceClient(settings.batch_service_url, timeout, breaker_config),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan."""
    configure_logging(settings)
    logger.info("Starting Search Service", version=app.version, environment=settings.environment)
    app.state.engine = build_engine()
    yield
    logger.info("Search Service shutdown complete")


app = FastAPI(
    title="RMS Search Service",
    description="Aggregated, fully resolved views over campus, employee, work order and batch data",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept", "Origin"],
)


@app.exception_handler(DomainException)
async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """
    Render domain exceptions as structured error responses.

    Args:
        request: FastAPI request
        exc: Domain exception

    Returns:
        JSONResponse: Structured error response
    """
    logger.warning(
        "Domain exception",
        path=request.url.path,
        method=request.method,
        error_code=exc.error_code.value,
        status_code=exc.status_code,
        context=exc.context,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render unhandled errors without leaking internals outside debug mode."""
    logger.error(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
        exc_info=True,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "INTERNAL_SERVER_ERROR",
            "message": str(exc) if settings.debug else "An unexpected error occurred",
            "type": type(exc).__name__,
        },
    )


# Include routers
search_prefix = f"{settings.api_v1_prefix}/search"
app.include_router(health.router, prefix="/health", tags=["Health"])
app.include_router(campuses.router, prefix=search_prefix)
app.include_router(buildings.router, prefix=search_prefix)
app.include_router(rooms.router, prefix=search_prefix)
app.include_router(people.router, prefix=search_prefix)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "service": "RMS Search Service",
        "version": "0.1.0",
        "status": "operational",
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "services.search_service.main:app",
        host=settings.search_service_host,
        port=settings.search_service_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
