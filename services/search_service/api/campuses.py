"""Campus aggregation endpoints."""

import structlog
from fastapi import APIRouter, Depends

from services.search_service.dependencies import get_engine
from services.search_service.engine import AggregationEngine
from services.search_service.models.views import CampusView

router = APIRouter(prefix="/campuses", tags=["Campuses"])
logger = structlog.get_logger(__name__)


@router.get("", response_model=list[CampusView])
async def list_campuses(engine: AggregationEngine = Depends(get_engine)):
    """Every campus, fully resolved."""
    return await engine.get_all_campuses()


@router.get("/training-manager/{employee_id}", response_model=list[CampusView])
async def list_campuses_by_training_manager(
    employee_id: int,
    engine: AggregationEngine = Depends(get_engine),
):
    """Campuses managed by the given training manager."""
    return await engine.get_campuses_by_training_manager(employee_id)


@router.get("/owner/{employee_id}", response_model=list[CampusView])
async def list_campuses_by_owner(
    employee_id: int,
    engine: AggregationEngine = Depends(get_engine),
):
    """Campuses whose resource owner is the given employee."""
    return await engine.get_campuses_by_owner(employee_id)


@router.get("/{campus_id}", response_model=CampusView)
async def get_campus(campus_id: int, engine: AggregationEngine = Depends(get_engine)):
    """
    Get one campus with buildings, rooms, work orders, batches and
    employees resolved.
    """
    logger.info("Get campus", campus_id=campus_id)
    return await engine.get_campus_by_id(campus_id)
