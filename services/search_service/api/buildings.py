"""Building aggregation endpoints."""

from fastapi import APIRouter, Depends

from services.search_service.dependencies import get_engine
from services.search_service.engine import AggregationEngine
from services.search_service.models.views import BuildingView

router = APIRouter(prefix="/buildings", tags=["Buildings"])


@router.get("", response_model=list[BuildingView])
async def list_buildings(engine: AggregationEngine = Depends(get_engine)):
    return await engine.get_all_buildings()


@router.get("/training-lead/{employee_id}", response_model=list[BuildingView])
async def list_buildings_by_training_lead(
    employee_id: int,
    engine: AggregationEngine = Depends(get_engine),
):
    return await engine.get_buildings_by_training_lead(employee_id)


@router.get("/owner/{employee_id}", response_model=list[BuildingView])
async def list_buildings_by_owner(
    employee_id: int,
    engine: AggregationEngine = Depends(get_engine),
):
    return await engine.get_buildings_by_owner(employee_id)


@router.get("/{building_id}", response_model=BuildingView)
async def get_building(building_id: int, engine: AggregationEngine = Depends(get_engine)):
    return await engine.get_building_by_id(building_id)
