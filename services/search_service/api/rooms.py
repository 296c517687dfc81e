"""Room aggregation endpoints."""

from fastapi import APIRouter, Depends

from services.search_service.dependencies import get_engine
from services.search_service.engine import AggregationEngine
from services.search_service.models.views import RoomView

router = APIRouter(prefix="/rooms", tags=["Rooms"])


@router.get("", response_model=list[RoomView])
async def list_rooms(engine: AggregationEngine = Depends(get_engine)):
    return await engine.get_all_rooms()


@router.get("/trainer/{employee_id}", response_model=list[RoomView])
async def list_rooms_by_trainer(
    employee_id: int,
    engine: AggregationEngine = Depends(get_engine),
):
    """Rooms hosting a batch led by the given trainer."""
    return await engine.get_rooms_by_trainer(employee_id)


@router.get("/{room_id}", response_model=RoomView)
async def get_room(room_id: int, engine: AggregationEngine = Depends(get_engine)):
    return await engine.get_room_by_id(room_id)
