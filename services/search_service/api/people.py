"""Employee, work order and batch endpoints."""

from fastapi import APIRouter, Depends

from services.search_service.dependencies import get_engine
from services.search_service.engine import AggregationEngine
from services.search_service.models.views import BatchView, EmployeeView, WorkOrderView

router = APIRouter()


@router.get("/employees", response_model=list[EmployeeView], tags=["Employees"])
async def list_employees(engine: AggregationEngine = Depends(get_engine)):
    return await engine.get_all_employees()


@router.get("/employees/{employee_id}", response_model=EmployeeView, tags=["Employees"])
async def get_employee(employee_id: int, engine: AggregationEngine = Depends(get_engine)):
    return await engine.get_employee_by_id(employee_id)


@router.get("/workorders/{work_order_id}", response_model=WorkOrderView, tags=["Work Orders"])
async def get_work_order(work_order_id: int, engine: AggregationEngine = Depends(get_engine)):
    return await engine.get_work_order_by_id(work_order_id)


@router.get("/batches/{batch_id}", response_model=BatchView, tags=["Batches"])
async def get_batch(batch_id: int, engine: AggregationEngine = Depends(get_engine)):
    return await engine.get_batch_by_id(batch_id)
