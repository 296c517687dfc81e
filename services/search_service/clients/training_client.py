"""Work order and batch service clients."""

from services.search_service.clients.base import CollaboratorClient
from services.search_service.models.raw import Batch, WorkOrder


class WorkOrderServiceClient(CollaboratorClient):
    """HTTP implementation of ``WorkOrderLookup``."""

    service_name = "work-order-service"

    async def by_id(self, work_order_id: int) -> WorkOrder:
        return await self.get_one(WorkOrder, f"/workorders/{work_order_id}")


class BatchServiceClient(CollaboratorClient):
    """HTTP implementation of ``BatchLookup``."""

    service_name = "batch-service"

    async def by_id(self, batch_id: int) -> Batch:
        return await self.get_one(Batch, f"/batches/{batch_id}")
