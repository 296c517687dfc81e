"""
Collaborator lookup interfaces.

The aggregation engine only depends on these protocols. Implementations raise
``ExternalResourceNotFoundError`` for absent entities and
``ExternalServiceError`` / ``MalformedPayloadError`` for everything else.
"""

from typing import Protocol

from services.search_service.models.raw import Batch, Building, Campus, Employee, Room, WorkOrder


class EmployeeLookup(Protocol):
    service_name: str

    async def by_id(self, employee_id: int) -> Employee: ...

    async def by_ids(self, employee_ids: list[int]) -> list[Employee]: ...

    async def all(self) -> list[Employee]: ...


class CampusLookup(Protocol):
    service_name: str

    async def by_id(self, campus_id: int) -> Campus: ...

    async def all(self) -> list[Campus]: ...

    async def building_by_id(self, building_id: int) -> Building: ...

    async def room_by_id(self, room_id: int) -> Room: ...


class WorkOrderLookup(Protocol):
    service_name: str

    async def by_id(self, work_order_id: int) -> WorkOrder: ...


class BatchLookup(Protocol):
    service_name: str

    async def by_id(self, batch_id: int) -> Batch: ...
