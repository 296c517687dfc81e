"""
In-memory collaborators for tests.

Every lookup records its calls so tests can assert exactly which
identifiers were fetched.
"""

import asyncio
from collections.abc import Iterable
from typing import Any

from shared.resilience.exceptions import (
    ExternalResourceNotFoundError,
    ExternalServiceError,
    MalformedPayloadError,
)
from services.search_service.models.raw import (
    Batch,
    Building,
    Campus,
    Employee,
    ResourceMetadata,
    Room,
    WorkOrder,
)


def metadata(creator: int = 1, modifier: int = 2, owner: int = 1) -> ResourceMetadata:
    return ResourceMetadata(
        resource_creator=creator,
        creation_date_time="1/1/20",
        last_modifier=modifier,
        last_modified_date_time="2/3/20",
        resource_owner=owner,
        is_active=True,
    )


def employee(employee_id: int, first_name: str, meta: ResourceMetadata | None = None) -> Employee:
    return Employee(
        id=employee_id,
        first_name=first_name,
        last_name="Tester",
        email=f"{first_name.lower()}@revature.test",
        title="TRAINER",
        department="DELIVERY",
        resource_metadata=meta if meta is not None else metadata(creator=1, modifier=1, owner=1),
    )


class RecordingLookup:
    """Shared behaviour: call recording, injected failures and delays."""

    def __init__(self, service_name: str):
        self.service_name = service_name
        self.calls: list[tuple[str, Any]] = []
        self.unavailable: set[Any] = set()
        self.malformed: set[Any] = set()
        self.delays: dict[Any, float] = {}

    async def _enter(self, method: str, key: Any) -> None:
        self.calls.append((method, key))
        if key in self.delays:
            await asyncio.sleep(self.delays[key])
        if key in self.unavailable:
            raise ExternalServiceError(service_name=self.service_name, message=f"{method}({key}) failed")
        if key in self.malformed:
            raise MalformedPayloadError(service_name=self.service_name, message=f"{method}({key}) is garbage")

    def _not_found(self, path: str) -> ExternalResourceNotFoundError:
        return ExternalResourceNotFoundError(service_name=self.service_name, path=path)

    def keys(self, method: str) -> list[Any]:
        return [key for name, key in self.calls if name == method]


class FakeEmployeeLookup(RecordingLookup):
    def __init__(self, employees: Iterable[Employee]):
        super().__init__("employee-service")
        self.employees = {e.id: e for e in employees}

    async def by_id(self, employee_id: int) -> Employee:
        await self._enter("by_id", employee_id)
        if employee_id not in self.employees:
            raise self._not_found(f"/employees/{employee_id}")
        return self.employees[employee_id]

    async def by_ids(self, employee_ids: list[int]) -> list[Employee]:
        await self._enter("by_ids", tuple(employee_ids))
        # Like the real service, unknown ids are silently left out.
        return [self.employees[i] for i in employee_ids if i in self.employees]

    async def all(self) -> list[Employee]:
        await self._enter("all", None)
        return list(self.employees.values())


class FakeCampusLookup(RecordingLookup):
    def __init__(
        self,
        campuses: Iterable[Campus],
        buildings: Iterable[Building] = (),
        rooms: Iterable[Room] = (),
    ):
        super().__init__("campus-service")
        self.campuses = {c.id: c for c in campuses}
        self.buildings = {b.id: b for b in buildings}
        self.rooms = {r.id: r for r in rooms}
        for campus in self.campuses.values():
            for building in campus.buildings:
                if isinstance(building, Building):
                    self.buildings.setdefault(building.id, building)
        for building in self.buildings.values():
            for room in building.rooms:
                self.rooms.setdefault(room.id, room)

    async def by_id(self, campus_id: int) -> Campus:
        await self._enter("by_id", campus_id)
        if campus_id not in self.campuses:
            raise self._not_found(f"/campuses/{campus_id}")
        return self.campuses[campus_id]

    async def all(self) -> list[Campus]:
        await self._enter("all", None)
        return list(self.campuses.values())

    async def building_by_id(self, building_id: int) -> Building:
        await self._enter("building_by_id", building_id)
        if building_id not in self.buildings:
            raise self._not_found(f"/buildings/{building_id}")
        return self.buildings[building_id]

    async def room_by_id(self, room_id: int) -> Room:
        await self._enter("room_by_id", room_id)
        if room_id not in self.rooms:
            raise self._not_found(f"/rooms/{room_id}")
        return self.rooms[room_id]


class FakeWorkOrderLookup(RecordingLookup):
    def __init__(self, work_orders: Iterable[WorkOrder]):
        super().__init__("work-order-service")
        self.work_orders = {w.id: w for w in work_orders}

    async def by_id(self, work_order_id: int) -> WorkOrder:
        await self._enter("by_id", work_order_id)
        if work_order_id not in self.work_orders:
            raise self._not_found(f"/workorders/{work_order_id}")
        return self.work_orders[work_order_id]


class FakeBatchLookup(RecordingLookup):
    def __init__(self, batches: Iterable[Batch]):
        super().__init__("batch-service")
        self.batches = {b.id: b for b in batches}

    async def by_id(self, batch_id: int) -> Batch:
        await self._enter("by_id", batch_id)
        if batch_id not in self.batches:
            raise self._not_found(f"/batches/{batch_id}")
        return self.batches[batch_id]
