"""
Aggregation Engine

Orchestration surface of the search service. Composes the resolvers into
get-by-id and get-all entry points per root entity, validates caller-supplied
identifiers, and guarantees that callers only ever see the domain error kinds:

- ResourceNotFoundError: the root or a required nested entity is missing
- InvalidRequestError: the caller supplied a non-positive identifier
- CollaboratorUnavailableError: a collaborator failed, timed out, or
  answered with a malformed payload

Every call is all-or-nothing: a failure anywhere in the tree aborts the call.
"""

import time
from collections.abc import Awaitable
from typing import Any, TypeVar

import structlog

from shared.config import Settings
from shared.domain.exceptions import DomainException, InvalidRequestError
from services.search_service.lookups import BatchLookup, CampusLookup, EmployeeLookup, WorkOrderLookup
from services.search_service.models.raw import Building, Campus, Room
from services.search_service.models.views import (
    BatchView,
    BuildingView,
    CampusView,
    EmployeeView,
    RoomView,
    WorkOrderView,
)
from services.search_service.resolvers import (
    BatchResolver,
    BuildingResolver,
    CampusResolver,
    EmployeeResolver,
    ResolutionOptions,
    RoomResolver,
    WorkOrderResolver,
)

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def require_id(entity_type: str, value: Any) -> int:
    """
    Validate a caller-supplied identifier.

    Raises:
        InvalidRequestError: If the value is not a positive integer
    """
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidRequestError(
            f"{entity_type} id must be a positive integer",
            field=f"{entity_type.lower()}_id",
            value=value,
        )
    return value


class AggregationEngine:
    """
    Builds fully resolved views from the four collaborators.

    Holds no state between calls besides the resolver graph itself.
    """

    def __init__(
        self,
        employees: EmployeeLookup,
        campuses: CampusLookup,
        work_orders: WorkOrderLookup,
        batches: BatchLookup,
        options: ResolutionOptions | None = None,
    ):
        """
        Wire the resolver graph.

        Args:
            employees: Employee collaborator
            campuses: Campus/facilities collaborator
            work_orders: Work order collaborator
            batches: Batch/training collaborator
            options: Timeout and concurrency options
        """
        self.options = options or ResolutionOptions()
        self.employee_resolver = EmployeeResolver(employees, self.options)
        self.work_order_resolver = WorkOrderResolver(work_orders, self.employee_resolver, self.options)
        self.batch_resolver = BatchResolver(batches, self.employee_resolver, self.options)
        self.room_resolver = RoomResolver(
            campuses,
            self.employee_resolver,
            self.work_order_resolver,
            self.batch_resolver,
            self.options,
        )
        self.building_resolver = BuildingResolver(
            campuses, self.employee_resolver, self.room_resolver, self.options
        )
        self.campus_resolver = CampusResolver(
            campuses, self.employee_resolver, self.building_resolver, self.options
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        employees: EmployeeLookup,
        campuses: CampusLookup,
        work_orders: WorkOrderLookup,
        batches: BatchLookup,
    ) -> "AggregationEngine":
        options = ResolutionOptions(
            lookup_timeout=settings.lookup_timeout_seconds,
            concurrent_siblings=settings.resolve_siblings_concurrently,
        )
        return cls(employees, campuses, work_orders, batches, options)

    # ------------------------------------------------------------------ campuses

    async def get_campus_by_id(self, campus_id: int) -> CampusView:
        require_id("Campus", campus_id)

        async def _run() -> CampusView:
            campus = await self.campus_resolver.fetch_campus(campus_id)
            return await self.campus_resolver.resolve(campus)

        return await self._aggregate("get_campus_by_id", _run(), campus_id=campus_id)

    async def resolve_campus(self, campus: Campus) -> CampusView:
        """Resolve a raw campus the caller already holds."""
        return await self._aggregate(
            "resolve_campus", self.campus_resolver.resolve(campus), campus_id=campus.id
        )

    async def get_all_campuses(self) -> list[CampusView]:
        async def _run() -> list[CampusView]:
            campuses = await self.campus_resolver.fetch_all()
            return await self.campus_resolver.each(campuses, self.campus_resolver.resolve)

        return await self._aggregate("get_all_campuses", _run())

    async def get_campuses_by_training_manager(self, employee_id: int) -> list[CampusView]:
        require_id("Employee", employee_id)

        async def _run() -> list[CampusView]:
            campuses = await self.campus_resolver.fetch_all()
            matching = [c for c in campuses if c.training_manager_id == employee_id]
            return await self.campus_resolver.each(matching, self.campus_resolver.resolve)

        return await self._aggregate(
            "get_campuses_by_training_manager", _run(), employee_id=employee_id
        )

    async def get_campuses_by_owner(self, employee_id: int) -> list[CampusView]:
        require_id("Employee", employee_id)

        async def _run() -> list[CampusView]:
            campuses = await self.campus_resolver.fetch_all()
            matching = [
                c for c in campuses
                if c.resource_metadata is not None and c.resource_metadata.resource_owner == employee_id
            ]
            return await self.campus_resolver.each(matching, self.campus_resolver.resolve)

        return await self._aggregate("get_campuses_by_owner", _run(), employee_id=employee_id)

    # ----------------------------------------------------------------- buildings

    async def get_building_by_id(self, building_id: int) -> BuildingView:
        require_id("Building", building_id)
        return await self._aggregate(
            "get_building_by_id",
            self.building_resolver.resolve_by_id(building_id),
            building_id=building_id,
        )

    async def get_all_buildings(self) -> list[BuildingView]:
        async def _run() -> list[BuildingView]:
            buildings = await self._all_raw_buildings()
            return await self.building_resolver.each(buildings, self.building_resolver.resolve)

        return await self._aggregate("get_all_buildings", _run())

    async def get_buildings_by_training_lead(self, employee_id: int) -> list[BuildingView]:
        require_id("Employee", employee_id)

        async def _run() -> list[BuildingView]:
            buildings = await self._all_raw_buildings()
            matching = [b for b in buildings if b.training_lead == employee_id]
            return await self.building_resolver.each(matching, self.building_resolver.resolve)

        return await self._aggregate(
            "get_buildings_by_training_lead", _run(), employee_id=employee_id
        )

    async def get_buildings_by_owner(self, employee_id: int) -> list[BuildingView]:
        require_id("Employee", employee_id)

        async def _run() -> list[BuildingView]:
            buildings = await self._all_raw_buildings()
            matching = [
                b for b in buildings
                if b.resource_metadata is not None and b.resource_metadata.resource_owner == employee_id
            ]
            return await self.building_resolver.each(matching, self.building_resolver.resolve)

        return await self._aggregate("get_buildings_by_owner", _run(), employee_id=employee_id)

    # --------------------------------------------------------------------- rooms

    async def get_room_by_id(self, room_id: int) -> RoomView:
        require_id("Room", room_id)
        return await self._aggregate(
            "get_room_by_id", self.room_resolver.resolve_by_id(room_id), room_id=room_id
        )

    async def get_all_rooms(self) -> list[RoomView]:
        async def _run() -> list[RoomView]:
            rooms = await self._all_raw_rooms()
            return await self.room_resolver.each(rooms, self.room_resolver.resolve)

        return await self._aggregate("get_all_rooms", _run())

    async def get_rooms_by_trainer(self, employee_id: int) -> list[RoomView]:
        """Rooms whose linked batch is led by the given trainer."""
        require_id("Employee", employee_id)

        async def _run() -> list[RoomView]:
            matching = []
            for room in await self._all_raw_rooms():
                if room.batch_id is None:
                    continue
                batch = await self.batch_resolver.fetch_batch(room.batch_id)
                if batch.trainer_id == employee_id:
                    matching.append(room)
            return await self.room_resolver.each(matching, self.room_resolver.resolve)

        return await self._aggregate("get_rooms_by_trainer", _run(), employee_id=employee_id)

    # ----------------------------------------------------------------- employees

    async def get_all_employees(self) -> list[EmployeeView]:
        return await self._aggregate("get_all_employees", self.employee_resolver.all())

    async def get_employee_by_id(self, employee_id: int) -> EmployeeView:
        require_id("Employee", employee_id)
        return await self._aggregate(
            "get_employee_by_id", self.employee_resolver.deep(employee_id), employee_id=employee_id
        )

    # --------------------------------------------------------- work orders/batch

    async def get_work_order_by_id(self, work_order_id: int) -> WorkOrderView:
        require_id("WorkOrder", work_order_id)
        return await self._aggregate(
            "get_work_order_by_id",
            self.work_order_resolver.resolve_by_id(work_order_id),
            work_order_id=work_order_id,
        )

    async def get_batch_by_id(self, batch_id: int) -> BatchView:
        require_id("Batch", batch_id)
        return await self._aggregate(
            "get_batch_by_id", self.batch_resolver.resolve_by_id(batch_id), batch_id=batch_id
        )

    # ------------------------------------------------------------------ helpers

    async def _all_raw_buildings(self) -> list[Building]:
        buildings: list[Building] = []
        for campus in await self.campus_resolver.fetch_all():
            buildings.extend(await self.campus_resolver.raw_buildings(campus))
        return buildings

    async def _all_raw_rooms(self) -> list[Room]:
        return [room for building in await self._all_raw_buildings() for room in building.rooms]

    async def _aggregate(self, operation: str, call: Awaitable[T], **fields: Any) -> T:
        """Run one aggregation call with start/finish logging."""
        log = logger.bind(operation=operation, **fields)
        log.info("Aggregation started")
        start_time = time.perf_counter()
        try:
            result = await call
        except DomainException as e:
            log.warning(
                "Aggregation failed",
                error_code=e.error_code.value,
                context=e.context,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            raise

        log.info(
            "Aggregation completed",
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return result
