"""Room resolution: status history, linked work orders, linked batch, metadata."""

from services.search_service.lookups import CampusLookup
from services.search_service.models.raw import Room, RoomStatus
from services.search_service.models.views import RoomStatusView, RoomView
from services.search_service.resolvers.base import ResolutionOptions, Resolver
from services.search_service.resolvers.batch import BatchResolver
from services.search_service.resolvers.employee import EmployeeResolver
from services.search_service.resolvers.work_order import WorkOrderResolver


class RoomResolver(Resolver):
    """Resolves rooms with their statuses, linked batch and work orders."""

    def __init__(
        self,
        lookup: CampusLookup,
        employees: EmployeeResolver,
        work_orders: WorkOrderResolver,
        batches: BatchResolver,
        options: ResolutionOptions,
    ):
        """
        Initialize room resolver.

        Args:
            lookup: Campus collaborator (owns rooms)
            employees: Employee resolver
            work_orders: Work order resolver
            batches: Batch resolver
            options: Timeout and concurrency options
        """
        super().__init__(options)
        self.lookup = lookup
        self.employees = employees
        self.work_orders = work_orders
        self.batches = batches

    async def fetch_room(self, room_id: int) -> Room:
        """Fetch a raw room by ID."""
        return await self.fetch(self.lookup.service_name, "Room", room_id, self.lookup.room_by_id(room_id))

    async def resolve_by_id(self, room_id: int) -> RoomView:
        """Fetch and resolve a room."""
        return await self.resolve(await self.fetch_room(room_id))

    async def resolve(self, room: Room) -> RoomView:
        """
        Resolve a raw room into its view.

        Args:
            room: Raw room

        Returns:
            RoomView: Statuses, metadata, batch (None when unlinked) and work
            orders in room order
        """
        statuses = await self.each(room.current_status, self.resolve_status)
        metadata = await self.employees.metadata.resolve(room.resource_metadata, "Room", room.id)

        batch = None
        if room.batch_id is not None:
            batch = await self.batches.resolve_by_id(room.batch_id)

        work_orders = await self.each(room.work_orders, self.work_orders.resolve_by_id)

        return RoomView(
            id=room.id,
            room_number=room.room_number,
            max_occupancy=room.max_occupancy,
            current_status=statuses,
            batch=batch,
            work_orders=work_orders,
            resource_metadata=metadata,
        )

    async def resolve_status(self, status: RoomStatus) -> RoomStatusView:
        """Resolve one status report with its submitter."""
        submitter = await self.employees.deep(status.submitter_id)
        return RoomStatusView(
            id=status.id,
            whiteboard_cleaned=status.whiteboard_cleaned,
            chairs_ordered=status.chairs_ordered,
            submitted_date_time=status.submitted_date_time,
            submitter=submitter,
            other_notes=status.other_notes,
        )
