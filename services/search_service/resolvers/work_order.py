"""Work order resolution: creator, resolver and metadata."""

from services.search_service.lookups import WorkOrderLookup
from services.search_service.models.raw import WorkOrder
from services.search_service.models.views import WorkOrderView
from services.search_service.resolvers.base import ResolutionOptions, Resolver
from services.search_service.resolvers.employee import EmployeeResolver


class WorkOrderResolver(Resolver):
    """Resolves work orders with their creator and resolver."""

    def __init__(
        self,
        lookup: WorkOrderLookup,
        employees: EmployeeResolver,
        options: ResolutionOptions,
    ):
        """
        Initialize work order resolver.

        Args:
            lookup: Work order collaborator
            employees: Employee resolver
            options: Timeout and concurrency options
        """
        super().__init__(options)
        self.lookup = lookup
        self.employees = employees

    async def fetch_work_order(self, work_order_id: int) -> WorkOrder:
        """Fetch a raw work order by ID."""
        return await self.fetch(
            self.lookup.service_name, "WorkOrder", work_order_id, self.lookup.by_id(work_order_id)
        )

    async def resolve_by_id(self, work_order_id: int) -> WorkOrderView:
        """Fetch and resolve a work order."""
        return await self.resolve(await self.fetch_work_order(work_order_id))

    async def resolve(self, work_order: WorkOrder) -> WorkOrderView:
        """
        Resolve a raw work order into its view.

        Args:
            work_order: Raw work order

        Returns:
            WorkOrderView: Creator, resolver (None while open) and metadata
        """
        creator = await self.employees.deep(work_order.creator_id)
        # Open work orders have nobody assigned yet.
        resolver = None
        if work_order.resolver_id is not None:
            resolver = await self.employees.deep(work_order.resolver_id)
        metadata = await self.employees.metadata.resolve(
            work_order.resource_metadata, "WorkOrder", work_order.id
        )

        return WorkOrderView(
            id=work_order.id,
            created_date_time=work_order.created_date_time,
            resolved_date_time=work_order.resolved_date_time,
            category=work_order.category,
            description=work_order.description,
            contact_email=work_order.contact_email,
            creator=creator,
            resolver=resolver,
            resource_metadata=metadata,
        )
