"""
Building Resolver

Resolves a building's training lead, its rooms and its metadata. Buildings
are the one entity whose metadata may legitimately be missing upstream: the
campus service does not always populate it, so a missing block yields a view
with ``resource_metadata=None`` instead of an error.
"""

import structlog

from services.search_service.lookups import CampusLookup
from services.search_service.models.raw import Building
from services.search_service.models.views import BuildingView
from services.search_service.resolvers.base import ResolutionOptions, Resolver
from services.search_service.resolvers.employee import EmployeeResolver
from services.search_service.resolvers.room import RoomResolver

logger = structlog.get_logger(__name__)


class BuildingResolver(Resolver):
    """Resolves buildings with their training lead and rooms."""

    def __init__(
        self,
        lookup: CampusLookup,
        employees: EmployeeResolver,
        rooms: RoomResolver,
        options: ResolutionOptions,
    ):
        """
        Initialize building resolver.

        Args:
            lookup: Campus collaborator (owns buildings)
            employees: Employee resolver
            rooms: Room resolver
            options: Timeout and concurrency options
        """
        super().__init__(options)
        self.lookup = lookup
        self.employees = employees
        self.rooms = rooms

    async def fetch_building(self, building_id: int) -> Building:
        """Fetch a raw building by ID."""
        return await self.fetch(
            self.lookup.service_name, "Building", building_id, self.lookup.building_by_id(building_id)
        )

    async def resolve_by_id(self, building_id: int) -> BuildingView:
        """Fetch and resolve a building."""
        return await self.resolve(await self.fetch_building(building_id))

    async def resolve(self, building: Building) -> BuildingView:
        """
        Resolve a raw building into its view.

        Args:
            building: Raw building

        Returns:
            BuildingView: Training lead, rooms and metadata (None when the
            collaborator left it out)
        """
        training_lead = await self.employees.deep(building.training_lead)
        rooms = await self.each(building.rooms, self.rooms.resolve)

        metadata = None
        if building.resource_metadata is not None:
            metadata = await self.employees.metadata.resolve(
                building.resource_metadata, "Building", building.id
            )
        else:
            logger.info("Building has no resource metadata", building_id=building.id)

        return BuildingView(
            id=building.id,
            name=building.name,
            abbr_name=building.abbr_name,
            physical_address=building.physical_address,
            training_lead=training_lead,
            amenities=list(building.amenities),
            rooms=rooms,
            resource_metadata=metadata,
        )
