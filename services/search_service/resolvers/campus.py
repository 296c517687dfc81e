"""
Campus Resolver

Root of the primary aggregation: resolves the campus's training manager,
staging manager and HR lead, every building (embedded or referenced by id),
the corporate employee roster, and the campus metadata.
"""

from services.search_service.lookups import CampusLookup
from services.search_service.models.raw import Building, Campus
from services.search_service.models.views import BuildingView, CampusView
from services.search_service.resolvers.base import ResolutionOptions, Resolver
from services.search_service.resolvers.building import BuildingResolver
from services.search_service.resolvers.employee import EmployeeResolver


class CampusResolver(Resolver):
    """Resolves campuses, the root of the aggregation tree."""

    def __init__(
        self,
        lookup: CampusLookup,
        employees: EmployeeResolver,
        buildings: BuildingResolver,
        options: ResolutionOptions,
    ):
        """
        Initialize campus resolver.

        Args:
            lookup: Campus collaborator
            employees: Employee resolver
            buildings: Building resolver
            options: Timeout and concurrency options
        """
        super().__init__(options)
        self.lookup = lookup
        self.employees = employees
        self.buildings = buildings

    async def fetch_campus(self, campus_id: int) -> Campus:
        """Fetch a raw campus by ID."""
        return await self.fetch(self.lookup.service_name, "Campus", campus_id, self.lookup.by_id(campus_id))

    async def fetch_all(self) -> list[Campus]:
        """Fetch every raw campus, in collaborator order."""
        return await self.fetch(self.lookup.service_name, "Campus", None, self.lookup.all())

    async def raw_buildings(self, campus: Campus) -> list[Building]:
        """The campus's buildings as raw records, fetching any given by id."""
        return await self.each(campus.buildings, self._raw_building)

    async def resolve(self, campus: Campus) -> CampusView:
        """
        Resolve a raw campus into its view.

        Args:
            campus: Raw campus

        Returns:
            CampusView: Managers, HR lead, metadata, buildings and corporate
            employees, all resolved
        """
        training_manager = await self.employees.deep(campus.training_manager_id)
        staging_manager = await self.employees.deep(campus.staging_manager_id)
        hr_lead = await self.employees.deep(campus.hr_lead)
        metadata = await self.employees.metadata.resolve(campus.resource_metadata, "Campus", campus.id)

        buildings = await self.each(campus.buildings, self._resolve_building)
        corporate_employees = await self.employees.deep_many(campus.corporate_employees)

        return CampusView(
            id=campus.id,
            name=campus.name,
            abbr_name=campus.abbr_name,
            shipping_address=campus.shipping_address,
            training_manager=training_manager,
            staging_manager=staging_manager,
            hr_lead=hr_lead,
            buildings=buildings,
            corporate_employees=corporate_employees,
            resource_metadata=metadata,
        )

    async def _raw_building(self, building: Building | int) -> Building:
        if isinstance(building, Building):
            return building
        return await self.buildings.fetch_building(building)

    async def _resolve_building(self, building: Building | int) -> BuildingView:
        return await self.buildings.resolve(await self._raw_building(building))
