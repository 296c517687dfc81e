"""
Employee Resolver

Two depths of resolution:

- ``shallow``: identity fields only. Used for metadata creators/owners/modifiers.
- ``deep``: identity fields plus the employee's metadata block, whose
  employees are in turn resolved shallow.

Everywhere an employee is a first-class party (training manager, submitter,
trainer, associate, ...) the deep variant is used.
"""

from shared.domain.exceptions import CollaboratorUnavailableError, ResourceNotFoundError
from services.search_service.lookups import EmployeeLookup
from services.search_service.models.raw import Employee
from services.search_service.models.views import EmployeeView, ResourceMetadataView
from services.search_service.resolvers.base import ResolutionOptions, Resolver
from services.search_service.resolvers.metadata import MetadataResolver


class EmployeeResolver(Resolver):
    """Resolves employees from the employee collaborator, shallow or deep."""

    def __init__(self, lookup: EmployeeLookup, options: ResolutionOptions):
        """
        Initialize employee resolver.

        Args:
            lookup: Employee collaborator
            options: Timeout and concurrency options
        """
        super().__init__(options)
        self.lookup = lookup
        self.metadata = MetadataResolver(self, options)

    async def fetch_employee(self, employee_id: int) -> Employee:
        """
        Fetch a raw employee.

        Args:
            employee_id: Employee ID

        Returns:
            Employee: Raw record as returned by the collaborator
        """
        return await self.fetch(
            self.lookup.service_name, "Employee", employee_id, self.lookup.by_id(employee_id)
        )

    async def shallow(self, employee_id: int) -> EmployeeView:
        """Resolve identity fields only; never touches the employee's metadata."""
        employee = await self.fetch_employee(employee_id)
        return self._view(employee)

    async def deep(self, employee_id: int) -> EmployeeView:
        """Resolve identity fields and the employee's metadata block."""
        employee = await self.fetch_employee(employee_id)
        return await self.deep_from(employee)

    async def deep_from(self, employee: Employee) -> EmployeeView:
        """
        Resolve an already fetched employee deep.

        Args:
            employee: Raw employee

        Returns:
            EmployeeView: Identity plus resolved metadata
        """
        metadata = await self.metadata.resolve(employee.resource_metadata, "Employee", employee.id)
        return self._view(employee, metadata)

    async def deep_many(self, employee_ids: list[int]) -> list[EmployeeView]:
        """
        Resolve a roster through the collaborator's batch lookup.

        The result follows the collaborator's order. Any requested id missing
        from the response fails the whole roster, and so does any employee
        the collaborator returns that was not requested.

        Args:
            employee_ids: Roster identifiers

        Returns:
            list[EmployeeView]: Deep views, one per requested employee

        Raises:
            ResourceNotFoundError: If a requested employee is missing
            CollaboratorUnavailableError: If unrequested employees are returned
        """
        if not employee_ids:
            return []

        employees = await self.fetch(
            self.lookup.service_name,
            "Employee",
            ",".join(str(i) for i in employee_ids),
            self.lookup.by_ids(list(employee_ids)),
        )
        returned = {employee.id for employee in employees}
        unexpected = returned - set(employee_ids)
        if unexpected:
            raise CollaboratorUnavailableError(
                self.lookup.service_name,
                "Employee",
                ",".join(str(i) for i in employee_ids),
                reason="returned unrequested employees "
                + ",".join(str(i) for i in sorted(unexpected)),
            )
        missing = set(employee_ids) - returned
        if missing:
            raise ResourceNotFoundError(
                "Employee",
                ",".join(str(i) for i in sorted(missing)),
                context={"requested": list(employee_ids)},
            )
        return await self.each(employees, self.deep_from)

    async def all(self) -> list[EmployeeView]:
        """Every employee the collaborator knows, resolved deep."""
        employees = await self.fetch(self.lookup.service_name, "Employee", None, self.lookup.all())
        return await self.each(employees, self.deep_from)

    @staticmethod
    def _view(employee: Employee, metadata: ResourceMetadataView | None = None) -> EmployeeView:
        return EmployeeView(
            id=employee.id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            email=employee.email,
            title=employee.title,
            department=employee.department,
            resource_metadata=metadata,
        )
