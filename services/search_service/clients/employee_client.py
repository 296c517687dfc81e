"""Employee service client."""

from services.search_service.clients.base import CollaboratorClient
from services.search_service.models.raw import Employee


class EmployeeServiceClient(CollaboratorClient):
    """HTTP implementation of ``EmployeeLookup``."""

    service_name = "employee-service"

    async def by_id(self, employee_id: int) -> Employee:
        return await self.get_one(Employee, f"/employees/{employee_id}")

    async def by_ids(self, employee_ids: list[int]) -> list[Employee]:
        return await self.get_many(Employee, "/employees/ids", params={"ids": employee_ids})

    async def all(self) -> list[Employee]:
        return await self.get_many(Employee, "/employees")
