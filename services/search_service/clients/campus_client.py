"""Campus/facilities service client."""

from services.search_service.clients.base import CollaboratorClient
from services.search_service.models.raw import Building, Campus, Room


class CampusServiceClient(CollaboratorClient):
    """HTTP implementation of ``CampusLookup``."""

    service_name = "campus-service"

    async def by_id(self, campus_id: int) -> Campus:
        return await self.get_one(Campus, f"/campuses/{campus_id}")

    async def all(self) -> list[Campus]:
        return await self.get_many(Campus, "/campuses")

    async def building_by_id(self, building_id: int) -> Building:
        return await self.get_one(Building, f"/buildings/{building_id}")

    async def room_by_id(self, room_id: int) -> Room:
        return await self.get_one(Room, f"/rooms/{room_id}")
