"""
Resolvers

Each resolver turns one raw entity (plus the identifiers it carries) into its
view. Composition is strictly top-down:

    Campus -> Building -> Room -> (WorkOrder, Batch)

with every level calling the Employee and Metadata resolvers as needed.
"""

from services.search_service.resolvers.base import ResolutionOptions, fetch, resolve_each
from services.search_service.resolvers.batch import NO_CO_TRAINER, BatchResolver
from services.search_service.resolvers.building import BuildingResolver
from services.search_service.resolvers.campus import CampusResolver
from services.search_service.resolvers.employee import EmployeeResolver
from services.search_service.resolvers.metadata import MetadataResolver
from services.search_service.resolvers.room import RoomResolver
from services.search_service.resolvers.work_order import WorkOrderResolver

__all__ = [
    "ResolutionOptions",
    "fetch",
    "resolve_each",
    "NO_CO_TRAINER",
    "BatchResolver",
    "BuildingResolver",
    "CampusResolver",
    "EmployeeResolver",
    "MetadataResolver",
    "RoomResolver",
    "WorkOrderResolver",
]
