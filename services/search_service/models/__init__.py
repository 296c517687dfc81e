"""
Search Service Models

Raw collaborator entities and the fully resolved views assembled from them.
"""

from services.search_service.models.raw import (
    Address,
    Amenity,
    Batch,
    Building,
    Campus,
    Employee,
    ResourceMetadata,
    Room,
    RoomStatus,
    WorkOrder,
)
from services.search_service.models.views import (
    BatchView,
    BuildingView,
    CampusView,
    EmployeeView,
    ResourceMetadataView,
    RoomStatusView,
    RoomView,
    WorkOrderView,
)

__all__ = [
    # Raw entities
    "Address",
    "Amenity",
    "Batch",
    "Building",
    "Campus",
    "Employee",
    "ResourceMetadata",
    "Room",
    "RoomStatus",
    "WorkOrder",
    # Views
    "BatchView",
    "BuildingView",
    "CampusView",
    "EmployeeView",
    "ResourceMetadataView",
    "RoomStatusView",
    "RoomView",
    "WorkOrderView",
]
