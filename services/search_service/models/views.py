"""
View Objects

Fully resolved, denormalized representations handed to clients. Every
reference is either resolved into a nested view or explicitly None.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from services.search_service.models.raw import Address, Amenity


class View(BaseModel):
    """Base for client-facing views (camelCase on the wire)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class EmployeeView(View):
    """
    Employee identity, optionally with its resolved audit block.

    Shallow views (used inside metadata) leave ``resource_metadata`` as None.
    """

    id: int
    first_name: str
    last_name: str
    email: str
    title: str | None = None
    department: str | None = None
    resource_metadata: "ResourceMetadataView | None" = None


class ResourceMetadataView(View):
    resource_creator: EmployeeView
    creation_date_time: str | None = None
    last_modifier: EmployeeView
    last_modified_date_time: str | None = None
    resource_owner: EmployeeView
    is_active: bool = Field(default=True, alias="currentlyActive")


class RoomStatusView(View):
    id: int
    whiteboard_cleaned: bool
    chairs_ordered: bool
    submitted_date_time: str | None = None
    submitter: EmployeeView
    other_notes: str | None = None


class WorkOrderView(View):
    id: int
    created_date_time: str | None = None
    resolved_date_time: str | None = None
    category: str | None = None
    description: str | None = None
    contact_email: str | None = None
    creator: EmployeeView
    resolver: EmployeeView | None = None
    resource_metadata: ResourceMetadataView


class BatchView(View):
    id: int
    name: str
    start_date: str | None = None
    end_date: str | None = None
    trainer: EmployeeView
    co_trainer: EmployeeView | None = None
    associates: list[EmployeeView] = Field(default_factory=list)
    curriculum: str | None = None
    resource_metadata: ResourceMetadataView


class RoomView(View):
    id: int
    room_number: str
    max_occupancy: int
    current_status: list[RoomStatusView] = Field(default_factory=list)
    batch: BatchView | None = None
    work_orders: list[WorkOrderView] = Field(default_factory=list)
    resource_metadata: ResourceMetadataView


class BuildingView(View):
    id: int
    name: str
    abbr_name: str | None = None
    physical_address: Address | None = None
    training_lead: EmployeeView
    amenities: list[Amenity] = Field(default_factory=list)
    rooms: list[RoomView] = Field(default_factory=list)
    resource_metadata: ResourceMetadataView | None = None


class CampusView(View):
    id: int
    name: str
    abbr_name: str | None = None
    shipping_address: Address | None = None
    training_manager: EmployeeView
    staging_manager: EmployeeView
    hr_lead: EmployeeView
    buildings: list[BuildingView] = Field(default_factory=list)
    corporate_employees: list[EmployeeView] = Field(default_factory=list)
    resource_metadata: ResourceMetadataView


EmployeeView.model_rebuild()
