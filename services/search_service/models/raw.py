"""
Raw Collaborator Entities

Records as returned by their owning collaborator. Relations are expressed as
bare identifiers, except for sub-entities owned by the same collaborator
(a campus embeds its buildings, a building embeds its rooms).
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RawEntity(BaseModel):
    """Base for collaborator payloads (camelCase on the wire)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class Address(RawEntity):
    """Postal address value."""

    id: int | None = None
    unit_street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None


class Amenity(RawEntity):
    """Building amenity and its stock level (e.g. COFFEE / LOW)."""

    type: str
    status: str


class ResourceMetadata(RawEntity):
    """Audit and ownership block attached to every resource."""

    resource_creator: int
    creation_date_time: str | None = None
    last_modifier: int
    last_modified_date_time: str | None = None
    resource_owner: int
    is_active: bool = Field(default=True, alias="currentlyActive")


class Employee(RawEntity):
    """Employee record from the employee service."""

    id: int
    first_name: str
    last_name: str
    email: str
    title: str | None = None
    department: str | None = None
    resource_metadata: ResourceMetadata | None = None


class RoomStatus(RawEntity):
    """A single status report submitted for a room."""

    id: int
    whiteboard_cleaned: bool = False
    chairs_ordered: bool = False
    submitted_date_time: str | None = None
    submitter_id: int
    other_notes: str | None = None


class Room(RawEntity):
    id: int
    room_number: str
    max_occupancy: int = 0
    current_status: list[RoomStatus] = Field(default_factory=list)
    batch_id: int | None = None
    work_orders: list[int] = Field(default_factory=list)
    resource_metadata: ResourceMetadata | None = None


class Building(RawEntity):
    id: int
    name: str
    abbr_name: str | None = None
    physical_address: Address | None = None
    training_lead: int
    amenities: list[Amenity] = Field(default_factory=list)
    rooms: list[Room] = Field(default_factory=list)
    # The campus service does not always populate this for buildings.
    resource_metadata: ResourceMetadata | None = None


class Campus(RawEntity):
    """
    Campus record from the campus service.

    Buildings arrive either embedded or as bare identifiers, depending on the
    campus service endpoint that produced the record.
    """

    id: int
    name: str
    abbr_name: str | None = None
    shipping_address: Address | None = None
    training_manager_id: int
    staging_manager_id: int
    hr_lead: int
    buildings: list[Building | int] = Field(default_factory=list)
    corporate_employees: list[int] = Field(default_factory=list)
    resource_metadata: ResourceMetadata | None = None


class WorkOrder(RawEntity):
    id: int
    created_date_time: str | None = None
    resolved_date_time: str | None = None
    category: str | None = None
    description: str | None = None
    contact_email: str | None = None
    creator_id: int
    resolver_id: int | None = None
    resource_metadata: ResourceMetadata | None = None


class Batch(RawEntity):
    """Training batch. A co-trainer id of 0 means no co-trainer is assigned."""

    id: int
    name: str
    start_date: str | None = None
    end_date: str | None = None
    trainer_id: int
    co_trainer_id: int = 0
    associates: list[int] = Field(default_factory=list)
    curriculum: str | None = None
    resource_metadata: ResourceMetadata | None = None
