"""
Sample collaborator data.

``build_world`` models one campus (USF) with one building, one room,
one work order and one linked batch, plus the employees they reference.
"""

from dataclasses import dataclass, field

from services.search_service.engine import AggregationEngine
from services.search_service.models.raw import (
    Address,
    Amenity,
    Batch,
    Building,
    Campus,
    Room,
    RoomStatus,
    WorkOrder,
)
from services.search_service.resolvers import ResolutionOptions
from tests.fakes import (
    FakeBatchLookup,
    FakeCampusLookup,
    FakeEmployeeLookup,
    FakeWorkOrderLookup,
    employee,
    metadata,
)

ADDRESS = Address(id=12, unit_street="123 Bruce B Downs Blvd", city="Tampa", state="FL", zip="33612", country="US")

# Employee ids used by the sample world
ADMIN = 1
MODIFIER = 2
TRAINING_MANAGER = 3
STAGING_MANAGER = 4
HR_LEAD = 5
TRAINING_LEAD = 6
SUBMITTER = 7
TRAINER = 8
CO_TRAINER = 9
ASSOCIATES = [10, 11, 12]
CORPORATE = [13, 14]
RESOLVER = 15


def make_employees():
    names = {
        ADMIN: "Ada",
        MODIFIER: "Max",
        TRAINING_MANAGER: "Tom",
        STAGING_MANAGER: "Sam",
        HR_LEAD: "Hana",
        TRAINING_LEAD: "Lea",
        SUBMITTER: "Sue",
        TRAINER: "Tim",
        CO_TRAINER: "Cora",
        10: "Ari",
        11: "Bea",
        12: "Cal",
        13: "Dee",
        14: "Eli",
        RESOLVER: "Rex",
    }
    return [employee(employee_id, name) for employee_id, name in names.items()]


def make_room(room_id: int = 15, batch_id: int | None = 24, work_orders: list[int] | None = None) -> Room:
    return Room(
        id=room_id,
        room_number=str(100 + room_id),
        max_occupancy=25,
        current_status=[
            RoomStatus(
                id=room_id * 10,
                whiteboard_cleaned=True,
                chairs_ordered=True,
                submitted_date_time="1/1/19",
                submitter_id=SUBMITTER,
                other_notes="Good",
            )
        ],
        batch_id=batch_id,
        work_orders=[3] if work_orders is None else work_orders,
        resource_metadata=metadata(),
    )


def make_building(building_id: int = 16, rooms: list[Room] | None = None) -> Building:
    return Building(
        id=building_id,
        name=f"Muma {building_id}",
        abbr_name="BSN",
        physical_address=ADDRESS,
        training_lead=TRAINING_LEAD,
        amenities=[Amenity(type="COFFEE", status="LOW")],
        rooms=[make_room()] if rooms is None else rooms,
        resource_metadata=metadata(),
    )


def make_campus(campus_id: int = 17, buildings: list | None = None) -> Campus:
    return Campus(
        id=campus_id,
        name="University of South Florida",
        abbr_name="USF",
        shipping_address=ADDRESS,
        training_manager_id=TRAINING_MANAGER,
        staging_manager_id=STAGING_MANAGER,
        hr_lead=HR_LEAD,
        buildings=[make_building()] if buildings is None else buildings,
        corporate_employees=list(CORPORATE),
        resource_metadata=metadata(),
    )


def make_work_order(work_order_id: int = 3, resolver_id: int | None = RESOLVER) -> WorkOrder:
    return WorkOrder(
        id=work_order_id,
        created_date_time="3/1/20",
        resolved_date_time="3/2/20" if resolver_id else None,
        category="LIGHTING",
        description="Projector bulb out",
        contact_email="sue@revature.test",
        creator_id=SUBMITTER,
        resolver_id=resolver_id,
        resource_metadata=metadata(),
    )


def make_batch(batch_id: int = 24, co_trainer_id: int = CO_TRAINER, associates: list[int] | None = None) -> Batch:
    return Batch(
        id=batch_id,
        name="ABatch",
        start_date="2/12/2020",
        end_date="4/10/2020",
        trainer_id=TRAINER,
        co_trainer_id=co_trainer_id,
        associates=list(ASSOCIATES) if associates is None else associates,
        curriculum="AI",
        resource_metadata=metadata(),
    )


@dataclass
class World:
    """A consistent set of fake collaborators."""

    employees: FakeEmployeeLookup
    campuses: FakeCampusLookup
    work_orders: FakeWorkOrderLookup
    batches: FakeBatchLookup
    options: ResolutionOptions = field(default_factory=ResolutionOptions)

    def engine(self, **options) -> AggregationEngine:
        resolved = ResolutionOptions(**options) if options else self.options
        return AggregationEngine(self.employees, self.campuses, self.work_orders, self.batches, resolved)


def build_world(
    campuses: list[Campus] | None = None,
    buildings: list[Building] = (),
    work_orders: list[WorkOrder] | None = None,
    batches: list[Batch] | None = None,
    extra_employees: list = (),
) -> World:
    return World(
        employees=FakeEmployeeLookup([*make_employees(), *extra_employees]),
        campuses=FakeCampusLookup([make_campus()] if campuses is None else campuses, buildings),
        work_orders=FakeWorkOrderLookup([make_work_order()] if work_orders is None else work_orders),
        batches=FakeBatchLookup([make_batch()] if batches is None else batches),
    )

