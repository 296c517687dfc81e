"""
Tests for the error boundary: identifier validation, collaborator failure
translation, timeouts and sibling cancellation.
"""

import asyncio

import pytest

from shared.domain.exceptions import (
    CollaboratorUnavailableError,
    ErrorCode,
    InvalidRequestError,
    ResourceNotFoundError,
)
from shared.resilience.exceptions import CollaboratorError
from services.search_service.resolvers import resolve_each
from tests.world import SUBMITTER, TRAINER, TRAINING_LEAD, build_world

BY_ID_OPERATIONS = [
    "get_campus_by_id",
    "get_building_by_id",
    "get_room_by_id",
    "get_employee_by_id",
    "get_work_order_by_id",
    "get_batch_by_id",
    "get_campuses_by_training_manager",
    "get_campuses_by_owner",
    "get_buildings_by_training_lead",
    "get_buildings_by_owner",
    "get_rooms_by_trainer",
]


class TestInvalidRequests:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("operation", BY_ID_OPERATIONS)
    @pytest.mark.parametrize("bad_id", [0, -3, True, "17"])
    async def test_bad_identifier_is_rejected_before_any_lookup(self, world, engine, operation, bad_id):
        with pytest.raises(InvalidRequestError) as exc_info:
            await getattr(engine, operation)(bad_id)

        assert exc_info.value.error_code == ErrorCode.INVALID_REQUEST
        assert exc_info.value.status_code == 400
        assert world.employees.calls == []
        assert world.campuses.calls == []


class TestCollaboratorFailures:

    @pytest.mark.asyncio
    async def test_transport_failure_is_unavailable_not_not_found(self, world, engine):
        world.batches.unavailable.add(24)

        with pytest.raises(CollaboratorUnavailableError) as exc_info:
            await engine.get_campus_by_id(17)

        error = exc_info.value
        assert not isinstance(error, ResourceNotFoundError)
        assert error.error_code == ErrorCode.COLLABORATOR_UNAVAILABLE
        assert error.status_code == 503
        assert error.context["service_name"] == "batch-service"
        assert error.context["entity_type"] == "Batch"
        assert error.context["entity_id"] == "24"

    @pytest.mark.asyncio
    async def test_collaborator_exceptions_do_not_leak(self, world, engine):
        world.employees.unavailable.add(SUBMITTER)

        with pytest.raises(CollaboratorUnavailableError) as exc_info:
            await engine.get_room_by_id(15)

        assert not isinstance(exc_info.value, CollaboratorError)
        assert isinstance(exc_info.value.cause, CollaboratorError)

    @pytest.mark.asyncio
    async def test_malformed_payload_is_unavailable(self, world, engine):
        world.campuses.malformed.add(17)

        with pytest.raises(CollaboratorUnavailableError) as exc_info:
            await engine.get_campus_by_id(17)

        assert exc_info.value.context["service_name"] == "campus-service"
        assert "reason" in exc_info.value.context

    @pytest.mark.asyncio
    async def test_slow_lookup_times_out(self):
        world = build_world()
        world.employees.delays[TRAINING_LEAD] = 1.0

        with pytest.raises(CollaboratorUnavailableError) as exc_info:
            await world.engine(lookup_timeout=0.05).get_building_by_id(16)

        assert exc_info.value.timeout is True
        assert exc_info.value.error_code == ErrorCode.COLLABORATOR_TIMEOUT
        assert exc_info.value.context["entity_id"] == str(TRAINING_LEAD)

    @pytest.mark.asyncio
    async def test_failure_is_not_retried(self, world, engine):
        world.employees.unavailable.add(TRAINER)

        with pytest.raises(CollaboratorUnavailableError):
            await engine.get_batch_by_id(24)

        assert world.employees.keys("by_id").count(TRAINER) == 1


class TestConcurrentSiblings:

    @pytest.mark.asyncio
    async def test_results_keep_input_order(self):
        delays = {1: 0.03, 2: 0.0, 3: 0.01}

        async def resolve(item):
            await asyncio.sleep(delays[item])
            return item * 10

        assert await resolve_each([1, 2, 3], resolve, concurrent=True) == [10, 20, 30]

    @pytest.mark.asyncio
    async def test_first_failure_cancels_remaining_siblings(self):
        cancelled = []

        async def resolve(item):
            if item == "bad":
                raise ResourceNotFoundError("Room", 2)
            try:
                await asyncio.sleep(1.0)
            except asyncio.CancelledError:
                cancelled.append(item)
                raise
            return item

        with pytest.raises(ResourceNotFoundError):
            await resolve_each(["slow-a", "bad", "slow-b"], resolve, concurrent=True)

        assert sorted(cancelled) == ["slow-a", "slow-b"]

    @pytest.mark.asyncio
    async def test_sequential_mode_stops_at_first_failure(self):
        seen = []

        async def resolve(item):
            seen.append(item)
            if item == 2:
                raise ResourceNotFoundError("Room", item)
            return item

        with pytest.raises(ResourceNotFoundError):
            await resolve_each([1, 2, 3], resolve)

        assert seen == [1, 2]

    @pytest.mark.asyncio
    async def test_concurrent_campus_matches_sequential(self):
        sequential = await build_world().engine().get_campus_by_id(17)
        concurrent = await build_world().engine(concurrent_siblings=True).get_campus_by_id(17)

        assert concurrent == sequential


class TestErrorContext:

    def test_caller_context_is_not_mutated(self):
        caller_context = {"owner_type": "Room"}

        not_found = ResourceNotFoundError("ResourceMetadata", 15, context=caller_context)
        unavailable = CollaboratorUnavailableError("campus-service", "Room", 15, context=caller_context)
        invalid = InvalidRequestError("bad id", field="room_id", value=0, context=caller_context)

        assert caller_context == {"owner_type": "Room"}
        assert not_found.context["entity_id"] == "15"
        assert unavailable.context["service_name"] == "campus-service"
        assert invalid.context["field"] == "room_id"
        assert all(e.context["owner_type"] == "Room" for e in (not_found, unavailable, invalid))
