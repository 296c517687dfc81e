"""
Pytest configuration for search service tests.
"""

import pytest

from services.search_service.engine import AggregationEngine
from tests.world import World, build_world


@pytest.fixture
def world() -> World:
    """One campus, building, room, work order and batch with their employees."""
    return build_world()


@pytest.fixture
def engine(world: World) -> AggregationEngine:
    return world.engine()
