"""
Tests for the HTTP surface of the search service.
"""

import pytest
from fastapi.testclient import TestClient

from services.search_service.dependencies import get_engine
from services.search_service.main import app
from tests.world import TRAINING_MANAGER, build_world


@pytest.fixture
def world():
    return build_world()


@pytest.fixture
def client(world):
    engine = world.engine()
    app.dependency_overrides[get_engine] = lambda: engine
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestSearchEndpoints:

    def test_get_campus_uses_camel_case(self, client):
        response = client.get("/api/v1/search/campuses/17")

        assert response.status_code == 200
        body = response.json()
        assert body["trainingManager"]["id"] == TRAINING_MANAGER
        assert body["buildings"][0]["rooms"][0]["batch"]["coTrainer"]["id"] == 9
        assert "trainingManagerId" not in body

    def test_list_campuses(self, client):
        response = client.get("/api/v1/search/campuses")

        assert response.status_code == 200
        assert [c["id"] for c in response.json()] == [17]

    def test_filtered_listing(self, client):
        response = client.get(f"/api/v1/search/campuses/training-manager/{TRAINING_MANAGER}")

        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_get_batch(self, client):
        response = client.get("/api/v1/search/batches/24")

        assert response.status_code == 200
        assert [a["id"] for a in response.json()["associates"]] == [10, 11, 12]


class TestErrorResponses:

    def test_unknown_campus_is_404(self, client):
        response = client.get("/api/v1/search/campuses/404")

        assert response.status_code == 404
        assert response.json()["error"] == "ENTITY_NOT_FOUND"

    def test_non_positive_id_is_400(self, client):
        response = client.get("/api/v1/search/rooms/0")

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_REQUEST"

    def test_unavailable_collaborator_is_503(self, world, client):
        world.batches.unavailable.add(24)

        response = client.get("/api/v1/search/batches/24")

        assert response.status_code == 503
        body = response.json()
        assert body["error"] == "COLLABORATOR_UNAVAILABLE"
        assert body["context"]["service_name"] == "batch-service"


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_circuit_breaker_status(self, client):
        response = client.get("/health/circuit-breakers")

        assert response.status_code == 200
        assert isinstance(response.json(), dict)
