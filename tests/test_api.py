"""Integration tests for the review API."""

import pytest
from fastapi.testclient import TestClient

from supermemo2.main import app


@pytest.fixture
def client():
    """Create a test client."""
    return TestClient(app)


class TestServiceEndpoints:
    """Tests for the health and info endpoints."""

    def test_healthz(self, client):
        response = client.get("/healthz")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        body = response.json()
        assert "name" in body
        assert body["endpoints"]["review"] == "/items/review"


class TestNewItem:
    def test_returns_default_state(self, client):
        response = client.get("/items/new")
        assert response.status_code == 200
        assert response.json() == {"easiness": 2.5, "repetitions": 0, "interval": 0}


class TestReview:
    """Tests for POST /items/review."""

    def test_first_success(self, client):
        response = client.post("/items/review", json={"quality": 4})
        assert response.status_code == 200
        body = response.json()
        assert body["item"] == {"easiness": 2.5, "repetitions": 1, "interval": 1}
        assert body["quality"] == 4
        assert body["passed"] is True

    def test_chained_reviews(self, client):
        item = client.get("/items/new").json()
        for quality in (4, 3, 5):
            response = client.post("/items/review", json={"item": item, "quality": quality})
            assert response.status_code == 200
            item = response.json()["item"]
        assert item["repetitions"] == 3
        assert item["interval"] == 15

    def test_grade_name(self, client):
        item = {"easiness": 2.5, "repetitions": 4, "interval": 20}
        response = client.post("/items/review", json={"item": item, "grade": "again"})
        assert response.status_code == 200
        body = response.json()
        assert body["quality"] == 0
        assert body["passed"] is False
        assert body["item"]["repetitions"] == 0
        assert body["item"]["interval"] == 1

    @pytest.mark.parametrize("quality", [-1, 6, 42])
    def test_out_of_range_quality_rejected(self, client, quality):
        response = client.post("/items/review", json={"quality": quality})
        assert response.status_code == 422
        assert "between 0 and 5" in str(response.json()["detail"])

    def test_unknown_grade_rejected(self, client):
        response = client.post("/items/review", json={"grade": "perfect"})
        assert response.status_code == 422

    def test_requires_exactly_one_of_quality_or_grade(self, client):
        assert client.post("/items/review", json={}).status_code == 422
        both = client.post("/items/review", json={"quality": 4, "grade": "good"})
        assert both.status_code == 422

    def test_invalid_item_state_rejected(self, client):
        item = {"easiness": 1.0, "repetitions": 0, "interval": 0}
        response = client.post("/items/review", json={"item": item, "quality": 4})
        assert response.status_code == 422

    def test_huge_easiness_saturates(self, client):
        item = {"easiness": 1e308, "repetitions": 2, "interval": 10}
        response = client.post("/items/review", json={"item": item, "quality": 5})
        assert response.status_code == 200
        assert response.json()["item"]["interval"] == 36500

    def test_fractional_repetitions_rejected(self, client):
        item = {"easiness": 2.5, "repetitions": 1.5, "interval": 1}
        response = client.post("/items/review", json={"item": item, "quality": 4})
        assert response.status_code == 422
