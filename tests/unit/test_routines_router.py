"""
Unit tests for the routines router.

Tests the routines router endpoints:
- POST /routines - Create a routine
- GET /routines - List routines
- GET /routines/{routine_id} - Get a routine
- PUT /routines/{routine_id} - Edit a routine
- DELETE /routines/{routine_id} - Delete a routine
"""

import pytest

from tests.fakes import make_routine

VALID_BODY = {
    "day_of_week": "Segunda-feira",
    "exercises": [{"name": "Supino reto", "category": "upper", "sets": 3, "reps": 10, "rest": "60"}],
}


@pytest.mark.unit
class TestCreateRoutine:
    """Tests for POST /routines."""

    def test_create_success(self, client, fake_routine_repo):
        response = client.post("/routines", json=VALID_BODY)

        assert response.status_code == 201
        data = response.json()
        assert data["success"] is True
        assert data["routine"]["day_of_week"] == "Segunda-feira"
        assert data["routine"]["status"] == "pending"
        assert data["routine"]["user_email"] == "ana@example.com"
        assert len(fake_routine_repo.get_all()) == 1

    def test_validation_errors(self, client, fake_routine_repo):
        response = client.post("/routines", json={"day_of_week": "Segunda-feira", "exercises": []})

        assert response.status_code == 422
        assert "Add at least one exercise" in response.json()["detail"]["errors"]
        assert fake_routine_repo.get_all() == []

    def test_database_failure(self, client, fake_routine_repo):
        fake_routine_repo.fail_writes = True
        response = client.post("/routines", json=VALID_BODY)
        assert response.status_code == 502


@pytest.mark.unit
class TestReadRoutines:
    """Tests for GET /routines and GET /routines/{routine_id}."""

    def test_list(self, client, fake_routine_repo):
        fake_routine_repo.seed([make_routine("r-1"), make_routine("r-2", owner="other@example.com")])

        response = client.get("/routines")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["routines"][0]["id"] == "r-1"

    def test_list_filtered_by_day(self, client, fake_routine_repo):
        from domain.models import DayOfWeek

        fake_routine_repo.seed([make_routine("r-1"), make_routine("r-2", day=DayOfWeek.SUNDAY)])

        response = client.get("/routines", params={"day": "Domingo"})

        assert [r["id"] for r in response.json()["routines"]] == ["r-2"]

    def test_get(self, client, fake_routine_repo):
        fake_routine_repo.seed([make_routine("r-1")])
        response = client.get("/routines/r-1")
        assert response.status_code == 200
        assert response.json()["routine"]["exercises"][0]["name"] == "Supino reto"

    def test_get_not_found(self, client):
        assert client.get("/routines/missing").status_code == 404


@pytest.mark.unit
class TestEditRoutine:
    """Tests for PUT and DELETE /routines/{routine_id}."""

    def test_update(self, client, fake_routine_repo):
        fake_routine_repo.seed([make_routine("r-1")])

        response = client.put("/routines/r-1", json={**VALID_BODY, "day_of_week": "Quinta-feira"})

        assert response.status_code == 200
        assert response.json()["routine"]["day_of_week"] == "Quinta-feira"

    def test_update_not_found(self, client):
        assert client.put("/routines/missing", json=VALID_BODY).status_code == 404

    def test_delete(self, client, fake_routine_repo):
        fake_routine_repo.seed([make_routine("r-1")])
        response = client.delete("/routines/r-1")
        assert response.status_code == 200
        assert fake_routine_repo.get_all() == []

    def test_delete_not_found(self, client):
        assert client.delete("/routines/missing").status_code == 404
