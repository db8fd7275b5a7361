"""
Tests for the Supabase repository implementations.

The Supabase client is replaced by a MagicMock whose query builder returns
itself from every chained call, so only the final `execute()` matters.
"""
import pytest
from unittest.mock import MagicMock, Mock

from domain.models import CompletionRecord, DayOfWeek, MealPlan, Routine, RoutineStatus
from infrastructure.db import (
    SupabaseCompletionRepository,
    SupabaseMealPlanRepository,
    SupabaseRoutineRepository,
)
from infrastructure.db.completion_repository import COMPLETIONS_TABLE, format_duration
from infrastructure.db.meal_plan_repository import MEAL_PLANS_TABLE
from infrastructure.db.routine_repository import ROUTINES_TABLE

pytestmark = pytest.mark.unit

OWNER = "ana@example.com"

ROUTINE_ROW = {
    "id": "r-1",
    "user_email": OWNER,
    "day_of_week": "Segunda-feira",
    "exercises": [{"name": "Supino", "category": "upper", "sets": 3, "reps": 10, "rest": "60"}],
    "status": None,
    "created_at": "2026-03-01T10:00:00+00:00",
}


def make_client(data=None, error=None):
    """Build a mock Supabase client whose queries return `data` (or raise `error`)."""
    query = MagicMock()
    for method in ("select", "insert", "update", "delete", "eq", "order", "limit", "range"):
        getattr(query, method).return_value = query
    if error is not None:
        query.execute.side_effect = error
    else:
        query.execute.return_value = Mock(data=data)
    client = MagicMock()
    client.table.return_value = query
    return client, query


class TestSupabaseRoutineRepository:
    """Tests for SupabaseRoutineRepository."""

    def test_get(self):
        client, query = make_client([ROUTINE_ROW])
        routine = SupabaseRoutineRepository(client).get("r-1", OWNER)

        client.table.assert_called_with(ROUTINES_TABLE)
        query.eq.assert_any_call("id", "r-1")
        query.eq.assert_any_call("user_email", OWNER)
        assert routine.status == RoutineStatus.PENDING
        assert routine.exercises[0].name == "Supino"

    def test_get_not_found(self):
        client, _ = make_client([])
        assert SupabaseRoutineRepository(client).get("r-1", OWNER) is None

    def test_get_error_returns_none(self):
        client, _ = make_client(error=Exception("PGRST301 permission denied"))
        assert SupabaseRoutineRepository(client).get("r-1", OWNER) is None

    def test_list_skips_malformed_rows(self):
        client, query = make_client([ROUTINE_ROW, {"id": "bad", "user_email": OWNER, "day_of_week": "Funday"}])
        routines = SupabaseRoutineRepository(client).list_for_owner(OWNER, day=DayOfWeek.MONDAY)

        assert [r.id for r in routines] == ["r-1"]
        query.eq.assert_any_call("day_of_week", "Segunda-feira")
        query.order.assert_called_with("created_at", desc=True)

    def test_create_drops_id(self):
        client, query = make_client([ROUTINE_ROW])
        routine = Routine(id="ignored", user_email=OWNER, day_of_week=DayOfWeek.MONDAY)

        stored = SupabaseRoutineRepository(client).create(routine)

        inserted = query.insert.call_args.args[0]
        assert "id" not in inserted
        assert inserted["status"] == "pending"
        assert stored.id == "r-1"

    def test_update_status(self):
        client, query = make_client([{**ROUTINE_ROW, "status": "completed"}])
        assert SupabaseRoutineRepository(client).update_status("r-1", OWNER, RoutineStatus.COMPLETED) is True
        query.update.assert_called_with({"status": "completed"})

    def test_update_status_no_rows(self):
        client, _ = make_client([])
        assert SupabaseRoutineRepository(client).update_status("r-1", OWNER, RoutineStatus.COMPLETED) is False

    def test_update_status_error(self):
        client, _ = make_client(error=ConnectionError("down"))
        assert SupabaseRoutineRepository(client).update_status("r-1", OWNER, RoutineStatus.COMPLETED) is False

    def test_delete(self):
        client, _ = make_client([ROUTINE_ROW])
        assert SupabaseRoutineRepository(client).delete("r-1", OWNER) is True

    def test_delete_missing(self):
        client, _ = make_client([])
        assert SupabaseRoutineRepository(client).delete("r-1", OWNER) is False


class TestSupabaseCompletionRepository:
    """Tests for SupabaseCompletionRepository."""

    def make_record(self):
        return CompletionRecord(
            id="c-1",
            user_email=OWNER,
            day_of_week=DayOfWeek.MONDAY,
            started_at="2026-03-02T10:00:00+00:00",
            finished_at="2026-03-02T10:50:00+00:00",
            workout_id="r-1",
        )

    def test_insert(self):
        record = self.make_record()
        client, query = make_client([record.to_row()])

        stored = SupabaseCompletionRepository(client).insert(record)

        client.table.assert_called_with(COMPLETIONS_TABLE)
        assert query.insert.call_args.args[0]["completed"] is True
        assert stored.id == "c-1"
        assert stored.workout_id == "r-1"

    def test_insert_writes_only_history_columns(self):
        client, query = make_client([self.make_record().to_row()])

        SupabaseCompletionRepository(client).insert(self.make_record())

        row = query.insert.call_args.args[0]
        assert set(row) == {
            "id", "user_email", "day_of_week", "completed", "started_at", "finished_at",
        }

    def test_insert_no_data(self):
        client, _ = make_client([])
        assert SupabaseCompletionRepository(client).insert(self.make_record()) is None

    def test_insert_error(self):
        client, _ = make_client(error=Exception("boom"))
        assert SupabaseCompletionRepository(client).insert(self.make_record()) is None

    def test_list_for_owner_clamps_page(self):
        client, query = make_client([self.make_record().to_row()])

        records = SupabaseCompletionRepository(client).list_for_owner(OWNER, limit=500, offset=10)

        assert len(records) == 1
        query.range.assert_called_with(10, 109)
        query.order.assert_called_with("finished_at", desc=True)

    def test_format_duration(self):
        assert format_duration(65) == "1:05"
        assert format_duration(3725) == "1:02:05"


class TestSupabaseMealPlanRepository:
    """Tests for SupabaseMealPlanRepository."""

    def test_list_sorted_by_weekday(self):
        client, _ = make_client([
            {"id": "p-2", "user_email": OWNER, "day": "Domingo", "meals": {}, "status": {}},
            {"id": "p-1", "user_email": OWNER, "day": "Segunda-feira", "meals": None, "status": None},
        ])

        plans = SupabaseMealPlanRepository(client).list_for_owner(OWNER)

        client.table.assert_called_with(MEAL_PLANS_TABLE)
        assert [p.id for p in plans] == ["p-1", "p-2"]

    def test_insert_generates_id(self):
        client, query = make_client([{"id": "p-1", "user_email": OWNER, "day": "Segunda-feira"}])

        SupabaseMealPlanRepository(client).insert(MealPlan(user_email=OWNER, day=DayOfWeek.MONDAY))

        inserted = query.insert.call_args.args[0]
        assert inserted["id"]
        assert inserted["meals"]["almoco"] == []

    def test_update_error(self):
        client, _ = make_client(error=Exception("boom"))
        result = SupabaseMealPlanRepository(client).update("p-1", OWNER, meals={}, status={})
        assert result is None
