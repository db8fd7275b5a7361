"""
Unit tests for WorkoutExecution and ExecutionRegistry.
"""

import pytest

from domain.execution import ExecutionRegistry, WorkoutExecution
from domain.models import RoutineStatus
from tests.fakes import TEST_OWNER, FakeTickScheduler, make_exercise, make_routine


@pytest.fixture
def scheduler():
    return FakeTickScheduler()


def open_execution(scheduler, **routine_kwargs):
    return WorkoutExecution(make_routine(**routine_kwargs), owner=TEST_OWNER, scheduler=scheduler)


@pytest.mark.unit
class TestWorkoutExecution:
    """Tests for WorkoutExecution."""

    def test_starts_from_zero(self, scheduler):
        execution = open_execution(scheduler)
        snapshot = execution.snapshot()

        assert snapshot["routine_id"] == "routine-1"
        assert snapshot["day_of_week"] == "Segunda-feira"
        assert snapshot["remaining_sets"] == 3
        assert snapshot["workout_completed"] is False
        assert snapshot["exercises"][0]["completed_sets"] == 0
        assert snapshot["exercises"][0]["rest_seconds"] == 60

    def test_progress_returns_copy(self, scheduler):
        execution = open_execution(scheduler)
        copy = execution.progress(0)
        copy.completed_sets = 3
        assert execution.progress(0).completed_sets == 0
        assert execution.progress(5) is None

    def test_full_walkthrough(self, scheduler):
        execution = open_execution(
            scheduler,
            exercises=[make_exercise(sets=2, rest="5"), make_exercise(name="Remada", sets=1, rest="5")],
        )
        assert execution.complete_set(0) is True
        assert execution.snapshot()["exercises"][0]["timer"] == 5
        scheduler.advance(5)
        assert execution.complete_set(0) is True
        assert execution.complete_set(1) is True

        snapshot = execution.snapshot()
        assert snapshot["workout_completed"] is True
        assert all(item["done"] for item in snapshot["exercises"])
        assert scheduler.live_handles == []

    def test_empty_routine_is_immediately_completed(self, scheduler):
        execution = open_execution(scheduler, exercises=[])
        assert execution.workout_completed is True

    def test_complete_set_rejected_on_completed_routine(self, scheduler):
        execution = open_execution(scheduler, status=RoutineStatus.COMPLETED)
        assert execution.complete_set(0) is False

    def test_listeners_notified_on_changes(self, scheduler):
        execution = open_execution(scheduler)
        calls = []
        execution.add_listener(lambda: calls.append(1))

        execution.complete_set(0)
        count_after_set = len(calls)
        assert count_after_set >= 1

        scheduler.advance(1)
        assert len(calls) == count_after_set + 1

    def test_failing_listener_does_not_break_execution(self, scheduler):
        execution = open_execution(scheduler)

        def boom():
            raise RuntimeError("listener failed")

        execution.add_listener(boom)
        assert execution.complete_set(0) is True

    def test_close_releases_countdowns(self, scheduler):
        execution = open_execution(scheduler)
        execution.complete_set(0)
        assert len(scheduler.live_handles) == 1

        execution.close()

        assert execution.closed
        assert scheduler.live_handles == []
        assert execution.complete_set(0) is False
        scheduler.advance(120)
        assert execution.progress(0).timer == 0

    def test_close_is_idempotent(self, scheduler):
        execution = open_execution(scheduler)
        calls = []
        execution.add_listener(lambda: calls.append(1))
        execution.close()
        execution.close()
        assert len(calls) == 1

    def test_begin_finalize_guards_reentry(self, scheduler):
        execution = open_execution(scheduler)
        assert execution.begin_finalize() is True
        assert execution.begin_finalize() is False
        execution.end_finalize()
        assert execution.begin_finalize() is True

    def test_mark_finalized(self, scheduler):
        execution = open_execution(scheduler)
        execution.complete_set(0)
        execution.mark_finalized()

        assert execution.routine.is_completed
        assert execution.snapshot()["status"] == "completed"
        assert scheduler.live_handles == []


@pytest.mark.unit
class TestExecutionRegistry:
    """Tests for ExecutionRegistry."""

    def test_open_and_get(self, scheduler):
        registry = ExecutionRegistry()
        execution = registry.open(open_execution(scheduler))
        assert registry.get(TEST_OWNER, "routine-1") is execution
        assert registry.get("someone@else.com", "routine-1") is None
        assert len(registry) == 1

    def test_reopen_closes_previous(self, scheduler):
        registry = ExecutionRegistry()
        first = registry.open(open_execution(scheduler))
        first.complete_set(0)

        second = registry.open(open_execution(scheduler))

        assert first.closed
        assert not second.closed
        assert registry.get(TEST_OWNER, "routine-1") is second
        assert scheduler.live_handles == []

    def test_close(self, scheduler):
        registry = ExecutionRegistry()
        execution = registry.open(open_execution(scheduler))
        assert registry.close(TEST_OWNER, "routine-1") is True
        assert execution.closed
        assert registry.close(TEST_OWNER, "routine-1") is False

    def test_close_all(self, scheduler):
        registry = ExecutionRegistry()
        registry.open(open_execution(scheduler, routine_id="a"))
        registry.open(open_execution(scheduler, routine_id="b"))
        assert registry.close_all() == 2
        assert len(registry) == 0

    def test_close_if_only_closes_registered_execution(self, scheduler):
        registry = ExecutionRegistry()
        stale = registry.open(open_execution(scheduler))
        current = registry.open(open_execution(scheduler))

        assert registry.close_if(stale) is False
        assert not current.closed
        assert registry.get(TEST_OWNER, "routine-1") is current

        assert registry.close_if(current) is True
        assert current.closed
        assert len(registry) == 0


@pytest.mark.unit
class TestIdleEviction:
    """Tests for ExecutionRegistry idle eviction."""

    def make_registry(self, clock):
        return ExecutionRegistry(idle_timeout=60, clock=lambda: clock[0])

    def test_idle_execution_evicted_on_next_open(self, scheduler):
        clock = [0.0]
        registry = self.make_registry(clock)
        abandoned = registry.open(open_execution(scheduler, routine_id="a"))
        abandoned.complete_set(0)

        clock[0] = 61.0
        registry.open(open_execution(scheduler, routine_id="b"))

        assert abandoned.closed
        assert registry.get(TEST_OWNER, "a") is None
        assert len(registry) == 1
        assert scheduler.live_handles == []

    def test_reads_keep_execution_alive(self, scheduler):
        clock = [0.0]
        registry = self.make_registry(clock)
        execution = registry.open(open_execution(scheduler, routine_id="a"))

        clock[0] = 50.0
        registry.get(TEST_OWNER, "a")
        clock[0] = 100.0

        assert registry.evict_idle() == 0
        assert not execution.closed

    def test_streamed_execution_not_evicted(self, scheduler):
        clock = [0.0]
        registry = self.make_registry(clock)
        execution = registry.open(open_execution(scheduler, routine_id="a"))
        execution.add_listener(lambda: None)

        clock[0] = 500.0

        assert registry.evict_idle() == 0
        assert not execution.closed

    def test_no_timeout_keeps_everything(self, scheduler):
        registry = ExecutionRegistry()
        execution = registry.open(open_execution(scheduler))
        assert registry.evict_idle() == 0
        assert not execution.closed
