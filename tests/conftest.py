"""
Shared pytest fixtures.

Provides fresh fakes for every repository port plus a TestClient whose
dependencies are overridden with those fakes, so router tests never touch
Supabase or the real event-loop scheduler.

Usage:
    def test_something(client, fake_routine_repo):
        fake_routine_repo.seed([make_routine()])
        response = client.get("/routines")
        assert response.status_code == 200
"""

import pytest
from fastapi.testclient import TestClient

from api import deps
from backend.main import create_app
from backend.settings import Settings
from domain.execution import ExecutionRegistry
from tests.fakes import (
    TEST_OWNER,
    FakeCompletionRepository,
    FakeMealPlanRepository,
    FakeRoutineRepository,
    FakeTickScheduler,
)


async def mock_get_current_user() -> str:
    """Mock auth dependency that returns the test owner."""
    return TEST_OWNER


@pytest.fixture
def test_settings() -> Settings:
    return Settings(environment="test", _env_file=None)


@pytest.fixture
def fake_routine_repo() -> FakeRoutineRepository:
    return FakeRoutineRepository()


@pytest.fixture
def fake_completion_repo() -> FakeCompletionRepository:
    return FakeCompletionRepository()


@pytest.fixture
def fake_meal_plan_repo() -> FakeMealPlanRepository:
    return FakeMealPlanRepository()


@pytest.fixture
def fake_scheduler() -> FakeTickScheduler:
    return FakeTickScheduler()


@pytest.fixture
def registry() -> ExecutionRegistry:
    registry = ExecutionRegistry()
    yield registry
    registry.close_all()


@pytest.fixture
def app(
    test_settings,
    fake_routine_repo,
    fake_completion_repo,
    fake_meal_plan_repo,
    fake_scheduler,
    registry,
):
    """FastAPI app with auth, repositories and execution state overridden."""
    app = create_app(settings=test_settings)
    app.dependency_overrides[deps.get_current_user] = mock_get_current_user
    app.dependency_overrides[deps.get_settings] = lambda: test_settings
    app.dependency_overrides[deps.get_routine_repo] = lambda: fake_routine_repo
    app.dependency_overrides[deps.get_completion_repo] = lambda: fake_completion_repo
    app.dependency_overrides[deps.get_meal_plan_repo] = lambda: fake_meal_plan_repo
    app.dependency_overrides[deps.get_execution_registry] = lambda: registry
    app.dependency_overrides[deps.get_tick_scheduler] = lambda: fake_scheduler
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
