from datetime import date

import pytest
from fastapi.testclient import TestClient

from backend import db, settings
from dashboard.data.memory import InMemoryJournalRepository, InMemoryStore, InMemoryTodoRepository
from dashboard.data.results import Result
from dashboard.state.journal import JournalState
from dashboard.state.tasks import TaskListState

OWNER = "u1@example.com"
TOKEN = "test-secret"


def owner_headers(owner=OWNER, token=TOKEN):
    return {"X-User-Email": owner, "X-Backend-Token": token}


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def todo_repository(store):
    return InMemoryTodoRepository(store)


@pytest.fixture
def journal_repository(store):
    return InMemoryJournalRepository(store)


@pytest.fixture
def tasks(todo_repository):
    state = TaskListState(todo_repository, OWNER, today=lambda: date(2024, 1, 1))
    state.load_todos(OWNER)
    return state


@pytest.fixture
def journal(journal_repository):
    state = JournalState(journal_repository, OWNER)
    state.load_entries(OWNER)
    return state


class FailingRepository:
    """Wraps a repository and fails the named methods."""

    def __init__(self, inner, failing=(), reason="backend unavailable"):
        self.inner = inner
        self.failing = set(failing)
        self.reason = reason
        self.calls = []

    def __getattr__(self, name):
        method = getattr(self.inner, name)

        def call(*args, **kwargs):
            self.calls.append(name)
            if name in self.failing:
                return Result.failure(self.reason)
            return method(*args, **kwargs)

        return call


@pytest.fixture
def backend_env(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'planner.db'}")
    monkeypatch.setenv("BACKEND_SESSION_SECRET", TOKEN)
    monkeypatch.delenv("ALLOWED_EMAILS", raising=False)
    settings.reset_settings()
    monkeypatch.setattr(db, "_engine", None)
    monkeypatch.setattr(db, "_session_factory", None)
    yield monkeypatch
    settings.reset_settings()


@pytest.fixture
def client(backend_env):
    from backend.main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
