from dataclasses import dataclass

import streamlit as st

from dashboard.auth import SessionContext, current_identity, get_secret, is_allowed
from dashboard.data import api_client
from dashboard.data.memory import InMemoryJournalRepository, InMemoryStore, InMemoryTodoRepository
from dashboard.data.repositories import ApiJournalRepository, ApiTodoRepository
from dashboard.state import session_slices
from dashboard.state.calendar import DateSelection
from dashboard.state.journal import JournalState
from dashboard.state.tasks import TaskListState
from dashboard.theme import ThemeState

PLANNER_SLICE = "planner"


@dataclass
class DashboardContext:
    session: SessionContext
    theme: ThemeState
    selection: DateSelection
    tasks: TaskListState
    journal: JournalState
    persistent: bool = True


@st.cache_resource
def get_memory_store():
    return InMemoryStore()


def build_repositories():
    """Pick the backend API when configured, else the process-local store."""
    if api_client.is_enabled():
        return ApiTodoRepository(), ApiJournalRepository(), True
    store = get_memory_store()
    return InMemoryTodoRepository(store), InMemoryJournalRepository(store), False


def build_context(session, theme):
    planner = session_slices.get_slice(PLANNER_SLICE)
    if planner.get("owner_id") != session.owner_id:
        todo_repository, journal_repository, persistent = build_repositories()
        planner.clear()
        planner.update(
            {
                "owner_id": session.owner_id,
                "tasks": TaskListState(todo_repository, session.owner_id),
                "journal": JournalState(journal_repository, session.owner_id),
                "selection": DateSelection(),
                "persistent": persistent,
            }
        )
    tasks = planner["tasks"]
    journal = planner["journal"]
    # A failed load is retried on the next rerun.
    if not tasks.loaded:
        tasks.load_todos(session.owner_id)
    if not journal.loaded:
        journal.load_entries(session.owner_id)
    return DashboardContext(
        session=session,
        theme=theme,
        selection=planner["selection"],
        tasks=tasks,
        journal=journal,
        persistent=planner["persistent"],
    )


def open_dashboard(theme):
    """Resolve the signed-in identity and its context.

    Returns ``(identity, None)`` when nobody is signed in or the identity is
    not on the allow-list; nothing is loaded in that case.
    """
    identity = current_identity()
    if identity is None or not is_allowed(identity):
        return identity, None
    api_client.configure(get_secret)
    return identity, build_context(identity, theme)
