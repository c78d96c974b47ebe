"""Todo and journal repositories.

Every method returns a :class:`~dashboard.data.results.Result`; transport and
HTTP failures are logged here and never raised to the views.
"""

import logging
from typing import Protocol

import requests

from dashboard.data import api_client
from dashboard.data.api_client import ApiError
from dashboard.data.models import JournalEntry, Todo
from dashboard.data.results import Result
from dashboard.datekeys import to_date_key

logger = logging.getLogger(__name__)

TODO_FIELDS = {"text", "completed"}


class TodoRepository(Protocol):
    def list_by_owner(self, owner_id) -> Result: ...

    def create(self, owner_id, text, date, completed=False) -> Result: ...

    def update(self, owner_id, todo_id, fields) -> Result: ...

    def delete(self, owner_id, todo_id) -> Result: ...


class JournalRepository(Protocol):
    def list_by_owner(self, owner_id) -> Result: ...

    def find_by_date(self, owner_id, date) -> Result: ...

    def create(self, owner_id, date, content) -> Result: ...

    def update(self, owner_id, entry_id, content) -> Result: ...

    def delete(self, owner_id, entry_id) -> Result: ...


def _call(action, method, path, owner_id, params=None, json=None):
    try:
        payload = api_client.request(method, path, params=params, json=json, user_email=owner_id)
    except (ApiError, requests.RequestException) as exc:
        logger.warning("Failed to %s: %s", action, exc)
        return Result.failure(exc)
    return Result.success(payload)


class ApiTodoRepository:
    def list_by_owner(self, owner_id):
        result = _call("load todos", "GET", "/v1/todos", owner_id)
        if not result.ok:
            return result
        items = (result.value or {}).get("items", [])
        return Result.success([Todo.from_payload(item) for item in items])

    def create(self, owner_id, text, date, completed=False):
        body = {"text": text, "completed": bool(completed), "date": to_date_key(date)}
        result = _call("create todo", "POST", "/v1/todos", owner_id, json=body)
        if not result.ok:
            return result
        return Result.success(Todo.from_payload(result.value))

    def update(self, owner_id, todo_id, fields):
        body = {key: value for key, value in (fields or {}).items() if key in TODO_FIELDS}
        result = _call("update todo", "PATCH", f"/v1/todos/{todo_id}", owner_id, json=body)
        if not result.ok:
            return result
        return Result.success(Todo.from_payload(result.value))

    def delete(self, owner_id, todo_id):
        result = _call("delete todo", "DELETE", f"/v1/todos/{todo_id}", owner_id)
        if not result.ok:
            return result
        return Result.success(None)


class ApiJournalRepository:
    def list_by_owner(self, owner_id):
        result = _call("load journal", "GET", "/v1/journal", owner_id)
        if not result.ok:
            return result
        items = (result.value or {}).get("items", [])
        return Result.success([JournalEntry.from_payload(item) for item in items])

    def find_by_date(self, owner_id, date):
        params = {"date": to_date_key(date)}
        result = _call("look up journal entry", "GET", "/v1/journal", owner_id, params=params)
        if not result.ok:
            return result
        items = (result.value or {}).get("items", [])
        return Result.success(JournalEntry.from_payload(items[0]) if items else None)

    def create(self, owner_id, date, content):
        body = {"date": to_date_key(date), "content": content}
        result = _call("create journal entry", "POST", "/v1/journal", owner_id, json=body)
        if not result.ok:
            return result
        return Result.success(JournalEntry.from_payload(result.value))

    def update(self, owner_id, entry_id, content):
        result = _call(
            "update journal entry", "PATCH", f"/v1/journal/{entry_id}", owner_id, json={"content": content}
        )
        if not result.ok:
            return result
        return Result.success(JournalEntry.from_payload(result.value))

    def delete(self, owner_id, entry_id):
        result = _call("delete journal entry", "DELETE", f"/v1/journal/{entry_id}", owner_id)
        if not result.ok:
            return result
        return Result.success(None)
