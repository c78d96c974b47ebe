"""Process-local stand-in for the backend store.

Used when no API is configured and by the tests. Records are keyed by a
generated id and filtered by owner the same way the backend does.
"""

import threading
from uuid import uuid4

from dashboard.data.models import JournalEntry, Todo
from dashboard.data.repositories import TODO_FIELDS
from dashboard.data.results import Result
from dashboard.datekeys import to_date_key


def _new_id():
    return uuid4().hex


class InMemoryStore:
    def __init__(self):
        self.todos = {}
        self.journal = {}
        self.lock = threading.Lock()


class InMemoryTodoRepository:
    def __init__(self, store=None):
        self.store = store or InMemoryStore()

    def list_by_owner(self, owner_id):
        with self.store.lock:
            items = [todo for todo in self.store.todos.values() if todo.owner_id == owner_id]
        return Result.success(items)

    def create(self, owner_id, text, date, completed=False):
        clean = str(text or "").strip()
        if not clean:
            return Result.failure("Todo text cannot be empty")
        todo = Todo(id=_new_id(), text=clean, completed=bool(completed), date=to_date_key(date), owner_id=owner_id)
        with self.store.lock:
            self.store.todos[todo.id] = todo
        return Result.success(todo)

    def update(self, owner_id, todo_id, fields):
        changes = {key: value for key, value in (fields or {}).items() if key in TODO_FIELDS}
        if "text" in changes:
            changes["text"] = str(changes["text"] or "").strip()
            if not changes["text"]:
                return Result.failure("Todo text cannot be empty")
        if "completed" in changes:
            changes["completed"] = bool(changes["completed"])
        with self.store.lock:
            current = self.store.todos.get(todo_id)
            if current is None or current.owner_id != owner_id:
                return Result.failure("Todo not found")
            updated = current.with_changes(**changes)
            self.store.todos[todo_id] = updated
        return Result.success(updated)

    def delete(self, owner_id, todo_id):
        with self.store.lock:
            current = self.store.todos.get(todo_id)
            if current is None or current.owner_id != owner_id:
                return Result.failure("Todo not found")
            del self.store.todos[todo_id]
        return Result.success(None)


class InMemoryJournalRepository:
    def __init__(self, store=None):
        self.store = store or InMemoryStore()

    def list_by_owner(self, owner_id):
        with self.store.lock:
            items = [entry for entry in self.store.journal.values() if entry.owner_id == owner_id]
        return Result.success(sorted(items, key=lambda entry: entry.date))

    def find_by_date(self, owner_id, date):
        key = to_date_key(date)
        with self.store.lock:
            for entry in self.store.journal.values():
                if entry.owner_id == owner_id and entry.date == key:
                    return Result.success(entry)
        return Result.success(None)

    def create(self, owner_id, date, content):
        key = to_date_key(date)
        with self.store.lock:
            if any(e.owner_id == owner_id and e.date == key for e in self.store.journal.values()):
                return Result.failure("Journal entry already exists for this date")
            entry = JournalEntry(id=_new_id(), owner_id=owner_id, date=key, content=str(content or ""))
            self.store.journal[entry.id] = entry
        return Result.success(entry)

    def update(self, owner_id, entry_id, content):
        with self.store.lock:
            current = self.store.journal.get(entry_id)
            if current is None or current.owner_id != owner_id:
                return Result.failure("Journal entry not found")
            updated = JournalEntry(id=current.id, owner_id=owner_id, date=current.date, content=str(content or ""))
            self.store.journal[entry_id] = updated
        return Result.success(updated)

    def delete(self, owner_id, entry_id):
        with self.store.lock:
            current = self.store.journal.get(entry_id)
            if current is None or current.owner_id != owner_id:
                return Result.failure("Journal entry not found")
            del self.store.journal[entry_id]
        return Result.success(None)
