import logging
from datetime import date
from uuid import uuid4

from dashboard.data.models import Todo
from dashboard.data.results import Result
from dashboard.datekeys import to_date_key

logger = logging.getLogger(__name__)

PENDING_ID_PREFIX = "pending-"


class TaskListState:
    """Local mirror of one owner's todos.

    Mutations are applied locally first, then written once to the
    repository. A failed write restores the previous local value and queues
    a notice for the view.
    """

    def __init__(self, repository, owner_id, today=date.today):
        self.repository = repository
        self.owner_id = owner_id
        self._today = today
        self.todos = []
        self.editing_id = None
        self.loaded = False
        self.notices = []

    def load_todos(self, owner_id=None):
        owner_id = owner_id or self.owner_id
        result = self.repository.list_by_owner(owner_id)
        if not result.ok:
            self._notify(f"Could not load tasks: {result.error}")
            return result
        self.owner_id = owner_id
        self.todos = list(result.value or [])
        self.loaded = True
        logger.debug("Loaded %d todos for %s", len(self.todos), owner_id)
        return result

    def visible_for(self, day):
        key = to_date_key(day)
        return [todo for todo in self.todos if todo.date == key]

    def get(self, todo_id):
        index = self._index(todo_id)
        return None if index is None else self.todos[index]

    def begin_edit(self, todo_id):
        todo = self.get(todo_id)
        if todo is None:
            return None
        self.editing_id = todo_id
        return todo.text

    def cancel_edit(self):
        self.editing_id = None

    def add_or_update_todo(self, text, editing_id=None, day=None):
        clean = str(text or "").strip()
        if not clean:
            return None
        target_id = editing_id if editing_id is not None else self.editing_id
        if target_id is not None:
            return self._update_text(target_id, clean)
        return self._create(clean, day)

    def toggle_completion(self, todo_id):
        index = self._index(todo_id)
        if index is None:
            return Result.failure("Todo not found")
        previous = self.todos[index]
        flipped = previous.with_changes(completed=not previous.completed)
        self.todos[index] = flipped
        result = self.repository.update(self.owner_id, todo_id, {"completed": flipped.completed})
        if not result.ok:
            self._restore(previous)
            self._notify(f"Could not update task: {result.error}")
        return result

    def delete_todo(self, todo_id):
        index = self._index(todo_id)
        if index is None:
            return Result.failure("Todo not found")
        previous = self.todos.pop(index)
        if self.editing_id == todo_id:
            self.editing_id = None
        result = self.repository.delete(self.owner_id, todo_id)
        if not result.ok:
            self.todos.insert(min(index, len(self.todos)), previous)
            self._notify(f"Could not delete task: {result.error}")
        return result

    def drain_notices(self):
        notices, self.notices = self.notices, []
        return notices

    def _create(self, text, day):
        day_key = to_date_key(day if day is not None else self._today())
        provisional = Todo(
            id=f"{PENDING_ID_PREFIX}{uuid4().hex}",
            text=text,
            completed=False,
            date=day_key,
            owner_id=self.owner_id,
        )
        self.todos.append(provisional)
        result = self.repository.create(self.owner_id, text, day_key)
        if not result.ok:
            self._remove(provisional.id)
            self._notify(f"Could not add task: {result.error}")
            return result
        self._replace(provisional.id, result.value)
        return result

    def _update_text(self, todo_id, text):
        index = self._index(todo_id)
        if index is None:
            self.editing_id = None
            return Result.failure("Todo not found")
        previous = self.todos[index]
        self.todos[index] = previous.with_changes(text=text)
        result = self.repository.update(self.owner_id, todo_id, {"text": text})
        if not result.ok:
            self._restore(previous)
            self._notify(f"Could not edit task: {result.error}")
            return result
        self._replace(todo_id, result.value)
        self.editing_id = None
        return result

    def _index(self, todo_id):
        for index, todo in enumerate(self.todos):
            if todo.id == todo_id:
                return index
        return None

    def _replace(self, todo_id, todo):
        index = self._index(todo_id)
        if index is not None:
            self.todos[index] = todo

    def _restore(self, previous):
        self._replace(previous.id, previous)

    def _remove(self, todo_id):
        self.todos = [todo for todo in self.todos if todo.id != todo_id]

    def _notify(self, message):
        logger.warning(message)
        self.notices.append(message)
