from datetime import date

from dashboard.state.tasks import PENDING_ID_PREFIX, TaskListState

from conftest import OWNER, FailingRepository


def test_add_creates_todo_for_today_with_store_id(tasks, todo_repository):
    result = tasks.add_or_update_todo("Buy milk")

    assert result.ok
    [todo] = tasks.visible_for("2024-01-01")
    assert todo.text == "Buy milk"
    assert todo.completed is False
    assert todo.owner_id == OWNER
    assert not todo.id.startswith(PENDING_ID_PREFIX)
    assert todo_repository.list_by_owner(OWNER).value == [todo]


def test_add_accepts_an_explicit_day(tasks):
    tasks.add_or_update_todo("Dentist", day=date(2024, 2, 14))

    assert [t.text for t in tasks.visible_for("2024-02-14")] == ["Dentist"]
    assert tasks.visible_for("2024-01-01") == []


def test_blank_text_is_a_no_op(tasks):
    assert tasks.add_or_update_todo("") is None
    assert tasks.add_or_update_todo("   \t") is None
    assert tasks.todos == []


def test_visible_for_filters_by_date_key(tasks):
    tasks.add_or_update_todo("a", day="2024-01-01")
    tasks.add_or_update_todo("b", day="2024-01-02")
    tasks.add_or_update_todo("c", day="2024-01-01")

    for todo in tasks.todos:
        assert (todo in tasks.visible_for(todo.date)) is True
        other = "2024-01-02" if todo.date == "2024-01-01" else "2024-01-01"
        assert todo not in tasks.visible_for(other)
    assert [t.text for t in tasks.visible_for(date(2024, 1, 1))] == ["a", "c"]


def test_toggle_twice_restores_original_value(tasks, todo_repository):
    todo = tasks.add_or_update_todo("Read").value

    tasks.toggle_completion(todo.id)
    assert tasks.get(todo.id).completed is True
    tasks.toggle_completion(todo.id)
    assert tasks.get(todo.id).completed is False
    assert todo_repository.list_by_owner(OWNER).value[0].completed is False


def test_edit_keeps_id_and_clears_edit_target(tasks):
    todo = tasks.add_or_update_todo("Buy milk").value

    assert tasks.begin_edit(todo.id) == "Buy milk"
    result = tasks.add_or_update_todo("Buy oat milk")

    assert result.ok
    assert tasks.editing_id is None
    assert tasks.get(todo.id).text == "Buy oat milk"
    assert len(tasks.todos) == 1


def test_explicit_editing_id_updates_that_todo(tasks):
    first = tasks.add_or_update_todo("one").value
    tasks.add_or_update_todo("two")

    tasks.add_or_update_todo("uno", editing_id=first.id)

    assert [t.text for t in tasks.todos] == ["uno", "two"]


def test_delete_removes_todo_from_every_date(tasks, todo_repository):
    todo = tasks.add_or_update_todo("Gone soon").value

    assert tasks.delete_todo(todo.id).ok
    assert tasks.get(todo.id) is None
    assert all(todo not in tasks.visible_for(day) for day in ("2024-01-01", "2024-01-02"))
    assert todo_repository.list_by_owner(OWNER).value == []


def test_deleting_the_edit_target_cancels_the_edit(tasks):
    todo = tasks.add_or_update_todo("x").value
    tasks.begin_edit(todo.id)

    tasks.delete_todo(todo.id)

    assert tasks.editing_id is None


def test_unknown_ids_report_failure_without_remote_calls(todo_repository):
    repository = FailingRepository(todo_repository)
    state = TaskListState(repository, OWNER)

    assert not state.toggle_completion("missing").ok
    assert not state.delete_todo("missing").ok
    assert not state.add_or_update_todo("text", editing_id="missing").ok
    assert repository.calls == []


def test_scenario_add_toggle_edit_delete(tasks):
    todo = tasks.add_or_update_todo("Buy milk").value
    [visible] = tasks.visible_for("2024-01-01")
    assert visible.completed is False

    tasks.toggle_completion(todo.id)
    assert tasks.visible_for("2024-01-01")[0].completed is True

    tasks.begin_edit(todo.id)
    tasks.add_or_update_todo("Buy oat milk")
    [edited] = tasks.visible_for("2024-01-01")
    assert edited.text == "Buy oat milk"
    assert edited.id == todo.id

    tasks.delete_todo(todo.id)
    assert tasks.visible_for("2024-01-01") == []


def test_failed_create_removes_the_provisional_todo(todo_repository):
    state = TaskListState(FailingRepository(todo_repository, {"create"}), OWNER, today=lambda: date(2024, 1, 1))

    result = state.add_or_update_todo("Buy milk")

    assert not result.ok
    assert state.todos == []
    assert state.drain_notices() == ["Could not add task: backend unavailable"]
    assert state.drain_notices() == []


def test_failed_toggle_reverts_local_state(todo_repository):
    todo = todo_repository.create(OWNER, "Read", "2024-01-01").value
    state = TaskListState(FailingRepository(todo_repository, {"update"}), OWNER)
    state.load_todos()

    result = state.toggle_completion(todo.id)

    assert not result.ok
    assert state.get(todo.id).completed is False
    assert state.notices


def test_failed_edit_restores_text_and_keeps_edit_target(todo_repository):
    todo = todo_repository.create(OWNER, "Read", "2024-01-01").value
    state = TaskListState(FailingRepository(todo_repository, {"update"}), OWNER)
    state.load_todos()
    state.begin_edit(todo.id)

    state.add_or_update_todo("Write")

    assert state.get(todo.id).text == "Read"
    assert state.editing_id == todo.id


def test_failed_delete_reinserts_at_original_position(todo_repository):
    ids = [todo_repository.create(OWNER, text, "2024-01-01").value.id for text in ("a", "b", "c")]
    state = TaskListState(FailingRepository(todo_repository, {"delete"}), OWNER)
    state.load_todos()
    order = [t.id for t in state.todos]

    state.delete_todo(ids[1])

    assert [t.id for t in state.todos] == order
    assert len(todo_repository.list_by_owner(OWNER).value) == 3


def test_failed_load_keeps_prior_collection(todo_repository):
    todo_repository.create(OWNER, "kept", "2024-01-01")
    repository = FailingRepository(todo_repository)
    state = TaskListState(repository, OWNER)
    state.load_todos()

    repository.failing.add("list_by_owner")
    result = state.load_todos()

    assert not result.ok
    assert [t.text for t in state.todos] == ["kept"]
    assert state.drain_notices() == ["Could not load tasks: backend unavailable"]


def test_first_failed_load_leaves_empty_state(todo_repository):
    state = TaskListState(FailingRepository(todo_repository, {"list_by_owner"}), OWNER)

    state.load_todos()

    assert state.todos == []
    assert state.loaded is False


def test_todos_are_scoped_to_their_owner(todo_repository):
    todo_repository.create("someone@else.com", "not mine", "2024-01-01")
    state = TaskListState(todo_repository, OWNER)

    state.load_todos()

    assert state.todos == []
