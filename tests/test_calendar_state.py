from datetime import date

from dashboard.data.models import Todo
from dashboard.state.calendar import DateSelection, DayMarks, day_marks, month_grid

from conftest import OWNER


def _todo(day, text="t"):
    return Todo(id=f"id-{day}-{text}", text=text, completed=False, date=day, owner_id=OWNER)


def test_day_marks_reflect_both_collections():
    journal = {"2024-01-01": "entry", "2024-01-03": "other"}
    todos = [_todo("2024-01-01"), _todo("2024-01-02")]

    assert day_marks("2024-01-01", journal, todos) == DayMarks(has_journal=True, has_todos=True)
    assert day_marks(date(2024, 1, 2), journal, todos) == DayMarks(has_journal=False, has_todos=True)
    assert day_marks("2024-01-03", journal, todos) == DayMarks(has_journal=True, has_todos=False)
    assert day_marks("2024-01-04", journal, todos) == DayMarks(has_journal=False, has_todos=False)


def test_badges():
    assert DayMarks(True, True).badge == " • ✎"
    assert DayMarks(False, True).badge == " •"
    assert DayMarks(True, False).badge == " ✎"
    assert DayMarks(False, False).badge == ""


def test_month_grid_starts_on_sunday_and_covers_the_month():
    weeks = month_grid(2024, 1, {}, [])

    assert all(len(week) == 7 for week in weeks)
    assert all(week[0].day.weekday() == 6 for week in weeks)
    in_month = [cell.day for week in weeks for cell in week if cell.in_month]
    assert in_month[0] == date(2024, 1, 1)
    assert in_month[-1] == date(2024, 1, 31)
    assert len(in_month) == 31
    assert weeks[0][0].key == "2023-12-31"
    assert weeks[0][0].in_month is False


def test_month_grid_marks_cells():
    weeks = month_grid(2024, 1, {"2024-01-15": "x"}, [_todo("2024-01-15"), _todo("2024-01-20")])
    cells = {cell.key: cell.marks for week in weeks for cell in week}

    assert cells["2024-01-15"] == DayMarks(True, True)
    assert cells["2024-01-20"] == DayMarks(False, True)
    assert cells["2024-01-21"] == DayMarks(False, False)


def test_selection_defaults_to_today():
    selection = DateSelection()

    assert selection.selected == date.today()
    assert selection.month == date.today().replace(day=1)


def test_select_moves_displayed_month():
    selection = DateSelection(selected=date(2024, 1, 31))

    selection.select("2024-03-05")

    assert selection.key == "2024-03-05"
    assert selection.month == date(2024, 3, 1)


def test_shift_month_wraps_years_without_changing_selection():
    selection = DateSelection(selected=date(2024, 12, 10))

    selection.shift_month(1)
    assert selection.month == date(2025, 1, 1)
    selection.shift_month(-13)
    assert selection.month == date(2023, 12, 1)
    assert selection.key == "2024-12-10"
    assert selection.month_title() == "December 2023"
