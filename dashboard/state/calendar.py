import calendar
from dataclasses import dataclass, field
from datetime import date

from dashboard.datekeys import from_date_key, to_date_key

WEEKDAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


@dataclass(frozen=True)
class DayMarks:
    has_journal: bool
    has_todos: bool

    @property
    def badge(self):
        badge = ""
        if self.has_todos:
            badge += " •"
        if self.has_journal:
            badge += " ✎"
        return badge


@dataclass(frozen=True)
class CalendarCell:
    day: date
    key: str
    marks: DayMarks
    in_month: bool


def day_marks(day, journal_map, todos):
    key = to_date_key(day)
    return DayMarks(
        has_journal=key in journal_map,
        has_todos=any(todo.date == key for todo in todos),
    )


def month_grid(year, month, journal_map, todos):
    """Weeks of ``month`` (Sunday first), padded with neighbouring days."""
    weeks = calendar.Calendar(firstweekday=6).monthdatescalendar(year, month)
    return [
        [
            CalendarCell(
                day=day,
                key=to_date_key(day),
                marks=day_marks(day, journal_map, todos),
                in_month=day.month == month,
            )
            for day in week
        ]
        for week in weeks
    ]


@dataclass
class DateSelection:
    selected: date = field(default_factory=date.today)
    month: date = None

    def __post_init__(self):
        if self.month is None:
            self.month = self.selected.replace(day=1)

    @property
    def key(self):
        return to_date_key(self.selected)

    def select(self, day):
        self.selected = from_date_key(day)
        self.month = self.selected.replace(day=1)

    def shift_month(self, delta):
        index = self.month.year * 12 + (self.month.month - 1) + int(delta)
        self.month = date(index // 12, index % 12 + 1, 1)

    def month_title(self):
        return f"{self.month:%B} {self.month.year}"
