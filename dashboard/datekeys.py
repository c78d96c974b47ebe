"""Canonical calendar-day keys shared by todos and journal entries."""

from datetime import date, datetime

DATE_KEY_FORMAT = "%Y-%m-%d"


def to_date_key(value):
    """Return the zero-padded ``YYYY-MM-DD`` key for ``value``.

    Accepts ``date``/``datetime`` objects, ISO datetime strings, or day
    strings with optional zero padding. Raises ``ValueError`` for anything
    that is not a real calendar day.
    """
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        text = value.strip()
        if "T" in text or " " in text:
            return datetime.fromisoformat(text).date().isoformat()
        return datetime.strptime(text, DATE_KEY_FORMAT).date().isoformat()
    raise ValueError(f"Unsupported date value: {value!r}")


def from_date_key(key):
    return date.fromisoformat(to_date_key(key))


def format_long(value):
    day = from_date_key(value)
    return f"{day:%B} {day.day}, {day.year}"


def format_weekday_long(value):
    day = from_date_key(value)
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"
