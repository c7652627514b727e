"""Calendar dates and timestamps in the hotel's ``dd.mm.yyyy`` notation."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date, datetime, timedelta

__all__ = [
    "format_date",
    "parse_date",
    "format_timestamp",
    "parse_timestamp",
    "today",
    "now",
    "date_range",
]

_ONE_DAY = timedelta(days=1)


def format_date(day: date) -> str:
    """Render a date (or the date part of a datetime) as ``dd.mm.yyyy``."""
    return f"{day.day:02d}.{day.month:02d}.{day.year}"


def parse_date(text: str) -> date:
    """Parse ``dd.mm.yyyy``; a trailing time part is ignored.

    Raises ValueError when the text is not a real calendar date.
    """
    date_part = text.strip().split(" ", 1)[0]
    pieces = date_part.split(".")
    if len(pieces) != 3:
        raise ValueError(f"invalid date: {text!r}")
    try:
        day, month, year = (int(piece) for piece in pieces)
        return date(year, month, day)
    except ValueError as exc:
        raise ValueError(f"invalid date: {text!r}") from exc


def format_timestamp(moment: datetime) -> str:
    """Render a moment as ``dd.mm.yyyy hh:mm:ss``."""
    return (
        f"{format_date(moment)} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )


def parse_timestamp(text: str) -> datetime:
    """Parse ``dd.mm.yyyy hh:mm:ss``; a bare date means midnight.

    Raises ValueError when the text is not a valid moment.
    """
    parts = text.strip().split(" ", 1)
    day = parse_date(parts[0])
    if len(parts) == 1 or not parts[1].strip():
        return datetime(day.year, day.month, day.day)
    pieces = parts[1].strip().split(":")
    if len(pieces) != 3:
        raise ValueError(f"invalid timestamp: {text!r}")
    try:
        hour, minute, second = (int(piece) for piece in pieces)
        return datetime(day.year, day.month, day.day, hour, minute, second)
    except ValueError as exc:
        raise ValueError(f"invalid timestamp: {text!r}") from exc


def today() -> date:
    """Return the current local date."""
    return date.today()


def now() -> datetime:
    """Return the current local time to the second."""
    return datetime.now().replace(microsecond=0)


def date_range(start: date, end: date) -> Iterator[date]:
    """Yield every day from ``start`` to ``end``, both included."""
    day = start
    while day <= end:
        yield day
        day += _ONE_DAY