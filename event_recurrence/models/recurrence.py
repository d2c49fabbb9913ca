"""Recurrence models: the rule, the viewing window and generated instances."""
import datetime as dt
from enum import Enum, IntEnum
from typing import Optional

from pydantic import BaseModel

from ..utils.formatting import format_display

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"


class InvalidInputError(ValueError):
    """Raised when a date, time or rule value cannot be parsed."""


class RecurrencePattern(str, Enum):
    """Stride between instances."""
    DAILY = "daily"
    WEEKLY = "weekly"


class Weekday(IntEnum):
    """Day of week, numbered from Sunday."""
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def of(cls, day: dt.date) -> "Weekday":
        """Weekday of a calendar date (``date.weekday()`` counts from Monday)."""
        return cls((day.weekday() + 1) % 7)


def parse_date(value: Optional[str], field: str = "date") -> Optional[dt.date]:
    """Parse a ``YYYY-MM-DD`` string; blank means absent."""
    if value is None or not value.strip():
        return None
    try:
        return dt.datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError:
        raise InvalidInputError(f"Invalid {field}: {value!r}, expected YYYY-MM-DD")


def parse_time(value: Optional[str], field: str = "time") -> Optional[dt.time]:
    """Parse an ``HH:MM`` string; blank means absent."""
    if value is None or not value.strip():
        return None
    try:
        return dt.datetime.strptime(value.strip(), TIME_FORMAT).time()
    except ValueError:
        raise InvalidInputError(f"Invalid {field}: {value!r}, expected HH:MM")


def parse_pattern(value) -> RecurrencePattern:
    """Parse a recurrence pattern name, case-insensitively."""
    if isinstance(value, RecurrencePattern):
        return value
    try:
        return RecurrencePattern(str(value).strip().lower())
    except ValueError:
        raise InvalidInputError(f"Recurrence must be one of: daily, weekly, got: {value!r}")


def parse_count(value) -> int:
    """Parse an occurrence count; clamping is left to the engine."""
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"Occurrence count must be a whole number, got: {value!r}")


def parse_weekday(value) -> Optional[Weekday]:
    """Parse a weekday number (0=Sunday..6=Saturday); blank means absent."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return Weekday(int(value))
    except (TypeError, ValueError):
        raise InvalidInputError(f"Weekday must be 0 (Sunday) to 6 (Saturday), got: {value!r}")


class RecurrenceSpec(BaseModel):
    """A recurring event rule.

    ``start_date`` of None means the rule is not ready to generate anything.
    ``weekday`` is only consulted for weekly recurrence.
    """

    start_date: Optional[dt.date] = None
    start_time: dt.time = dt.time(9, 0)
    pattern: RecurrencePattern = RecurrencePattern.WEEKLY
    weekday: Optional[Weekday] = None
    count: int = 10

    class Config:
        frozen = True

    @classmethod
    def from_strings(
        cls,
        start_date: Optional[str],
        start_time: Optional[str] = None,
        pattern="weekly",
        weekday=None,
        count: int = 10,
    ) -> "RecurrenceSpec":
        """Build a rule from wire values, raising InvalidInputError on malformed input."""
        parsed_time = parse_time(start_time, "start time")
        return cls(
            start_date=parse_date(start_date, "start date"),
            start_time=parsed_time if parsed_time is not None else dt.time(9, 0),
            pattern=parse_pattern(pattern),
            weekday=parse_weekday(weekday),
            count=parse_count(count),
        )


class ViewWindow(BaseModel):
    """Date-inclusive viewing range. A missing bound leaves the window unconstrained."""

    start: Optional[dt.date] = None
    end: Optional[dt.date] = None

    class Config:
        frozen = True

    @classmethod
    def from_strings(cls, start: Optional[str] = None, end: Optional[str] = None) -> "ViewWindow":
        return cls(start=parse_date(start, "window start"), end=parse_date(end, "window end"))

    @property
    def is_constrained(self) -> bool:
        return self.start is not None and self.end is not None


class Instance(BaseModel):
    """One concrete occurrence of a recurring event."""

    date: dt.date
    time: dt.time
    in_window: bool = True

    class Config:
        frozen = True

    @property
    def starts_at(self) -> dt.datetime:
        return dt.datetime.combine(self.date, self.time)

    @property
    def display(self) -> str:
        return format_display(self.date, self.time)
