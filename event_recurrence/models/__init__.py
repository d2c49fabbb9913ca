"""Domain models for recurring events."""
from .recurrence import (
    Instance,
    InvalidInputError,
    RecurrencePattern,
    RecurrenceSpec,
    ViewWindow,
    Weekday,
)

__all__ = [
    "Instance",
    "InvalidInputError",
    "RecurrencePattern",
    "RecurrenceSpec",
    "ViewWindow",
    "Weekday",
]
