"""Human-readable rendering of instance dates."""
from datetime import date, time


def format_display(day: date, at: time) -> str:
    """Render a date and time the way the en-US long locale format does.

    >>> format_display(date(2024, 1, 1), time(9, 0))
    'Monday, January 1, 2024 at 09:00 AM'
    """
    return f"{day:%A}, {day:%B} {day.day}, {day.year} at {at:%I:%M %p}"
