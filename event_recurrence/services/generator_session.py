"""
Generator Session.

Holds the caller-side state around the recurrence engine: the rule being
edited, the viewing window, the last generated instances and the view of
them filtered to the window. Editing the rule never regenerates; changing
the window always refilters the existing instances.
"""

import calendar
from datetime import date
from typing import List, Optional

from .. import config
from ..models.recurrence import (
    Instance,
    RecurrenceSpec,
    ViewWindow,
    parse_count,
    parse_date,
    parse_pattern,
    parse_time,
    parse_weekday,
)
from ..utils.metrics import metrics_collector
from .recurrence_engine import RecurrenceEngine


def add_months(day: date, months: int) -> date:
    """Same day ``months`` later, clamped to the length of the target month."""
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1

    # Handle months with different number of days
    max_day = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, max_day))


class GeneratorSession:
    """Mutable form state driving a stateless RecurrenceEngine."""

    def __init__(self, engine: Optional[RecurrenceEngine] = None, today: Optional[date] = None):
        self.engine = engine or RecurrenceEngine()
        today = today or date.today()

        self.spec = RecurrenceSpec.from_strings(
            start_date=today.isoformat(),
            start_time=config.DEFAULT_EVENT_TIME,
            pattern=config.DEFAULT_RECURRENCE,
            weekday=config.DEFAULT_WEEKDAY,
            count=config.DEFAULT_OCCURRENCES,
        )
        self.window = ViewWindow(start=today, end=add_months(today, config.DEFAULT_WINDOW_MONTHS))

        self.instances: List[Instance] = []
        self.filtered_instances: List[Instance] = []

    def update_spec(self, **changes) -> RecurrenceSpec:
        """Change rule fields. Existing instances are left untouched until regenerate()."""
        unknown = set(changes) - set(RecurrenceSpec.model_fields)
        if unknown:
            raise TypeError(f"Unknown recurrence fields: {', '.join(sorted(unknown))}")

        if isinstance(changes.get("start_date"), str):
            changes["start_date"] = parse_date(changes["start_date"], "start date")
        if isinstance(changes.get("start_time"), str):
            changes["start_time"] = parse_time(changes["start_time"], "start time") or self.spec.start_time
        if "pattern" in changes:
            changes["pattern"] = parse_pattern(changes["pattern"])
        if "weekday" in changes:
            changes["weekday"] = parse_weekday(changes["weekday"])
        if "count" in changes:
            changes["count"] = parse_count(changes["count"])

        self.spec = self.spec.model_copy(update=changes)
        return self.spec

    def set_window(self, start, end) -> List[Instance]:
        """Change the viewing window and refilter the current instances.

        Bounds are dates or ``YYYY-MM-DD`` strings; None or a blank string
        leaves that side open.
        """
        if isinstance(start, str):
            start = parse_date(start, "window start")
        if isinstance(end, str):
            end = parse_date(end, "window end")
        self.window = ViewWindow(start=start, end=end)
        self._refilter()
        return self.filtered_instances

    def regenerate(self) -> List[Instance]:
        """Regenerate instances from the current rule; a rule without a start date is a no-op."""
        if self.spec.start_date is None:
            return self.instances

        self.instances = self.engine.generate(self.spec, self.window)
        metrics_collector.instances_generated(len(self.instances))
        self._refilter()
        return self.instances

    def _refilter(self):
        self.instances = self.engine.filter_by_window(self.instances, self.window)
        self.filtered_instances = [i for i in self.instances if i.in_window]
        metrics_collector.window_refiltered()

    def summary(self) -> str:
        return f"Showing {len(self.instances)} instances ({len(self.filtered_instances)} in view window)"
