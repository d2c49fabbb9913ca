"""
Recurrence Engine.

Expands a recurrence rule into dated instances and classifies each instance
against a date-inclusive viewing window.
"""

from datetime import datetime, time, timedelta
from typing import Iterable, List, Optional

from ..config import MAX_OCCURRENCES
from ..models.recurrence import (
    Instance,
    InvalidInputError,
    RecurrencePattern,
    RecurrenceSpec,
    ViewWindow,
    Weekday,
)
from ..utils.logger import get_logger
from ..utils.metrics import metrics_collector
from .recurrence_validator import RecurrenceValidator

logger = get_logger("recurrence-engine")

END_OF_DAY = time(23, 59, 59)


class RecurrenceEngine:
    """Stateless generator of recurring event instances."""

    def __init__(self, max_occurrences: int = MAX_OCCURRENCES):
        self.max_occurrences = max_occurrences

    @metrics_collector.time_operation("generate_seconds")
    def generate(self, spec: RecurrenceSpec, window: Optional[ViewWindow] = None) -> List[Instance]:
        """
        Generate the instances of a recurrence rule.

        Args:
            spec: Recurrence rule
            window: Window used to tag each instance; None means unconstrained

        Returns:
            Instances in ascending chronological order, empty when the rule
            has no start date yet
        """
        if spec.start_date is None:
            return []

        window = window or ViewWindow()
        count = RecurrenceValidator.clamp_count(spec.count, self.max_occurrences)
        if count != spec.count:
            logger.warning("Occurrence count clamped", requested=spec.count, used=count)

        if spec.pattern == RecurrencePattern.WEEKLY:
            if spec.weekday is None:
                raise InvalidInputError("Weekly recurrence requires a weekday")
            first = self.align_to_weekday(spec.start_date, spec.weekday)
            stride = timedelta(weeks=1)
        else:
            first = spec.start_date
            stride = timedelta(days=1)

        instances = []
        try:
            for i in range(count):
                day = first + stride * i
                instances.append(Instance(
                    date=day,
                    time=spec.start_time,
                    in_window=self.is_in_window(datetime.combine(day, spec.start_time), window),
                ))
        except OverflowError:
            raise InvalidInputError(
                f"{count} {spec.pattern.value} occurrences from {first} run beyond the supported calendar range"
            )

        logger.debug(
            "Generated instances",
            pattern=spec.pattern.value,
            first=first,
            count=count,
        )
        return instances

    @staticmethod
    def align_to_weekday(start, weekday: Weekday):
        """Move ``start`` forward, never backward, to the first date on ``weekday``."""
        day = start
        try:
            while Weekday.of(day) != weekday:
                day += timedelta(days=1)
        except OverflowError:
            raise InvalidInputError(f"No {weekday.name.title()} on or after {start} within the supported calendar range")
        return day

    @staticmethod
    def is_in_window(instant: datetime, window: ViewWindow) -> bool:
        """
        Check whether an instant falls inside a viewing window.

        The window covers its start day from 00:00:00 through its end day at
        23:59:59. An inverted window matches nothing.
        """
        if not window.is_constrained:
            return True

        window_start = datetime.combine(window.start, time.min)
        window_end = datetime.combine(window.end, END_OF_DAY)
        return window_start <= instant <= window_end

    def filter_by_window(self, instances: Iterable[Instance], window: ViewWindow) -> List[Instance]:
        """Re-tag every instance against ``window``, keeping the full list."""
        return [
            instance.model_copy(update={"in_window": self.is_in_window(instance.starts_at, window)})
            for instance in instances
        ]

    def select_in_window(self, instances: Iterable[Instance], window: ViewWindow) -> List[Instance]:
        """Only the instances that fall inside ``window``."""
        return [i for i in self.filter_by_window(instances, window) if i.in_window]

    @staticmethod
    def count_in_window(instances: Iterable[Instance]) -> int:
        return sum(1 for instance in instances if instance.in_window)
