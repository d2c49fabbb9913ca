"""Shared fixtures for recurrence tests."""
from datetime import date

import pytest

from event_recurrence.models.recurrence import RecurrenceSpec, ViewWindow
from event_recurrence.services.recurrence_engine import RecurrenceEngine
from event_recurrence.utils.metrics import metrics_collector


@pytest.fixture(autouse=True)
def reset_metrics():
    """Every test starts with zeroed counters."""
    metrics_collector.reset()
    yield
    metrics_collector.reset()


@pytest.fixture
def engine() -> RecurrenceEngine:
    return RecurrenceEngine()


@pytest.fixture
def weekly_monday_spec() -> RecurrenceSpec:
    """Three Mondays starting Monday 2024-01-01 at 09:00."""
    return RecurrenceSpec.from_strings("2024-01-01", "09:00", "weekly", 1, 3)


@pytest.fixture
def early_january_window() -> ViewWindow:
    return ViewWindow(start=date(2024, 1, 5), end=date(2024, 1, 10))
