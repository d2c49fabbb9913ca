"""Tests for GeneratorSession caller-side state."""
from datetime import date, time

import pytest

from event_recurrence.models.recurrence import InvalidInputError, RecurrencePattern, Weekday
from event_recurrence.services.generator_session import GeneratorSession, add_months
from event_recurrence.utils.metrics import metrics_collector


@pytest.fixture
def session() -> GeneratorSession:
    return GeneratorSession(today=date(2024, 1, 1))


@pytest.mark.parametrize("day,months,expected", [
    (date(2024, 1, 15), 1, date(2024, 2, 15)),
    (date(2024, 1, 31), 1, date(2024, 2, 29)),
    (date(2023, 1, 31), 1, date(2023, 2, 28)),
    (date(2024, 12, 10), 1, date(2025, 1, 10)),
    (date(2024, 11, 30), 3, date(2025, 2, 28)),
])
def test_add_months(day, months, expected):
    assert add_months(day, months) == expected


def test_defaults(session):
    assert session.spec.start_date == date(2024, 1, 1)
    assert session.spec.start_time == time(9, 0)
    assert session.spec.pattern == RecurrencePattern.WEEKLY
    assert session.spec.weekday == Weekday.MONDAY
    assert session.spec.count == 10
    assert (session.window.start, session.window.end) == (date(2024, 1, 1), date(2024, 2, 1))
    assert session.instances == []
    assert session.filtered_instances == []


def test_regenerate_fills_both_lists(session):
    session.regenerate()

    # Mondays from 2024-01-01; the window runs to 2024-02-01
    assert len(session.instances) == 10
    assert [i.date for i in session.filtered_instances] == [
        date(2024, 1, 1), date(2024, 1, 8), date(2024, 1, 15), date(2024, 1, 22), date(2024, 1, 29),
    ]
    assert session.summary() == "Showing 10 instances (5 in view window)"


def test_spec_change_does_not_regenerate(session):
    session.regenerate()
    before = list(session.instances)

    session.update_spec(pattern="daily", count=3, start_time="14:00")

    assert session.instances == before
    assert session.spec.pattern == RecurrencePattern.DAILY

    session.regenerate()
    assert [i.date for i in session.instances] == [date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 3)]
    assert all(i.time == time(14, 0) for i in session.instances)


def test_window_change_refilters(session):
    session.regenerate()

    filtered = session.set_window(date(2024, 1, 5), date(2024, 1, 10))

    assert [i.date for i in filtered] == [date(2024, 1, 8)]
    assert len(session.instances) == 10
    assert session.summary() == "Showing 10 instances (1 in view window)"


def test_clearing_window_shows_everything(session):
    session.regenerate()

    session.set_window(None, date(2024, 1, 10))

    assert len(session.filtered_instances) == 10


def test_blank_start_date_keeps_previous_instances(session):
    session.regenerate()
    before = list(session.instances)

    session.update_spec(start_date="")
    assert session.spec.start_date is None

    assert session.regenerate() == before


def test_update_spec_rejects_bad_values(session):
    with pytest.raises(InvalidInputError):
        session.update_spec(start_date="2024-02-31")
    with pytest.raises(TypeError):
        session.update_spec(interval=2)


def test_metrics_recorded(session):
    session.regenerate()
    session.set_window(date(2024, 1, 5), date(2024, 1, 10))

    counters = metrics_collector.get_metrics()["counters"]
    assert counters["generations_total"] == 1
    assert counters["instances_generated_total"] == 10
    assert counters["window_refilters_total"] == 2


def test_update_spec_non_numeric_count(session):
    with pytest.raises(InvalidInputError):
        session.update_spec(count="many")
    assert session.spec.count == 10


def test_set_window_accepts_strings(session):
    session.regenerate()

    filtered = session.set_window("2024-01-05", "2024-01-10")

    assert session.window.start == date(2024, 1, 5)
    assert [i.date for i in filtered] == [date(2024, 1, 8)]


def test_set_window_blank_string_is_open(session):
    session.regenerate()

    session.set_window("", "2024-01-10")

    assert session.window.start is None
    assert len(session.filtered_instances) == 10


def test_set_window_rejects_malformed_string(session):
    with pytest.raises(InvalidInputError):
        session.set_window("next week", None)
