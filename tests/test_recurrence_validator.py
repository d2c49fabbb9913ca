"""Tests for RecurrenceValidator."""
from datetime import date

import pytest

from event_recurrence.services.recurrence_validator import RecurrenceValidator


class TestValidateRecurrencePattern:

    def test_weekly_with_weekday(self):
        result = RecurrenceValidator.validate_recurrence_pattern("weekly", 3)

        assert result == {"valid": True, "errors": [], "warnings": []}

    def test_weekly_requires_weekday(self):
        result = RecurrenceValidator.validate_recurrence_pattern("weekly")

        assert not result["valid"]
        assert "requires a weekday" in result["errors"][0]

    @pytest.mark.parametrize("weekday", [7, -1])
    def test_weekday_range(self, weekday):
        assert not RecurrenceValidator.validate_recurrence_pattern("weekly", weekday)["valid"]

    def test_daily_weekday_is_warning(self):
        result = RecurrenceValidator.validate_recurrence_pattern("daily", 2)

        assert result["valid"]
        assert result["warnings"] == ["Weekday is ignored for daily recurrence"]

    @pytest.mark.parametrize("recurrence", ["monthly", "custom", ""])
    def test_unsupported_recurrence(self, recurrence):
        assert not RecurrenceValidator.validate_recurrence_pattern(recurrence, 1)["valid"]


class TestCount:

    @pytest.mark.parametrize("count,expected", [(-5, 1), (0, 1), (1, 1), (100, 100), (366, 366), (1000, 366)])
    def test_clamp_count(self, count, expected):
        assert RecurrenceValidator.clamp_count(count, 366) == expected

    def test_in_range_has_no_warnings(self):
        assert RecurrenceValidator.validate_count(10, 366)["warnings"] == []

    def test_out_of_range_warns(self):
        assert RecurrenceValidator.validate_count(0, 366)["warnings"]
        assert RecurrenceValidator.validate_count(400, 366)["warnings"]
        assert RecurrenceValidator.validate_count(400, 366)["valid"]


class TestViewWindow:

    def test_inverted_window_warns_but_is_valid(self):
        result = RecurrenceValidator.validate_view_window(date(2024, 1, 10), date(2024, 1, 5))

        assert result["valid"]
        assert len(result["warnings"]) == 1

    def test_open_window(self):
        assert RecurrenceValidator.validate_view_window(None, date(2024, 1, 5))["warnings"] == []
