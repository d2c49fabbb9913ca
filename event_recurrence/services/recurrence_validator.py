"""Recurrence Validator."""
from typing import Dict, Any, Optional

from ..config import MAX_OCCURRENCES


class RecurrenceValidator:
    """Validate recurrence rules and viewing windows."""

    @staticmethod
    def validate_recurrence_pattern(recurrence: str, weekday: Optional[int] = None) -> Dict[str, Any]:
        """
        Validate recurrence pattern and weekday.

        Args:
            recurrence: Recurrence type (daily, weekly)
            weekday: Day of week for weekly recurrence, 0 (Sunday) to 6 (Saturday)

        Returns:
            Dict with validation result
        """
        result = {
            "valid": True,
            "errors": [],
            "warnings": []
        }

        if recurrence not in ["daily", "weekly"]:
            result["valid"] = False
            result["errors"].append(f"Recurrence must be one of: daily, weekly, got: {recurrence}")
            return result

        if recurrence == "weekly":
            if weekday is None:
                result["valid"] = False
                result["errors"].append("Weekly recurrence requires a weekday")
                return result

            if not isinstance(weekday, int) or not 0 <= weekday <= 6:
                result["valid"] = False
                result["errors"].append(f"Weekday must be 0 (Sunday) to 6 (Saturday), got: {weekday}")
                return result
        elif weekday is not None:
            result["warnings"].append("Weekday is ignored for daily recurrence")

        return result

    @staticmethod
    def validate_count(count: int, maximum: int = MAX_OCCURRENCES) -> Dict[str, Any]:
        """
        Validate the number of occurrences.

        Counts outside [1, maximum] are not rejected; they are clamped and
        reported as warnings.
        """
        result = {
            "valid": True,
            "errors": [],
            "warnings": []
        }

        if count < 1:
            result["warnings"].append(f"Occurrence count {count} is below 1, using 1")
        elif count > maximum:
            result["warnings"].append(f"Occurrence count {count} exceeds maximum of {maximum}, using {maximum}")

        return result

    @staticmethod
    def validate_view_window(start, end) -> Dict[str, Any]:
        """
        Validate a viewing window.

        An inverted window is allowed; it simply matches no instance.
        """
        result = {
            "valid": True,
            "errors": [],
            "warnings": []
        }

        if start is None or end is None:
            return result

        if start > end:
            result["warnings"].append(f"View window start {start} is after end {end}; no instance will match")

        return result

    @staticmethod
    def clamp_count(count: int, maximum: int = MAX_OCCURRENCES) -> int:
        """Clamp an occurrence count into [1, maximum]."""
        return max(1, min(count, maximum))
