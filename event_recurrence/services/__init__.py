"""Recurrence services."""
from .recurrence_engine import RecurrenceEngine
from .recurrence_validator import RecurrenceValidator
from .generator_session import GeneratorSession

__all__ = ["RecurrenceEngine", "RecurrenceValidator", "GeneratorSession"]
