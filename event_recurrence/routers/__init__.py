"""Routers package for the recurrence API."""

from .recurrence import router as recurrence_router

__all__ = ["recurrence_router"]
