"""Recurring event instance generator."""
