"""Recurrence request and response schemas."""
from pydantic import BaseModel, Field
from typing import Optional, List


class ViewWindowIn(BaseModel):
    """Viewing window; blank or missing bounds leave it unconstrained."""
    from_date: Optional[str] = Field(None, alias="from")  # ISO date string
    to_date: Optional[str] = Field(None, alias="to")  # ISO date string

    class Config:
        populate_by_name = True


class GenerateRequest(BaseModel):
    """Schema for generating instances of a recurring event."""
    start_date: Optional[str] = Field(None)  # ISO date string, blank means nothing to generate
    start_time: Optional[str] = Field("09:00")  # HH:MM
    recurrence: str = Field("weekly", pattern=r"^(daily|weekly)$")  # Recurrence pattern
    weekday: Optional[int] = Field(None, ge=0, le=6)  # 0=Sunday..6=Saturday, weekly only
    count: int = Field(10)  # Clamped to [1, MAX_OCCURRENCES]
    window: Optional[ViewWindowIn] = None


class InstanceIn(BaseModel):
    """A previously generated instance sent back for refiltering."""
    date: str
    time: str
    in_window: Optional[bool] = None


class FilterRequest(BaseModel):
    """Schema for re-tagging existing instances against a new window."""
    instances: List[InstanceIn] = Field(default_factory=list)
    window: Optional[ViewWindowIn] = None


class InstanceResponse(BaseModel):
    """Schema for a generated instance."""
    date: str
    time: str
    display: str
    in_window: bool


class InstanceListResponse(BaseModel):
    """Schema for instance list responses."""
    instances: List[InstanceResponse]
    count: int
    in_window_count: int
    warnings: List[str] = []
