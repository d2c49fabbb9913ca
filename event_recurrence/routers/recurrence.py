"""Recurrence router: instance generation and window refiltering."""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import Dict, Any, List, Optional

from ..models.recurrence import Instance, InvalidInputError, RecurrenceSpec, ViewWindow, parse_date, parse_time
from ..schemas.recurrence import (
    FilterRequest,
    GenerateRequest,
    InstanceListResponse,
    InstanceResponse,
    ViewWindowIn,
)
from ..services.recurrence_engine import RecurrenceEngine
from ..services.recurrence_validator import RecurrenceValidator
from ..utils.logger import get_logger
from ..utils.metrics import metrics_collector

router = APIRouter(prefix="/recurrence", tags=["Recurrence"])

logger = get_logger("recurrence-api")


def get_recurrence_engine() -> RecurrenceEngine:
    """Dependency for getting RecurrenceEngine instance."""
    return RecurrenceEngine()


def _bad_request(detail: str) -> HTTPException:
    metrics_collector.invalid_request()
    logger.warning("Rejected recurrence request", detail=detail)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def _parse_window(window_in: Optional[ViewWindowIn]) -> ViewWindow:
    if window_in is None:
        return ViewWindow()
    return ViewWindow.from_strings(window_in.from_date, window_in.to_date)


def _to_response(instances: List[Instance], warnings: List[str]) -> InstanceListResponse:
    return InstanceListResponse(
        instances=[
            InstanceResponse(
                date=i.date.isoformat(),
                time=i.time.strftime("%H:%M"),
                display=i.display,
                in_window=i.in_window,
            )
            for i in instances
        ],
        count=len(instances),
        in_window_count=RecurrenceEngine.count_in_window(instances),
        warnings=warnings,
    )


@router.post("/instances", response_model=InstanceListResponse)
async def generate_instances(
    request: GenerateRequest,
    engine: RecurrenceEngine = Depends(get_recurrence_engine),
):
    """Generate the instances of a recurrence rule, tagged against an optional window."""
    pattern_validation = RecurrenceValidator.validate_recurrence_pattern(request.recurrence, request.weekday)
    if not pattern_validation["valid"]:
        raise _bad_request(", ".join(pattern_validation["errors"]))

    count_validation = RecurrenceValidator.validate_count(request.count, engine.max_occurrences)

    try:
        spec = RecurrenceSpec.from_strings(
            start_date=request.start_date,
            start_time=request.start_time,
            pattern=request.recurrence,
            weekday=request.weekday,
            count=request.count,
        )
        window = _parse_window(request.window)
        instances = engine.generate(spec, window)
    except InvalidInputError as e:
        raise _bad_request(str(e))

    window_validation = RecurrenceValidator.validate_view_window(window.start, window.end)
    warnings = pattern_validation["warnings"] + count_validation["warnings"] + window_validation["warnings"]

    if instances:
        metrics_collector.instances_generated(len(instances))

    return _to_response(instances, warnings)


@router.post("/filter", response_model=InstanceListResponse)
async def filter_instances(
    request: FilterRequest,
    engine: RecurrenceEngine = Depends(get_recurrence_engine),
):
    """Re-tag previously generated instances against a new window; dates and times are unchanged."""
    try:
        window = _parse_window(request.window)
        instances = []
        for item in request.instances:
            day = parse_date(item.date, "instance date")
            at = parse_time(item.time, "instance time")
            if day is None or at is None:
                raise InvalidInputError("Every instance requires a date and a time")
            instances.append(Instance(date=day, time=at))
    except InvalidInputError as e:
        raise _bad_request(str(e))

    refiltered = engine.filter_by_window(instances, window)
    metrics_collector.window_refiltered()

    window_validation = RecurrenceValidator.validate_view_window(window.start, window.end)
    return _to_response(refiltered, window_validation["warnings"])


@router.get("/metrics", response_model=Dict[str, Any])
async def get_metrics():
    """Current generation counters and timers."""
    return metrics_collector.get_metrics()
