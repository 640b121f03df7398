"""
REST API for pairing schedules.
Thin wrappers around the scheduling, statistics and validation services.
"""
from __future__ import annotations

import logging
from typing import Any, Union

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from shiftpair.config import get_settings
from shiftpair.formatting import format_schedule
from shiftpair.models import Schedule, ScheduleMethod, schedule_from_lists
from shiftpair.services import (
    InvalidParticipantCount,
    PairingInfeasible,
    SearchLimitExceeded,
    compute_statistics,
    generate_schedule_with_method,
    validate_schedule,
)

logger = logging.getLogger(__name__)

_settings = get_settings()

# ---------- FastAPI app ----------
app = FastAPI(
    title="Shift Pairing API",
    description="Round-robin pairing schedules with fair byes",
    version="0.1.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(_settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------- Request/Response models ----------


class ScheduleResponse(BaseModel):
    schedule: dict[str, Any]
    stats: dict[str, Any]
    is_valid: bool
    issues: list[str]


class ScheduleTextResponse(BaseModel):
    participant_count: int
    method: str
    text: str


class ValidateRequest(BaseModel):
    participant_count: int = Field(..., ge=1)
    rounds: list[list[list[Union[int, str]]]]


# ---------- Helpers ----------


def _check_limit(participants: int, limit: int) -> None:
    if participants > limit:
        raise HTTPException(status_code=400, detail=f"participants must be at most {limit}")


def _build(participants: int, method: ScheduleMethod) -> Schedule:
    """Generate or map domain errors to HTTP errors."""
    settings = get_settings()
    _check_limit(participants, settings.max_participants)
    fair_limit = settings.max_fair_participants
    if method == ScheduleMethod.FAIR_BYE and participants % 2 == 1 and participants > fair_limit:
        raise HTTPException(
            status_code=400,
            detail=f"method=fair supports odd counts up to {fair_limit}; use method=circle for {participants}",
        )
    try:
        return generate_schedule_with_method(participants, method)
    except InvalidParticipantCount as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SearchLimitExceeded as e:
        logger.warning("Search limit hit for %d participants after %d steps", participants, e.steps)
        raise HTTPException(status_code=422, detail=str(e))
    except PairingInfeasible as e:
        raise HTTPException(status_code=422, detail=str(e))


# ---------- Routes ----------


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/schedules", response_model=ScheduleResponse)
def get_schedule(
    participants: int = Query(..., description="Number of participants"),
    method: ScheduleMethod = Query(ScheduleMethod.FAIR_BYE),
) -> ScheduleResponse:
    """Schedule plus statistics and validation verdict."""
    schedule = _build(participants, method)
    report = validate_schedule(schedule)
    return ScheduleResponse(
        schedule=schedule.to_dict(),
        stats=report.stats.to_dict(),
        is_valid=report.is_valid,
        issues=report.issues,
    )


@app.get("/schedules/text", response_model=ScheduleTextResponse)
def get_schedule_text(
    participants: int = Query(..., description="Number of participants"),
    method: ScheduleMethod = Query(ScheduleMethod.FAIR_BYE),
    names: list[str] | None = Query(None, description="Display names, one per participant"),
) -> ScheduleTextResponse:
    schedule = _build(participants, method)
    return ScheduleTextResponse(
        participant_count=schedule.participant_count,
        method=schedule.method.value,
        text=format_schedule(schedule, names),
    )


@app.get("/schedules/stats")
def get_schedule_stats(
    participants: int = Query(..., description="Number of participants"),
    method: ScheduleMethod = Query(ScheduleMethod.FAIR_BYE),
) -> dict[str, Any]:
    schedule = _build(participants, method)
    return compute_statistics(schedule).to_dict()


@app.post("/schedules/validate")
def post_validate(body: ValidateRequest) -> dict[str, Any]:
    """Validate an externally supplied schedule."""
    _check_limit(body.participant_count, get_settings().max_participants)
    try:
        schedule = schedule_from_lists(body.rounds, body.participant_count)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return validate_schedule(schedule).to_dict()
