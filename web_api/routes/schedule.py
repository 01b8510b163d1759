"""
Course schedule API routes.

Endpoints:
- GET /api/schedule/zones - Zones every meeting time is displayed in
- GET /api/schedule/timezones - Zones offered by the admin meeting editor
- GET /api/schedule/time - Format one meeting time in one zone
- POST /api/schedule/render - Build meeting cards for a course's meetings
"""

import logging
from datetime import datetime

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from schedule_core.config import get_display_zones
from schedule_core.constants import TIMEZONES
from schedule_core.schedule import DisplayZone, build_course_schedule
from schedule_core.timezone import (
    InvalidInputError,
    UnknownTimezoneError,
    format_time_in_zone,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/schedule", tags=["schedule"])


# --- Pydantic models ---


class DisplayZoneModel(BaseModel):
    """A display zone in a render request."""

    timezone: str
    label: str


class RenderScheduleRequest(BaseModel):
    """Request body for rendering a course schedule."""

    meetings: list[dict]
    zones: list[DisplayZoneModel] | None = None
    now: datetime | None = None


# --- Routes ---


@router.get("/zones")
async def list_display_zones():
    """Get the zones meeting times are shown in."""
    return {
        "zones": [
            {"timezone": tz_name, "label": label}
            for tz_name, label in get_display_zones()
        ]
    }


@router.get("/timezones")
async def list_timezones():
    """Get the timezones an admin can pick for a meeting."""
    return {"timezones": TIMEZONES}


@router.get("/time")
async def get_meeting_time(
    start_time: str = Query(..., description="Local start time, HH:MM"),
    source_tz: str = Query(..., description="Zone the start time is defined in"),
    target_tz: str = Query(..., description="Zone to display the time in"),
    weekday: str = Query(..., description="Weekday code, e.g. 'sat'"),
    now: datetime | None = Query(None, description="Override current date"),
):
    """Format a weekly meeting's start time in another timezone."""
    try:
        display = format_time_in_zone(
            start_time, source_tz, target_tz, weekday, now=now
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except UnknownTimezoneError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return {"time": display}


@router.post("/render")
async def render_schedule(request: RenderScheduleRequest):
    """
    Build the weekly schedule cards for a list of meeting rows.

    Zones that fail to format show a placeholder; malformed rows
    (missing weekday, time or timezone) reject the whole request.
    """
    zones = None
    if request.zones is not None:
        zones = [DisplayZone(z.timezone, z.label) for z in request.zones]

    try:
        cards = build_course_schedule(request.meetings, zones=zones, now=request.now)
    except InvalidInputError as e:
        logger.info(f"Rejected schedule render request: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return {"meetings": [card.to_dict() for card in cards]}
