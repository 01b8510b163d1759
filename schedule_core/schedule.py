"""
Weekly schedule view model.

Turns course meeting rows into meeting cards, each listing the meeting's
start time in every display zone. A zone that cannot be formatted gets a
placeholder so one bad row never blocks the rest of the table.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Optional

import sentry_sdk

from .config import get_display_zones, get_placeholder
from .constants import WEEKDAY_LABELS
from .timezone import (
    InvalidInputError,
    TimeFormattingError,
    ZoneResolver,
    format_time_in_zone,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisplayZone:
    """A zone to show meeting times in."""
    timezone: str
    label: str


@dataclass
class CourseMeeting:
    """A recurring weekly meeting, as stored in the course_meetings table."""
    id: str
    weekday: str
    start_time_local: str  # "HH:MM" in `timezone`
    timezone: str
    label: str = ""
    course_id: Optional[str] = None
    duration_minutes: Optional[int] = None
    zoom_join_url: Optional[str] = None
    zoom_meeting_id: Optional[str] = None
    zoom_passcode: Optional[str] = None
    note: Optional[str] = None
    sort_order: int = 0

    @classmethod
    def from_row(cls, row: dict) -> "CourseMeeting":
        """
        Build a meeting from a database row.

        Raises:
            InvalidInputError: if a required column is missing or the
                duration is negative
        """
        missing = [
            key for key in ("id", "weekday", "start_time_local", "timezone")
            if row.get(key) in (None, "")
        ]
        if missing:
            raise InvalidInputError(f"Meeting row missing {', '.join(missing)}")

        try:
            duration = int(row.get("duration_minutes") or 0)
            sort_order = int(row.get("sort_order") or 0)
        except (TypeError, ValueError):
            raise InvalidInputError(
                f"Meeting {row['id']} has a non-numeric duration or sort order"
            ) from None
        if duration < 0:
            raise InvalidInputError(
                f"Meeting {row['id']} has a negative duration: {duration}"
            )

        return cls(
            id=str(row["id"]),
            weekday=row["weekday"],
            start_time_local=_normalize_start_time(row["start_time_local"]),
            timezone=row["timezone"],
            label=row.get("label") or "",
            course_id=str(row["course_id"]) if row.get("course_id") else None,
            duration_minutes=duration or None,
            zoom_join_url=row.get("zoom_join_url") or None,
            zoom_meeting_id=row.get("zoom_meeting_id") or None,
            zoom_passcode=row.get("zoom_passcode") or None,
            note=row.get("note") or None,
            sort_order=sort_order,
        )


@dataclass
class ZoneTime:
    """One row of a meeting card's timezone table."""
    label: str
    timezone: str
    time: str
    ok: bool = True


@dataclass
class MeetingCard:
    """Everything the schedule view shows for one meeting."""
    meeting_id: str
    heading: str
    zone_times: list = field(default_factory=list)  # list of ZoneTime
    duration_text: Optional[str] = None
    zoom_join_url: Optional[str] = None
    zoom_meeting_id: Optional[str] = None
    zoom_passcode: Optional[str] = None
    note: Optional[str] = None

    def to_dict(self) -> dict:
        """Serialize with camelCase keys for the frontend."""
        return {
            "meetingId": self.meeting_id,
            "heading": self.heading,
            "zoneTimes": [
                {"label": z.label, "timezone": z.timezone, "time": z.time, "ok": z.ok}
                for z in self.zone_times
            ],
            "durationText": self.duration_text,
            "zoomJoinUrl": self.zoom_join_url,
            "zoomMeetingId": self.zoom_meeting_id,
            "zoomPasscode": self.zoom_passcode,
            "note": self.note,
        }


def _normalize_start_time(value) -> str:
    """Accept "HH:MM", "HH:MM:SS" (SQL time column) or a time object."""
    if isinstance(value, time):
        return value.strftime("%H:%M")
    if isinstance(value, str) and value.count(":") == 2:
        return value.rsplit(":", 1)[0]
    return value


def meeting_heading(meeting: CourseMeeting) -> str:
    """Build "Saturday — Weekly Q&A" (unknown codes are shown as-is)."""
    day_label = WEEKDAY_LABELS.get(str(meeting.weekday).lower(), meeting.weekday)
    if not meeting.label:
        return day_label
    return f"{day_label} — {meeting.label}"


def format_zone_time(
    meeting: CourseMeeting,
    zone: DisplayZone,
    now: datetime | date,
    resolver: ZoneResolver | None = None,
    placeholder: str | None = None,
) -> ZoneTime:
    """
    Format one meeting in one zone, falling back to a placeholder on error.
    """
    try:
        display = format_time_in_zone(
            meeting.start_time_local,
            meeting.timezone,
            zone.timezone,
            meeting.weekday,
            now=now,
            resolver=resolver,
        )
    except TimeFormattingError as e:
        logger.warning(
            f"Could not format meeting {meeting.id} for {zone.timezone}: {e}"
        )
        sentry_sdk.capture_exception(e)
        return ZoneTime(
            label=zone.label,
            timezone=zone.timezone,
            time=placeholder if placeholder is not None else get_placeholder(),
            ok=False,
        )
    return ZoneTime(label=zone.label, timezone=zone.timezone, time=display)


def build_meeting_card(
    meeting: CourseMeeting,
    zones: list[DisplayZone],
    now: datetime | date,
    resolver: ZoneResolver | None = None,
    placeholder: str | None = None,
) -> MeetingCard:
    """Build the card for a single meeting."""
    return MeetingCard(
        meeting_id=meeting.id,
        heading=meeting_heading(meeting),
        zone_times=[
            format_zone_time(meeting, zone, now, resolver, placeholder)
            for zone in zones
        ],
        duration_text=(
            f"Duration: {meeting.duration_minutes} minutes"
            if meeting.duration_minutes
            else None
        ),
        zoom_join_url=meeting.zoom_join_url,
        zoom_meeting_id=meeting.zoom_meeting_id if meeting.zoom_join_url else None,
        zoom_passcode=meeting.zoom_passcode if meeting.zoom_join_url else None,
        note=meeting.note,
    )


def build_course_schedule(
    meetings: list,
    zones: list[DisplayZone] | None = None,
    now: datetime | date | None = None,
    resolver: ZoneResolver | None = None,
) -> list[MeetingCard]:
    """
    Build the weekly schedule for a course.

    Args:
        meetings: CourseMeeting objects or raw meeting rows
        zones: Zones to display (defaults to the configured display zones)
        now: Current date reference, shared by every cell of the table
        resolver: Timezone rules source (defaults to pytz)

    Returns:
        List of MeetingCard ordered by sort_order
    """
    if zones is None:
        zones = [DisplayZone(tz, label) for tz, label in get_display_zones()]
    if now is None:
        now = datetime.now()
    placeholder = get_placeholder()

    parsed = [
        m if isinstance(m, CourseMeeting) else CourseMeeting.from_row(m)
        for m in meetings
    ]
    parsed.sort(key=lambda m: m.sort_order)

    return [
        build_meeting_card(meeting, zones, now, resolver, placeholder)
        for meeting in parsed
    ]
