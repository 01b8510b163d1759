"""
Course schedule business logic - framework-agnostic.
Can be used by the web API or any other interface.
"""

# Constants
from .constants import WEEKDAYS, WEEKDAY_LABELS, DISPLAY_ZONES, TIMEZONES

# Timezone conversion
from .timezone import (
    TimeFormattingError, InvalidInputError, UnknownTimezoneError,
    ZoneResolver, PytzResolver,
    weekday_index, parse_wall_time, reference_date,
    meeting_utc_instant, format_time_in_zone,
)

# Schedule view model
from .schedule import (
    DisplayZone, CourseMeeting, ZoneTime, MeetingCard,
    build_meeting_card, build_course_schedule,
)

__all__ = [
    # Constants
    'WEEKDAYS', 'WEEKDAY_LABELS', 'DISPLAY_ZONES', 'TIMEZONES',
    # Timezone
    'TimeFormattingError', 'InvalidInputError', 'UnknownTimezoneError',
    'ZoneResolver', 'PytzResolver',
    'weekday_index', 'parse_wall_time', 'reference_date',
    'meeting_utc_instant', 'format_time_in_zone',
    # Schedule
    'DisplayZone', 'CourseMeeting', 'ZoneTime', 'MeetingCard',
    'build_meeting_card', 'build_course_schedule',
]
