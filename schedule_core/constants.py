"""
Shared constants used by the schedule view.
"""

# Weekday codes in calendar order, Sunday first (matches the stored column)
WEEKDAYS = ["sun", "mon", "tue", "wed", "thu", "fri", "sat"]

WEEKDAY_LABELS = {
    "sun": "Sunday",
    "mon": "Monday",
    "tue": "Tuesday",
    "wed": "Wednesday",
    "thu": "Thursday",
    "fri": "Friday",
    "sat": "Saturday",
}

# Target timezones shown on every meeting card: (IANA id, label)
DISPLAY_ZONES = [
    ("Asia/Jerusalem", "Israel"),
    ("America/New_York", "New York"),
    ("Europe/London", "London"),
    ("Asia/Seoul", "Seoul"),
]

# Shown in place of a time that could not be formatted
TIME_PLACEHOLDER = "—"

# Zones offered by the admin meeting editor's timezone picker
TIMEZONES = [
    # Middle East
    "Asia/Jerusalem",
    "Asia/Dubai",
    # Americas
    "America/New_York",
    "America/Chicago",
    "America/Denver",
    "America/Los_Angeles",
    "America/Toronto",
    "America/Sao_Paulo",
    # Europe
    "Europe/London",
    "Europe/Paris",
    "Europe/Berlin",
    "Europe/Amsterdam",
    # Asia
    "Asia/Tokyo",
    "Asia/Seoul",
    "Asia/Shanghai",
    "Asia/Singapore",
    "Asia/Kolkata",
    # Pacific
    "Australia/Sydney",
    "Pacific/Auckland",
    # UTC
    "UTC",
]
