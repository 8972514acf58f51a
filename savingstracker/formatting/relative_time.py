"""Mini README: Relative timestamp labels for the transaction feed.

``format_relative_time`` buckets the elapsed time between ``timestamp`` and
an explicit ``now`` into whole 24-hour days (not calendar days):

    0     -> "Today, 09:05 AM"
    1     -> "Yesterday, 09:05 AM"
    2-6   -> "Monday, 09:05 AM"
    other -> "Jan 5, 2024, 09:05 AM"

Month and weekday names are fixed English so output never depends on the
process locale.
"""

from __future__ import annotations

from datetime import datetime, timedelta

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_DAY = timedelta(days=1)


def elapsed_days(timestamp: datetime, now: datetime) -> int:
    """Whole days between the two instants, ignoring direction."""

    return abs(now - timestamp) // _DAY


def format_clock(timestamp: datetime) -> str:
    """Two-digit 12-hour time, e.g. ``09:05 PM``."""

    hour = timestamp.hour % 12 or 12
    meridiem = "AM" if timestamp.hour < 12 else "PM"
    return f"{hour:02d}:{timestamp.minute:02d} {meridiem}"


def format_relative_time(timestamp: datetime, now: datetime) -> str:
    """Label ``timestamp`` relative to ``now`` using elapsed whole days."""

    days = elapsed_days(timestamp, now)
    clock = format_clock(timestamp)
    if days == 0:
        return f"Today, {clock}"
    if days == 1:
        return f"Yesterday, {clock}"
    if days < 7:
        return f"{WEEKDAYS[timestamp.weekday()]}, {clock}"
    return f"{MONTHS[timestamp.month - 1]} {timestamp.day}, {timestamp.year}, {clock}"
