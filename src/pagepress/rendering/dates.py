"""Date labels for rendered pages.

Relative labels follow the usual "fromNow" thresholds: anything under 45
seconds is "a few seconds", minutes up to 45, hours up to 22, days up to 26,
months up to 11, then years. Each unit is rounded half up before comparing.
"""

import math
from datetime import UTC, datetime, timedelta, tzinfo

# Average month length in days (400-year Gregorian cycle)
DAYS_PER_MONTH = 146097 / 4800


def _round(value: float) -> int:
    return math.floor(value + 0.5)


def _local(time: datetime, tz: tzinfo | None) -> datetime:
    return time.astimezone(tz or UTC)


def ordinal(day: int) -> str:
    """Format a day of the month with its English ordinal suffix."""
    if 10 <= day % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def month_label(time: datetime, tz: tzinfo | None = None) -> str:
    """Format a timestamp as "January 2024"."""
    return _local(time, tz).strftime("%B %Y")


def day_label(time: datetime, tz: tzinfo | None = None) -> str:
    """Format a timestamp as "March 3rd"."""
    local = _local(time, tz)
    return f"{local:%B} {ordinal(local.day)}"


def _humanize(seconds: float) -> str:
    secs = _round(seconds)
    minutes = _round(seconds / 60)
    hours = _round(seconds / 3600)
    days_exact = seconds / 86400
    days = _round(days_exact)
    months = _round(days_exact / DAYS_PER_MONTH)
    years = _round(days_exact / DAYS_PER_MONTH / 12)

    if secs < 45:
        return "a few seconds"
    if minutes <= 1:
        return "a minute"
    if minutes < 45:
        return f"{minutes} minutes"
    if hours <= 1:
        return "an hour"
    if hours < 22:
        return f"{hours} hours"
    if days <= 1:
        return "a day"
    if days < 26:
        return f"{days} days"
    if months <= 1:
        return "a month"
    if months < 11:
        return f"{months} months"
    if years <= 1:
        return "a year"
    return f"{years} years"


def time_ago(time: datetime, now: datetime) -> str:
    """Describe ``time`` relative to ``now``, e.g. "3 hours ago" or "in a minute"."""
    delta = (now - time).total_seconds()
    label = _humanize(abs(delta))
    if delta < 0:
        return f"in {label}"
    return f"{label} ago"


def is_recent(time: datetime, now: datetime, hours: int = 12) -> bool:
    """Check whether ``time`` falls strictly inside the last ``hours`` before ``now``."""
    return time > now - timedelta(hours=hours)
