"""Time and timezone utilities."""

from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

from dateutil.relativedelta import MO, relativedelta

UTC = ZoneInfo("UTC")


def to_utc(dt: datetime, tz: tzinfo) -> datetime:
    """Convert a datetime to UTC, treating naive values as local to tz."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz)
    return dt.astimezone(UTC)


def from_utc(dt: datetime, tz: tzinfo) -> datetime:
    """Convert a UTC datetime to the given timezone."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(tz)


def week_window(now: datetime, tz: tzinfo) -> tuple[datetime, datetime]:
    """Get the calendar week (Monday to Monday, local to tz) containing now.

    Returns:
        (start, end) as UTC datetimes, end exclusive
    """
    local_now = from_utc(now, tz)
    monday = local_now + relativedelta(weekday=MO(-1), hour=0, minute=0, second=0, microsecond=0)
    next_monday = monday + relativedelta(weeks=1)
    return to_utc(monday, tz), to_utc(next_monday, tz)


def format_relative_time(dt: datetime, now: datetime) -> str:
    """Format a datetime relative to now.

    Examples:
        "in 5 minutes"
        "in 2 hours"
        "tomorrow"
        "2 days ago"
    """
    delta = dt - now
    total_seconds = delta.total_seconds()

    if total_seconds < 0:
        abs_seconds = abs(total_seconds)
        if abs_seconds < 3600:
            minutes = int(abs_seconds / 60)
            return f"{minutes} minute{'s' if minutes != 1 else ''} ago"
        elif abs_seconds < 86400:
            hours = int(abs_seconds / 3600)
            return f"{hours} hour{'s' if hours != 1 else ''} ago"
        else:
            days = int(abs_seconds / 86400)
            return f"{days} day{'s' if days != 1 else ''} ago"
    else:
        if total_seconds < 3600:
            minutes = int(total_seconds / 60)
            return f"in {minutes} minute{'s' if minutes != 1 else ''}"
        elif total_seconds < 86400:
            hours = int(total_seconds / 3600)
            return f"in {hours} hour{'s' if hours != 1 else ''}"
        elif total_seconds < 172800:  # 2 days
            return "tomorrow"
        else:
            days = int(total_seconds / 86400)
            return f"in {days} days"
