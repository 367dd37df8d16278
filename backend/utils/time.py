"""Time-related utility functions."""

from datetime import date, datetime, time

MINUTES_PER_DAY = 24 * 60


def parse_time(time_str: str) -> time:
    """Parse an 'HH:MM' or 'HH:MM:SS' string into a time (seconds dropped)."""
    parts = time_str.strip().split(":")
    if len(parts) not in (2, 3):
        raise ValueError(f"Invalid time format '{time_str}', expected HH:MM")
    return time(int(parts[0]), int(parts[1]))


def time_to_minutes(time_str: str) -> int:
    t = parse_time(time_str)
    return t.hour * 60 + t.minute


def parse_date(date_str: str) -> date:
    """Parse an ISO 'YYYY-MM-DD' string."""
    return date.fromisoformat(date_str.strip()[:10])


def combine(date_str: str, time_str: str) -> datetime:
    """Naive datetime for a calendar date and time of day."""
    return datetime.combine(parse_date(date_str), parse_time(time_str))
