from __future__ import annotations

from datetime import date, datetime, timezone


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 timestamp as written to storage.

    A trailing "Z" (browser ``Date.toJSON``) is accepted and converted to local time.
    """
    if value.endswith("Z"):
        return datetime.fromisoformat(value[:-1] + "+00:00").astimezone().replace(tzinfo=None)
    return datetime.fromisoformat(value)


def hour_key(moment: datetime) -> str:
    """Bucket label for hourly grouping, e.g. 9 -> "9:00"."""
    return f"{moment.hour}:00"


def format_timestamp(moment: datetime) -> str:
    """Locale-style display time, e.g. "10/19/2026, 2:05:09 PM"."""
    hour12 = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{moment.month}/{moment.day}/{moment.year}, {hour12}:{moment.minute:02d}:{moment.second:02d} {suffix}"


def export_date_stamp(day: date) -> str:
    return day.strftime("%Y-%m-%d")


def utc_today() -> date:
    """Current UTC date, used to stamp export filenames."""
    return datetime.now(timezone.utc).date()
