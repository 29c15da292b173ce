"""ISO-8601 helpers shared by the store and the insights engine."""

from datetime import UTC, date, datetime, timedelta

WEEK_LENGTH = timedelta(days=7)


def parse_instant(value: str | None) -> datetime | None:
    """
    Parse an ISO-8601 instant into an aware UTC datetime.

    Naive values are read as UTC. Returns None for anything unparseable
    instead of raising; callers decide how to report it.
    """
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def week_window(start_iso: str) -> tuple[datetime, datetime]:
    """Half-open [start, start + 7 days) window, start at UTC midnight of the week date."""
    start_day = date.fromisoformat(start_iso[:10])
    start = datetime(start_day.year, start_day.month, start_day.day, tzinfo=UTC)
    return start, start + WEEK_LENGTH


def utc_now_iso() -> str:
    """Current instant as ISO-8601 with millisecond precision and a Z suffix."""
    return datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"
