"""Coarse "how long ago" strings for timestamps."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

SECOND = timedelta(seconds=1)
MINUTE = timedelta(minutes=1)
HOUR = timedelta(hours=1)
DAY = timedelta(days=1)


def relative_age(elapsed: timedelta) -> str:
    """Describe an elapsed duration, counting whole units of the matching bucket.

    Negative durations (timestamps in the future) read as "just now".
    """
    if elapsed < SECOND:
        return "just now"
    if elapsed < 2 * SECOND:
        return "one second ago"
    if elapsed < MINUTE:
        return f"{elapsed // SECOND} seconds ago"
    if elapsed < 2 * MINUTE:
        return "one minute ago"
    if elapsed < HOUR:
        return f"{elapsed // MINUTE} minutes ago"
    if elapsed < 2 * HOUR:
        return "one hour ago"
    if elapsed < DAY:
        return f"{elapsed // HOUR} hours ago"
    if elapsed < 2 * DAY:
        return "one day ago"
    return f"{elapsed // DAY} days ago"


def relative_time(t: datetime, now: datetime | None = None) -> str:
    """Format ``t`` relative to ``now`` (default: the current UTC time).

    Naive datetimes are taken to be UTC.
    """
    if t.tzinfo is None:
        t = t.replace(tzinfo=UTC)
    if now is None:
        now = datetime.now(UTC)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    return relative_age(now - t)
