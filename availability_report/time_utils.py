"""
Shared datetime helpers and the report date window.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional, Tuple, Union

from .errors import InvalidTimestamp


DEFAULT_WINDOW_DAYS = 7
DATE_FORMAT = "%Y-%m-%d"
# Format of the "datetime" field written next to the rendered pages.
HUMAN_TIMESTAMP_FORMAT = "%d %b %Y, %H:%M:%S UTC"
PLACEHOLDER = ""


def ensure_utc(dt: datetime) -> datetime:
    """Return a timezone-aware UTC datetime."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_timestamp(value: str) -> Optional[datetime]:
    """Parse an ISO 8601 or human-formatted timestamp and normalize it to UTC."""
    if not value or not isinstance(value, str):
        return None
    value = value.strip()
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        try:
            parsed = datetime.strptime(value, HUMAN_TIMESTAMP_FORMAT)
        except ValueError:
            return None
    return ensure_utc(parsed)


def build_date_window(
    anchor: Union[str, datetime],
    days: int = DEFAULT_WINDOW_DAYS,
) -> Tuple[str, ...]:
    """Build the descending list of calendar dates ending at the anchor.

    Args:
        anchor: Anchor timestamp, either a string or a datetime
        days: Number of dates in the window

    Returns:
        Tuple of ``YYYY-MM-DD`` strings, the anchor's UTC date first

    Raises:
        InvalidTimestamp: If the anchor cannot be parsed or the window
            runs out of the supported date range
    """
    if days < 1:
        raise ValueError(f"Window must span at least one day, got {days}")

    if isinstance(anchor, datetime):
        anchor_dt = ensure_utc(anchor)
    else:
        anchor_dt = parse_timestamp(anchor)
        if anchor_dt is None:
            raise InvalidTimestamp(anchor)

    anchor_date = anchor_dt.date()
    try:
        anchor_date - timedelta(days=days - 1)
    except OverflowError as e:
        raise InvalidTimestamp(anchor, f"{days}-day window reaches before year 1") from e

    return tuple(
        (anchor_date - timedelta(days=offset)).strftime(DATE_FORMAT)
        for offset in range(days)
    )


def with_placeholder(window: Iterable[str]) -> Tuple[str, ...]:
    """Prepend the empty "no date" column used by renderers."""
    return (PLACEHOLDER, *window)


def real_dates(window: Iterable[str]) -> Tuple[str, ...]:
    return tuple(date for date in window if date)
