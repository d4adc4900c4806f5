"""Month bucketing helpers shared by the ledger and valuation services."""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from src.domain.constants import DEFAULT_TIMEZONE
from src.domain.models.months import MonthKey


def month_key_for(
    value: date | datetime,
    tz: ZoneInfo | str = DEFAULT_TIMEZONE,
) -> MonthKey:
    """Return the calendar month a stored date falls into.

    Plain dates are taken as calendar dates. Datetimes are converted to the
    reference zone first; naive datetimes are read as UTC, which is how the
    database hands back timestamps.

    Args:
        value: Date or datetime read from storage.
        tz: Reference timezone (instance or IANA name).

    Returns:
        MonthKey: Month in the reference zone.
    """
    if isinstance(value, datetime):
        zone = ZoneInfo(tz) if isinstance(tz, str) else tz
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        local = value.astimezone(zone)
        return MonthKey(local.year, local.month)
    return MonthKey(value.year, value.month)


def current_month(
    tz: ZoneInfo | str = DEFAULT_TIMEZONE,
    now: datetime | None = None,
) -> MonthKey:
    """Return the current month in the reference zone."""
    zone = ZoneInfo(tz) if isinstance(tz, str) else tz
    moment = now or datetime.now(zone)
    return month_key_for(moment, zone)


def rolling_month_window(
    anchor: MonthKey,
    size: int,
    *,
    ending: bool = True,
) -> list[MonthKey]:
    """Return ``size`` consecutive months in chronological order.

    Args:
        anchor: Month the window ends at (or starts from).
        size: Number of months; must be positive.
        ending: When True the anchor is the last month, else the first.

    Returns:
        list[MonthKey]: Consecutive months, anchor included.
    """
    if size <= 0:
        raise ValueError(f"Window size must be positive: {size}")
    first = anchor.shift(-(size - 1)) if ending else anchor
    return [first.shift(offset) for offset in range(size)]


def window_bounds(window: list[MonthKey]) -> tuple[date, date]:
    """Return the [start, end) date range covering a month window."""
    if not window:
        raise ValueError("Window must contain at least one month")
    return window[0].start_date, window[-1].next().start_date


__all__ = [
    "month_key_for",
    "current_month",
    "rolling_month_window",
    "window_bounds",
]
