"""Calendar-relative aggregation windows (today, week, month, total)."""

from datetime import date, datetime, time, timedelta
from enum import Enum

from focus_vault.types.entries import Window


def local_now() -> datetime:
    """Current instant as an aware datetime in the local timezone."""
    return datetime.now().astimezone()


def _local_midnight(day: date) -> datetime:
    """Start of a local calendar day, with that day's own UTC offset."""
    return datetime.combine(day, time.min).astimezone()


def window_range(
    window: Window, now: datetime | None = None
) -> tuple[datetime | None, datetime | None]:
    """Return the ``[start, end)`` bounds of a window containing ``now``.

    Bounds are aware datetimes in local time. ``Window.TOTAL`` is unbounded
    and returns ``(None, None)``. Weeks start on Sunday. Each bound is built
    from its own calendar date, so days next to a DST change are 23 or 25
    hours long.
    """
    # Naive values are interpreted as local time by astimezone()
    now = local_now() if now is None else now.astimezone()
    today = now.date()

    if window == Window.TODAY:
        return _local_midnight(today), _local_midnight(today + timedelta(days=1))
    if window == Window.WEEK:
        # weekday(): Monday == 0 ... Sunday == 6
        week_start = today - timedelta(days=(today.weekday() + 1) % 7)
        return _local_midnight(week_start), _local_midnight(week_start + timedelta(days=7))
    if window == Window.MONTH:
        month_start = today.replace(day=1)
        if month_start.month == 12:
            next_month = month_start.replace(year=month_start.year + 1, month=1)
        else:
            next_month = month_start.replace(month=month_start.month + 1)
        return _local_midnight(month_start), _local_midnight(next_month)
    return None, None


def in_window(
    instant: datetime,
    bounds: tuple[datetime | None, datetime | None],
) -> bool:
    """Check whether an instant falls inside ``[start, end)``."""
    start, end = bounds
    if start is not None and instant < start:
        return False
    if end is not None and instant >= end:
        return False
    return True


class DateGroup(str, Enum):
    TODAY = "Today"
    YESTERDAY = "Yesterday"
    THIS_WEEK = "This Week"
    THIS_MONTH = "This Month"
    OLDER = "Older"


def get_date_group(instant: datetime, now: datetime | None = None) -> DateGroup:
    """Classify an instant into a relative date group for list sections."""
    now = local_now() if now is None else now.astimezone()
    instant = instant.astimezone()

    today_start, _ = window_range(Window.TODAY, now)
    week_start, _ = window_range(Window.WEEK, now)
    month_start, _ = window_range(Window.MONTH, now)

    if instant >= today_start:
        return DateGroup.TODAY
    elif instant >= _local_midnight(now.date() - timedelta(days=1)):
        return DateGroup.YESTERDAY
    elif instant >= week_start:
        return DateGroup.THIS_WEEK
    elif instant >= month_start:
        return DateGroup.THIS_MONTH
    else:
        return DateGroup.OLDER
