"""Human-readable formatting of millisecond durations."""


def format_duration(milliseconds: int | None) -> str:
    """Clock format, e.g. ``01:05:09``. Falsy or negative input gives ``00:00:00``."""
    if not milliseconds or milliseconds < 0:
        return "00:00:00"
    total_seconds = int(milliseconds) // 1000
    hours, rem = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rem, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_duration_compact(milliseconds: int | None) -> str:
    """Compact format: ``2h 15m``, ``4m 10s``, ``42s``.

    Zero-valued trailing units are dropped (``2h``, ``4m``).
    """
    if not milliseconds or milliseconds < 0:
        return "0s"
    total_seconds = int(milliseconds) // 1000
    hours, rem = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rem, 60)

    if hours > 0:
        return f"{hours}h {minutes}m" if minutes > 0 else f"{hours}h"
    if minutes > 0:
        return f"{minutes}m {seconds}s" if seconds > 0 else f"{minutes}m"
    return f"{seconds}s"


def format_duration_hours(milliseconds: int | None) -> str:
    """Decimal hours (``1.5h``), or rounded minutes below one hour (``45m``)."""
    if not milliseconds or milliseconds < 0:
        return "0h"
    hours = milliseconds / 3_600_000
    if hours < 1:
        return f"{round(hours * 60)}m"
    return f"{hours:.1f}h"
