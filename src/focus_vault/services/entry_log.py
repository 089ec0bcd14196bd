"""Entry log operations and window aggregation.

All functions are pure over the entry list they receive: nothing is cached
between calls, so a deletion is reflected by the very next aggregation.
"""

from collections import defaultdict
from datetime import datetime
from typing import Iterable

from focus_vault.types import Project, TimeEntry, Window, WindowStats
from focus_vault.utils.date_windows import in_window, window_range

DEFAULT_RECENT_LIMIT = 10


def append_entry(entries: list[TimeEntry], entry: TimeEntry) -> None:
    """Append without dedup or ordering."""
    entries.append(entry)


def window_stats(
    entries: Iterable[TimeEntry],
    window: Window | str,
    now: datetime | None = None,
) -> WindowStats:
    """Sum durations, count sessions and distinct projects inside a window."""
    bounds = window_range(Window(window), now=now)

    duration = 0
    sessions = 0
    project_ids: set[str] = set()
    for entry in entries:
        if not in_window(entry.start_time, bounds):
            continue
        duration += entry.duration
        sessions += 1
        project_ids.add(entry.project_id)

    return WindowStats(
        duration_ms=duration,
        session_count=sessions,
        project_count=len(project_ids),
    )


def recent_entries(
    entries: Iterable[TimeEntry], limit: int = DEFAULT_RECENT_LIMIT
) -> list[TimeEntry]:
    """Newest-first by start time, truncated to ``limit``. Does not mutate input."""
    ordered = sorted(entries, key=lambda e: e.start_time, reverse=True)
    if limit < 0:
        return ordered
    return ordered[:limit]


def remove_project_entries(entries: Iterable[TimeEntry], project_id: str) -> list[TimeEntry]:
    """Return the entries that do not belong to ``project_id``."""
    return [e for e in entries if e.project_id != project_id]


def project_durations(entries: Iterable[TimeEntry]) -> dict[str, int]:
    """Total logged milliseconds per project id."""
    totals: dict[str, int] = defaultdict(int)
    for entry in entries:
        totals[entry.project_id] += entry.duration
    return dict(totals)


def recompute_project_totals(projects: Iterable[Project], entries: Iterable[TimeEntry]) -> int:
    """Rebuild each project's total_time cache from the log.

    Returns the number of projects whose cached total was wrong.
    """
    totals = project_durations(entries)
    fixed = 0
    for project in projects:
        expected = totals.get(project.id, 0)
        if project.total_time != expected:
            project.total_time = expected
            fixed += 1
    return fixed
