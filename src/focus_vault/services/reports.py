"""Read-side summary built from the entry log."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Iterable

from focus_vault.services.entry_log import project_durations, window_stats
from focus_vault.types import Project, TimeEntry, Window, WindowStats
from focus_vault.utils.date_windows import local_now

DEFAULT_DAILY_TARGET_HOURS = 8


@dataclass
class Report:
    today: WindowStats
    week: WindowStats
    month: WindowStats
    total: WindowStats
    project_total: int = 0
    average_session_ms: int = 0
    productivity_score: int = 0  # 0..100, today's time against the daily target
    streak_days: int = 0
    by_project: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "today": self.today.to_dict(),
            "week": self.week.to_dict(),
            "month": self.month.to_dict(),
            "total": self.total.to_dict(),
            "projectTotal": self.project_total,
            "averageSessionMs": self.average_session_ms,
            "productivityScore": self.productivity_score,
            "streakDays": self.streak_days,
            "byProject": dict(self.by_project),
        }


def productivity_score(today_ms: int, daily_target_hours: float = DEFAULT_DAILY_TARGET_HOURS) -> int:
    if daily_target_hours <= 0:
        return 0
    target_ms = daily_target_hours * 3_600_000
    return min(100, round(today_ms / target_ms * 100))


def streak_days(entries: Iterable[TimeEntry], now: datetime | None = None) -> int:
    """Consecutive local days with at least one entry, ending today."""
    now = local_now() if now is None else now.astimezone()
    days = {e.start_time.astimezone().date() for e in entries}
    day = now.date()
    streak = 0
    while day in days:
        streak += 1
        day -= timedelta(days=1)
    return streak


def build_report(
    entries: list[TimeEntry],
    projects: list[Project],
    now: datetime | None = None,
    daily_target_hours: float = DEFAULT_DAILY_TARGET_HOURS,
) -> Report:
    today = window_stats(entries, Window.TODAY, now=now)
    total = window_stats(entries, Window.TOTAL, now=now)
    average = total.duration_ms // total.session_count if total.session_count else 0
    names = {p.id: p.name for p in projects}

    return Report(
        today=today,
        week=window_stats(entries, Window.WEEK, now=now),
        month=window_stats(entries, Window.MONTH, now=now),
        total=total,
        project_total=len(projects),
        average_session_ms=average,
        productivity_score=productivity_score(today.duration_ms, daily_target_hours),
        streak_days=streak_days(entries, now=now),
        by_project={
            names.get(pid, pid): ms for pid, ms in project_durations(entries).items()
        },
    )
