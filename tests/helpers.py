"""Shared test helpers."""

from datetime import datetime, timedelta

from focus_vault.types import TimeEntry
from focus_vault.utils.timestamps import local_day


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs):
        self.current = self.current + timedelta(**kwargs)


class FailingStore:
    """KeyValueStore whose writes fail until ``healthy`` is set."""

    def __init__(self, inner, healthy: bool = False):
        self.inner = inner
        self.healthy = healthy
        self.write_attempts = 0

    def get(self, key):
        return self.inner.get(key)

    def set(self, key, value) -> bool:
        self.write_attempts += 1
        if not self.healthy:
            return False
        return self.inner.set(key, value)


def make_entry(entry_id: str, project_id: str, start: datetime, duration_ms: int,
               project_name: str = "", task: str = "") -> TimeEntry:
    return TimeEntry(
        id=entry_id,
        project_id=project_id,
        project_name=project_name or project_id,
        task=task,
        start_time=start,
        end_time=start + timedelta(milliseconds=duration_ms),
        duration=duration_ms,
        date=local_day(start),
        created_at=start,
    )
