"""Time entry records and aggregation results."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from focus_vault.utils.timestamps import local_day, parse_iso, to_iso


class Window(str, Enum):
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    TOTAL = "total"


@dataclass(frozen=True)
class TimeEntry:
    """One completed session. Immutable once created."""

    id: str
    project_id: str
    project_name: str  # Snapshot at creation; not updated on rename
    start_time: datetime
    end_time: datetime
    duration: int  # ms
    task: str = ""
    date: str = ""  # Local calendar day of start_time
    created_at: datetime | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "projectId": self.project_id,
            "projectName": self.project_name,
            "task": self.task,
            "startTime": to_iso(self.start_time),
            "endTime": to_iso(self.end_time),
            "duration": self.duration,
            "date": self.date,
            "createdAt": to_iso(self.created_at or self.end_time),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "TimeEntry":
        start = parse_iso(d["startTime"])
        end = parse_iso(d["endTime"]) if d.get("endTime") else start
        created = d.get("createdAt")
        return cls(
            id=str(d["id"]),
            project_id=str(d["projectId"]),
            project_name=d.get("projectName", ""),
            task=d.get("task") or "",
            start_time=start,
            end_time=end,
            duration=max(0, int(d.get("duration") or 0)),
            date=d.get("date") or local_day(start),
            created_at=parse_iso(created) if created else None,
        )


@dataclass(frozen=True)
class WindowStats:
    duration_ms: int = 0
    session_count: int = 0
    project_count: int = 0

    def to_dict(self) -> dict:
        return {
            "duration": self.duration_ms,
            "sessionCount": self.session_count,
            "projectCount": self.project_count,
        }
