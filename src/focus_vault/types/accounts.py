"""Identity records: credential plus owned projects and entries."""

import logging
from dataclasses import dataclass, field
from datetime import datetime

from focus_vault.types.entries import TimeEntry
from focus_vault.types.projects import Project
from focus_vault.utils.timestamps import parse_iso, to_iso, utc_now

logger = logging.getLogger(__name__)


@dataclass
class Identity:
    id: str
    name: str
    email: str
    password: str
    projects: list[Project] = field(default_factory=list)
    time_entries: list[TimeEntry] = field(default_factory=list)
    created_at: datetime | None = None

    def find_project(self, project_id: str) -> Project | None:
        for p in self.projects:
            if p.id == project_id:
                return p
        return None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "password": self.password,
            "projects": [p.to_dict() for p in self.projects],
            "timeEntries": [e.to_dict() for e in self.time_entries],
            "createdAt": to_iso(self.created_at or utc_now()),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Identity":
        """Build an Identity, skipping malformed project/entry records."""
        projects = []
        for raw in d.get("projects") or []:
            try:
                projects.append(Project.from_dict(raw))
            except (KeyError, TypeError, ValueError):
                logger.warning("Skipping malformed project record for %s", d.get("email"))
        entries = []
        for raw in d.get("timeEntries") or []:
            try:
                entries.append(TimeEntry.from_dict(raw))
            except (KeyError, TypeError, ValueError):
                logger.warning("Skipping malformed time entry for %s", d.get("email"))

        created = d.get("createdAt")
        return cls(
            id=str(d["id"]),
            name=d.get("name", ""),
            email=d["email"],
            password=d.get("password", ""),
            projects=projects,
            time_entries=entries,
            created_at=parse_iso(created) if created else None,
        )
