"""Project records."""

from dataclasses import dataclass
from datetime import datetime

from focus_vault.utils.timestamps import parse_iso, to_iso, utc_now


@dataclass
class Project:
    id: str
    name: str
    description: str = ""
    color: str = "gold"
    created_at: datetime | None = None
    total_time: int = 0  # ms; cache of the sum of this project's entry durations

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "color": self.color,
            "createdAt": to_iso(self.created_at or utc_now()),
            "totalTime": self.total_time,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Project":
        created = d.get("createdAt")
        return cls(
            id=str(d["id"]),
            name=d["name"],
            description=d.get("description") or "",
            color=d.get("color") or "gold",
            created_at=parse_iso(created) if created else None,
            total_time=max(0, int(d.get("totalTime") or 0)),
        )
