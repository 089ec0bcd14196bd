"""Tests for record (de)serialization in focus_vault.types."""

from datetime import timezone

from focus_vault.types import Identity, Project, TimeEntry

BROWSER_RECORD = {
    "id": "smalesker-001",
    "name": "SMALESKER",
    "email": "smalesker@focusvault.com",
    "password": "admin",
    "projects": [
        {"id": "1", "name": "Web Development", "description": "Building awesome web applications",
         "color": "gold", "createdAt": "2025-09-01T08:00:00.000Z", "totalTime": 90000},
    ],
    "timeEntries": [
        {"id": "lx1abc", "projectId": "1", "projectName": "Web Development", "task": "",
         "startTime": "2025-09-02T10:00:00.000Z", "endTime": "2025-09-02T10:01:30.000Z",
         "duration": 90000, "date": "Tue Sep 02 2025", "createdAt": "2025-09-02T10:01:30.000Z"},
    ],
    "createdAt": "2025-09-01T08:00:00.000Z",
}


class TestIdentityFromBrowserRecord:
    def test_parses_camel_case(self):
        identity = Identity.from_dict(BROWSER_RECORD)
        assert identity.find_project("1").total_time == 90_000
        entry = identity.time_entries[0]
        assert entry.project_id == "1"
        assert entry.duration == 90_000
        assert entry.start_time.tzinfo is not None
        assert entry.start_time.astimezone(timezone.utc).hour == 10

    def test_round_trip_keeps_keys(self):
        data = Identity.from_dict(BROWSER_RECORD).to_dict()
        assert set(data) == set(BROWSER_RECORD)
        assert set(data["timeEntries"][0]) == set(BROWSER_RECORD["timeEntries"][0])
        assert Identity.from_dict(data).time_entries == Identity.from_dict(BROWSER_RECORD).time_entries

    def test_malformed_children_skipped(self):
        record = dict(BROWSER_RECORD, projects=[{"name": "no id"}], timeEntries=[{"id": "x"}])
        identity = Identity.from_dict(record)
        assert identity.projects == []
        assert identity.time_entries == []


class TestDefaults:
    def test_project_defaults(self):
        project = Project.from_dict({"id": 7, "name": "P"})
        assert project.id == "7"
        assert project.color == "gold"
        assert project.total_time == 0

    def test_negative_duration_clamped(self):
        entry = TimeEntry.from_dict({
            "id": "e", "projectId": "1", "startTime": "2025-09-02T10:00:00Z", "duration": -10,
        })
        assert entry.duration == 0
        assert entry.end_time == entry.start_time
