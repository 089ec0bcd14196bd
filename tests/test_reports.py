"""Tests for focus_vault.services.reports."""

from datetime import timedelta

from focus_vault.services.reports import build_report, productivity_score, streak_days
from focus_vault.types import Project
from helpers import make_entry


class TestProductivityScore:
    def test_half_day(self):
        assert productivity_score(4 * 3_600_000, daily_target_hours=8) == 50

    def test_capped(self):
        assert productivity_score(20 * 3_600_000, daily_target_hours=8) == 100

    def test_zero_target(self):
        assert productivity_score(1_000, daily_target_hours=0) == 0


class TestStreak:
    def test_consecutive_days(self, now):
        entries = [make_entry(f"e{d}", "A", now - timedelta(days=d), 1) for d in (0, 1, 2, 4)]
        assert streak_days(entries, now=now) == 3

    def test_multiple_entries_same_day(self, now):
        entries = [make_entry(f"e{i}", "A", now - timedelta(minutes=i), 1) for i in range(5)]
        assert streak_days(entries, now=now) == 1

    def test_nothing_today(self, now):
        entries = [make_entry("y", "A", now - timedelta(days=1), 1)]
        assert streak_days(entries, now=now) == 0

    def test_empty(self, now):
        assert streak_days([], now=now) == 0


class TestBuildReport:
    def test_report(self, now):
        projects = [Project(id="A", name="Alpha"), Project(id="B", name="Beta")]
        entries = [
            make_entry("a", "A", now - timedelta(hours=1), 3_600_000),
            make_entry("b", "B", now - timedelta(days=5), 1_800_000),
        ]
        report = build_report(entries, projects, now=now, daily_target_hours=2)
        assert report.today.duration_ms == 3_600_000
        assert report.total.session_count == 2
        assert report.week.session_count == 1
        assert report.month.session_count == 2
        assert report.project_total == 2
        assert report.average_session_ms == 2_700_000
        assert report.productivity_score == 50
        assert report.streak_days == 1
        assert report.by_project == {"Alpha": 3_600_000, "Beta": 1_800_000}

    def test_empty_report(self, now):
        report = build_report([], [], now=now)
        data = report.to_dict()
        assert data["total"] == {"duration": 0, "sessionCount": 0, "projectCount": 0}
        assert data["averageSessionMs"] == 0
        assert data["streakDays"] == 0
