"""Tests for focus_vault.models (ProjectModel, EntryModel)."""

from datetime import timedelta

from PySide6.QtCore import Qt

from focus_vault.models.entry_model import EntryModel
from focus_vault.models.project_model import ProjectModel
from focus_vault.types import Project
from helpers import make_entry


# ---------------------------------------------------------------------------
# ProjectModel
# ---------------------------------------------------------------------------

class TestProjectModel:
    def test_empty_model(self, qapp):
        model = ProjectModel()
        assert model.rowCount() == 0

    def test_data_roles(self, qapp):
        model = ProjectModel()
        model.set_projects([
            Project(id="p1", name="Writing", description="Blog", color="blue", total_time=5_400_000),
        ])
        idx = model.index(0, 0)
        assert model.data(idx, ProjectModel.ProjectIdRole) == "p1"
        assert model.data(idx, ProjectModel.ProjectNameRole) == "Writing"
        assert model.data(idx, ProjectModel.DescriptionRole) == "Blog"
        assert model.data(idx, ProjectModel.ColorRole) == "#3b82f6"
        assert model.data(idx, ProjectModel.TotalTimeRole) == 5_400_000
        assert model.data(idx, ProjectModel.TotalTextRole) == "1.5h"
        assert model.data(idx, Qt.DisplayRole) == "Writing"

    def test_get_project_id(self, qapp):
        model = ProjectModel()
        model.set_projects([Project(id="p1", name="a")])
        assert model.get_project_id(0) == "p1"
        assert model.get_project_id(99) == ""

    def test_set_projects_copies(self, qapp):
        projects = [Project(id="p1", name="a")]
        model = ProjectModel()
        model.set_projects(projects)
        projects.clear()
        assert model.rowCount() == 1


# ---------------------------------------------------------------------------
# EntryModel
# ---------------------------------------------------------------------------

class TestEntryModel:
    def test_empty_model(self, qapp):
        assert EntryModel().rowCount() == 0

    def test_data_roles(self, qapp, now):
        model = EntryModel()
        entry = make_entry("e1", "p1", now - timedelta(minutes=30), 250_000,
                           project_name="Writing", task="draft")
        model.set_entries([entry])
        idx = model.index(0, 0)
        assert model.data(idx, EntryModel.EntryIdRole) == "e1"
        assert model.data(idx, EntryModel.ProjectNameRole) == "Writing"
        assert model.data(idx, EntryModel.TaskRole) == "draft"
        assert model.data(idx, EntryModel.DurationRole) == 250_000
        assert model.data(idx, EntryModel.DurationTextRole) == "4m 10s"
        assert model.data(idx, EntryModel.TimeTextRole) == "11:30"
        assert model.data(idx, EntryModel.DateTextRole) == "2026-02-11"

    def test_invalid_index(self, qapp):
        model = EntryModel()
        assert model.data(model.index(3, 0), EntryModel.EntryIdRole) is None

    def test_role_names(self, qapp):
        names = set(EntryModel().roleNames().values())
        assert {b"projectName", b"durationText", b"section"} <= names
