"""QAbstractListModel for the project list and selector."""

from PySide6.QtCore import QAbstractListModel, QModelIndex, Qt, Slot

from focus_vault.types import Project
from focus_vault.utils.duration_format import format_duration_hours
from focus_vault.utils.validation import color_hex


class ProjectModel(QAbstractListModel):
    """Exposes the active identity's Projects to QML."""

    ProjectIdRole = Qt.UserRole + 1
    ProjectNameRole = Qt.UserRole + 2
    DescriptionRole = Qt.UserRole + 3
    ColorRole = Qt.UserRole + 4
    TotalTimeRole = Qt.UserRole + 5
    TotalTextRole = Qt.UserRole + 6

    def __init__(self, parent=None):
        super().__init__(parent)
        self._projects: list[Project] = []

    def roleNames(self):
        return {
            self.ProjectIdRole: b"projectId",
            self.ProjectNameRole: b"projectName",
            self.DescriptionRole: b"description",
            self.ColorRole: b"projectColor",
            self.TotalTimeRole: b"totalTime",
            self.TotalTextRole: b"totalText",
        }

    def rowCount(self, parent=QModelIndex()):
        return len(self._projects)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid() or index.row() >= len(self._projects):
            return None

        project = self._projects[index.row()]

        if role == self.ProjectIdRole:
            return project.id
        elif role in (self.ProjectNameRole, Qt.DisplayRole):
            return project.name
        elif role == self.DescriptionRole:
            return project.description
        elif role == self.ColorRole:
            return color_hex(project.color)
        elif role == self.TotalTimeRole:
            return project.total_time
        elif role == self.TotalTextRole:
            return format_duration_hours(project.total_time)
        return None

    def set_projects(self, projects: list[Project]):
        """Replace the entire project list."""
        self.beginResetModel()
        self._projects = list(projects)
        self.endResetModel()

    @Slot(int, result=str)
    def get_project_id(self, index: int) -> str:
        """Get project ID by index (for QML ComboBox)."""
        if 0 <= index < len(self._projects):
            return self._projects[index].id
        return ""
