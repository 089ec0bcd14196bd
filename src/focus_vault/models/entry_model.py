"""QAbstractListModel for the recent time entries list."""

from PySide6.QtCore import QAbstractListModel, QModelIndex, Qt

from focus_vault.types import TimeEntry
from focus_vault.utils.date_windows import get_date_group
from focus_vault.utils.duration_format import format_duration_compact


class EntryModel(QAbstractListModel):
    """Exposes recent TimeEntries to QML with date-group sections."""

    EntryIdRole = Qt.UserRole + 1
    ProjectNameRole = Qt.UserRole + 2
    TaskRole = Qt.UserRole + 3
    DateTextRole = Qt.UserRole + 4
    TimeTextRole = Qt.UserRole + 5
    DurationRole = Qt.UserRole + 6
    DurationTextRole = Qt.UserRole + 7
    SectionRole = Qt.UserRole + 8

    def __init__(self, parent=None):
        super().__init__(parent)
        self._entries: list[TimeEntry] = []

    def roleNames(self):
        return {
            self.EntryIdRole: b"entryId",
            self.ProjectNameRole: b"projectName",
            self.TaskRole: b"task",
            self.DateTextRole: b"dateText",
            self.TimeTextRole: b"timeText",
            self.DurationRole: b"duration",
            self.DurationTextRole: b"durationText",
            self.SectionRole: b"section",
        }

    def rowCount(self, parent=QModelIndex()):
        return len(self._entries)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid() or index.row() >= len(self._entries):
            return None

        entry = self._entries[index.row()]
        local_start = entry.start_time.astimezone()

        if role == self.EntryIdRole:
            return entry.id
        elif role in (self.ProjectNameRole, Qt.DisplayRole):
            return entry.project_name
        elif role == self.TaskRole:
            return entry.task
        elif role == self.DateTextRole:
            return local_start.strftime("%Y-%m-%d")
        elif role == self.TimeTextRole:
            return local_start.strftime("%H:%M")
        elif role == self.DurationRole:
            return entry.duration
        elif role == self.DurationTextRole:
            return format_duration_compact(entry.duration)
        elif role == self.SectionRole:
            return get_date_group(entry.start_time).value
        return None

    def set_entries(self, entries: list[TimeEntry]):
        """Replace the entire entry list. Callers pass entries already ordered."""
        self.beginResetModel()
        self._entries = list(entries)
        self.endResetModel()
