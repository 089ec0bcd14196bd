"""User-facing notifications raised at the operation boundary."""

import logging
import uuid as uuid_mod
from datetime import datetime, timezone

from PySide6.QtCore import QObject, Signal, Slot

logger = logging.getLogger(__name__)

MAX_HISTORY = 100
LEVELS = ("info", "success", "warning", "error")


class NotificationCenter(QObject):
    """Collects notifications and broadcasts them to the shell."""

    notification_posted = Signal(dict)
    history_changed = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._history: list[dict] = []

    @Slot(str, str)
    def post(self, message: str, level: str = "info"):
        """Record a notification and emit it."""
        if level not in LEVELS:
            level = "info"
        entry = {
            "id": str(uuid_mod.uuid4()),
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

        self._history.append(entry)
        if len(self._history) > MAX_HISTORY:
            self._history = self._history[-MAX_HISTORY:]

        logger.debug("Notification [%s]: %s", level, message)
        self.notification_posted.emit(entry)
        self.history_changed.emit()

    @Slot(result=list)
    def get_history(self) -> list[dict]:
        """Return notification history (newest first)."""
        return list(reversed(self._history))

    @Slot(result=dict)
    def latest(self) -> dict:
        return dict(self._history[-1]) if self._history else {}

    @Slot()
    def clear_history(self):
        self._history = []
        self.history_changed.emit()
