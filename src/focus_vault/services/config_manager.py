"""Application configuration manager wrapping QSettings."""

import logging

from PySide6.QtCore import QObject, Signal, Slot, QSettings

logger = logging.getLogger(__name__)

# Default values
DEFAULTS = {
    "timer/tickInterval": 1000,
    "entries/recentLimit": 10,
    "stats/dailyTargetHours": 8,
    "storage/retryAttempts": 2,
    "advanced/debugLogging": False,
}


class ConfigManager(QObject):
    """Centralized application settings with QML property bindings."""

    settings_changed = Signal(str)  # key

    def __init__(self, parent=None):
        super().__init__(parent)
        self._settings = QSettings()

    @Slot(str, result=str)
    def get_string(self, key: str) -> str:
        return str(self._settings.value(key, DEFAULTS.get(key, "")))

    @Slot(str, result=int)
    def get_int(self, key: str) -> int:
        val = self._settings.value(key, DEFAULTS.get(key, 0))
        try:
            return int(val)
        except (ValueError, TypeError):
            logger.warning("Non-integer setting %s=%r, using default", key, val)
            return DEFAULTS.get(key, 0)

    @Slot(str, result=bool)
    def get_bool(self, key: str) -> bool:
        val = self._settings.value(key, DEFAULTS.get(key, False))
        if isinstance(val, bool):
            return val
        if isinstance(val, str):
            return val.lower() in ("true", "1", "yes")
        return bool(val)

    @Slot(str, str)
    def set_string(self, key: str, value: str):
        self._settings.setValue(key, value)
        self.settings_changed.emit(key)

    @Slot(str, int)
    def set_int(self, key: str, value: int):
        self._settings.setValue(key, value)
        self.settings_changed.emit(key)

    @Slot(str, bool)
    def set_bool(self, key: str, value: bool):
        self._settings.setValue(key, value)
        self.settings_changed.emit(key)

    @Slot(str)
    def reset(self, key: str):
        """Drop a stored override so the default applies again."""
        self._settings.remove(key)
        self.settings_changed.emit(key)
