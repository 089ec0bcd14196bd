"""Durable key-value storage for JSON values."""

import logging
from typing import Any, Protocol

import orjson
from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

USERS_KEY = "focusVaultUsers"
CURRENT_USER_KEY = "currentFocusVaultUser"


class KeyValueStore(Protocol):
    """get/set contract over a durable local store.

    ``get`` returns the decoded JSON value, or None when the key is absent
    or unreadable. ``set`` returns False when the write did not land.
    """

    def get(self, key: str) -> Any: ...

    def set(self, key: str, value: Any) -> bool: ...


class SettingsStore:
    """KeyValueStore backed by QSettings, values encoded with orjson."""

    def __init__(self, settings: QSettings | None = None, group: str = "vault"):
        self._settings = settings if settings is not None else QSettings()
        self._group = group

    def _key(self, key: str) -> str:
        return f"{self._group}/{key}" if self._group else key

    def get(self, key: str) -> Any:
        raw = self._settings.value(self._key(key), None)
        if raw is None or raw == "":
            return None
        try:
            return orjson.loads(raw)
        except (orjson.JSONDecodeError, TypeError):
            logger.warning("Unreadable value under %s, treating as empty", key)
            return None

    def set(self, key: str, value: Any) -> bool:
        try:
            encoded = orjson.dumps(value).decode("utf-8")
        except TypeError:
            logger.exception("Value for %s is not JSON-serializable", key)
            return False
        self._settings.setValue(self._key(key), encoded)
        self._settings.sync()
        if self._settings.status() != QSettings.Status.NoError:
            logger.warning("QSettings write failed for %s: %s", key, self._settings.status())
            return False
        return True


class MemoryStore:
    """In-process KeyValueStore. Values round-trip through orjson like the real store."""

    def __init__(self, initial: dict[str, Any] | None = None):
        self._data: dict[str, bytes] = {}
        for key, value in (initial or {}).items():
            self.set(key, value)

    def get(self, key: str) -> Any:
        raw = self._data.get(key)
        return orjson.loads(raw) if raw is not None else None

    def set(self, key: str, value: Any) -> bool:
        self._data[key] = orjson.dumps(value)
        return True

    def keys(self) -> list[str]:
        return list(self._data)
