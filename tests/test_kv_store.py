"""Tests for focus_vault.services.kv_store."""

import pytest

from focus_vault.services.kv_store import MemoryStore, SettingsStore


@pytest.fixture
def settings_store(isolated_settings):
    return SettingsStore()


class TestSettingsStore:
    def test_missing_key(self, settings_store):
        assert settings_store.get("nothing") is None

    def test_set_get(self, settings_store):
        value = {"a@b.co": {"projects": [{"id": "1", "totalTime": 5}], "ok": True}}
        assert settings_store.set("users", value) is True
        assert settings_store.get("users") == value

    def test_null_value(self, settings_store):
        settings_store.set("current", None)
        assert settings_store.get("current") is None

    def test_survives_new_instance(self, settings_store):
        settings_store.set("users", {"x": 1})
        assert SettingsStore().get("users") == {"x": 1}

    def test_corrupt_value(self, settings_store):
        from PySide6.QtCore import QSettings
        QSettings().setValue("vault/users", "{not json")
        assert settings_store.get("users") is None

    def test_unserializable_value(self, settings_store):
        assert settings_store.set("bad", {"obj": object()}) is False


class TestMemoryStore:
    def test_values_are_copied(self):
        store = MemoryStore()
        value = {"list": [1, 2]}
        store.set("k", value)
        value["list"].append(3)
        assert store.get("k") == {"list": [1, 2]}

    def test_initial(self):
        store = MemoryStore({"k": [1]})
        assert store.get("k") == [1]
        assert store.keys() == ["k"]
