"""Services for Focus Vault."""

from focus_vault.services.kv_store import KeyValueStore, SettingsStore, MemoryStore
from focus_vault.services.config_manager import ConfigManager
from focus_vault.services.notification_center import NotificationCenter
from focus_vault.services.account_store import AccountStore
from focus_vault.services.project_ledger import ProjectLedger
from focus_vault.services.session_timer import SessionTimer
from focus_vault.services.vault_controller import VaultController
from focus_vault.services.entry_log import window_stats, recent_entries
from focus_vault.services.reports import build_report

__all__ = [
    "KeyValueStore",
    "SettingsStore",
    "MemoryStore",
    "ConfigManager",
    "NotificationCenter",
    "AccountStore",
    "ProjectLedger",
    "SessionTimer",
    "VaultController",
    "window_stats",
    "recent_entries",
    "build_report",
]
