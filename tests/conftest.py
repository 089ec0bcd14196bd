"""Shared test fixtures for Focus Vault."""

import os
import sys
from datetime import datetime, timedelta

import pytest

from focus_vault.services.account_store import AccountStore, DEMO_EMAIL, DEMO_PASSWORD
from focus_vault.services.kv_store import MemoryStore
from focus_vault.services.project_ledger import ProjectLedger
from focus_vault.services.session_timer import SessionTimer
from helpers import FakeClock


@pytest.fixture(scope="session")
def qapp():
    """Create a QGuiApplication for tests that need Qt."""
    os.environ["QT_QPA_PLATFORM"] = "offscreen"
    from PySide6.QtGui import QGuiApplication

    app = QGuiApplication.instance()
    if app is None:
        app = QGuiApplication(sys.argv or ["test"])
    # QSettings reports AccessError on sync() without an organization name
    app.setOrganizationName("focus-vault-tests")
    app.setApplicationName("Focus Vault Tests")
    yield app


@pytest.fixture
def isolated_settings(qapp, tmp_path):
    """Point QSettings at a throwaway INI directory."""
    from PySide6.QtCore import QSettings
    QSettings.setDefaultFormat(QSettings.IniFormat)
    QSettings.setPath(QSettings.IniFormat, QSettings.UserScope, str(tmp_path / "config"))
    return tmp_path / "config"


@pytest.fixture
def now() -> datetime:
    """Fixed local 'now': Wednesday Feb 11, 2026 at noon."""
    return datetime(2026, 2, 11, 12, 0, 0).astimezone()


@pytest.fixture
def clock(now) -> FakeClock:
    return FakeClock(now)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def accounts(qapp, store, clock) -> AccountStore:
    """AccountStore over an empty store (so seeded with the demo identity), logged in."""
    a = AccountStore(store, clock=clock)
    a.login(DEMO_EMAIL, DEMO_PASSWORD)
    return a


@pytest.fixture
def ledger(accounts, clock) -> ProjectLedger:
    return ProjectLedger(accounts, clock=clock)


@pytest.fixture
def timer(accounts, clock):
    t = SessionTimer(accounts, clock=clock)
    yield t
    t.cleanup()


@pytest.fixture
def later(now):
    """Offset helper: later(seconds=30) -> now + 30s."""
    return lambda **kw: now + timedelta(**kw)
