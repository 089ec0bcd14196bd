"""Application entry point: backend construction, QML engine setup and model wiring."""

import logging
import os
import sys
import signal
from dataclasses import dataclass
from pathlib import Path

from PySide6.QtGui import QGuiApplication
from PySide6.QtQml import QQmlApplicationEngine
from PySide6.QtCore import QUrl
from PySide6.QtNetwork import QLocalSocket, QLocalServer

from focus_vault.services.account_store import AccountStore
from focus_vault.services.config_manager import ConfigManager
from focus_vault.services.kv_store import KeyValueStore, SettingsStore
from focus_vault.services.notification_center import NotificationCenter
from focus_vault.services.project_ledger import ProjectLedger
from focus_vault.services.session_timer import SessionTimer
from focus_vault.services.vault_controller import VaultController
from focus_vault.models.project_model import ProjectModel
from focus_vault.models.entry_model import EntryModel

logger = logging.getLogger(__name__)

QML_DIR = Path(__file__).parent / "qml"
SOCKET_NAME = "focus-vault-instance"


@dataclass
class Backend:
    config: ConfigManager
    notifier: NotificationCenter
    accounts: AccountStore
    ledger: ProjectLedger
    timer: SessionTimer
    controller: VaultController
    project_model: ProjectModel
    entry_model: EntryModel

    def cleanup(self):
        self.controller.cleanup()


def create_backend(store: KeyValueStore | None = None, config: ConfigManager | None = None) -> Backend:
    """Build and wire every backend object. Needs a Qt application instance."""
    config = config if config is not None else ConfigManager()
    store = store if store is not None else SettingsStore()

    notifier = NotificationCenter()
    accounts = AccountStore(store, retry_attempts=config.get_int("storage/retryAttempts"))
    ledger = ProjectLedger(accounts)
    timer = SessionTimer(accounts, tick_interval_ms=config.get_int("timer/tickInterval"))
    controller = VaultController(accounts, ledger, timer, notifier, config=config)
    project_model = ProjectModel()
    entry_model = EntryModel()

    # Wire signals: controller -> models
    controller.projects_changed.connect(lambda: project_model.set_projects(controller.projects()))
    controller.entries_changed.connect(lambda: entry_model.set_entries(controller.recent()))

    def _on_setting(key: str):
        if key == "timer/tickInterval":
            timer.set_tick_interval(config.get_int(key))
        elif key == "entries/recentLimit":
            entry_model.set_entries(controller.recent())

    config.settings_changed.connect(_on_setting)

    # Initial fill for a restored login
    project_model.set_projects(controller.projects())
    entry_model.set_entries(controller.recent())

    return Backend(
        config=config,
        notifier=notifier,
        accounts=accounts,
        ledger=ledger,
        timer=timer,
        controller=controller,
        project_model=project_model,
        entry_model=entry_model,
    )


def _check_single_instance() -> QLocalServer | None:
    """Enforce single instance via QLocalSocket. Returns server if we're the first instance."""
    socket = QLocalSocket()
    socket.connectToServer(SOCKET_NAME)
    if socket.waitForConnected(500):
        # Another instance is running
        socket.close()
        return None

    server = QLocalServer()
    server.removeServer(SOCKET_NAME)
    server.listen(SOCKET_NAME)
    return server


def _configure_logging(config: ConfigManager):
    level = logging.DEBUG if config.get_bool("advanced/debugLogging") else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run() -> int:
    """Launch the application."""
    os.environ.setdefault("QT_QUICK_CONTROLS_STYLE", "Fusion")

    app = QGuiApplication(sys.argv)
    app.setApplicationName("Focus Vault")
    app.setOrganizationName("focus-vault")
    app.setOrganizationDomain("focusvault.local")

    config = ConfigManager()
    _configure_logging(config)

    # Single instance check: two writers would clobber each other's records
    instance_server = _check_single_instance()
    if instance_server is None:
        print("Another instance is already running.", file=sys.stderr)
        return 0

    # Allow Ctrl+C to kill the app
    signal.signal(signal.SIGINT, signal.SIG_DFL)

    engine = QQmlApplicationEngine()
    backend = create_backend(config=config)

    # Expose backend objects to QML via context properties.
    ctx = engine.rootContext()
    ctx.setContextProperty("Vault", backend.controller)
    ctx.setContextProperty("ProjectModel", backend.project_model)
    ctx.setContextProperty("EntryModel", backend.entry_model)
    ctx.setContextProperty("Notifications", backend.notifier)
    ctx.setContextProperty("ConfigManager", backend.config)

    qml_file = QML_DIR / "Main.qml"
    engine.load(QUrl.fromLocalFile(str(qml_file)))

    if not engine.rootObjects():
        logger.error("Failed to load %s", qml_file)
        return 1

    ret = app.exec()
    backend.cleanup()
    instance_server.close()
    return ret
