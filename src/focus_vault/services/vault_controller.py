"""QML-facing operation boundary.

Every slot runs one user-facing operation. Classified errors raised by the
services are caught here, logged, and turned into exactly one notification;
nothing propagates past a slot.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from PySide6.QtCore import QObject, Signal, Slot, Property

from focus_vault.errors import FocusVaultError, InvalidState
from focus_vault.services.account_store import AccountStore
from focus_vault.services.config_manager import ConfigManager
from focus_vault.services.entry_log import recent_entries, window_stats
from focus_vault.services.notification_center import NotificationCenter
from focus_vault.services.project_ledger import ProjectLedger
from focus_vault.services.reports import build_report
from focus_vault.services.session_timer import SessionTimer
from focus_vault.types import Project, TimeEntry, TimerState, Window
from focus_vault.utils.date_windows import local_now
from focus_vault.utils.duration_format import (
    format_duration,
    format_duration_compact,
    format_duration_hours,
)
from focus_vault.utils.validation import color_hex

logger = logging.getLogger(__name__)

MESSAGES = {
    "login": "Welcome back to your Focus Vault!",
    "register": "Vault created successfully! Please sign in.",
    "logout": "Vault secured. See you next time!",
    "project_created": "Project added to your vault!",
    "project_deleted": "Project deleted",
    "project_renamed": "Project updated",
    "session_started": "Focus session started!",
    "session_paused": "Session paused",
    "session_resumed": "Session resumed",
}


class VaultController(QObject):
    """Wires authentication, projects, the timer and stats for the shell."""

    auth_changed = Signal()
    projects_changed = Signal()
    entries_changed = Signal()
    timer_changed = Signal()
    elapsed_changed = Signal()
    logout_confirmation_required = Signal()
    unsaved_changed = Signal()

    def __init__(
        self,
        accounts: AccountStore,
        ledger: ProjectLedger,
        timer: SessionTimer,
        notifier: NotificationCenter,
        config: ConfigManager | None = None,
        parent=None,
        now: Callable[[], datetime] = local_now,
    ):
        super().__init__(parent)
        self._accounts = accounts
        self._ledger = ledger
        self._timer = timer
        self._notifier = notifier
        self._config = config
        self._now = now

        self._accounts.active_changed.connect(self._on_active_changed)
        self._accounts.data_changed.connect(self._on_data_changed)
        self._accounts.storage_failed.connect(self._on_storage_failed)
        self._accounts.storage_recovered.connect(self.unsaved_changed.emit)
        self._timer.state_changed.connect(lambda _state: self.timer_changed.emit())
        self._timer.tick.connect(lambda _ms: self.elapsed_changed.emit())

    # ------------------------------------------------------------------
    # Operation boundary
    # ------------------------------------------------------------------

    def _run(
        self,
        action: Callable[[], object],
        success: str | Callable[[object], str] | None = None,
    ) -> bool:
        """Run one operation, converting any failure into a notification."""
        try:
            result = action()
        except FocusVaultError as e:
            logger.info("%s: %s", type(e).__name__, e)
            self._notifier.post(str(e), e.level)
            return False
        except Exception:
            logger.exception("Unexpected failure in user operation")
            self._notifier.post("Something went wrong. See the log for details.", "error")
            return False

        if success is not None:
            message = success(result) if callable(success) else success
            if message:
                self._notifier.post(message, "success")
        return True

    def _config_int(self, key: str, fallback: int) -> int:
        return self._config.get_int(key) if self._config is not None else fallback

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    def _get_logged_in(self) -> bool:
        return self._accounts.active is not None

    loggedIn = Property(bool, _get_logged_in, notify=auth_changed)

    def _get_user_name(self) -> str:
        active = self._accounts.active
        return active.name if active is not None else ""

    userName = Property(str, _get_user_name, notify=auth_changed)

    def _get_timer_state(self) -> str:
        return self._timer.state.value

    timerState = Property(str, _get_timer_state, notify=timer_changed)

    def _get_elapsed_text(self) -> str:
        return format_duration(self._timer.elapsed_ms())

    elapsedText = Property(str, _get_elapsed_text, notify=elapsed_changed)

    def _get_session_project(self) -> str:
        session = self._timer.session
        return session.project_name if session is not None else ""

    sessionProjectName = Property(str, _get_session_project, notify=timer_changed)

    def _get_session_task(self) -> str:
        session = self._timer.session
        if session is None:
            return ""
        return session.task or "No specific task"

    sessionTask = Property(str, _get_session_task, notify=timer_changed)

    def _get_session_start(self) -> str:
        session = self._timer.session
        if session is None:
            return ""
        return session.started_at.astimezone().strftime("%H:%M:%S")

    sessionStartText = Property(str, _get_session_start, notify=timer_changed)

    def _get_unsaved_changes(self) -> bool:
        return self._accounts.is_dirty

    unsavedChanges = Property(bool, _get_unsaved_changes, notify=unsaved_changed)

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    @Slot(str, str, result=bool)
    def login(self, email: str, password: str) -> bool:
        def _login():
            if self._timer.is_active:
                raise InvalidState("Stop the running session before switching vaults")
            return self._accounts.login(email, password)

        return self._run(_login, MESSAGES["login"])

    @Slot(str, str, str, result=bool)
    def register(self, name: str, email: str, password: str) -> bool:
        return self._run(lambda: self._accounts.register(name, email, password), MESSAGES["register"])

    @Slot(bool, result=bool)
    def logout(self, confirmed: bool = False) -> bool:
        """Log out. An active session needs ``confirmed=True`` and is stopped and logged first."""
        if self._timer.is_active and not confirmed:
            logger.info("Logout deferred: session in progress needs confirmation")
            self.logout_confirmation_required.emit()
            return False

        def _logout():
            stopped = self._timer.stop() if self._timer.is_active else None
            self._accounts.logout()
            return stopped

        def _message(stopped: TimeEntry | None) -> str:
            if stopped is None:
                return MESSAGES["logout"]
            return f"{self._stopped_message(stopped)}. {MESSAGES['logout']}"

        return self._run(_logout, _message)

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    @Slot(str, str, str, result=bool)
    def add_project(self, name: str, description: str = "", color: str = "gold") -> bool:
        return self._run(
            lambda: self._ledger.create(name, description, color),
            MESSAGES["project_created"],
        )

    @Slot(str, str, str, result=bool)
    def rename_project(self, project_id: str, name: str, description: str = "") -> bool:
        return self._run(
            lambda: self._ledger.rename(project_id, name, description),
            MESSAGES["project_renamed"],
        )

    @Slot(str, result=bool)
    def delete_project(self, project_id: str) -> bool:
        def _delete():
            session = self._timer.session
            if session is not None and session.project_id == project_id:
                raise InvalidState("Stop the running session before deleting its project")
            return self._ledger.delete(project_id)

        return self._run(_delete, lambda deleted: MESSAGES["project_deleted"] if deleted else "")

    # ------------------------------------------------------------------
    # Timer
    # ------------------------------------------------------------------

    @Slot(str, str, result=bool)
    def start_session(self, project_id: str, task: str = "") -> bool:
        return self._run(lambda: self._timer.start(project_id, task), MESSAGES["session_started"])

    @Slot(result=bool)
    def pause_session(self) -> bool:
        return self._run(self._timer.pause, MESSAGES["session_paused"])

    @Slot(result=bool)
    def resume_session(self) -> bool:
        return self._run(self._timer.resume, MESSAGES["session_resumed"])

    @Slot(result=bool)
    def toggle_pause(self) -> bool:
        return self._run(
            self._timer.toggle,
            lambda state: MESSAGES["session_paused" if state == TimerState.PAUSED else "session_resumed"],
        )

    @Slot(result=bool)
    def stop_session(self) -> bool:
        return self._run(self._timer.stop, self._stopped_message)

    @staticmethod
    def _stopped_message(entry: TimeEntry) -> str:
        return f"Session complete! {format_duration(entry.duration)} logged for {entry.project_name}"

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    def projects(self) -> list[Project]:
        active = self._accounts.active
        return list(active.projects) if active is not None else []

    def recent(self) -> list[TimeEntry]:
        active = self._accounts.active
        if active is None:
            return []
        return recent_entries(active.time_entries, self._config_int("entries/recentLimit", 10))

    @Slot(result=list)
    def get_projects(self) -> list[dict]:
        return [
            {
                **p.to_dict(),
                "colorHex": color_hex(p.color),
                "totalText": format_duration_hours(p.total_time),
            }
            for p in self.projects()
        ]

    @Slot(result=list)
    def get_recent_entries(self) -> list[dict]:
        return [
            {**e.to_dict(), "durationText": format_duration_compact(e.duration)}
            for e in self.recent()
        ]

    @Slot(str, result=dict)
    def get_stats(self, window: str) -> dict:
        """``{duration, sessionCount, projectCount, durationText}`` for a window."""
        active = self._accounts.active
        try:
            win = Window(window)
        except ValueError:
            logger.warning("Unknown stats window %r", window)
            return {}
        entries = active.time_entries if active is not None else []
        stats = window_stats(entries, win, now=self._now())
        return {**stats.to_dict(), "durationText": format_duration_compact(stats.duration_ms)}

    @Slot(result=dict)
    def get_report(self) -> dict:
        active = self._accounts.active
        if active is None:
            return {}
        report = build_report(
            active.time_entries,
            active.projects,
            now=self._now(),
            daily_target_hours=self._config_int("stats/dailyTargetHours", 8),
        )
        return report.to_dict()

    # ------------------------------------------------------------------
    # Signal handlers / lifecycle
    # ------------------------------------------------------------------

    def _on_active_changed(self):
        self.auth_changed.emit()
        self._on_data_changed()

    def _on_data_changed(self):
        self.projects_changed.emit()
        self.entries_changed.emit()

    def _on_storage_failed(self, message: str):
        logger.warning("Storage unavailable: %s", message)
        self.unsaved_changed.emit()

    @Slot(result=bool)
    def save_now(self) -> bool:
        """Retry writing changes that failed to save earlier."""
        was_dirty = self._accounts.is_dirty
        return self._run(self._accounts.flush, "All changes saved" if was_dirty else None)

    @Slot()
    def cleanup(self):
        """Stop the tick and retry any write that failed earlier."""
        self._timer.cleanup()
        try:
            self._accounts.flush()
        except FocusVaultError:
            logger.warning("Unsaved changes could not be written on shutdown")
