"""Start/pause/resume/stop state machine for one focus session."""

import logging
from collections.abc import Callable
from datetime import datetime, timedelta

from PySide6.QtCore import QObject, Signal, Property, QTimer

from focus_vault.errors import InvalidSelection, InvalidState
from focus_vault.services.account_store import AccountStore
from focus_vault.types import ActiveSession, TimeEntry, TimerState
from focus_vault.utils.timestamps import local_day, millis_between, utc_now
from focus_vault.utils.validation import generate_id, sanitize_string

logger = logging.getLogger(__name__)

DEFAULT_TICK_MS = 1000


class SessionTimer(QObject):
    """Tracks the active identity's in-progress session.

    Elapsed time is derived from an anchor instant rather than summed from
    ticks: while RUNNING, elapsed == now - anchor. Pausing freezes that value;
    resuming moves the anchor to now - frozen, so paused wall-clock time never
    counts. The tick only re-reads elapsed time for display.

    ``stop()`` is the only place a session touches durable state.
    """

    state_changed = Signal(str)  # TimerState value
    tick = Signal(int)  # elapsed ms
    session_started = Signal(str)  # project_id
    session_completed = Signal(dict)  # TimeEntry.to_dict()

    def __init__(
        self,
        accounts: AccountStore,
        parent=None,
        clock: Callable[[], datetime] = utc_now,
        tick_interval_ms: int = DEFAULT_TICK_MS,
    ):
        super().__init__(parent)
        self._accounts = accounts
        self._clock = clock
        self._state = TimerState.IDLE
        self._session: ActiveSession | None = None

        self._tick_timer = QTimer(self)
        self._tick_timer.setInterval(tick_interval_ms)
        self._tick_timer.timeout.connect(self._on_tick)

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def session(self) -> ActiveSession | None:
        return self._session

    @property
    def is_active(self) -> bool:
        return self._state != TimerState.IDLE

    def elapsed_ms(self) -> int:
        """Running time of the current session, excluding paused spans."""
        if self._session is None:
            return 0
        if self._state == TimerState.PAUSED:
            return self._session.elapsed_ms
        return max(0, millis_between(self._session.anchor, self._clock()))

    def _get_state_name(self) -> str:
        return self._state.value

    timerState = Property(str, _get_state_name, notify=state_changed)

    def is_ticking(self) -> bool:
        return self._tick_timer.isActive()

    def set_tick_interval(self, ms: int):
        self._tick_timer.setInterval(max(50, ms))

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(self, project_id: str, task: str = "") -> ActiveSession:
        if self._state != TimerState.IDLE:
            raise InvalidState("A focus session is already in progress")
        if not project_id:
            raise InvalidSelection("Please select a project first")

        identity = self._accounts.require_active()
        project = identity.find_project(project_id)
        if project is None:
            raise InvalidSelection("Selected project not found")

        now = self._clock()
        self._session = ActiveSession(
            project_id=project.id,
            project_name=project.name,
            owner_email=identity.email,
            task=sanitize_string(task),
            started_at=now,
            anchor=now,
            elapsed_ms=0,
        )
        self._tick_timer.start()
        self._set_state(TimerState.RUNNING)
        logger.info("Session started on %s", project.name)
        self.session_started.emit(project.id)
        return self._session

    def pause(self) -> int:
        """Freeze the session. Returns elapsed ms at the pause."""
        if self._state != TimerState.RUNNING:
            raise InvalidState("There is no running session to pause")

        self._session.elapsed_ms = max(0, millis_between(self._session.anchor, self._clock()))
        self._tick_timer.stop()
        self._set_state(TimerState.PAUSED)
        logger.debug("Session paused at %d ms", self._session.elapsed_ms)
        return self._session.elapsed_ms

    def resume(self):
        if self._state != TimerState.PAUSED:
            raise InvalidState("There is no paused session to resume")

        self._session.anchor = self._clock() - timedelta(milliseconds=self._session.elapsed_ms)
        self._tick_timer.start()
        self._set_state(TimerState.RUNNING)
        logger.debug("Session resumed from %d ms", self._session.elapsed_ms)

    def toggle(self) -> TimerState:
        """Pause when running, resume when paused."""
        if self._state == TimerState.RUNNING:
            self.pause()
        elif self._state == TimerState.PAUSED:
            self.resume()
        else:
            raise InvalidState("There is no active session")
        return self._state

    def stop(self) -> TimeEntry:
        """Finish the session, log it and credit its project exactly once."""
        if self._state == TimerState.IDLE:
            raise InvalidState("There is no active session to stop")
        # Checked up front so a failed precondition leaves the session intact
        identity = self._accounts.require_active()
        if identity.email != self._session.owner_email:
            raise InvalidState("This session belongs to another vault")

        end = self._clock()
        if self._state == TimerState.PAUSED:
            duration = self._session.elapsed_ms
        else:
            duration = max(0, millis_between(self._session.anchor, end))
        start = end - timedelta(milliseconds=duration)

        entry = TimeEntry(
            id=generate_id(),
            project_id=self._session.project_id,
            project_name=self._session.project_name,
            task=self._session.task,
            start_time=start,
            end_time=end,
            duration=duration,
            date=local_day(start),
            created_at=end,
        )

        # The entry is in memory once commit_entry returns or raises StorageError,
        # so the session ends either way
        try:
            self._accounts.commit_entry(entry)
        finally:
            self._reset()
            logger.info("Session on %s logged: %d ms", entry.project_name, duration)
            self.session_completed.emit(entry.to_dict())
        return entry

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _reset(self):
        self._tick_timer.stop()
        self._session = None
        self._set_state(TimerState.IDLE)

    def _set_state(self, state: TimerState):
        if self._state != state:
            self._state = state
            self.state_changed.emit(state.value)

    def _on_tick(self):
        self.tick.emit(self.elapsed_ms())

    def cleanup(self):
        self._tick_timer.stop()
