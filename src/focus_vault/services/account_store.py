"""Identity records, the active-identity pointer, and persistence."""

import hmac
import logging
from collections.abc import Callable
from datetime import datetime

from PySide6.QtCore import QObject, Signal

from focus_vault.errors import AuthError, StorageError, ValidationError
from focus_vault.services.entry_log import append_entry, recompute_project_totals
from focus_vault.services.kv_store import CURRENT_USER_KEY, USERS_KEY, KeyValueStore
from focus_vault.types import Identity, Project, TimeEntry
from focus_vault.utils.timestamps import utc_now
from focus_vault.utils.validation import (
    generate_id,
    sanitize_string,
    validate_email,
    validate_password,
)

logger = logging.getLogger(__name__)

DEMO_EMAIL = "smalesker@focusvault.com"
DEMO_PASSWORD = "admin"


def demo_identity(now: datetime) -> Identity:
    """The fixed identity seeded on first run."""
    return Identity(
        id="smalesker-001",
        name="SMALESKER",
        email=DEMO_EMAIL,
        password=DEMO_PASSWORD,
        projects=[
            Project(
                id="1",
                name="Web Development",
                description="Building awesome web applications",
                color="gold",
                created_at=now,
            ),
            Project(
                id="2",
                name="Learning & Research",
                description="Studying new technologies and concepts",
                color="blue",
                created_at=now,
            ),
        ],
        time_entries=[],
        created_at=now,
    )


class AccountStore(QObject):
    """Owns every identity record and which one is logged in.

    All mutations of an identity end in ``commit()`` (or ``commit_entry()``
    for a finished session), which writes the whole users map plus the
    active snapshot. Failed writes are retried; if they still fail the
    in-memory state stays authoritative and the store is marked dirty until
    a later write lands.
    """

    active_changed = Signal()
    data_changed = Signal()
    storage_failed = Signal(str)
    storage_recovered = Signal()

    def __init__(
        self,
        store: KeyValueStore,
        parent=None,
        retry_attempts: int = 2,
        clock: Callable[[], datetime] = utc_now,
    ):
        super().__init__(parent)
        self._store = store
        self._retry_attempts = max(0, retry_attempts)
        self._clock = clock
        self._users: dict[str, Identity] = {}
        self._active: Identity | None = None
        self._dirty = False
        self._load()

    # ------------------------------------------------------------------
    # Loading / bootstrap
    # ------------------------------------------------------------------

    def _load(self):
        raw = self._store.get(USERS_KEY)
        if raw is not None and not isinstance(raw, dict):
            logger.warning("Users record has unexpected type %s, ignoring", type(raw).__name__)
            raw = None

        for email, record in (raw or {}).items():
            try:
                identity = Identity.from_dict(record)
            except (KeyError, TypeError, ValueError, AttributeError):
                logger.warning("Skipping malformed identity record %s", email)
                continue
            fixed = recompute_project_totals(identity.projects, identity.time_entries)
            if fixed:
                logger.warning("Repaired %d stale project totals for %s", fixed, email)
            self._users[email] = identity

        if not self._users:
            logger.info("No identities found, seeding demo account %s", DEMO_EMAIL)
            demo = demo_identity(self._clock())
            self._users[demo.email] = demo
            self._persist_quietly()

        snapshot = self._store.get(CURRENT_USER_KEY)
        if isinstance(snapshot, dict):
            email = snapshot.get("email")
            if email in self._users:
                self._active = self._users[email]
                logger.info("Restored session for %s", email)
            else:
                logger.warning("Active snapshot refers to unknown identity %s", email)

    def _persist_quietly(self):
        try:
            self.persist()
        except StorageError:
            logger.warning("Initial write failed; will retry on next change")

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def active(self) -> Identity | None:
        return self._active

    @property
    def is_dirty(self) -> bool:
        """True when in-memory changes have not reached the store yet."""
        return self._dirty

    def require_active(self) -> Identity:
        if self._active is None:
            raise AuthError("Please sign in first")
        return self._active

    def get_identity(self, email: str) -> Identity | None:
        return self._users.get(email)

    def identity_count(self) -> int:
        return len(self._users)

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    def register(self, name: str, email: str, password: str) -> Identity:
        """Create a new identity. Does not log it in."""
        name = sanitize_string(name)
        email = (email or "").strip()
        if not name or not email or not password:
            raise ValidationError("Please fill in all fields")
        if not validate_email(email):
            raise ValidationError("Please enter a valid email address")
        if not validate_password(password):
            raise ValidationError("Password is too long")
        if email in self._users:
            raise AuthError("A vault with this email already exists")

        identity = Identity(
            id=generate_id(),
            name=name,
            email=email,
            password=password,
            created_at=self._clock(),
        )
        self._users[email] = identity
        logger.info("Registered identity %s", email)
        self.persist()
        return identity

    def login(self, email: str, password: str) -> Identity:
        email = (email or "").strip()
        if not email or not password:
            raise ValidationError("Please enter both email and password")

        identity = self._users.get(email)
        if identity is None or not hmac.compare_digest(
            identity.password.encode("utf-8"), password.encode("utf-8")
        ):
            logger.info("Rejected login for %s", email)
            raise AuthError("Invalid credentials. Access denied.")

        self._active = identity
        logger.info("Logged in %s", email)
        self.active_changed.emit()
        self.persist()
        return identity

    def logout(self):
        """Clear the active pointer and the stored snapshot."""
        if self._active is None:
            return
        logger.info("Logged out %s", self._active.email)
        self._active = None
        self.active_changed.emit()
        self.persist()

    # ------------------------------------------------------------------
    # Mutation and persistence
    # ------------------------------------------------------------------

    def commit(self):
        """Announce a mutation of the active identity and write it out."""
        self.data_changed.emit()
        self.persist()

    def commit_entry(self, entry: TimeEntry):
        """Append a finished session and credit its project, as one unit."""
        identity = self.require_active()
        append_entry(identity.time_entries, entry)
        project = identity.find_project(entry.project_id)
        if project is not None:
            project.total_time += entry.duration
        else:
            logger.warning("Entry %s references missing project %s", entry.id, entry.project_id)
        self.commit()

    def persist(self):
        """Write all identities and the active snapshot, retrying on failure."""
        users_payload = {email: ident.to_dict() for email, ident in self._users.items()}
        snapshot = self._active.to_dict() if self._active is not None else None
        attempts = self._retry_attempts + 1

        for attempt in range(1, attempts + 1):
            if self._write(USERS_KEY, users_payload) and self._write(CURRENT_USER_KEY, snapshot):
                if self._dirty:
                    logger.info("Pending changes written after earlier storage failure")
                    self._dirty = False
                    self.storage_recovered.emit()
                return
            logger.warning("Persist attempt %d/%d failed", attempt, attempts)

        self._dirty = True
        message = "Could not save your data. Changes are kept and will be saved on the next try."
        self.storage_failed.emit(message)
        raise StorageError(message)

    def flush(self):
        """Retry a previously failed write, if any."""
        if self._dirty:
            self.persist()

    def _write(self, key: str, value) -> bool:
        try:
            return bool(self._store.set(key, value))
        except (OSError, TypeError, ValueError):
            logger.warning("Store raised while writing %s", key, exc_info=True)
            return False
