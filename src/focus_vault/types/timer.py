"""Session timer state."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class TimerState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


@dataclass
class ActiveSession:
    """An in-progress session. Never persisted."""

    project_id: str
    project_name: str
    owner_email: str  # Identity the session belongs to
    task: str
    started_at: datetime  # First start, for display
    anchor: datetime  # now - anchor == elapsed running time while RUNNING
    elapsed_ms: int = 0  # Frozen accumulator while PAUSED
