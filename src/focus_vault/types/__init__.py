"""Type definitions for Focus Vault."""

from focus_vault.types.accounts import Identity
from focus_vault.types.entries import TimeEntry, Window, WindowStats
from focus_vault.types.projects import Project
from focus_vault.types.timer import ActiveSession, TimerState

__all__ = [
    "Identity",
    "Project",
    "TimeEntry",
    "Window",
    "WindowStats",
    "ActiveSession",
    "TimerState",
]
