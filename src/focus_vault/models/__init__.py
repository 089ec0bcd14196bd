"""Qt models for Focus Vault."""

from focus_vault.models.project_model import ProjectModel
from focus_vault.models.entry_model import EntryModel

__all__ = ["ProjectModel", "EntryModel"]
