"""CRUD over the active identity's projects."""

import logging
from collections.abc import Callable
from datetime import datetime

from focus_vault.errors import InvalidSelection, ValidationError
from focus_vault.services.account_store import AccountStore
from focus_vault.services.entry_log import remove_project_entries
from focus_vault.types import Project
from focus_vault.utils.timestamps import utc_now
from focus_vault.utils.validation import (
    DEFAULT_COLOR,
    PROJECT_COLORS,
    PROJECT_NAME_MAX_LENGTH,
    generate_id,
    sanitize_string,
    validate_project_name,
)

logger = logging.getLogger(__name__)


class ProjectLedger:
    """Creates, renames and deletes projects of whoever is logged in."""

    def __init__(self, accounts: AccountStore, clock: Callable[[], datetime] = utc_now):
        self._accounts = accounts
        self._clock = clock

    def list(self) -> list[Project]:
        """Projects in insertion order."""
        return list(self._accounts.require_active().projects)

    def get(self, project_id: str) -> Project | None:
        return self._accounts.require_active().find_project(project_id)

    def create(self, name: str, description: str = "", color: str = DEFAULT_COLOR) -> Project:
        name = self._clean_name(name)
        color = color or DEFAULT_COLOR
        if color not in PROJECT_COLORS:
            raise ValidationError(f"Unknown project color: {color}")

        identity = self._accounts.require_active()
        project = Project(
            id=generate_id(),
            name=name,
            description=sanitize_string(description),
            color=color,
            created_at=self._clock(),
            total_time=0,
        )
        identity.projects.append(project)
        logger.info("Created project %s (%s)", project.name, project.id)
        self._accounts.commit()
        return project

    def rename(self, project_id: str, name: str, description: str | None = None) -> Project:
        """Rename a project. Existing entries keep the name they were logged under."""
        name = self._clean_name(name)
        project = self.get(project_id)
        if project is None:
            raise InvalidSelection("Project not found")
        project.name = name
        if description is not None:
            project.description = sanitize_string(description)
        self._accounts.commit()
        return project

    def delete(self, project_id: str) -> bool:
        """Delete a project and all its entries. Unknown ids are ignored.

        Returns True if something was deleted.
        """
        identity = self._accounts.require_active()
        if identity.find_project(project_id) is None:
            logger.debug("Delete of unknown project %s ignored", project_id)
            return False

        before = len(identity.time_entries)
        identity.projects = [p for p in identity.projects if p.id != project_id]
        identity.time_entries = remove_project_entries(identity.time_entries, project_id)
        logger.info(
            "Deleted project %s and %d entries",
            project_id, before - len(identity.time_entries),
        )
        self._accounts.commit()
        return True

    @staticmethod
    def _clean_name(name: str) -> str:
        name = sanitize_string(name)
        if not name:
            raise ValidationError("Please enter a project name")
        if not validate_project_name(name):
            raise ValidationError(
                f"Project names are limited to {PROJECT_NAME_MAX_LENGTH} characters"
            )
        return name
