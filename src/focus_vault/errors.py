"""Classified errors raised by Focus Vault services.

Services raise these; the controller catches them at the operation boundary
and turns each into a single user-facing notification.
"""


class FocusVaultError(Exception):
    """Base class. ``str(err)`` is shown to the user as-is."""

    level = "error"


class ValidationError(FocusVaultError):
    """A required field is empty or malformed."""

    level = "warning"


class InvalidSelection(FocusVaultError):
    """The operation references a project or entity that does not exist."""

    level = "warning"


class InvalidState(FocusVaultError):
    """A timer operation was attempted from a state that forbids it."""

    level = "warning"


class StorageError(FocusVaultError):
    """Reading or writing the key-value store failed."""


class AuthError(FocusVaultError):
    """Credential mismatch, duplicate registration, or nobody logged in."""
