"""Input validation and sanitizing for user-entered fields."""

import re
import time
import uuid

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PROJECT_NAME_MAX_LENGTH = 100
PASSWORD_MAX_LENGTH = 128

PROJECT_COLORS: dict[str, str] = {
    "gold": "#d4af37",
    "blue": "#3b82f6",
    "green": "#22c55e",
    "red": "#ef4444",
    "purple": "#8b5cf6",
    "orange": "#f59e0b",
}
DEFAULT_COLOR = "gold"


def validate_email(email: str) -> bool:
    return bool(email) and EMAIL_PATTERN.match(email) is not None


def validate_project_name(name: str) -> bool:
    if not name or not isinstance(name, str):
        return False
    return 1 <= len(name.strip()) <= PROJECT_NAME_MAX_LENGTH


def validate_password(password: str) -> bool:
    if not password or not isinstance(password, str):
        return False
    return len(password) <= PASSWORD_MAX_LENGTH


def sanitize_string(value) -> str:
    """Strip whitespace and angle brackets from free text."""
    if not value:
        return ""
    return str(value).strip().replace("<", "").replace(">", "")


def color_hex(color: str) -> str:
    """Resolve a color tag to its hex value, falling back to gold."""
    return PROJECT_COLORS.get(color, PROJECT_COLORS[DEFAULT_COLOR])


def generate_id() -> str:
    """Fresh unique id, time-prefixed so ids sort roughly by creation."""
    return f"{int(time.time() * 1000):x}-{uuid.uuid4().hex[:12]}"
