"""Tests for focus_vault.utils.validation."""

import pytest

from focus_vault.utils.validation import (
    PROJECT_COLORS,
    color_hex,
    generate_id,
    sanitize_string,
    validate_email,
    validate_password,
    validate_project_name,
)


@pytest.mark.parametrize("email,ok", [
    ("smalesker@focusvault.com", True),
    ("a@b.co", True),
    ("no-at-sign.com", False),
    ("two words@x.com", False),
    ("", False),
])
def test_validate_email(email, ok):
    assert validate_email(email) is ok


def test_validate_project_name():
    assert validate_project_name("Writing") is True
    assert validate_project_name("   ") is False
    assert validate_project_name("x" * 101) is False


def test_validate_password():
    assert validate_password("admin") is True
    assert validate_password("") is False
    assert validate_password("x" * 129) is False


def test_sanitize_string():
    assert sanitize_string("  <b>bold</b> ") == "bbold/b"
    assert sanitize_string(None) == ""


def test_color_hex_fallback():
    assert color_hex("blue") == PROJECT_COLORS["blue"]
    assert color_hex("nope") == PROJECT_COLORS["gold"]


def test_generate_id_unique():
    assert len({generate_id() for _ in range(100)}) == 100
