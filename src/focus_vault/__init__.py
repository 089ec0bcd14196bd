"""Focus Vault: a local time tracker with projects, a session timer and stats."""

__version__ = "0.1.0"
