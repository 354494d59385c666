"""
Application-level exceptions.

SettingsFileUnavailable is the only failure the loader knows about. It is
raised by the file reader and recovered inside EnvFileStore.load(), so
accessor callers never see it.
"""

from __future__ import annotations

from pathlib import Path


class DBConfigError(Exception):
    """Base class for dbconfig errors."""


class SettingsFileUnavailable(DBConfigError):
    """The settings file could not be opened or decoded (missing, unreadable, I/O failure)."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"settings file {self.path} unavailable: {reason}")
