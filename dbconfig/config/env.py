"""
Database settings from a local .env file, the process environment, and defaults.

Resolution order for every key (first match wins):
- .env file entry (an empty value still counts as set)
- environment variable (an empty value counts as unset)
- hard-coded default

- DB_URL: connection URL (default: jdbc:mysql://localhost:3310/java_college_db)
- DB_USER: connection user (default: root)
- DB_PASSWORD: connection password (default: empty)
- DB_DRIVER: driver identifier (default: com.mysql.cj.jdbc.Driver)
- DBCONFIG_ENV_FILE: path of the settings file (default: .env in the working directory)
"""

from __future__ import annotations

import os
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from dbconfig.core.exceptions import SettingsFileUnavailable
from dbconfig.dbconfig_logging import get_logger

logger = get_logger(__name__)

ENV_FILE_VAR = "DBCONFIG_ENV_FILE"
DEFAULT_ENV_FILE = ".env"

DB_URL_KEY = "DB_URL"
DB_USER_KEY = "DB_USER"
DB_PASSWORD_KEY = "DB_PASSWORD"
DB_DRIVER_KEY = "DB_DRIVER"

DEFAULT_DB_URL = "jdbc:mysql://localhost:3310/java_college_db"
DEFAULT_DB_USER = "root"
DEFAULT_DB_PASSWORD = ""
DEFAULT_DB_DRIVER = "com.mysql.cj.jdbc.Driver"


def default_env_path() -> Path:
    """Return DBCONFIG_ENV_FILE if set, else .env relative to the working directory."""
    raw = (os.getenv(ENV_FILE_VAR) or "").strip()
    return Path(raw or DEFAULT_ENV_FILE)


def _parse_line(line: str) -> tuple[str, str] | None:
    """Return (key, value) for a KEY=VALUE line, None for blanks, comments and lines without '=' or a key."""
    line = line.strip()
    if not line or line.startswith("#"):
        return None
    key, sep, value = line.partition("=")
    key = key.strip()
    if not sep or not key:
        return None
    return key, value.strip()


def _read_env_file(path: Path) -> dict[str, str]:
    """
    Parse a KEY=VALUE settings file.

    Blank lines and '#' comments are skipped, whitespace around key and value
    is stripped, only the first '=' splits, and the last duplicate wins.
    Values are taken literally: no quoting, escapes or inline comments.
    Lines without '=' are dropped. Raises SettingsFileUnavailable if the file
    cannot be opened or decoded.
    """
    entries: dict[str, str] = {}
    try:
        with open(path, encoding="utf-8") as fh:
            for line in fh:
                parsed = _parse_line(line)
                if parsed is not None:
                    key, value = parsed
                    entries[key] = value
    except (OSError, UnicodeDecodeError) as e:
        raise SettingsFileUnavailable(path, str(e)) from e
    return entries


class EnvFileStore:
    """
    In-memory copy of the settings file, loaded at most once.

    load() is safe to call from several threads; only the first call touches
    the file. entries is a read-only view afterwards.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else default_env_path()
        self._entries: Mapping[str, str] = MappingProxyType({})
        self._loaded = False
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def entries(self) -> Mapping[str, str]:
        self.load()
        return self._entries

    def load(self) -> None:
        """Read the settings file once. A missing or unreadable file logs a warning and leaves entries empty."""
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            try:
                data = _read_env_file(self.path)
            except SettingsFileUnavailable as e:
                logger.warning(
                    "settings_file_unavailable",
                    path=str(e.path),
                    reason=e.reason,
                    hint="Using system environment variables instead. Create a .env file based on .env.example",
                )
                data = {}
            else:
                logger.info("settings_file_loaded", path=str(self.path), keys=len(data))
            self._entries = MappingProxyType(data)
            self._loaded = True


class SettingsResolver:
    """Resolve a setting from the store, then the environment, then a default."""

    def __init__(self, store: EnvFileStore | None = None) -> None:
        self.store = store if store is not None else EnvFileStore()

    def resolve(self, key: str, default: str) -> str:
        entries = self.store.entries
        if key in entries:
            return entries[key]
        value = os.environ.get(key)
        if value:
            return value
        return default


_resolver: SettingsResolver | None = None
_resolver_lock = threading.Lock()


def get_resolver() -> SettingsResolver:
    """Return the process-wide resolver, creating it on first use."""
    global _resolver
    if _resolver is None:
        with _resolver_lock:
            if _resolver is None:
                _resolver = SettingsResolver()
    return _resolver


def reset_resolver_for_test() -> None:
    """
    Drop the process-wide resolver so the next access re-reads the settings file. For tests only.
    """
    global _resolver
    with _resolver_lock:
        _resolver = None


def get_db_url(*, resolver: SettingsResolver | None = None) -> str:
    """Return DB_URL."""
    return (resolver or get_resolver()).resolve(DB_URL_KEY, DEFAULT_DB_URL)


def get_db_user(*, resolver: SettingsResolver | None = None) -> str:
    """Return DB_USER."""
    return (resolver or get_resolver()).resolve(DB_USER_KEY, DEFAULT_DB_USER)


def get_db_password(*, resolver: SettingsResolver | None = None) -> str:
    """Return DB_PASSWORD (empty when unset)."""
    return (resolver or get_resolver()).resolve(DB_PASSWORD_KEY, DEFAULT_DB_PASSWORD)


def get_db_driver(*, resolver: SettingsResolver | None = None) -> str:
    """Return DB_DRIVER."""
    return (resolver or get_resolver()).resolve(DB_DRIVER_KEY, DEFAULT_DB_DRIVER)
