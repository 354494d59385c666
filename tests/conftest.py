"""
Pytest fixtures for dbconfig tests. Each test runs in an empty temp working directory.
"""

from __future__ import annotations

from pathlib import Path

import pytest

DB_KEYS = ("DB_URL", "DB_USER", "DB_PASSWORD", "DB_DRIVER")


@pytest.fixture
def clean_env(tmp_path, monkeypatch):
    """
    chdir into tmp_path, unset DB_* and DBCONFIG_ENV_FILE, and drop the cached
    process-wide resolver and settings so each test starts from nothing.
    """
    for key in DB_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("DBCONFIG_ENV_FILE", raising=False)
    monkeypatch.chdir(tmp_path)

    from dbconfig.config import env
    from dbconfig.config.settings import get_settings

    env.reset_resolver_for_test()
    get_settings.cache_clear()
    yield tmp_path
    env.reset_resolver_for_test()
    get_settings.cache_clear()


@pytest.fixture
def write_env(clean_env):
    """Write text to .env in the temp working directory and return its path."""

    def _write(text: str, name: str = ".env") -> Path:
        path = clean_env / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
