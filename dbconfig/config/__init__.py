"""
Configuration management for dbconfig.

Loads database settings from a local .env file with environment variable and
default fallbacks. Exposes the four accessors plus a typed settings snapshot.
"""

from dbconfig.config.env import (  # noqa: F401
    EnvFileStore,
    SettingsResolver,
    get_db_driver,
    get_db_password,
    get_db_url,
    get_db_user,
    get_resolver,
    reset_resolver_for_test,
)
from dbconfig.config.settings import DatabaseSettings, get_settings, log_db_startup  # noqa: F401

__all__ = [
    "DatabaseSettings",
    "EnvFileStore",
    "SettingsResolver",
    "get_db_driver",
    "get_db_password",
    "get_db_url",
    "get_db_user",
    "get_resolver",
    "get_settings",
    "log_db_startup",
    "reset_resolver_for_test",
]
