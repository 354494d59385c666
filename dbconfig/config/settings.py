"""
Typed database settings snapshot.

Responsibilities:
- Resolve the four DB_* values once into a frozen DatabaseSettings object
  that can be handed to whatever opens the connection.
- Render settings for logs without leaking the password.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any

from dbconfig.config.env import (
    SettingsResolver,
    get_db_driver,
    get_db_password,
    get_db_url,
    get_db_user,
    get_resolver,
)
from dbconfig.dbconfig_logging import get_logger

logger = get_logger(__name__)

MASK = "***"


def mask_url(url: str) -> str:
    """Hide a password=... query parameter if the URL carries one."""
    if "password=" not in url:
        return url
    head, _, tail = url.partition("password=")
    _, amp, rest = tail.partition("&")
    return f"{head}password={MASK}{amp}{rest}"


@dataclass(frozen=True)
class DatabaseSettings:
    """Resolved connection parameters."""

    url: str
    user: str
    password: str
    driver: str

    @classmethod
    def from_resolver(cls, resolver: SettingsResolver | None = None) -> DatabaseSettings:
        resolver = resolver or get_resolver()
        return cls(
            url=get_db_url(resolver=resolver),
            user=get_db_user(resolver=resolver),
            password=get_db_password(resolver=resolver),
            driver=get_db_driver(resolver=resolver),
        )

    def to_dict(self, *, mask_secrets: bool = True) -> dict[str, Any]:
        if not mask_secrets:
            return {
                "url": self.url,
                "user": self.user,
                "password": self.password,
                "driver": self.driver,
            }
        return {
            "url": mask_url(self.url),
            "user": self.user,
            "password": MASK if self.password else "",
            "driver": self.driver,
        }


@functools.lru_cache(maxsize=1)
def get_settings() -> DatabaseSettings:
    """
    Return the database settings from the process-wide resolver.

    Cached for the life of the process; call get_settings.cache_clear() after
    reset_resolver_for_test() in tests.
    """
    return DatabaseSettings.from_resolver()


def log_db_startup(script_name: str, settings: DatabaseSettings | None = None) -> None:
    """Log the resolved database settings (password masked) at script start."""
    settings = settings or get_settings()
    logger.info("db_settings_resolved", script=script_name, **settings.to_dict())
