"""
dbconfig — database connection settings from .env, environment, and defaults.

Call get_db_url(), get_db_user(), get_db_password() and get_db_driver()
anywhere; the .env file is read once on first access.
"""

from dbconfig.dbconfig_logging import configure_logging  # noqa: F401
from dbconfig.config import (  # noqa: F401
    DatabaseSettings,
    get_db_driver,
    get_db_password,
    get_db_url,
    get_db_user,
    get_settings,
)

__version__ = "0.1.0"

__all__ = [
    "DatabaseSettings",
    "configure_logging",
    "get_db_driver",
    "get_db_password",
    "get_db_url",
    "get_db_user",
    "get_settings",
]
