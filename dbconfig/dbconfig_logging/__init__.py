"""
Structured logging for dbconfig.

Host programs call configure_logging() to pick level, format and stream.
"""

from dbconfig.dbconfig_logging.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
