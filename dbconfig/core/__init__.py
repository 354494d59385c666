"""
Core utilities — exceptions shared across the config layer.
"""

from dbconfig.core.exceptions import DBConfigError, SettingsFileUnavailable

__all__ = ["DBConfigError", "SettingsFileUnavailable"]
