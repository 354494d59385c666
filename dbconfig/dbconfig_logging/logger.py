"""
Diagnostics for dbconfig, emitted through structlog.

dbconfig is imported into a host program, so the host decides how loud it
is: call configure_logging() with a level, a format ("json" or "console")
and a stream. Until then, LOG_LEVEL / LOG_FORMAT from the environment apply
(INFO, JSON on stderr). A host that configures structlog itself before
importing dbconfig keeps its own setup.

Loggers returned by get_logger() are lazy: every call picks up the current
configuration, so reconfiguring after import takes effect immediately.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import IO, Any

import structlog
from structlog._config import BoundLoggerLazyProxy

LEVEL_ENV = "LOG_LEVEL"
FORMAT_ENV = "LOG_FORMAT"
FORMATS = ("json", "console")


def _level_value(level: str | int | None) -> int:
    if level is None:
        level = os.getenv(LEVEL_ENV, "INFO")
    if isinstance(level, int):
        return level
    return getattr(logging, level.strip().upper(), logging.INFO)


def _format_name(fmt: str | None) -> str:
    fmt = (fmt or os.getenv(FORMAT_ENV) or "json").strip().lower()
    return fmt if fmt in FORMATS else "json"


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    event_dict.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
    return event_dict


def _event_type(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Store the event name under event_type (settings_file_loaded, settings_file_unavailable, ...)."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    return event_dict


def configure_logging(
    level: str | int | None = None,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """
    Configure dbconfig diagnostics.

    Args:
        level: "DEBUG", "WARNING", logging.ERROR, ... Default: LOG_LEVEL or INFO.
        fmt: "json" or "console". Default: LOG_FORMAT or json.
        stream: Where lines are written. Default: sys.stderr.
    """
    stream = stream if stream is not None else sys.stderr
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        _add_timestamp,
        _event_type,
    ]
    if _format_name(fmt) == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(colors=stream.isatty(), event_key="event_type")
        )
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_level_value(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )


if not structlog.is_configured():
    configure_logging()


def get_logger(name: str) -> Any:
    """Return a lazy structlog logger tagged with logger=name."""
    # structlog.get_logger(logger=name) collides with wrap_logger's own
    # `logger` parameter, so build the same lazy proxy it would return.
    return BoundLoggerLazyProxy(None, initial_values={"logger": name}, logger_factory_args=())
