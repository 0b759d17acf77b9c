"""
Logging configuration.

areacodekit logs through the standard library and never installs handlers on
import. Applications that want the library's records on stdout call
`configure_logging(settings)` once; it attaches a single handler to the
`areacodekit` logger, leaving the root logger alone.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

from areacodekit.config import AreaCodeSettings

PACKAGE_LOGGER = "areacodekit"
PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Attributes every LogRecord has; anything else came in through `extra=`.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}


def record_extras(record: logging.LogRecord) -> dict[str, Any]:
    """Return the fields passed with `extra=` (source, count, country, ...)."""

    return {
        k: v
        for k, v in record.__dict__.items()
        if k not in _RESERVED_ATTRS and not k.startswith("_")
    }


class JsonFormatter(logging.Formatter):
    """One JSON object per line: ts, level, logger, msg plus any extras."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            **record_extras(record),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"), default=str)


class _AreaCodeHandler(logging.StreamHandler):
    """Marker type so reconfiguration replaces only handlers installed here."""


def configure_logging(
    settings: AreaCodeSettings | None = None, *, stream: TextIO | None = None
) -> logging.Logger:
    """
    Route areacodekit log records to `stream` (stdout by default).

    `settings.log_level` sets the package logger level and
    `settings.json_logging` picks `JsonFormatter` over the plain format.
    Calling it again replaces the handler instead of adding a second one.
    """

    settings = settings or AreaCodeSettings()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(settings.log_level.upper())

    for h in list(logger.handlers):
        if isinstance(h, _AreaCodeHandler):
            logger.removeHandler(h)

    handler = _AreaCodeHandler(stream or sys.stdout)
    formatter = JsonFormatter() if settings.json_logging else logging.Formatter(PLAIN_FORMAT)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    # Records are handled here; don't print them again through root handlers.
    logger.propagate = False
    return logger
