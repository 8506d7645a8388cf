"""
Logging setup for the window advisor CLI.

``configure_logging(config)`` is called once per CLI command, right after
the config loads and before the catalog is fetched.  Library modules only
ever call ``logging.getLogger(__name__)``.

Handlers write to stderr (and optionally a log file) so the comparison
table on stdout can be piped or redirected without log noise.

Structured fields
-----------------
Modules attach run facts with ``extra=`` instead of formatting them into
the message.  The ranker, for example, logs::

    logger.info("Recommended %d of %d scored products (best score %d)", ...,
                extra={"catalog_size": 12, "scored": 4, "recommended": 4,
                       "best_score": 65, "climate": "cold"})

The plain text format ignores those fields.  With ``json_format = true``
under ``[logging]`` each record becomes one JSON object and the fields sit
beside the standard keys::

    {"ts": "2026-10-19T15:00:00Z", "level": "INFO",
     "logger": "window_advisor.recommendations.ranker",
     "msg": "Recommended 4 of 4 scored products (best score 65)",
     "catalog_size": 12, "scored": 4, "recommended": 4, "best_score": 65,
     "climate": "cold"}
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from window_advisor.config import LoggingConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Loggers of the HTTP stack used by the catalog and location clients
_QUIET_LOGGERS = ("httpx", "httpcore")

# Attributes every LogRecord carries; anything else arrived through extra=
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({})).keys()) | {"message", "asctime"}


def record_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Return the ``extra=`` fields attached to ``record``."""
    return {
        key: val
        for key, val in vars(record).items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


class _JsonFormatter(logging.Formatter):
    """One JSON object per record: ``ts``, ``level``, ``logger``, ``msg``,
    ``exc`` when an exception is attached, then the record's ``extra=`` fields.

    Standard keys win over an ``extra=`` field of the same name.  Values
    that ``json`` cannot encode (enums, paths, Decimals) are written with
    ``str()``.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = record_fields(record)
        payload.update(
            ts=datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(LOG_DATE_FORMAT),
            level=record.levelname,
            logger=record.name,
            msg=record.getMessage(),
        )
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _handler(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def configure_logging(config: "LoggingConfig") -> None:
    """Install stderr and optional file handlers on the root logger.

    Args:
        config: ``[logging]`` section of ``AppConfig``.  ``log_file`` parent
            directories are created if missing.
    """
    level = getattr(logging, config.level.upper(), logging.INFO)
    formatter = (
        _JsonFormatter()
        if config.json_format
        else logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    )

    handlers = [_handler(logging.StreamHandler(sys.stderr), level, formatter)]
    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            _handler(logging.FileHandler(log_path, encoding="utf-8"), level, formatter)
        )

    logging.basicConfig(level=level, handlers=handlers, force=True)

    # Request lines from the HTTP clients only at WARNING and above
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
