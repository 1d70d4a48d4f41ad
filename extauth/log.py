"""
Severity-aware logging for the auth process.

Modules log through ``logging.getLogger(__name__)`` as usual; everything under the
``extauth`` logger ends up in a single append-only file whose lines look like::

    2024-05-01 12:00:00 <4242>      INFO: Entering event loop...

Only severities in the enabled set are written. Without a log path every call is a
no-op, which is what ejabberd expects from a quiet helper process.
"""

from __future__ import annotations

import logging
import warnings
from enum import IntEnum
from typing import FrozenSet, Iterable, Optional, Union

LOGGER_NAME = "extauth"
LOG_FORMAT = "%(asctime)s <%(process)d> %(levelname)9s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Severity(IntEnum):
    """Syslog-style severities expressed as ``logging`` levels."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    NOTICE = 25
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL
    ALERT = 55
    EMERGENCY = 60
    KERNEL = 65


for _severity in (Severity.NOTICE, Severity.ALERT, Severity.EMERGENCY, Severity.KERNEL):
    logging.addLevelName(int(_severity), _severity.name)

DEFAULT_ENABLED: FrozenSet[Severity] = frozenset(
    {
        Severity.EMERGENCY,
        Severity.ALERT,
        Severity.CRITICAL,
        Severity.ERROR,
        Severity.WARNING,
        Severity.INFO,
        Severity.KERNEL,
    }
)


def parse_severities(value: Union[str, Iterable[str]]) -> FrozenSet[Severity]:
    """Turn ``"error,warning,debug"`` (or an iterable of names) into a severity set."""
    names = value.split(",") if isinstance(value, str) else value
    try:
        return frozenset(Severity[name.strip().upper()] for name in names if name.strip())
    except KeyError as exc:
        raise ValueError(f"Unknown severity {exc.args[0]!r}") from exc


class SeverityFilter(logging.Filter):
    """Pass records whose level is an enabled severity; drop everything else."""

    def __init__(self, enabled: Iterable[int]) -> None:
        super().__init__()
        self.enabled = frozenset(int(level) for level in enabled)

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno in self.enabled


def configure_logging(path: Optional[str], enabled: Iterable[Severity] = DEFAULT_ENABLED) -> logging.Handler:
    """
    Install the process-wide sink and return its handler.

    An unopenable path leaves logging disabled rather than failing startup.
    Python warnings are captured into the same sink so runtime warnings are logged
    instead of being printed to stderr.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()

    handler: logging.Handler = logging.NullHandler()
    if path:
        try:
            handler = logging.FileHandler(path, mode="a", encoding="utf-8")
        except OSError as exc:
            warnings.warn(f"Cannot open log file {path}: {exc}; logging disabled", RuntimeWarning, stacklevel=2)
    handler.addFilter(SeverityFilter(enabled))
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    logging.getLogger("py.warnings").addHandler(handler)
    logging.captureWarnings(True)
    return handler


def release_logging(handler: logging.Handler) -> None:
    """Detach and close a handler installed by :func:`configure_logging`."""
    logging.captureWarnings(False)
    logging.getLogger("py.warnings").removeHandler(handler)
    logging.getLogger(LOGGER_NAME).removeHandler(handler)
    handler.close()


def log(message: str, severity: Severity = Severity.ERROR) -> None:
    logging.getLogger(LOGGER_NAME).log(int(severity), message)


__all__ = [
    "LOGGER_NAME",
    "Severity",
    "DEFAULT_ENABLED",
    "SeverityFilter",
    "parse_severities",
    "configure_logging",
    "release_logging",
    "log",
]
