"""Event kinds and payload types emitted by drivers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

VERBOSE = 15


class EventKind(str, Enum):
    TRIPLE = "triple"
    LOG = "log"
    FINISH = "finish"
    FAIL = "fail"

    @property
    def is_terminal(self) -> bool:
        return self in (EventKind.FINISH, EventKind.FAIL)


class LogLevel(str, Enum):
    """Severity tags carried by log events."""

    DEBUG = "debug"
    VERBOSE = "verbose"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def logging_level(self) -> int:
        return _LOGGING_LEVELS[self]


_LOGGING_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.VERBOSE: VERBOSE,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


@dataclass(frozen=True)
class Triple:
    """A single RDF statement in N3.js term notation.

    ``object`` is either an IRI, a blank node label (``_:b0``) or a quoted
    literal such as ``"Jakarta"@id`` or ``"42"^^http://www.w3.org/2001/XMLSchema#integer``.
    """

    subject: str
    predicate: str
    object: Any

    def as_tuple(self) -> tuple[str, str, Any]:
        return (self.subject, self.predicate, self.object)
