"""Base class for BenangMerah drivers.

A driver feeds linked data from one kind of source (an IATI datasource, a
CKAN endpoint, a JSON dump) into BenangMerah. One driver instance serves one
source instance, e.g. a single CKAN endpoint.

Hosts configure an instance with :meth:`DriverBase.set_options` and
:meth:`DriverBase.set_last_fetched`, subscribe to its events, then call
:meth:`DriverBase.fetch` once. Concrete drivers override ``fetch`` and report
through :meth:`add_triple`, the logging helpers, and exactly one of
:meth:`finish` or :meth:`fail`.
"""

from __future__ import annotations

import datetime
from collections.abc import Awaitable, Mapping, Sequence
from enum import Enum
from typing import Any

from benangmerah_driver.events import EventKind, Listener, LogLevel, Observable, Triple
from benangmerah_driver.exceptions import DriverStateError
from benangmerah_driver.options import merge_options


class DriverState(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    FINISHED = "finished"
    FAILED = "failed"


class DriverBase:
    """The base BenangMerah driver class."""

    def __init__(self) -> None:
        self.events = Observable()
        self.last_fetched: str = ""
        self.options: dict[str, Any] = self.default_options()
        self.state = DriverState.IDLE

    @classmethod
    def default_options(cls) -> dict[str, Any]:
        """Return a fresh mapping of default options. Subclasses extend this."""
        return {}

    @property
    def name(self) -> str:
        return type(self).__name__

    # -- configuration, called by the host before fetch ------------------

    def set_options(self, new_options: Mapping[str, Any] | None) -> DriverBase:
        self.options = merge_options(new_options, self.default_options())
        return self

    def set_last_fetched(self, last_fetched: str) -> DriverBase:
        """Record when this source instance was last fetched, for delta fetching."""
        self.last_fetched = last_fetched
        return self

    @property
    def last_fetched_datetime(self) -> datetime.datetime | None:
        if not self.last_fetched:
            return None
        return datetime.datetime.fromisoformat(self.last_fetched)

    # -- subscription ----------------------------------------------------

    def subscribe(self, kind: EventKind | str, listener: Listener) -> None:
        self.events.subscribe(kind, listener)

    def unsubscribe(self, kind: EventKind | str, listener: Listener) -> None:
        self.events.unsubscribe(kind, listener)

    on = subscribe
    off = unsubscribe

    def once(self, kind: EventKind | str, listener: Listener) -> None:
        self.events.once(kind, listener)

    # -- emission, called by concrete drivers ----------------------------

    @property
    def is_terminated(self) -> bool:
        return self.state in (DriverState.FINISHED, DriverState.FAILED)

    def _emit(self, kind: EventKind, *payload: Any) -> None:
        if self.is_terminated:
            raise DriverStateError(
                f"{self.name} emitted {kind.value!r} after it {self.state.value}"
            )
        if self.state is DriverState.IDLE:
            self.state = DriverState.FETCHING
        if kind is EventKind.FINISH:
            self.state = DriverState.FINISHED
        elif kind is EventKind.FAIL:
            self.state = DriverState.FAILED
        self.events.emit(kind, *payload)

    def add_triple(self, subject: str, predicate: str, obj: Any) -> None:
        """Add one statement to the graph.

        *obj* is an IRI or a literal in N3.js notation; see
        :func:`benangmerah_driver.rdf.literal`.
        """
        self._emit(EventKind.TRIPLE, Triple(subject, predicate, obj))

    def log(self, level: LogLevel | str, message: Any) -> None:
        self._emit(EventKind.LOG, LogLevel(level), message)

    def debug(self, message: Any) -> None:
        self.log(LogLevel.DEBUG, message)

    def verbose(self, message: Any) -> None:
        self.log(LogLevel.VERBOSE, message)

    def info(self, message: Any) -> None:
        self.log(LogLevel.INFO, message)

    def warn(self, message: Any) -> None:
        self.log(LogLevel.WARN, message)

    def error(self, message: Any) -> None:
        self.log(LogLevel.ERROR, message)

    def finish(self) -> None:
        """Signal that fetching completed. Nothing may be emitted afterwards."""
        self._emit(EventKind.FINISH)

    def fail(self, error: BaseException | str) -> None:
        """Signal that fetching could not complete. Nothing may be emitted afterwards."""
        self._emit(EventKind.FAIL, error)

    # -- extension point -------------------------------------------------

    def fetch(self) -> Awaitable[None] | None:
        """Fetch data from the source. Overridden by concrete drivers.

        Implementations call :meth:`add_triple` for each statement, the
        logging helpers at any point, and finally :meth:`finish` (or
        :meth:`fail`). There is no reset: a second call on the same
        instance raises :class:`DriverStateError` on its first emission.
        Async drivers may return a coroutine.
        """
        return None

    @classmethod
    def run_cli(
        cls,
        options: Mapping[str, Any] | None = None,
        args: Sequence[str] | None = None,
    ) -> None:
        """Run this driver standalone, writing RDF to a file or stdout."""
        from benangmerah_driver.harness import handle_cli

        handle_cli(cls, options, args)
