"""Forward driver events to an RDF writer and the logging system."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from benangmerah_driver.events import EventKind, Listenable, LogLevel, Triple
from benangmerah_driver.rdf import TripleWriter

logger = logging.getLogger(__name__)


class HarnessListener:
    """Subscribes to every event kind of one driver.

    Triples accumulate in *writer*. On ``finish`` the serialized graph is
    passed to *sink* exactly once, and only if at least one triple arrived.
    A ``fail`` writes nothing.
    """

    def __init__(
        self,
        driver: Listenable,
        writer: TripleWriter,
        sink: Callable[[str], None],
        driver_logger: logging.Logger | None = None,
    ) -> None:
        self.driver = driver
        self.writer = writer
        self.sink = sink
        self.driver_logger = driver_logger or logging.getLogger(
            f"benangmerah_driver.drivers.{type(driver).__name__}"
        )
        self.triple_count = 0
        self.outcome: EventKind | None = None
        self.error: Any = None
        self.written = False

    def _handlers(self) -> dict[EventKind, Callable[..., None]]:
        return {
            EventKind.TRIPLE: self.on_triple,
            EventKind.LOG: self.on_log,
            EventKind.FINISH: self.on_finish,
            EventKind.FAIL: self.on_fail,
        }

    def attach(self) -> None:
        for kind, handler in self._handlers().items():
            self.driver.subscribe(kind, handler)

    def detach(self) -> None:
        for kind, handler in self._handlers().items():
            self.driver.unsubscribe(kind, handler)

    def on_triple(self, triple: Triple) -> None:
        self.writer.add(triple)
        self.triple_count += 1

    def on_log(self, level: LogLevel, message: Any) -> None:
        self.driver_logger.log(level.logging_level, "%s", message)

    def on_finish(self) -> None:
        self.outcome = EventKind.FINISH
        if not self.triple_count:
            logger.info("No triples emitted, nothing written")
            return
        self.sink(self.writer.end())
        self.written = True
        logger.info("Wrote %d statements", len(self.writer))

    def on_fail(self, error: Any) -> None:
        self.outcome = EventKind.FAIL
        self.error = error
        logger.error(
            "Fetch failed after %d triples, nothing written: %s",
            self.triple_count,
            error,
        )
