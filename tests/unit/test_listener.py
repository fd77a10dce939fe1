"""Tests for the harness listener that feeds the RDF writer."""

from __future__ import annotations

import logging

import pytest

from benangmerah_driver.events import EventKind
from benangmerah_driver.harness import HarnessListener
from benangmerah_driver.rdf import TripleWriter

from sample_drivers import (
    TRIPLE_A,
    EmptyDriver,
    ErrorLogDriver,
    FailingDriver,
    TwoTriplesDriver,
)


@pytest.fixture
def writes() -> list[str]:
    return []


def _attach(driver, writes):
    listener = HarnessListener(driver, TripleWriter(format="nt"), writes.append)
    listener.attach()
    return listener


class TestHarnessListener:
    def test_empty_fetch_writes_nothing(self, writes):
        driver = EmptyDriver()
        listener = _attach(driver, writes)
        driver.fetch()
        assert writes == []
        assert listener.outcome is EventKind.FINISH
        assert not listener.written

    def test_single_write_with_all_triples(self, writes):
        driver = TwoTriplesDriver()
        listener = _attach(driver, writes)
        driver.fetch()
        assert len(writes) == 1
        assert listener.triple_count == 2
        lines = sorted(line for line in writes[0].splitlines() if line)
        assert lines == [
            '<http://example.org/bandung> <http://www.w3.org/2000/01/rdf-schema#label> "Bandung"@id .',
            '<http://example.org/jakarta> <http://www.w3.org/2000/01/rdf-schema#label> "Jakarta"@id .',
        ]

    def test_error_log_still_produces_partial_output(self, writes, caplog):
        driver = ErrorLogDriver()
        _attach(driver, writes)
        with caplog.at_level(logging.ERROR):
            driver.fetch()
        assert len(writes) == 1
        assert "Jakarta" in writes[0]
        assert "source returned 500 for page 2" in caplog.text

    def test_fail_writes_nothing(self, writes, caplog):
        driver = FailingDriver()
        listener = _attach(driver, writes)
        with caplog.at_level(logging.ERROR):
            driver.fetch()
        assert writes == []
        assert listener.outcome is EventKind.FAIL
        assert listener.error == "endpoint unreachable"
        assert "endpoint unreachable" in caplog.text

    def test_log_levels_forwarded(self, writes, caplog):
        driver = TwoTriplesDriver()
        _attach(driver, writes)
        with caplog.at_level(logging.DEBUG):
            driver.verbose("detail")
            driver.warn("careful")
        records = [r for r in caplog.records if r.name.endswith("TwoTriplesDriver")]
        assert [(r.levelname, r.getMessage()) for r in records] == [
            ("VERBOSE", "detail"),
            ("WARNING", "careful"),
        ]

    def test_detach(self, writes):
        driver = TwoTriplesDriver()
        listener = _attach(driver, writes)
        listener.detach()
        driver.add_triple(*TRIPLE_A)
        driver.finish()
        assert listener.triple_count == 0
        assert writes == []
