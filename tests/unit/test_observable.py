"""Tests for the event emitter."""

from __future__ import annotations

import pytest

from benangmerah_driver.driver import DriverBase
from benangmerah_driver.events import EventKind, Listenable, LogLevel, Observable, Triple


class TestObservable:
    def test_emit_without_listeners_is_noop(self):
        events = Observable()
        events.emit(EventKind.TRIPLE, Triple("s", "p", "o"))
        events.emit(EventKind.FINISH)

    def test_events_arrive_in_emission_order(self):
        events = Observable()
        seen = []
        events.subscribe("triple", lambda t: seen.append(("triple", t.subject)))
        events.subscribe("log", lambda lvl, msg: seen.append(("log", lvl, msg)))
        events.subscribe("finish", lambda: seen.append(("finish",)))

        events.emit(EventKind.TRIPLE, Triple("A", "p", "o"))
        events.emit(EventKind.LOG, LogLevel.INFO, "x")
        events.emit(EventKind.TRIPLE, Triple("B", "p", "o"))
        events.emit(EventKind.FINISH)

        assert seen == [
            ("triple", "A"),
            ("log", LogLevel.INFO, "x"),
            ("triple", "B"),
            ("finish",),
        ]

    def test_listeners_called_in_subscription_order(self):
        events = Observable()
        calls = []
        events.subscribe(EventKind.FINISH, lambda: calls.append(1))
        events.subscribe(EventKind.FINISH, lambda: calls.append(2))
        events.emit(EventKind.FINISH)
        assert calls == [1, 2]

    def test_once_fires_a_single_time(self):
        events = Observable()
        calls = []
        events.once(EventKind.TRIPLE, lambda t: calls.append(t))
        events.emit(EventKind.TRIPLE, Triple("a", "b", "c"))
        events.emit(EventKind.TRIPLE, Triple("d", "e", "f"))
        assert calls == [Triple("a", "b", "c")]
        assert events.listener_count(EventKind.TRIPLE) == 0

    def test_unsubscribe(self):
        events = Observable()
        calls = []

        def listener():
            calls.append(True)

        events.subscribe(EventKind.FINISH, listener)
        events.unsubscribe(EventKind.FINISH, listener)
        events.emit(EventKind.FINISH)
        assert calls == []

    def test_unsubscribe_removes_pending_once_listener(self):
        events = Observable()
        calls = []

        def listener():
            calls.append(True)

        events.once(EventKind.FINISH, listener)
        events.unsubscribe(EventKind.FINISH, listener)
        assert events.listener_count(EventKind.FINISH) == 0
        events.emit(EventKind.FINISH)
        assert calls == []

    def test_unsubscribe_removes_one_registration_at_a_time(self):
        events = Observable()
        calls = []

        def listener():
            calls.append(True)

        events.subscribe(EventKind.FINISH, listener)
        events.once(EventKind.FINISH, listener)
        events.unsubscribe(EventKind.FINISH, listener)
        events.emit(EventKind.FINISH)
        assert calls == [True]

    def test_unsubscribe_unknown_listener_is_noop(self):
        Observable().unsubscribe(EventKind.LOG, print)

    def test_unknown_kind_rejected(self):
        events = Observable()
        with pytest.raises(ValueError):
            events.subscribe("addTriple", print)
        with pytest.raises(ValueError):
            events.emit("error")

    def test_listener_errors_propagate(self):
        events = Observable()

        def broken():
            raise RuntimeError("listener bug")

        events.subscribe(EventKind.FINISH, broken)
        with pytest.raises(RuntimeError, match="listener bug"):
            events.emit(EventKind.FINISH)


class TestListenable:
    def test_observable_and_driver_are_listenable(self):
        assert isinstance(Observable(), Listenable)
        assert isinstance(DriverBase(), Listenable)

    def test_terminal_kinds(self):
        assert EventKind.FINISH.is_terminal
        assert EventKind.FAIL.is_terminal
        assert not EventKind.TRIPLE.is_terminal
        assert not EventKind.LOG.is_terminal
