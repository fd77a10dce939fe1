"""Tests for options merging."""

from __future__ import annotations

from benangmerah_driver.drivers import JsonRecordsDriver
from benangmerah_driver.options import merge_options

from sample_drivers import TwoTriplesDriver


class TestMergeOptions:
    def test_new_options_win_and_unique_keys_pass_through(self):
        defaults = {"force": False, "limit": 100}
        merged = merge_options({"limit": 50, "outputFile": "x.ttl"}, defaults)
        assert merged == {"force": False, "limit": 50, "outputFile": "x.ttl"}

    def test_empty_or_none_gives_defaults(self):
        assert merge_options({}, {"a": 1}) == {"a": 1}
        assert merge_options(None, {"a": 1}) == {"a": 1}

    def test_keys_absent_from_both_sides_are_absent(self):
        assert "b" not in merge_options({"a": 2}, {"a": 1})

    def test_inputs_not_mutated(self):
        new, defaults = {"limit": 5}, {"limit": 100, "force": False}
        merge_options(new, defaults)
        assert new == {"limit": 5}
        assert defaults == {"limit": 100, "force": False}

    def test_falsy_values_still_override(self):
        assert merge_options({"force": False, "limit": 0}, {"force": True, "limit": 9}) == {
            "force": False,
            "limit": 0,
        }


class TestSetOptions:
    def test_documented_example(self):
        driver = TwoTriplesDriver().set_options({"limit": 50, "outputFile": "x.ttl"})
        assert driver.options == {"force": False, "limit": 50, "outputFile": "x.ttl"}

    def test_options_default_before_set(self):
        assert TwoTriplesDriver().options == {"force": False, "limit": 100}

    def test_idempotent(self):
        driver = TwoTriplesDriver()
        driver.set_options({"limit": 1})
        first = dict(driver.options)
        driver.set_options({"limit": 1})
        assert driver.options == first

    def test_replaces_rather_than_accumulates(self):
        driver = TwoTriplesDriver()
        driver.set_options({"extra": 1})
        driver.set_options({"limit": 2})
        assert driver.options == {"force": False, "limit": 2}

    def test_defaults_not_shared_between_instances(self):
        a, b = JsonRecordsDriver(), JsonRecordsDriver()
        a.options["predicates"]["name"] = "http://example.org/name"
        assert b.options["predicates"] == {}
        assert JsonRecordsDriver.default_options()["predicates"] == {}
