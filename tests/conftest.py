"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def records_json() -> Path:
    return FIXTURES_DIR / "records.json"


@pytest.fixture
def records_ndjson() -> Path:
    return FIXTURES_DIR / "records.ndjson"


@pytest.fixture
def cities_config() -> Path:
    return FIXTURES_DIR / "cities.yaml"


@pytest.fixture(autouse=True)
def _keep_root_logging(monkeypatch):
    """Stop the harness from reconfiguring the root logger (it would drop caplog)."""
    monkeypatch.setattr(
        "benangmerah_driver.harness.runner.setup_logging", lambda level="INFO": None
    )
