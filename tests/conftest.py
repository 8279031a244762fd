"""
Shared test fixtures for the SuperCycle test suite.

Provides:
- A fixed clock pinned to a known instant
- A factory for cycle configurations
- The Flask app and test client wired to the fixed clock

Usage:
    def test_example(make_config):
        config = make_config(light_hours=12, dark_hours=12)
        assert config.cycle_length == 24
"""

from __future__ import annotations

import logging
from datetime import datetime

import pytest

from supercycle import create_app
from supercycle.domain.cycle_config import CycleConfig
from supercycle.utils.time import FixedClock

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
logging.getLogger("supercycle").setLevel(logging.WARNING)

START = datetime(2024, 1, 1, 0, 0)


@pytest.fixture()
def start() -> datetime:
    return START


@pytest.fixture()
def make_config():
    """Build a CycleConfig starting at 2024-01-01 00:00 unless told otherwise."""

    def _make(
        light_hours: float = 13,
        dark_hours: float = 14,
        duration_days: int = 60,
        start_instant: datetime = START,
    ) -> CycleConfig:
        return CycleConfig(
            start_instant=start_instant,
            light_hours=light_hours,
            dark_hours=dark_hours,
            duration_days=duration_days,
        )

    return _make


@pytest.fixture()
def clock() -> FixedClock:
    """Clock pinned to 10:00 on the default start day."""
    return FixedClock(datetime(2024, 1, 1, 10, 0))


# ========================== App Fixtures ===================================


@pytest.fixture()
def app(clock, monkeypatch):
    monkeypatch.delenv("SUPERCYCLE_TICK_SECONDS", raising=False)
    monkeypatch.delenv("SUPERCYCLE_DEFAULT_LIGHT_HOURS", raising=False)
    monkeypatch.delenv("SUPERCYCLE_DEFAULT_DARK_HOURS", raising=False)
    monkeypatch.delenv("SUPERCYCLE_DEFAULT_DURATION_DAYS", raising=False)
    app = create_app({"secret_key": "test-secret", "log_file": ""}, clock=clock)
    app.config["TESTING"] = True
    yield app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def config_service(app):
    return app.config["CONTAINER"].cycle_config_service
