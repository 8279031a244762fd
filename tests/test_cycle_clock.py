"""
Cycle Clock Tests
=================
Tests for elapsed time, phase position and the light test.
"""

from datetime import timedelta

import pytest

from supercycle.constants import CYCLE_LENGTH_EPSILON
from supercycle.domain.cycle_clock import (
    completed_cycles,
    elapsed_hours,
    is_light,
    phase_at,
    position_in_cycle,
)
from supercycle.enums import LightState


class TestPositionInCycle:
    @pytest.mark.parametrize("cycle_length", [27.0, 24.0, 0.5, CYCLE_LENGTH_EPSILON])
    @pytest.mark.parametrize(
        "elapsed",
        [-1000.5, -27.0, -13.0, -1e-12, 0.0, 13.0, 26.999, 27.0, 1_000_000.3],
    )
    def test_position_always_within_cycle(self, elapsed, cycle_length):
        position = position_in_cycle(elapsed, cycle_length)
        assert 0 <= position < cycle_length

    def test_negative_elapsed_wraps_backwards(self):
        # One hour before the start is the last hour of the previous cycle
        assert position_in_cycle(-1.0, 27.0) == pytest.approx(26.0)
        assert position_in_cycle(-28.0, 27.0) == pytest.approx(26.0)

    def test_full_cycles_return_to_zero(self):
        assert position_in_cycle(54.0, 27.0) == 0.0


class TestIsLight:
    def test_start_of_cycle_is_light_when_light_hours_positive(self):
        assert is_light(0.0, 13.0) is True

    def test_start_of_cycle_is_dark_without_light_hours(self):
        assert is_light(0.0, 0.0) is False

    def test_boundary_belongs_to_dark(self):
        assert is_light(13.0, 13.0) is False
        assert is_light(12.999, 13.0) is True


class TestPhaseAt:
    def test_elapsed_is_signed(self, make_config, start):
        config = make_config()
        assert elapsed_hours(config, start + timedelta(hours=5)) == pytest.approx(5.0)
        assert elapsed_hours(config, start - timedelta(hours=2, minutes=30)) == pytest.approx(-2.5)

    def test_thirteen_hours_after_start_is_dark(self, make_config, start):
        config = make_config(light_hours=13, dark_hours=14)
        phase = phase_at(config, start + timedelta(hours=13))
        assert phase.is_light is False
        assert phase.state is LightState.DARK
        assert phase.position_in_cycle == pytest.approx(13.0)

    def test_light_phase(self, make_config, start):
        phase = phase_at(make_config(), start + timedelta(hours=10))
        assert phase.is_light is True
        assert phase.state is LightState.LIGHT

    def test_pre_start_instant_uses_previous_cycle(self, make_config, start):
        phase = phase_at(make_config(), start - timedelta(hours=1))
        assert phase.elapsed_hours == pytest.approx(-1.0)
        assert phase.position_in_cycle == pytest.approx(26.0)
        assert phase.is_light is False
        assert phase.completed_cycles == 0

    def test_zero_length_cycle_is_never_light(self, make_config, start):
        config = make_config(light_hours=0, dark_hours=0)
        assert config.cycle_length == CYCLE_LENGTH_EPSILON
        for hours in (0, 0.25, 7, 1000):
            assert phase_at(config, start + timedelta(hours=hours)).is_light is False

    def test_to_dict_reports_switch_label(self, make_config, start):
        payload = phase_at(make_config(), start).to_dict()
        assert payload["state"] == "ON"
        assert payload["is_light"] is True


class TestCompletedCycles:
    def test_counts_full_super_cycles(self):
        assert completed_cycles(26.9, 27.0) == 0
        assert completed_cycles(27.0, 27.0) == 1
        assert completed_cycles(100.0, 27.0) == 3

    def test_never_negative(self):
        assert completed_cycles(-50.0, 27.0) == 0
