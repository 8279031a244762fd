"""
Energy Balance Tests
====================
Tests for cumulative light versus the 12/12 reference.
"""

import pytest

from supercycle.domain.energy_balance import balance_direction, energy_balance
from supercycle.enums import BalanceDirection


class TestEnergyBalance:
    @pytest.mark.parametrize("light,dark", [(13, 14), (18, 6), (0, 0), (24, 0), (12, 12)])
    def test_zero_at_start(self, make_config, light, dark):
        assert energy_balance(make_config(light_hours=light, dark_hours=dark), 0.0) == 0

    def test_zero_before_start(self, make_config):
        assert energy_balance(make_config(light_hours=20, dark_hours=4), -100.0) == 0

    @pytest.mark.parametrize("light", [12, 10, 7.5, 0.25])
    @pytest.mark.parametrize("elapsed", [0.0, 1.0, 27.0, 1234.567, 240_000.0])
    def test_symmetric_cycles_are_neutral(self, make_config, light, elapsed):
        config = make_config(light_hours=light, dark_hours=light)
        assert energy_balance(config, elapsed) == 0

    def test_shorter_light_saves(self, make_config):
        # 13/27 lit versus 13.5/27 for the reference
        assert energy_balance(make_config(light_hours=13, dark_hours=14), 27.0) == pytest.approx(0.5)

    def test_longer_light_spends_extra(self, make_config):
        assert energy_balance(make_config(light_hours=18, dark_hours=6), 24.0) == pytest.approx(-6.0)

    def test_always_dark_saves_half(self, make_config):
        assert energy_balance(make_config(light_hours=0, dark_hours=12), 48.0) == pytest.approx(24.0)


class TestBalanceDirection:
    def test_directions(self):
        assert balance_direction(0.5) is BalanceDirection.SAVING
        assert balance_direction(-0.1) is BalanceDirection.EXTRA
        assert balance_direction(0.0) is BalanceDirection.NEUTRAL
