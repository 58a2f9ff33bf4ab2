"""Tests for time-control presets and the custom config builder."""

import pytest

from chessclock.core.enums import TimeControlMode
from chessclock.game.config import InvalidClockConfigError, Stage
from chessclock.game.presets import TIMER_PRESETS, custom_config, get_preset


class TestPresets:
    def test_lookup(self) -> None:
        config = get_preset("BLITZ_5MIN_3SEC_INC")
        assert config is not None
        assert config.mode is TimeControlMode.FISCHER_INCREMENT
        assert config.base_millis == 300_000
        assert config.inc_millis == 3000

    def test_unknown_key(self) -> None:
        assert get_preset("NOPE") is None

    def test_every_mode_is_covered(self) -> None:
        modes = {config.mode for config in TIMER_PRESETS.values()}
        assert modes == set(TimeControlMode)

    def test_classical_tournament_stages(self) -> None:
        config = TIMER_PRESETS["CLASSICAL_TOURNAMENT"]
        assert config.base_millis == 90 * 60_000
        assert config.stages == (
            Stage(40, 30 * 60_000),
            Stage(60, 15 * 60_000, 30_000),
        )

    def test_delay_presets(self) -> None:
        assert TIMER_PRESETS["BLITZ_3MIN_5SEC_DELAY"].delay_seconds == 5.0
        assert TIMER_PRESETS["RAPID_15MIN_5SEC_BRONSTEIN"].delay_seconds == 5.0


class TestCustomConfig:
    def test_fischer(self) -> None:
        config = custom_config("FISCHER_INCREMENT", 3, increment_seconds=2)
        assert config.mode is TimeControlMode.FISCHER_INCREMENT
        assert config.base_millis == 180_000
        assert config.inc_millis == 2000
        assert config.delay_millis is None

    def test_zero_options_are_left_unset(self) -> None:
        config = custom_config(TimeControlMode.SUDDEN_DEATH, 5, increment_seconds=0)
        assert config.inc_millis is None
        assert config.stages == ()

    def test_fractional_minutes(self) -> None:
        config = custom_config(TimeControlMode.SIMPLE_DELAY, 2.5, delay_seconds=5)
        assert config.base_millis == 150_000
        assert config.delay_millis == 5000

    def test_stages(self) -> None:
        config = custom_config(
            TimeControlMode.MULTI_STAGE,
            90,
            increment_seconds=30,
            stages=[(40, 30, None), (60, 15, 30)],
        )
        assert config.stages == (
            Stage(40, 1_800_000),
            Stage(60, 900_000, 30_000),
        )

    def test_invalid_values_rejected(self) -> None:
        with pytest.raises(InvalidClockConfigError):
            custom_config(TimeControlMode.SUDDEN_DEATH, 0)
