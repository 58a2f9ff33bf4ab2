"""Tests for ClockConfig construction and validation."""

import dataclasses

import pytest

from chessclock.core.enums import TimeControlMode
from chessclock.game.config import (
    ClockConfig,
    InvalidClockConfigError,
    Stage,
    UnknownTimeControlError,
    format_config_time,
)


class TestClockConfigBasics:
    def test_mode_string_is_coerced(self) -> None:
        config = ClockConfig("FISCHER_INCREMENT", 180_000, inc_millis=2000)
        assert config.mode is TimeControlMode.FISCHER_INCREMENT

    def test_seconds_helpers(self) -> None:
        config = ClockConfig(
            TimeControlMode.SIMPLE_DELAY, 180_000, delay_millis=5000
        )
        assert config.base_seconds == 180.0
        assert config.delay_seconds == 5.0
        assert config.increment_seconds == 0.0

    def test_is_immutable(self) -> None:
        config = ClockConfig(TimeControlMode.SUDDEN_DEATH, 300_000)
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.base_millis = 1  # type: ignore[misc]

    def test_stages_list_becomes_tuple(self) -> None:
        config = ClockConfig(
            TimeControlMode.MULTI_STAGE,
            5_400_000,
            stages=[Stage(40, 1_800_000)],  # type: ignore[arg-type]
        )
        assert config.stages == (Stage(40, 1_800_000),)

    def test_equal_configs_compare_equal(self) -> None:
        a = ClockConfig(TimeControlMode.SUDDEN_DEATH, 300_000)
        b = ClockConfig("SUDDEN_DEATH", 300_000)
        assert a == b


class TestClockConfigValidation:
    def test_unknown_mode(self) -> None:
        with pytest.raises(UnknownTimeControlError):
            ClockConfig("HOURGLASS", 300_000)  # type: ignore[arg-type]

    def test_unknown_mode_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            ClockConfig("HOURGLASS", 300_000)  # type: ignore[arg-type]

    @pytest.mark.parametrize("base", [0, -1000])
    def test_base_must_be_positive(self, base: int) -> None:
        with pytest.raises(InvalidClockConfigError):
            ClockConfig(TimeControlMode.SUDDEN_DEATH, base)

    def test_delay_must_be_positive(self) -> None:
        with pytest.raises(InvalidClockConfigError):
            ClockConfig(TimeControlMode.SIMPLE_DELAY, 60_000, delay_millis=0)

    def test_increment_must_be_positive(self) -> None:
        with pytest.raises(InvalidClockConfigError):
            ClockConfig(TimeControlMode.FISCHER_INCREMENT, 60_000, inc_millis=-5)

    def test_stages_require_multi_stage_mode(self) -> None:
        with pytest.raises(InvalidClockConfigError):
            ClockConfig(
                TimeControlMode.FISCHER_INCREMENT,
                60_000,
                stages=(Stage(40, 60_000),),
            )

    def test_stage_fields_must_be_positive(self) -> None:
        with pytest.raises(InvalidClockConfigError):
            ClockConfig(TimeControlMode.MULTI_STAGE, 60_000, stages=(Stage(0, 60_000),))
        with pytest.raises(InvalidClockConfigError):
            ClockConfig(TimeControlMode.MULTI_STAGE, 60_000, stages=(Stage(40, 0),))
        with pytest.raises(InvalidClockConfigError):
            ClockConfig(
                TimeControlMode.MULTI_STAGE, 60_000, stages=(Stage(40, 60_000, 0),)
            )

    def test_stages_must_ascend(self) -> None:
        with pytest.raises(InvalidClockConfigError):
            ClockConfig(
                TimeControlMode.MULTI_STAGE,
                60_000,
                stages=(Stage(60, 60_000), Stage(40, 60_000)),
            )


class TestDescribe:
    def test_sudden_death(self) -> None:
        assert ClockConfig(TimeControlMode.SUDDEN_DEATH, 300_000).describe() == "5m"

    def test_fischer(self) -> None:
        config = ClockConfig(TimeControlMode.FISCHER_INCREMENT, 300_000, inc_millis=3000)
        assert config.describe() == "5m + 3s"

    def test_simple_delay(self) -> None:
        config = ClockConfig(TimeControlMode.SIMPLE_DELAY, 180_000, delay_millis=5000)
        assert config.describe() == "3m, 5s delay"

    def test_bronstein(self) -> None:
        config = ClockConfig(TimeControlMode.BRONSTEIN_DELAY, 180_000, delay_millis=3000)
        assert config.describe() == "3m, 3s Bronstein"

    def test_multi_stage(self) -> None:
        config = ClockConfig(
            TimeControlMode.MULTI_STAGE,
            5_400_000,
            inc_millis=30_000,
            stages=(Stage(40, 1_800_000),),
        )
        assert config.describe() == "90m + 30s, +30m after 40"


class TestFormatConfigTime:
    @pytest.mark.parametrize(
        ("millis", "text"),
        [
            (45_000, "45s"),
            (300_000, "5m"),
            (150_000, "2m 30s"),
            (999, "0s"),
        ],
    )
    def test_format(self, millis: int, text: str) -> None:
        assert format_config_time(millis) == text
