"""Ready-made tournament time controls and a builder for custom ones."""

from __future__ import annotations

from collections.abc import Sequence

from chessclock.core.enums import TimeControlMode
from chessclock.game.config import ClockConfig, Stage

_MINUTE = 60 * 1000
_SECOND = 1000

TIMER_PRESETS: dict[str, ClockConfig] = {
    # Sudden death
    "BLITZ_3MIN": ClockConfig(TimeControlMode.SUDDEN_DEATH, 3 * _MINUTE),
    "BLITZ_5MIN": ClockConfig(TimeControlMode.SUDDEN_DEATH, 5 * _MINUTE),
    "RAPID_15MIN": ClockConfig(TimeControlMode.SUDDEN_DEATH, 15 * _MINUTE),
    "CLASSICAL_60MIN": ClockConfig(TimeControlMode.SUDDEN_DEATH, 60 * _MINUTE),
    # Simple delay
    "BLITZ_3MIN_5SEC_DELAY": ClockConfig(
        TimeControlMode.SIMPLE_DELAY, 3 * _MINUTE, delay_millis=5 * _SECOND
    ),
    "RAPID_15MIN_10SEC_DELAY": ClockConfig(
        TimeControlMode.SIMPLE_DELAY, 15 * _MINUTE, delay_millis=10 * _SECOND
    ),
    # Bronstein delay
    "BLITZ_3MIN_3SEC_BRONSTEIN": ClockConfig(
        TimeControlMode.BRONSTEIN_DELAY, 3 * _MINUTE, delay_millis=3 * _SECOND
    ),
    "RAPID_15MIN_5SEC_BRONSTEIN": ClockConfig(
        TimeControlMode.BRONSTEIN_DELAY, 15 * _MINUTE, delay_millis=5 * _SECOND
    ),
    # Fischer increment
    "BLITZ_3MIN_2SEC_INC": ClockConfig(
        TimeControlMode.FISCHER_INCREMENT, 3 * _MINUTE, inc_millis=2 * _SECOND
    ),
    "BLITZ_5MIN_3SEC_INC": ClockConfig(
        TimeControlMode.FISCHER_INCREMENT, 5 * _MINUTE, inc_millis=3 * _SECOND
    ),
    "RAPID_15MIN_10SEC_INC": ClockConfig(
        TimeControlMode.FISCHER_INCREMENT, 15 * _MINUTE, inc_millis=10 * _SECOND
    ),
    # Multi-stage (classical tournaments)
    "WORLD_CHAMPIONSHIP": ClockConfig(
        TimeControlMode.MULTI_STAGE,
        90 * _MINUTE,
        inc_millis=30 * _SECOND,
        stages=(Stage(after_moves=40, add_millis=30 * _MINUTE),),
    ),
    "CANDIDATES_TOURNAMENT": ClockConfig(
        TimeControlMode.MULTI_STAGE,
        100 * _MINUTE,
        stages=(
            Stage(after_moves=40, add_millis=50 * _MINUTE, inc_millis=30 * _SECOND),
        ),
    ),
    "CLASSICAL_TOURNAMENT": ClockConfig(
        TimeControlMode.MULTI_STAGE,
        90 * _MINUTE,
        stages=(
            Stage(after_moves=40, add_millis=30 * _MINUTE),
            Stage(after_moves=60, add_millis=15 * _MINUTE, inc_millis=30 * _SECOND),
        ),
    ),
    # Online platforms
    "LICHESS_BULLET": ClockConfig(
        TimeControlMode.FISCHER_INCREMENT, 1 * _MINUTE, inc_millis=1 * _SECOND
    ),
    "CHESS_COM_BLITZ": ClockConfig(
        TimeControlMode.FISCHER_INCREMENT, 5 * _MINUTE, inc_millis=5 * _SECOND
    ),
    "FIDE_RAPID": ClockConfig(
        TimeControlMode.FISCHER_INCREMENT, 15 * _MINUTE, inc_millis=10 * _SECOND
    ),
}


def get_preset(key: str) -> ClockConfig | None:
    """Look up a preset by its key, e.g. ``"BLITZ_5MIN_3SEC_INC"``."""
    return TIMER_PRESETS.get(key)


def custom_config(
    mode: TimeControlMode | str,
    base_minutes: float,
    *,
    delay_seconds: float | None = None,
    increment_seconds: float | None = None,
    stages: Sequence[tuple[int, float, float | None]] | None = None,
) -> ClockConfig:
    """Build a config from human units.

    *stages* holds ``(after_moves, add_minutes, increment_seconds)`` tuples.
    A zero or missing delay/increment is left unset.
    """
    return ClockConfig(
        mode=mode,
        base_millis=round(base_minutes * _MINUTE),
        delay_millis=round(delay_seconds * _SECOND) if delay_seconds else None,
        inc_millis=round(increment_seconds * _SECOND) if increment_seconds else None,
        stages=tuple(
            Stage(
                after_moves=after_moves,
                add_millis=round(add_minutes * _MINUTE),
                inc_millis=round(inc * _SECOND) if inc else None,
            )
            for after_moves, add_minutes, inc in stages or ()
        ),
    )
