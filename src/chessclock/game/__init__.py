"""Clock layer — engine, time-control rules, state and presets.

Quick start::

    from chessclock.core import Color
    from chessclock.game import ClockEngine, get_preset

    engine = ClockEngine(
        get_preset("BLITZ_5MIN_3SEC_INC"),
        on_state_change=lambda state: print(state.players[Color.WHITE]),
        on_timeout=lambda color: print(f"{color} flagged"),
    )
    engine.start(Color.WHITE)
    engine.switch_player()
"""

from chessclock.game.clock import TICK_INTERVAL_MS, ClockEngine
from chessclock.game.config import (
    ClockConfig,
    InvalidClockConfigError,
    Stage,
    UnknownTimeControlError,
    format_config_time,
)
from chessclock.game.interfaces import ITimeControlRule
from chessclock.game.presets import TIMER_PRESETS, custom_config, get_preset
from chessclock.game.rules import (
    BronsteinDelayRule,
    FischerIncrementRule,
    MultiStageRule,
    SimpleDelayRule,
    SuddenDeathRule,
    create_rule,
)
from chessclock.game.state import ClockPatch, PlayerClock, TimerDisplayInfo, TimerState

__all__ = [
    # Interfaces
    "ITimeControlRule",
    # Config
    "ClockConfig",
    "InvalidClockConfigError",
    "Stage",
    "TIMER_PRESETS",
    "UnknownTimeControlError",
    "custom_config",
    "format_config_time",
    "get_preset",
    # State
    "ClockPatch",
    "PlayerClock",
    "TimerDisplayInfo",
    "TimerState",
    # Rules
    "BronsteinDelayRule",
    "FischerIncrementRule",
    "MultiStageRule",
    "SimpleDelayRule",
    "SuddenDeathRule",
    "create_rule",
    # Engine
    "TICK_INTERVAL_MS",
    "ClockEngine",
]
