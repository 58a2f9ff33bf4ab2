"""Time-control rules: the per-format math behind the clock engine."""

from __future__ import annotations

import time

from chessclock.core.enums import Color, TimeControlMode
from chessclock.game.config import UnknownTimeControlError, coerce_mode
from chessclock.game.interfaces import ITimeControlRule, WallClock
from chessclock.game.state import ClockPatch, TimerDisplayInfo, TimerState


class _BaseRule(ITimeControlRule):
    """Shared move bookkeeping: stamp the move start, count completed moves."""

    __slots__ = ("_now",)

    def __init__(self, now: WallClock = time.monotonic) -> None:
        self._now = now

    def on_move_start(self, color: Color, state: TimerState) -> ClockPatch:
        return ClockPatch(move_start_time=self._now())

    def on_move_complete(
        self, color: Color, elapsed: float, state: TimerState
    ) -> ClockPatch:
        return ClockPatch(
            move_count=state.players[color].move_count + 1,
            clear_move_start=True,
        )

    def on_tick(self, color: Color, state: TimerState) -> ClockPatch:
        return ClockPatch()

    def display_info(self, color: Color, state: TimerState) -> TimerDisplayInfo:
        return TimerDisplayInfo(main_time=state.players[color].time_remaining)


class SuddenDeathRule(_BaseRule):
    """Plain countdown; the engine does all the decrementing."""

    __slots__ = ()


class SimpleDelayRule(_BaseRule):
    """US delay: each move gets a grace period before main time runs."""

    __slots__ = ()

    def on_move_start(self, color: Color, state: TimerState) -> ClockPatch:
        return ClockPatch(
            move_start_time=self._now(),
            delay_remaining=state.config.delay_seconds,
        )

    def on_move_complete(
        self, color: Color, elapsed: float, state: TimerState
    ) -> ClockPatch:
        return ClockPatch(
            move_count=state.players[color].move_count + 1,
            clear_delay=True,
            clear_move_start=True,
        )

    def on_tick(self, color: Color, state: TimerState) -> ClockPatch:
        delay = state.players[color].delay_remaining
        if delay and delay > 0:
            return ClockPatch(delay_remaining=max(0.0, delay - 1))
        return ClockPatch()

    def display_info(self, color: Color, state: TimerState) -> TimerDisplayInfo:
        clock = state.players[color]
        delay = clock.delay_remaining
        in_delay = delay is not None and delay > 0
        return TimerDisplayInfo(
            main_time=clock.time_remaining,
            delay_time=delay if in_delay else None,
            is_in_delay=in_delay,
        )


class BronsteinDelayRule(_BaseRule):
    """Bronstein delay: refund the time used on a move, up to the delay."""

    __slots__ = ()

    def on_move_complete(
        self, color: Color, elapsed: float, state: TimerState
    ) -> ClockPatch:
        clock = state.players[color]
        compensation = min(elapsed, state.config.delay_seconds)
        return ClockPatch(
            time_remaining=clock.time_remaining + compensation,
            move_count=clock.move_count + 1,
            clear_move_start=True,
        )

    def display_info(self, color: Color, state: TimerState) -> TimerDisplayInfo:
        # Informational only; the delay is not counted down live here.
        return TimerDisplayInfo(
            main_time=state.players[color].time_remaining,
            delay_time=state.config.delay_seconds,
        )


class FischerIncrementRule(_BaseRule):
    """Fixed increment added after every completed move."""

    __slots__ = ()

    def on_move_complete(
        self, color: Color, elapsed: float, state: TimerState
    ) -> ClockPatch:
        clock = state.players[color]
        return ClockPatch(
            time_remaining=clock.time_remaining + state.config.increment_seconds,
            move_count=clock.move_count + 1,
            clear_move_start=True,
        )

    def display_info(self, color: Color, state: TimerState) -> TimerDisplayInfo:
        return TimerDisplayInfo(
            main_time=state.players[color].time_remaining,
            pending_increment=state.config.increment_seconds,
        )


class MultiStageRule(_BaseRule):
    """Classical controls: lump sums at move thresholds plus an increment.

    Only the pending stage is checked per completed move, so crossing two
    thresholds at once still advances a single stage. The increment is
    looked up on the stage that was pending *before* this move and is
    added on top of any stage bonus in the same update.
    """

    __slots__ = ()

    def on_move_complete(
        self, color: Color, elapsed: float, state: TimerState
    ) -> ClockPatch:
        clock = state.players[color]
        stages = state.config.stages
        move_count = clock.move_count + 1
        time_remaining = clock.time_remaining
        stage_index = clock.stage_index

        if stage_index < len(stages) and move_count >= stages[stage_index].after_moves:
            time_remaining += stages[stage_index].add_millis / 1000
            stage_index += 1

        time_remaining += self._stage_increment(clock.stage_index, state)

        return ClockPatch(
            time_remaining=time_remaining,
            move_count=move_count,
            stage_index=stage_index,
            clear_move_start=True,
        )

    def display_info(self, color: Color, state: TimerState) -> TimerDisplayInfo:
        clock = state.players[color]
        stages = state.config.stages

        stage_info: str | None = None
        if clock.stage_index < len(stages):
            stage = stages[clock.stage_index]
            moves_left = stage.after_moves - clock.move_count
            if moves_left > 0:
                stage_info = f"+{stage.add_millis // 60000}min after {moves_left} moves"

        increment = self._stage_increment(clock.stage_index, state)
        return TimerDisplayInfo(
            main_time=clock.time_remaining,
            pending_increment=increment if increment > 0 else None,
            stage_info=stage_info,
        )

    @staticmethod
    def _stage_increment(stage_index: int, state: TimerState) -> float:
        """Increment in seconds for *stage_index*, else the base increment."""
        stages = state.config.stages
        if stage_index < len(stages) and stages[stage_index].inc_millis is not None:
            return stages[stage_index].inc_millis / 1000
        return state.config.increment_seconds


_RULES: dict[TimeControlMode, type[_BaseRule]] = {
    TimeControlMode.SUDDEN_DEATH: SuddenDeathRule,
    TimeControlMode.SIMPLE_DELAY: SimpleDelayRule,
    TimeControlMode.BRONSTEIN_DELAY: BronsteinDelayRule,
    TimeControlMode.FISCHER_INCREMENT: FischerIncrementRule,
    TimeControlMode.MULTI_STAGE: MultiStageRule,
}


def create_rule(
    mode: TimeControlMode | str, now: WallClock = time.monotonic
) -> ITimeControlRule:
    """Build the rule for *mode*.

    Raises:
        UnknownTimeControlError: *mode* is not a supported format.
    """
    rule_cls = _RULES.get(coerce_mode(mode))
    if rule_cls is None:
        raise UnknownTimeControlError(f"No rule registered for mode: {mode!r}")
    return rule_cls(now)
