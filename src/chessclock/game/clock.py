"""ClockEngine — the real-time orchestrator of a two-sided chess clock.

Owns the authoritative :class:`TimerState`, one active time-control rule
and a one-second ``QTimer``. Listeners subscribe via Qt signals or the
constructor callbacks.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from chessclock.core.enums import Color, TimeControlMode
from chessclock.game.config import ClockConfig
from chessclock.game.interfaces import ITimeControlRule, WallClock
from chessclock.game.rules import create_rule
from chessclock.game.state import ClockPatch, TimerDisplayInfo, TimerState

_LOGGER = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000

StateChangeCallback = Callable[[TimerState], None]
TimeoutCallback = Callable[[Color], None]


class ClockEngine(QObject):
    """Two countdown clocks governed by one time-control rule.

    States: idle (nothing started), active (ticking for ``active_player``)
    and paused (stopped, ``active_player`` kept). Control calls that do not
    fit the current state are silent no-ops.

    Args:
        config: Time control to start from.
        on_state_change: Called with a state snapshot after every mutation.
        on_timeout: Called once with the side whose flag fell.
        now: Monotonic wall clock used to time moves.
        parent: Optional Qt parent.
    """

    state_changed = pyqtSignal(object)  # TimerState
    timed_out = pyqtSignal(object)  # Color

    __slots__ = ("_state", "_rule", "_timer", "_now", "_destroyed")

    def __init__(
        self,
        config: ClockConfig,
        on_state_change: StateChangeCallback | None = None,
        on_timeout: TimeoutCallback | None = None,
        *,
        now: WallClock = time.monotonic,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._now = now
        self._rule: ITimeControlRule = create_rule(config.mode, now)
        self._state = TimerState.initial(config)
        self._destroyed = False

        self._timer = QTimer(self)
        self._timer.setInterval(TICK_INTERVAL_MS)
        self._timer.timeout.connect(self._tick)

        if on_state_change is not None:
            self.state_changed.connect(on_state_change)
        if on_timeout is not None:
            self.timed_out.connect(on_timeout)

        self._notify()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def config(self) -> ClockConfig:
        return self._state.config

    @property
    def is_running(self) -> bool:
        return self._state.is_running

    @property
    def active_player(self) -> Color | None:
        return self._state.active_player

    @property
    def is_ticking(self) -> bool:
        """Whether the one-second timer is currently scheduled."""
        return not self._destroyed and self._timer.isActive()

    # ── Control API ──────────────────────────────────────────────────────

    def start(self, color: Color) -> None:
        """Start the clock with *color* on move."""
        if self._state.is_running:
            return
        _LOGGER.debug("Clock started for %s (%s)", color, self._state.config.mode)
        self._state.is_running = True
        self._state.active_player = color
        self._notify()
        self._begin_move(color)
        self._start_ticking()

    def pause(self) -> None:
        """Stop ticking and drop the move stamp; the active player is kept."""
        if not self._state.is_running:
            return
        _LOGGER.debug("Clock paused on %s", self._state.active_player)
        self._state.is_running = False
        self._state.move_start_time = None
        self._stop_ticking()
        self._notify()

    def resume(self, first: Color | None = None) -> None:
        """Continue the paused player's move.

        When no side has ever been started this behaves like
        ``start(first)``; without *first* it does nothing.
        """
        if self._state.is_running:
            return
        color = self._state.active_player
        if color is None:
            if first is not None:
                self.start(first)
            return
        _LOGGER.debug("Clock resumed for %s", color)
        self._state.is_running = True
        self._notify()
        self._begin_move(color)
        self._start_ticking()

    def switch_player(self) -> None:
        """Complete the active player's move and hand the move over."""
        color = self._state.active_player
        if not self._state.is_running or color is None:
            return
        self._complete_move(color)
        nxt = color.opposite
        self._state.active_player = nxt
        self._notify()
        self._begin_move(nxt)

    def reset(self, config: ClockConfig | None = None) -> None:
        """Back to idle with full clocks for *config* (or the current one)."""
        self._stop_ticking()
        new_config = config or self._state.config
        self._rule = create_rule(new_config.mode, self._now)
        self._state = TimerState.initial(new_config)
        _LOGGER.debug("Clock reset to %s", new_config.describe())
        self._notify()

    def add_time(self, color: Color, seconds: float) -> None:
        """Operator adjustment: add (or with a negative value, remove) time."""
        clock = self._state.players[color]
        clock.time_remaining = max(0.0, clock.time_remaining + seconds)
        self._notify()

    def set_time(self, color: Color, seconds: float) -> None:
        """Operator override of *color*'s remaining time."""
        self._state.players[color].time_remaining = max(0.0, seconds)
        self._notify()

    def destroy(self) -> None:
        """Stop ticking for good; no signals are emitted afterwards."""
        if self._destroyed:
            return
        self._stop_ticking()
        self._timer.timeout.disconnect(self._tick)
        self._timer.deleteLater()
        self._destroyed = True
        _LOGGER.debug("Clock destroyed")

    # ── Queries ──────────────────────────────────────────────────────────

    def get_state(self) -> TimerState:
        """Snapshot of the current state, safe to keep or mutate."""
        return self._state.copy()

    def display_info(self, color: Color) -> TimerDisplayInfo:
        return self._rule.display_info(color, self._state)

    def move_count(self, color: Color) -> int:
        return self._state.players[color].move_count

    def current_stage(self, color: Color) -> int:
        return self._state.players[color].stage_index

    # ── Internal ─────────────────────────────────────────────────────────

    def _begin_move(self, color: Color) -> None:
        self._apply(color, self._rule.on_move_start(color, self._state))

    def _complete_move(self, color: Color) -> None:
        elapsed = self._move_elapsed()
        self._apply(color, self._rule.on_move_complete(color, elapsed, self._state))

    def _move_elapsed(self) -> float:
        started = self._state.move_start_time
        if started is None:
            return 0.0
        return max(0.0, self._now() - started)

    def _tick(self) -> None:
        color = self._state.active_player
        if not self._state.is_running or color is None:
            return

        # Decided before the rule's tick so the 1 -> 0 delay tick is still held.
        decrement = self._decrements_main_time(color)

        patch = self._rule.on_tick(color, self._state)
        if not patch.is_empty:
            self._apply(color, patch)

        if not decrement:
            return

        clock = self._state.players[color]
        if clock.time_remaining <= 0:
            self._handle_timeout(color)
            return
        clock.time_remaining = max(0.0, clock.time_remaining - 1)
        self._notify()

    def _decrements_main_time(self, color: Color) -> bool:
        if self._state.config.mode is TimeControlMode.SIMPLE_DELAY:
            delay = self._state.players[color].delay_remaining
            return not delay or delay <= 0
        return True

    def _handle_timeout(self, color: Color) -> None:
        _LOGGER.info("Flag fell for %s", color)
        self.pause()
        if not self._destroyed:
            self.timed_out.emit(color)

    def _apply(self, color: Color, patch: ClockPatch) -> None:
        patch.apply(self._state, color)
        self._notify()

    def _start_ticking(self) -> None:
        if self._destroyed or self._timer.isActive():
            return
        self._timer.start()

    def _stop_ticking(self) -> None:
        if self._destroyed:
            return
        self._timer.stop()

    def _notify(self) -> None:
        if self._destroyed:
            return
        self.state_changed.emit(self._state.copy())
