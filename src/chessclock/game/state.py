"""Timer state, per-hook patches and the display projection."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chessclock.core.enums import Color
from chessclock.game.config import ClockConfig


@dataclass(slots=True)
class PlayerClock:
    """One side's countdown and move progress."""

    time_remaining: float
    move_count: int = 0
    stage_index: int = 0
    delay_remaining: float | None = None  # only set mid-delay (Simple Delay)


@dataclass(slots=True)
class TimerState:
    """Authoritative state of both clocks.

    Mutated only by :class:`~chessclock.game.clock.ClockEngine`; everything
    handed out to listeners is a :meth:`copy`.
    """

    config: ClockConfig
    players: dict[Color, PlayerClock]
    is_running: bool = False
    active_player: Color | None = None
    move_start_time: float | None = None
    initial_time: float = 0.0

    @classmethod
    def initial(cls, config: ClockConfig) -> TimerState:
        """Fresh state for *config*: both clocks full, nothing started."""
        seconds = config.base_seconds
        return cls(
            config=config,
            players={
                Color.WHITE: PlayerClock(seconds),
                Color.BLACK: PlayerClock(seconds),
            },
            initial_time=seconds,
        )

    def copy(self) -> TimerState:
        """Defensive copy; the config is immutable and shared."""
        return replace(
            self,
            players={color: replace(clock) for color, clock in self.players.items()},
        )


@dataclass(frozen=True, slots=True)
class ClockPatch:
    """Fields changed by one rule hook.

    Per-player fields apply to the player the hook was called for. ``None``
    means "unchanged"; clearing an optional value is spelled out with the
    ``clear_*`` flags.
    """

    time_remaining: float | None = None
    move_count: int | None = None
    stage_index: int | None = None
    delay_remaining: float | None = None
    clear_delay: bool = False
    move_start_time: float | None = None
    clear_move_start: bool = False

    @property
    def is_empty(self) -> bool:
        return self == _EMPTY_PATCH

    def apply(self, state: TimerState, color: Color) -> None:
        """Merge this patch into *state* for *color* in place."""
        clock = state.players[color]
        if self.time_remaining is not None:
            clock.time_remaining = self.time_remaining
        if self.move_count is not None:
            clock.move_count = self.move_count
        if self.stage_index is not None:
            clock.stage_index = self.stage_index
        if self.clear_delay:
            clock.delay_remaining = None
        elif self.delay_remaining is not None:
            clock.delay_remaining = self.delay_remaining
        if self.clear_move_start:
            state.move_start_time = None
        elif self.move_start_time is not None:
            state.move_start_time = self.move_start_time


_EMPTY_PATCH = ClockPatch()


@dataclass(frozen=True, slots=True)
class TimerDisplayInfo:
    """Read-only projection of one player's clock for presentation."""

    main_time: float
    delay_time: float | None = None
    is_in_delay: bool | None = None
    pending_increment: float | None = None
    stage_info: str | None = None
