"""Abstract interfaces for the clock layer.

The engine depends on :class:`ITimeControlRule`, not on the concrete
per-format rules, so a format can be swapped at ``reset`` time.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING

from chessclock.core.enums import Color

if TYPE_CHECKING:
    from chessclock.game.state import ClockPatch, TimerDisplayInfo, TimerState

WallClock = Callable[[], float]


class ITimeControlRule(ABC):
    """Per-format clock math.

    Each hook only reads and patches the fields of the player it is called
    for; running/active-player transitions belong to the engine.
    """

    @abstractmethod
    def on_move_start(self, color: Color, state: TimerState) -> ClockPatch:
        """*color* begins (or resumes) thinking."""

    @abstractmethod
    def on_move_complete(
        self, color: Color, elapsed: float, state: TimerState
    ) -> ClockPatch:
        """*color* pressed the clock after *elapsed* wall-clock seconds."""

    @abstractmethod
    def on_tick(self, color: Color, state: TimerState) -> ClockPatch:
        """One second passed while *color* was on move."""

    @abstractmethod
    def display_info(self, color: Color, state: TimerState) -> TimerDisplayInfo:
        """Project *color*'s clock for presentation."""
