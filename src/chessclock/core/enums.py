"""Core enumerations for the chess clock domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class TimeControlMode(StrEnum):
    """Supported tournament time-control formats."""

    SUDDEN_DEATH = "SUDDEN_DEATH"
    SIMPLE_DELAY = "SIMPLE_DELAY"
    BRONSTEIN_DELAY = "BRONSTEIN_DELAY"
    FISCHER_INCREMENT = "FISCHER_INCREMENT"
    MULTI_STAGE = "MULTI_STAGE"

    @property
    def display_name(self) -> str:
        """Human-friendly mode name for menus and labels."""
        return _MODE_DISPLAY_NAME[self]


_MODE_DISPLAY_NAME: dict[TimeControlMode, str] = {
    TimeControlMode.SUDDEN_DEATH: "Sudden Death",
    TimeControlMode.SIMPLE_DELAY: "Simple Delay",
    TimeControlMode.BRONSTEIN_DELAY: "Bronstein Delay",
    TimeControlMode.FISCHER_INCREMENT: "Fischer Increment",
    TimeControlMode.MULTI_STAGE: "Multi-Stage",
}
