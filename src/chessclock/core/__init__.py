"""Core domain layer — plain enumerations with zero external dependencies."""

from chessclock.core.enums import Color, TimeControlMode

__all__ = [
    "Color",
    "TimeControlMode",
]
