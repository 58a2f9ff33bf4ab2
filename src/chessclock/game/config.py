"""Immutable time-control definitions."""

from __future__ import annotations

from dataclasses import dataclass

from chessclock.core.enums import TimeControlMode


class UnknownTimeControlError(ValueError):
    """Raised when a time-control mode is not one of the supported formats."""


class InvalidClockConfigError(ValueError):
    """Raised when a clock configuration carries impossible parameters."""


def coerce_mode(mode: TimeControlMode | str) -> TimeControlMode:
    """Return *mode* as a :class:`TimeControlMode`, rejecting unknown names."""
    if isinstance(mode, TimeControlMode):
        return mode
    try:
        return TimeControlMode(mode)
    except ValueError:
        raise UnknownTimeControlError(f"Unknown time control mode: {mode!r}") from None


def format_config_time(millis: int) -> str:
    """Compact duration label: ``45s``, ``5m`` or ``2m 30s``."""
    total_seconds = millis // 1000
    minutes, seconds = divmod(total_seconds, 60)
    if minutes == 0:
        return f"{seconds}s"
    if seconds == 0:
        return f"{minutes}m"
    return f"{minutes}m {seconds}s"


@dataclass(frozen=True, slots=True)
class Stage:
    """Multi-stage transition: after *after_moves* moves add *add_millis*.

    *inc_millis* optionally overrides the config's base increment while
    this stage is the pending one.
    """

    after_moves: int
    add_millis: int
    inc_millis: int | None = None


@dataclass(frozen=True, slots=True)
class ClockConfig:
    """Immutable time-control description shared by both players.

    Args:
        mode: Time-control format (enum member or its string value).
        base_millis: Starting time per player.
        delay_millis: Delay for Simple/Bronstein delay modes.
        inc_millis: Per-move increment (Fischer, Multi-Stage default).
        stages: Ordered Multi-Stage transitions.
    """

    mode: TimeControlMode
    base_millis: int
    delay_millis: int | None = None
    inc_millis: int | None = None
    stages: tuple[Stage, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", coerce_mode(self.mode))
        object.__setattr__(self, "stages", tuple(self.stages))
        self._validate()

    # ── Derived values ───────────────────────────────────────────────────

    @property
    def base_seconds(self) -> float:
        return self.base_millis / 1000

    @property
    def delay_seconds(self) -> float:
        return (self.delay_millis or 0) / 1000

    @property
    def increment_seconds(self) -> float:
        return (self.inc_millis or 0) / 1000

    def describe(self) -> str:
        """Short label such as ``5m + 3s`` or ``90m, +30m after 40``."""
        base = format_config_time(self.base_millis)
        if self.mode is TimeControlMode.SIMPLE_DELAY:
            return f"{base}, {format_config_time(self.delay_millis or 0)} delay"
        if self.mode is TimeControlMode.BRONSTEIN_DELAY:
            return f"{base}, {format_config_time(self.delay_millis or 0)} Bronstein"
        if self.inc_millis:
            base = f"{base} + {format_config_time(self.inc_millis)}"
        if self.mode is TimeControlMode.MULTI_STAGE:
            parts = [base]
            for stage in self.stages:
                label = f"+{format_config_time(stage.add_millis)} after {stage.after_moves}"
                if stage.inc_millis:
                    label += f" (+{format_config_time(stage.inc_millis)})"
                parts.append(label)
            return ", ".join(parts)
        return base

    # ── Internal ─────────────────────────────────────────────────────────

    def _validate(self) -> None:
        if self.base_millis <= 0:
            raise InvalidClockConfigError("base_millis must be positive")
        if self.delay_millis is not None and self.delay_millis <= 0:
            raise InvalidClockConfigError("delay_millis must be positive when set")
        if self.inc_millis is not None and self.inc_millis <= 0:
            raise InvalidClockConfigError("inc_millis must be positive when set")
        if self.stages and self.mode is not TimeControlMode.MULTI_STAGE:
            raise InvalidClockConfigError(
                f"stages are only valid for {TimeControlMode.MULTI_STAGE}, not {self.mode}"
            )

        previous = 0
        for index, stage in enumerate(self.stages):
            if stage.after_moves <= 0 or stage.add_millis <= 0:
                raise InvalidClockConfigError(
                    f"stage {index}: after_moves and add_millis must be positive"
                )
            if stage.inc_millis is not None and stage.inc_millis <= 0:
                raise InvalidClockConfigError(
                    f"stage {index}: inc_millis must be positive when set"
                )
            if stage.after_moves <= previous:
                raise InvalidClockConfigError(
                    "stages must be ordered by ascending after_moves"
                )
            previous = stage.after_moves
