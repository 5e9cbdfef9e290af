from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum
from types import MappingProxyType
from typing import Mapping

from simon.utilities.env import Configuration


class CountdownSeverity(IntEnum):
    CALM = 0
    WARNING = 1
    CRITICAL = 2


class TimerColor(StrEnum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


SEVERITY_TIMER_COLORS: Mapping[CountdownSeverity, TimerColor] = MappingProxyType(
    {
        CountdownSeverity.CALM: TimerColor.GREEN,
        CountdownSeverity.WARNING: TimerColor.YELLOW,
        CountdownSeverity.CRITICAL: TimerColor.RED,
    }
)


@dataclass(frozen=True, slots=True)
class CountdownThresholds:
    """Remaining-seconds boundaries, inclusive: ``s <= critical`` is critical."""

    warning_seconds: int = 10
    critical_seconds: int = 5

    def __post_init__(self) -> None:
        if self.critical_seconds < 0:
            raise ValueError("critical_seconds must not be negative")
        if self.critical_seconds > self.warning_seconds:
            raise ValueError("critical_seconds must not exceed warning_seconds")

    @classmethod
    def from_configuration(cls) -> "CountdownThresholds":
        return cls(
            warning_seconds=Configuration.countdown_warning_seconds(),
            critical_seconds=Configuration.countdown_critical_seconds(),
        )

    def classify(self, seconds_remaining: int) -> CountdownSeverity:
        seconds = max(0, seconds_remaining)
        if seconds <= self.critical_seconds:
            return CountdownSeverity.CRITICAL
        if seconds <= self.warning_seconds:
            return CountdownSeverity.WARNING
        return CountdownSeverity.CALM


@dataclass(frozen=True, slots=True)
class CountdownPresentation:
    seconds_remaining: int
    severity: CountdownSeverity
    is_pulsing: bool
    visible: bool


HIDDEN_COUNTDOWN = CountdownPresentation(
    seconds_remaining=0,
    severity=CountdownSeverity.CALM,
    is_pulsing=False,
    visible=False,
)


def present_countdown(
    seconds_remaining: int,
    *,
    is_input_phase: bool,
    thresholds: CountdownThresholds = CountdownThresholds(),
) -> CountdownPresentation:
    seconds = max(0, seconds_remaining)
    severity = thresholds.classify(seconds)
    return CountdownPresentation(
        seconds_remaining=seconds,
        severity=severity,
        is_pulsing=severity is CountdownSeverity.CRITICAL,
        visible=is_input_phase and seconds > 0,
    )
