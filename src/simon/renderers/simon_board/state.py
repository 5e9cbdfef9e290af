from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Hashable, TypeVar

from simon.board.countdown import (HIDDEN_COUNTDOWN, CountdownPresentation,
                                   TimerColor)

RegionT = TypeVar("RegionT", bound=Hashable)


@dataclass(frozen=True, slots=True)
class RoundResult:
    is_correct: bool
    player_name: str


@dataclass(frozen=True)
class BoardInputs(Generic[RegionT]):
    """Everything the caller hands the board on each update.

    ``sequence`` is compared by identity: handing over a new sequence object
    restarts playback even when its contents are unchanged.
    """

    sequence: tuple[RegionT, ...] = ()
    round: int = 1
    is_showing_sequence: bool = False
    is_input_phase: bool = False
    disabled: bool = False
    player_sequence: tuple[RegionT, ...] = ()
    can_submit: bool = False
    seconds_remaining: int = 0
    timer_color: TimerColor = TimerColor.GREEN
    is_timer_pulsing: bool = False
    last_result: RoundResult | None = None

    @property
    def accepts_input(self) -> bool:
        return (
            not self.disabled
            and not self.is_showing_sequence
            and self.is_input_phase
        )


@dataclass(frozen=True)
class SimonBoardState(Generic[RegionT]):
    inputs: BoardInputs[RegionT] = field(default_factory=BoardInputs)
    active_region: RegionT | None = None
    # Index into ``inputs.sequence`` while playback runs, ``None`` when idle.
    playback_index: int | None = None
    generation: int = 0
    countdown: CountdownPresentation = HIDDEN_COUNTDOWN

    @property
    def is_playing(self) -> bool:
        return self.playback_index is not None

    @property
    def accepts_input(self) -> bool:
        return self.inputs.accepts_input and not self.is_playing
