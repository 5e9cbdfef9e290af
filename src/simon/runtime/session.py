from __future__ import annotations

import random
from datetime import timedelta
from enum import StrEnum
from typing import Any, Callable, Hashable, Sequence

import reactivex
from reactivex import abc
from reactivex.disposable import SerialDisposable
from reactivex.subject import BehaviorSubject

from simon.board.countdown import (SEVERITY_TIMER_COLORS, CountdownSeverity,
                                   CountdownThresholds)
from simon.board.regions import CLASSIC_READING_ORDER
from simon.renderers.simon_board.state import BoardInputs, RoundResult
from simon.utilities.env import Configuration
from simon.utilities.env.playback import (DEFAULT_SHOW_DURATION_MS,
                                          DEFAULT_SHOW_GAP_MS)
from simon.utilities.env.runtime import DEFAULT_INPUT_SECONDS
from simon.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PLAYER_NAME = "Player"
DEFAULT_RESULT_PAUSE_MS = 1500


class SessionPhase(StrEnum):
    IDLE = "idle"
    SHOWING = "showing"
    INPUT = "input"
    JUDGED = "judged"


class LocalSession:
    """Single-player game driver that feeds the board.

    Owns everything the board only reads: the secret sequence, the round
    number, the player's answer and the countdown. Each round appends one
    random region, shows the sequence, then gives the player
    ``input_seconds`` to reproduce it. A correct answer moves on to the next
    round; a wrong answer or a timeout starts over from round 1.
    """

    def __init__(
        self,
        *,
        scheduler: abc.SchedulerBase,
        regions: Sequence[Hashable] = CLASSIC_READING_ORDER,
        player_name: str = DEFAULT_PLAYER_NAME,
        input_seconds: int = DEFAULT_INPUT_SECONDS,
        show_duration_ms: int = DEFAULT_SHOW_DURATION_MS,
        show_gap_ms: int = DEFAULT_SHOW_GAP_MS,
        result_pause_ms: int = DEFAULT_RESULT_PAUSE_MS,
        thresholds: CountdownThresholds = CountdownThresholds(),
        rng: random.Random | None = None,
    ) -> None:
        if not regions:
            raise ValueError("LocalSession needs at least one region")
        self._scheduler = scheduler
        self._regions = tuple(regions)
        self.player_name = player_name
        self.input_seconds = input_seconds
        self.show_duration_ms = show_duration_ms
        self.show_gap_ms = show_gap_ms
        self.result_pause_ms = result_pause_ms
        self.thresholds = thresholds
        self._rng = rng or random.Random()

        self.phase = SessionPhase.IDLE
        self._round = 1
        self._sequence: tuple[Hashable, ...] = ()
        self._player_sequence: tuple[Hashable, ...] = ()
        self._seconds_remaining = 0
        self._last_result: RoundResult | None = None
        self._timer = SerialDisposable()
        self._inputs: BehaviorSubject[BoardInputs] = BehaviorSubject(BoardInputs())

    @classmethod
    def from_configuration(
        cls,
        *,
        scheduler: abc.SchedulerBase,
        player_name: str = DEFAULT_PLAYER_NAME,
        rng: random.Random | None = None,
    ) -> "LocalSession":
        return cls(
            scheduler=scheduler,
            player_name=player_name,
            input_seconds=Configuration.input_seconds(),
            show_duration_ms=Configuration.show_duration_ms(),
            show_gap_ms=Configuration.show_gap_ms(),
            thresholds=CountdownThresholds.from_configuration(),
            rng=rng,
        )

    def observable(self) -> reactivex.Observable[BoardInputs]:
        return self._inputs

    @property
    def current(self) -> BoardInputs:
        return self._inputs.value

    def start(self) -> None:
        logger.info(f"Starting session for {self.player_name}")
        self._round = 1
        self._sequence = ()
        self._last_result = None
        self._next_round()

    def record_click(self, region: Hashable) -> None:
        if self.phase is not SessionPhase.INPUT:
            return
        if len(self._player_sequence) >= len(self._sequence):
            return
        self._player_sequence = self._player_sequence + (region,)
        self._emit()

    def submit(self) -> None:
        if self.phase is not SessionPhase.INPUT:
            return
        self._judge()

    def dispose(self) -> None:
        self._timer.dispose()
        self._inputs.on_completed()

    ##
    # Round flow
    ##
    def _next_round(self) -> None:
        self._sequence = self._sequence + (self._rng.choice(self._regions),)
        self._player_sequence = ()
        self._seconds_remaining = 0
        self.phase = SessionPhase.SHOWING
        logger.info(f"Round {self._round}: showing {len(self._sequence)} regions")
        self._emit()
        playback_ms = len(self._sequence) * (self.show_duration_ms + self.show_gap_ms)
        self._after(playback_ms, self._begin_input)

    def _begin_input(self) -> None:
        self.phase = SessionPhase.INPUT
        self._seconds_remaining = self.input_seconds
        self._emit()
        self._after(1000, self._tick)

    def _tick(self) -> None:
        if self.phase is not SessionPhase.INPUT:
            return
        self._seconds_remaining -= 1
        if self._seconds_remaining <= 0:
            logger.info(f"Round {self._round}: time is up")
            self._judge()
            return
        self._emit()
        self._after(1000, self._tick)

    def _judge(self) -> None:
        correct = self._player_sequence == self._sequence
        self._last_result = RoundResult(is_correct=correct, player_name=self.player_name)
        self.phase = SessionPhase.JUDGED
        logger.info(
            f"Round {self._round}: {'correct' if correct else 'wrong'} "
            f"({len(self._player_sequence)}/{len(self._sequence)})"
        )
        self._emit()
        self._after(self.result_pause_ms, lambda: self._advance(correct))

    def _advance(self, correct: bool) -> None:
        if correct:
            self._round += 1
        else:
            self._round = 1
            self._sequence = ()
        self._next_round()

    ##
    # Plumbing
    ##
    def _after(self, delay_ms: int, action: Callable[[], None]) -> None:
        def _fire(*_: Any) -> None:
            action()

        self._timer.disposable = self._scheduler.schedule_relative(
            timedelta(milliseconds=delay_ms), _fire
        )

    def _emit(self) -> None:
        in_input = self.phase is SessionPhase.INPUT
        severity = self.thresholds.classify(self._seconds_remaining)
        self._inputs.on_next(
            BoardInputs(
                sequence=self._sequence,
                round=self._round,
                is_showing_sequence=self.phase is SessionPhase.SHOWING,
                is_input_phase=in_input,
                player_sequence=self._player_sequence,
                can_submit=in_input
                and len(self._player_sequence) == len(self._sequence),
                seconds_remaining=self._seconds_remaining,
                timer_color=SEVERITY_TIMER_COLORS[severity],
                is_timer_pulsing=in_input and severity is CountdownSeverity.CRITICAL,
                last_result=self._last_result,
            )
        )
