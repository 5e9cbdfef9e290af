from __future__ import annotations

import logging
from dataclasses import replace
from datetime import timedelta
from typing import Any, Callable, Generic, Hashable, Sequence, TypeVar

import reactivex
from reactivex import abc
from reactivex import operators as ops
from reactivex.disposable import SerialDisposable
from reactivex.subject import BehaviorSubject

from simon.board.countdown import CountdownThresholds, present_countdown
from simon.peripheral.core.providers import ObservableProvider
from simon.peripheral.haptics import (CLICK_PULSE_MS, SUBMIT_PULSE_MS,
                                      HapticTrigger, NullHaptics)
from simon.renderers.simon_board.state import BoardInputs, SimonBoardState
from simon.utilities.env import Configuration
from simon.utilities.env.playback import (DEFAULT_CLICK_FLASH_MS,
                                          DEFAULT_SHOW_DURATION_MS,
                                          DEFAULT_SHOW_GAP_MS)
from simon.utilities.logging import get_logger
from simon.utilities.logging_control import get_logging_controller

logger = get_logger(__name__)

RegionT = TypeVar("RegionT", bound=Hashable)


def _ignore(*_: Any) -> None:
    return None


class PlaybackCoordinator(
    ObservableProvider[SimonBoardState[RegionT]], Generic[RegionT]
):
    """Reveal a sequence one region at a time and gate the player's input.

    Playback is a chain of scheduler timers: highlight for
    ``show_duration_ms``, clear, wait ``show_gap_ms``, move to the next index.
    Every run owns a generation number. Cancelling bumps the generation and
    disposes the pending timer, and every timer callback checks its generation
    before touching state, so a timer that slips through after cancellation
    does nothing.

    The coordinator never stores the player's answer. Accepted clicks and
    submits are handed to the caller, who sends back fresh ``BoardInputs``.
    """

    def __init__(
        self,
        *,
        scheduler: abc.SchedulerBase,
        on_color_click: Callable[[RegionT], None] | None = None,
        on_submit: Callable[[], None] | None = None,
        haptics: HapticTrigger | None = None,
        show_duration_ms: int = DEFAULT_SHOW_DURATION_MS,
        show_gap_ms: int = DEFAULT_SHOW_GAP_MS,
        click_flash_ms: int = DEFAULT_CLICK_FLASH_MS,
        countdown_thresholds: CountdownThresholds = CountdownThresholds(),
    ) -> None:
        if show_duration_ms <= 0 or show_gap_ms < 0 or click_flash_ms <= 0:
            raise ValueError("Playback timings must be positive")
        if click_flash_ms >= show_duration_ms:
            raise ValueError(
                "click_flash_ms must be shorter than show_duration_ms so feedback "
                "never reads as a playback reveal"
            )
        self._scheduler = scheduler
        self._on_color_click: Callable[[RegionT], None] = on_color_click or _ignore
        self._on_submit: Callable[[], None] = on_submit or _ignore
        self._haptics: HapticTrigger = haptics or NullHaptics()
        self.show_duration_ms = show_duration_ms
        self.show_gap_ms = show_gap_ms
        self.click_flash_ms = click_flash_ms
        self.countdown_thresholds = countdown_thresholds

        self._generation = 0
        self._flash_token = 0
        self._playback_timer = SerialDisposable()
        self._flash_timer = SerialDisposable()
        self._state: SimonBoardState[RegionT] = SimonBoardState()
        self._states: BehaviorSubject[SimonBoardState[RegionT]] = BehaviorSubject(
            self._state
        )

    @classmethod
    def from_configuration(
        cls,
        *,
        scheduler: abc.SchedulerBase,
        on_color_click: Callable[[RegionT], None] | None = None,
        on_submit: Callable[[], None] | None = None,
        haptics: HapticTrigger | None = None,
    ) -> "PlaybackCoordinator[RegionT]":
        return cls(
            scheduler=scheduler,
            on_color_click=on_color_click,
            on_submit=on_submit,
            haptics=haptics,
            show_duration_ms=Configuration.show_duration_ms(),
            show_gap_ms=Configuration.show_gap_ms(),
            click_flash_ms=Configuration.click_flash_ms(),
            countdown_thresholds=CountdownThresholds.from_configuration(),
        )

    def bind(
        self,
        *,
        on_color_click: Callable[[RegionT], None],
        on_submit: Callable[[], None],
    ) -> None:
        self._on_color_click = on_color_click
        self._on_submit = on_submit

    def observable(self) -> reactivex.Observable[SimonBoardState[RegionT]]:
        return self._states.pipe(ops.distinct_until_changed())

    @property
    def state(self) -> SimonBoardState[RegionT]:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    ##
    # Caller contract
    ##
    def update(self, inputs: BoardInputs[RegionT]) -> None:
        previous = self._state.inputs
        restart = (
            inputs.is_showing_sequence != previous.is_showing_sequence
            or inputs.sequence is not previous.sequence
        )
        self._set(
            inputs=inputs,
            countdown=present_countdown(
                inputs.seconds_remaining,
                is_input_phase=inputs.is_input_phase,
                thresholds=self.countdown_thresholds,
            ),
        )
        if inputs.disabled and not previous.disabled:
            self._cancel_flash()
        if restart:
            self._cancel_flash()
            self._cancel_playback()
            if inputs.is_showing_sequence and inputs.sequence:
                self._reveal(self._generation, inputs.sequence, 0)
        self._publish()

    def click(self, region: RegionT) -> bool:
        state = self._state
        if not state.accepts_input:
            self._log_rejection("click", region, self._rejection_reason(state))
            return False

        self._haptics.pulse(CLICK_PULSE_MS)
        self._flash(region)
        self._publish()
        self._on_color_click(region)
        return True

    def submit(self) -> bool:
        if not self._state.inputs.can_submit:
            self._log_rejection("submit", None, "submission not allowed yet")
            return False

        self._haptics.pulse(SUBMIT_PULSE_MS)
        self._on_submit()
        return True

    def dispose(self) -> None:
        self._generation += 1
        self._flash_token += 1
        self._playback_timer.dispose()
        self._flash_timer.dispose()
        self._states.on_completed()

    ##
    # Playback
    ##
    def _reveal(self, generation: int, sequence: Sequence[RegionT], index: int) -> None:
        if generation != self._generation:
            logger.debug("Ignoring reveal %s from cancelled run %s", index, generation)
            return
        if index >= len(sequence):
            self._set(active_region=None, playback_index=None)
            logger.debug("Playback run %s finished after %s reveals", generation, index)
            return

        self._set(active_region=sequence[index], playback_index=index)
        self._playback_timer.disposable = self._schedule(
            self.show_duration_ms,
            lambda: self._conceal(generation, sequence, index),
        )

    def _conceal(self, generation: int, sequence: Sequence[RegionT], index: int) -> None:
        if generation != self._generation:
            logger.debug("Ignoring conceal %s from cancelled run %s", index, generation)
            return
        self._set(active_region=None)
        self._playback_timer.disposable = self._schedule(
            self.show_gap_ms,
            lambda: self._reveal(generation, sequence, index + 1),
        )

    def _cancel_playback(self) -> None:
        self._generation += 1
        self._playback_timer.disposable = None
        self._set(
            active_region=None,
            playback_index=None,
            generation=self._generation,
        )

    ##
    # Click feedback
    ##
    def _flash(self, region: RegionT) -> None:
        self._flash_token += 1
        token = self._flash_token
        self._set(active_region=region)
        self._flash_timer.disposable = self._schedule(
            self.click_flash_ms, lambda: self._end_flash(token)
        )

    def _end_flash(self, token: int) -> None:
        if token != self._flash_token or self._state.is_playing:
            return
        self._set(active_region=None)

    def _cancel_flash(self) -> None:
        self._flash_token += 1
        self._flash_timer.disposable = None
        if not self._state.is_playing:
            self._set(active_region=None)

    ##
    # Plumbing
    ##
    def _schedule(self, delay_ms: int, action: Callable[[], None]) -> abc.DisposableBase:
        def _fire(*_: Any) -> None:
            action()
            self._publish()

        return self._scheduler.schedule_relative(timedelta(milliseconds=delay_ms), _fire)

    def _set(self, **changes: Any) -> None:
        self._state = replace(self._state, **changes)

    def _publish(self) -> None:
        self._states.on_next(self._state)

    @staticmethod
    def _rejection_reason(state: SimonBoardState[RegionT]) -> str:
        if state.inputs.disabled:
            return "board disabled"
        if state.is_playing or state.inputs.is_showing_sequence:
            return "sequence playing"
        return "not in input phase"

    def _log_rejection(self, action: str, region: RegionT | None, reason: str) -> None:
        get_logging_controller().log(
            key=f"board.{action}.rejected",
            logger=logger,
            level=logging.DEBUG,
            msg="Dropped %s on %s: %s",
            args=(action, region, reason),
        )
