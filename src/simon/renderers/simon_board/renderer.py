from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Hashable, Mapping, Sequence

import pygame

from simon.board.countdown import CountdownSeverity, TimerColor
from simon.board.layout import BoardGeometry
from simon.board.regions import (CLASSIC_QUADRANTS, CLASSIC_READING_ORDER,
                                 colors_for)
from simon.display.color import Color
from simon.renderers import StatefulBaseRenderer
from simon.renderers.simon_board.presentation import (progress_label,
                                                      result_line, round_label,
                                                      status_line,
                                                      submit_label)
from simon.renderers.simon_board.provider import PlaybackCoordinator
from simon.renderers.simon_board.state import BoardInputs, SimonBoardState
from simon.utilities.env.board import DEFAULT_GAP_DEGREES

BACKGROUND = Color.from_hex("#111827")
BOARD_BACKGROUND = Color.from_hex("#1a1a1a")
HUB_STROKE = Color.from_hex("#333333")
TEXT = Color(255, 255, 255)
MUTED_TEXT = Color.from_hex("#d1d5db")
FAINT_TEXT = Color.from_hex("#9ca3af")
SUBMIT_READY = Color.from_hex("#22c55e")
SUBMIT_BLOCKED = Color.from_hex("#4b5563")
TIMER_COLORS: Mapping[TimerColor, Color] = {
    TimerColor.GREEN: Color.from_hex("#4ade80"),
    TimerColor.YELLOW: Color.from_hex("#facc15"),
    TimerColor.RED: Color.from_hex("#f87171"),
}
# Countdown glyph height as a fraction of the window height.
TIMER_SCALE: Mapping[CountdownSeverity, float] = {
    CountdownSeverity.CALM: 0.06,
    CountdownSeverity.WARNING: 0.075,
    CountdownSeverity.CRITICAL: 0.09,
}
DISABLED_DIM = 0.3
PULSE_PERIOD_MS = 2000
WEDGE_STROKE_WIDTH = 2


class Control(StrEnum):
    SUBMIT = "submit"


@dataclass(frozen=True)
class BoardFrame:
    """Where everything sits for one window size."""

    size: tuple[int, int]
    geometry: BoardGeometry
    submit_rect: pygame.Rect
    round_y: int
    status_y: int
    result_y: int
    timer_y: int
    progress_y: int


class SimonBoardRenderer(StatefulBaseRenderer[SimonBoardState]):
    def __init__(
        self,
        coordinator: PlaybackCoordinator | None = None,
        *,
        state: SimonBoardState | None = None,
        regions: Sequence[Hashable] = CLASSIC_READING_ORDER,
        quadrants: Mapping[Hashable, int] | None = CLASSIC_QUADRANTS,
        gap_degrees: float = DEFAULT_GAP_DEGREES,
    ) -> None:
        self.regions = tuple(regions)
        self.quadrants = quadrants
        self.gap_degrees = gap_degrees
        self._frame: BoardFrame | None = None
        self._fonts: dict[int, pygame.font.Font] = {}
        super().__init__(builder=coordinator, state=state)

    @property
    def frame(self) -> BoardFrame | None:
        return self._frame

    def hit_test(self, position: tuple[int, int]) -> Hashable | Control | None:
        """Return the region or control under ``position`` in the last frame."""
        if self._frame is None:
            return None
        if self.state.inputs.is_input_phase and self._frame.submit_rect.collidepoint(position):
            return Control.SUBMIT
        return self._frame.geometry.region_at(*position)

    def layout(self, size: tuple[int, int]) -> BoardFrame:
        if self._frame is not None and self._frame.size == size:
            return self._frame
        width, height = size
        board_top = int(height * 0.22)
        board_size = min(width * 0.94, height * 0.56)
        submit_width = min(width * 0.85, 320)
        submit_height = max(int(height * 0.08), 24)
        self._frame = BoardFrame(
            size=size,
            geometry=BoardGeometry.fit(
                center=(width / 2, board_top + board_size / 2),
                size=board_size,
                regions=self.regions,
                gap_degrees=self.gap_degrees,
                quadrants=self.quadrants,
            ),
            submit_rect=pygame.Rect(
                int((width - submit_width) / 2),
                int(height * 0.87),
                int(submit_width),
                submit_height,
            ),
            round_y=int(height * 0.045),
            status_y=int(height * 0.1),
            result_y=int(height * 0.14),
            timer_y=int(height * 0.18),
            progress_y=int(height * 0.82),
        )
        return self._frame

    def real_process(self, window: pygame.Surface, clock: pygame.time.Clock) -> None:
        frame = self.layout(window.get_size())
        state = self.state
        inputs = state.inputs

        window.fill(BACKGROUND.tuple())
        self._draw_header(window, frame, inputs)
        if state.countdown.visible:
            self._draw_countdown(window, frame, state)
        self._draw_board(window, frame, state)
        if inputs.is_input_phase:
            if inputs.player_sequence:
                self._draw_progress(window, frame, inputs)
            self._draw_submit(window, frame, inputs)

    ##
    # Drawing
    ##
    def _font(self, size: int) -> pygame.font.Font:
        size = max(size, 8)
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.SysFont("arial", size, bold=True)
            self._fonts[size] = font
        return font

    def _blit_centered(
        self,
        window: pygame.Surface,
        text: str,
        *,
        size: int,
        color: Color,
        center: tuple[float, float],
    ) -> None:
        surface = self._font(size).render(text, True, color.tuple())
        window.blit(surface, surface.get_rect(center=(int(center[0]), int(center[1]))))

    def _draw_header(
        self, window: pygame.Surface, frame: BoardFrame, inputs: BoardInputs
    ) -> None:
        width, height = frame.size
        self._blit_centered(
            window,
            round_label(inputs),
            size=int(height * 0.055),
            color=TEXT,
            center=(width / 2, frame.round_y),
        )
        self._blit_centered(
            window,
            status_line(inputs),
            size=int(height * 0.035),
            color=MUTED_TEXT,
            center=(width / 2, frame.status_y),
        )
        result = result_line(inputs.last_result)
        if result is not None and not inputs.is_input_phase:
            self._blit_centered(
                window,
                result,
                size=int(height * 0.03),
                color=FAINT_TEXT,
                center=(width / 2, frame.result_y),
            )

    def _draw_countdown(
        self, window: pygame.Surface, frame: BoardFrame, state: SimonBoardState
    ) -> None:
        width, height = frame.size
        color = TIMER_COLORS.get(state.inputs.timer_color, TEXT)
        if state.countdown.is_pulsing or state.inputs.is_timer_pulsing:
            phase = (pygame.time.get_ticks() % PULSE_PERIOD_MS) / PULSE_PERIOD_MS
            color = color.mix(BACKGROUND, 0.25 * (1 - math.cos(2 * math.pi * phase)))
        self._blit_centered(
            window,
            f"{state.countdown.seconds_remaining}s",
            size=int(height * TIMER_SCALE[state.countdown.severity]),
            color=color,
            center=(width / 2, frame.timer_y),
        )

    def _draw_board(
        self, window: pygame.Surface, frame: BoardFrame, state: SimonBoardState
    ) -> None:
        geometry = frame.geometry
        center = (geometry.center_x, geometry.center_y)
        pygame.draw.circle(
            window, BOARD_BACKGROUND.tuple(), center, geometry.outer_radius + 5
        )

        interactive = state.accepts_input
        for region, outline in geometry.outlines():
            colors = colors_for(region)
            if region == state.active_region:
                fill = colors.lit
            elif interactive:
                fill = colors.base
            else:
                fill = colors.base.dim(DISABLED_DIM)
            points = outline.polygon()
            pygame.draw.polygon(window, fill.tuple(), points)
            pygame.draw.polygon(
                window, BOARD_BACKGROUND.tuple(), points, width=WEDGE_STROKE_WIDTH
            )

        if geometry.inner_radius > 2:
            pygame.draw.circle(
                window, BOARD_BACKGROUND.tuple(), center, geometry.inner_radius - 2
            )
            pygame.draw.circle(
                window, HUB_STROKE.tuple(), center, geometry.inner_radius - 2, width=3
            )
            self._blit_centered(
                window,
                "SIMON",
                size=int(geometry.inner_radius * 0.4),
                color=TEXT,
                center=center,
            )

    def _draw_progress(
        self, window: pygame.Surface, frame: BoardFrame, inputs: BoardInputs
    ) -> None:
        width, height = frame.size
        radius = max(int(height * 0.015), 3)
        spacing = radius * 3
        label = progress_label(inputs)
        label_size = int(height * 0.025)
        label_width = self._font(label_size).size(label)[0]
        total = spacing * len(inputs.player_sequence) + label_width
        x = (width - total) / 2 + radius
        for region in inputs.player_sequence:
            pygame.draw.circle(
                window, colors_for(region).base.tuple(), (x, frame.progress_y), radius
            )
            x += spacing
        self._blit_centered(
            window,
            label,
            size=label_size,
            color=FAINT_TEXT,
            center=(x - radius + label_width / 2, frame.progress_y),
        )

    def _draw_submit(
        self, window: pygame.Surface, frame: BoardFrame, inputs: BoardInputs
    ) -> None:
        rect = frame.submit_rect
        fill = SUBMIT_READY if inputs.can_submit else SUBMIT_BLOCKED
        pygame.draw.rect(window, fill.tuple(), rect, border_radius=12)
        self._blit_centered(
            window,
            submit_label(inputs),
            size=int(rect.height * 0.45),
            color=TEXT if inputs.can_submit else FAINT_TEXT,
            center=rect.center,
        )

