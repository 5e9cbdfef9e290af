"""Tests for routing pygame input to the board."""

from __future__ import annotations

import math

import pygame
import pytest

from simon import Region
from simon.renderers.simon_board.provider import PlaybackCoordinator
from simon.renderers.simon_board.renderer import SimonBoardRenderer
from simon.renderers.simon_board.state import BoardInputs
from simon.runtime.pygame_event_handler import (PygameEventHandler,
                                                default_key_bindings)

SEQUENCE = (Region.RED, Region.BLUE)


@pytest.fixture()
def calls() -> list[object]:
    return []


@pytest.fixture()
def coordinator(scheduler, calls) -> PlaybackCoordinator[Region]:
    coordinator = PlaybackCoordinator(
        scheduler=scheduler,
        on_color_click=calls.append,
        on_submit=lambda: calls.append("submit"),
    )
    coordinator.update(BoardInputs(sequence=SEQUENCE, is_input_phase=True))
    return coordinator


@pytest.fixture()
def handler(coordinator) -> PygameEventHandler:
    renderer = SimonBoardRenderer(coordinator)
    renderer.initialize(pygame.Surface((360, 540), 0, 32), pygame.time.Clock())
    return PygameEventHandler(coordinator=coordinator, renderer=renderer)


def _wedge_point(handler: PygameEventHandler, angle: float) -> tuple[int, int]:
    geometry = handler.renderer.frame.geometry
    radius = (geometry.inner_radius + geometry.outer_radius) / 2
    return (
        int(geometry.center_x + radius * math.cos(math.radians(angle))),
        int(geometry.center_y + radius * math.sin(math.radians(angle))),
    )


class TestPygameEventHandler:
    """Group input routing checks so every input device reaches the same gate."""

    def test_quit_stops_loop(self, handler) -> None:
        """Verify a window close request stops the loop."""
        assert handler.handle_event(pygame.event.Event(pygame.QUIT)) is False

    def test_escape_stops_loop(self, handler) -> None:
        """Verify escape stops the loop."""
        event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
        assert handler.handle_event(event) is False

    def test_left_click_on_wedge_clicks_region(self, handler, calls) -> None:
        """Ensure a left click on the blue wedge is forwarded as a blue click."""
        event = pygame.event.Event(
            pygame.MOUSEBUTTONDOWN, pos=_wedge_point(handler, 45), button=1
        )

        assert handler.handle_event(event) is True
        assert calls == [Region.BLUE]

    def test_right_click_is_ignored(self, handler, calls) -> None:
        """Check only the primary button presses wedges."""
        event = pygame.event.Event(
            pygame.MOUSEBUTTONDOWN, pos=_wedge_point(handler, 45), button=3
        )

        handler.handle_event(event)

        assert calls == []

    def test_number_keys_follow_reading_order(self, handler, calls) -> None:
        """Verify keys 1 to 4 press green, red, yellow and blue."""
        for key in (pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4):
            handler.handle_event(pygame.event.Event(pygame.KEYDOWN, key=key))

        assert calls == [Region.GREEN, Region.RED, Region.YELLOW, Region.BLUE]

    def test_enter_submits_only_when_allowed(self, handler, coordinator, calls) -> None:
        """Ensure submit keys go through the coordinator gate."""
        event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN)
        handler.handle_event(event)
        assert calls == []

        coordinator.update(
            BoardInputs(
                sequence=SEQUENCE,
                is_input_phase=True,
                player_sequence=SEQUENCE,
                can_submit=True,
            )
        )
        handler.handle_event(event)

        assert calls == ["submit"]

    def test_default_key_bindings_cover_regions(self) -> None:
        """Check bindings stop at the number of regions."""
        bindings = default_key_bindings((Region.RED, Region.BLUE))

        assert bindings == {pygame.K_1: Region.RED, pygame.K_2: Region.BLUE}
