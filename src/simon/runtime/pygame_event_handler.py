from __future__ import annotations

from typing import Hashable, Mapping, Sequence

import pygame

from simon.board.regions import CLASSIC_READING_ORDER
from simon.renderers.simon_board.provider import PlaybackCoordinator
from simon.renderers.simon_board.renderer import Control, SimonBoardRenderer
from simon.utilities.logging import get_logger

logger = get_logger(__name__)

SUBMIT_KEYS = frozenset({pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE})
QUIT_KEYS = frozenset({pygame.K_ESCAPE})
REGION_KEYS = (pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4, pygame.K_5, pygame.K_6)


def default_key_bindings(regions: Sequence[Hashable]) -> Mapping[int, Hashable]:
    """Number keys pick regions in reading order: 1 is the first region."""
    return dict(zip(REGION_KEYS, regions))


class PygameEventHandler:
    def __init__(
        self,
        coordinator: PlaybackCoordinator,
        renderer: SimonBoardRenderer,
        key_bindings: Mapping[int, Hashable] | None = None,
    ) -> None:
        self.coordinator = coordinator
        self.renderer = renderer
        self.key_bindings = (
            dict(key_bindings)
            if key_bindings is not None
            else default_key_bindings(renderer.regions or CLASSIC_READING_ORDER)
        )

    def handle_events(self) -> bool:
        running = True
        try:
            for event in pygame.event.get():
                running = self.handle_event(event) and running
        except SystemError:
            # Some joystick drivers queue events that blow up on read.
            logger.exception("Encountered segfaulted event")
        return running

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Dispatch one event. Returns False when the loop should stop."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._press(self.renderer.hit_test(event.pos))
        elif event.type == pygame.FINGERDOWN:
            width, height = self.renderer.frame.size if self.renderer.frame else (0, 0)
            self._press(
                self.renderer.hit_test((int(event.x * width), int(event.y * height)))
            )
        elif event.type == pygame.KEYDOWN:
            if event.key in QUIT_KEYS:
                return False
            if event.key in SUBMIT_KEYS:
                self._press(Control.SUBMIT)
            elif event.key in self.key_bindings:
                self._press(self.key_bindings[event.key])
        return True

    def _press(self, target: Hashable | None) -> None:
        if target is None:
            return
        if target == Control.SUBMIT:
            self.coordinator.submit()
        else:
            self.coordinator.click(target)
