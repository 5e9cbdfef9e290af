from __future__ import annotations

import pygame
from reactivex.abc import DisposableBase
from reactivex.scheduler.mainloop import PyGameScheduler

from simon.renderers.simon_board.provider import PlaybackCoordinator
from simon.renderers.simon_board.renderer import SimonBoardRenderer
from simon.runtime.pygame_event_handler import PygameEventHandler
from simon.runtime.session import LocalSession
from simon.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_FPS = 60
WINDOW_ASPECT = 1.5
WINDOW_TITLE = "Simon"


class GameLoop:
    """Owns the window and drives everything on one thread.

    Each frame pumps pygame events, runs timers that came due on the
    scheduler, then draws the latest board state. Playback timers, the
    session countdown and input handling therefore never race each other.
    """

    def __init__(
        self,
        *,
        session: LocalSession,
        coordinator: PlaybackCoordinator,
        renderer: SimonBoardRenderer,
        event_handler: PygameEventHandler,
        scheduler: PyGameScheduler,
        window_size: int,
        max_fps: int = DEFAULT_MAX_FPS,
    ) -> None:
        self.session = session
        self.coordinator = coordinator
        self.renderer = renderer
        self.event_handler = event_handler
        self.scheduler = scheduler
        self.window_size = window_size
        self.max_fps = max_fps
        self.running = False
        self.screen: pygame.Surface | None = None
        self.clock: pygame.time.Clock | None = None
        self._inputs_subscription: DisposableBase | None = None

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.window_size, int(self.window_size * WINDOW_ASPECT)

    def start(self) -> None:
        logger.info("Starting GameLoop")
        self._initialize()
        self.running = True
        logger.info("Entering main loop.")
        try:
            self._run_main_loop()
        finally:
            self.shutdown()
            pygame.quit()

    def shutdown(self) -> None:
        if self._inputs_subscription is not None:
            self._inputs_subscription.dispose()
            self._inputs_subscription = None
        self.session.dispose()
        self.coordinator.dispose()
        self.renderer.reset()

    def _initialize(self) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode(self.dimensions)
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()
        self.coordinator.bind(
            on_color_click=self.session.record_click,
            on_submit=self.session.submit,
        )
        self._inputs_subscription = self.session.observable().subscribe(
            on_next=self.coordinator.update
        )
        self.renderer.initialize(self.screen, self.clock)
        self.session.start()

    def _one_loop(self) -> None:
        if self.screen is None or self.clock is None:
            raise RuntimeError("GameLoop screen is not initialized")
        self.scheduler.run()
        self.renderer._internal_process(self.screen, self.clock)
        pygame.display.flip()

    def _run_main_loop(self) -> None:
        assert self.clock is not None
        while self.running:
            self.running = self.event_handler.handle_events()
            self._one_loop()
            self.clock.tick(self.max_fps)
