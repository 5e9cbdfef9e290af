import time
from typing import Generic, TypeVar, final

import pygame
from reactivex import Observable
from reactivex.disposable import Disposable

from simon.peripheral.core.providers import (ObservableProvider,
                                             StaticStateProvider)
from simon.utilities.logging import get_logger

logger = get_logger(__name__)

StateT = TypeVar("StateT")


class AtomicBaseRenderer(Generic[StateT]):
    """Base renderer that manages an immutable state snapshot."""

    def __init__(self, *args, **kwargs) -> None:
        self.initialized = False
        self.warmup = True
        self._state: StateT | None = None

    @property
    def state(self) -> StateT:
        assert self._state is not None
        return self._state

    def set_state(self, state: StateT) -> None:
        self._state = state

    @property
    def name(self):
        return self.__class__.__name__

    def is_initialized(self) -> bool:
        return self.initialized

    @final
    def process(self, window: pygame.Surface, clock: pygame.time.Clock) -> None:
        return self.real_process(window=window, clock=clock)

    def real_process(self, window: pygame.Surface, clock: pygame.time.Clock) -> None:
        raise NotImplementedError("Please implement")

    @final
    def _internal_process(self, window: pygame.Surface, clock: pygame.time.Clock) -> None:
        if not self.is_initialized():
            raise ValueError("Needs to be initialized")

        start_ns = time.perf_counter_ns()
        self.real_process(window=window, clock=clock)
        duration_ms = (time.perf_counter_ns() - start_ns) / 1_000_000
        logger.debug(
            "renderer.frame",
            extra={
                "renderer": self.name,
                "duration_ms": duration_ms,
            },
        )

    def reset(self):
        self.initialized = False


class StatefulBaseRenderer(AtomicBaseRenderer[StateT], Generic[StateT]):
    """Renderer whose state arrives from an :class:`ObservableProvider`.

    A fixed ``state`` is wrapped in a :class:`StaticStateProvider`, so every
    renderer goes through the same subscription path.
    """

    def __init__(
        self,
        builder: ObservableProvider[StateT] | None = None,
        *args,
        state: StateT | None = None,
        **kwargs,
    ) -> None:
        if builder is not None and state is not None:
            raise ValueError("StatefulBaseRenderer expects either builder or state")
        if builder is None:
            if state is None:
                raise ValueError("StatefulBaseRenderer needs a builder or a state")
            builder = StaticStateProvider(state)
        self.builder: ObservableProvider[StateT] = builder
        self._subscription: Disposable | None = None
        super().__init__(*args, **kwargs)

    def state_observable(self) -> Observable[StateT]:
        return self.builder.observable()

    def initialize(self, window: pygame.Surface, clock: pygame.time.Clock) -> None:
        self._subscription = self.state_observable().subscribe(on_next=self.set_state)
        try:
            if self.warmup:
                self.process(window, clock)
        except Exception as e:
            logger.warning(f"Error initializing renderer ({type(self)}): {e}")
            raise e
        self.initialized = True

    def reset(self):
        if self._subscription is not None:
            self._subscription.dispose()
            self._subscription = None
        super().reset()
