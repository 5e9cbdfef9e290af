from __future__ import annotations

import random
from typing import TYPE_CHECKING, Any, Mapping

import pygame
from lagom import Singleton
from reactivex.scheduler.mainloop import PyGameScheduler

from simon.peripheral.haptics import HapticTrigger, detect_haptics
from simon.renderers.simon_board.provider import PlaybackCoordinator
from simon.renderers.simon_board.renderer import SimonBoardRenderer
from simon.runtime.container import RuntimeContainer
from simon.runtime.session import DEFAULT_PLAYER_NAME, LocalSession
from simon.utilities.env import Configuration
from simon.utilities.logging import get_logger

logger = get_logger(__name__)

if TYPE_CHECKING:
    from simon.runtime.game_loop import GameLoop
    from simon.runtime.pygame_event_handler import PygameEventHandler


def _build_scheduler() -> PyGameScheduler:
    return PyGameScheduler(pygame)


def _build_playback_coordinator(resolver: RuntimeContainer) -> PlaybackCoordinator:
    return PlaybackCoordinator.from_configuration(
        scheduler=resolver[PyGameScheduler],
        haptics=resolver[HapticTrigger],
    )


def _build_renderer(resolver: RuntimeContainer) -> SimonBoardRenderer:
    return SimonBoardRenderer(
        resolver[PlaybackCoordinator],
        gap_degrees=Configuration.gap_degrees(),
    )


def _build_event_handler(resolver: RuntimeContainer) -> PygameEventHandler:
    from simon.runtime.pygame_event_handler import PygameEventHandler

    return PygameEventHandler(
        coordinator=resolver[PlaybackCoordinator],
        renderer=resolver[SimonBoardRenderer],
    )


def _build_game_loop(resolver: RuntimeContainer) -> GameLoop:
    from simon.runtime.game_loop import GameLoop
    from simon.runtime.pygame_event_handler import PygameEventHandler

    return GameLoop(
        session=resolver[LocalSession],
        coordinator=resolver[PlaybackCoordinator],
        renderer=resolver[SimonBoardRenderer],
        event_handler=resolver[PygameEventHandler],
        scheduler=resolver[PyGameScheduler],
        window_size=resolver[RuntimeSettings].window_size,
        max_fps=Configuration.max_fps(),
    )


class RuntimeSettings:
    """Values chosen on the command line, resolved once per container."""

    def __init__(
        self,
        *,
        player_name: str = DEFAULT_PLAYER_NAME,
        seed: int | None = None,
        window_size: int | None = None,
    ) -> None:
        self.player_name = player_name
        self.seed = seed
        self.window_size = (
            window_size if window_size is not None else Configuration.window_size()
        )


def build_runtime_container(
    *,
    player_name: str = DEFAULT_PLAYER_NAME,
    seed: int | None = None,
    window_size: int | None = None,
    overrides: Mapping[type[Any], object] | None = None,
) -> RuntimeContainer:
    container = RuntimeContainer()
    logger.debug("Created Lagom container for runtime configuration.")
    configure_runtime_container(
        container=container,
        settings=RuntimeSettings(
            player_name=player_name, seed=seed, window_size=window_size
        ),
        overrides=overrides,
    )
    return container


def configure_runtime_container(
    *,
    container: RuntimeContainer,
    settings: RuntimeSettings,
    overrides: Mapping[type[Any], object] | None = None,
) -> None:
    logger.debug(
        "Configuring Lagom runtime container with overrides=%s.",
        set(overrides.keys()) if overrides else set(),
    )
    _bind(container, overrides, RuntimeSettings, settings)
    _bind(container, overrides, PyGameScheduler, Singleton(_build_scheduler))
    _bind(container, overrides, HapticTrigger, Singleton(detect_haptics))
    _bind(
        container,
        overrides,
        LocalSession,
        Singleton(
            lambda resolver: LocalSession.from_configuration(
                scheduler=resolver[PyGameScheduler],
                player_name=resolver[RuntimeSettings].player_name,
                rng=random.Random(resolver[RuntimeSettings].seed),
            )
        ),
    )
    _bind(
        container,
        overrides,
        PlaybackCoordinator,
        Singleton(_build_playback_coordinator),
    )
    _bind(container, overrides, SimonBoardRenderer, Singleton(_build_renderer))
    _configure_game_loop_bindings(container, overrides)


def _configure_game_loop_bindings(
    container: RuntimeContainer,
    overrides: Mapping[type[Any], object] | None,
) -> None:
    from simon.runtime.game_loop import GameLoop
    from simon.runtime.pygame_event_handler import PygameEventHandler

    _bind(
        container,
        overrides,
        PygameEventHandler,
        Singleton(_build_event_handler),
    )
    _bind(container, overrides, GameLoop, Singleton(_build_game_loop))


def _bind(
    container: RuntimeContainer,
    overrides: Mapping[type[Any], object] | None,
    key: type[Any],
    value: object,
) -> None:
    if overrides and key in overrides:
        container[key] = overrides[key]
        logger.debug("Applied Lagom override for %s.", key)
        return
    if key in container.defined_types:
        logger.debug("Lagom already defined %s; skipping registration.", key)
        return
    container[key] = value
    logger.debug("Registered Lagom provider for %s.", key)
