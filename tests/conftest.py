from datetime import datetime, timedelta
from typing import Callable

import pygame
import pytest
from hypothesis import HealthCheck, settings
from reactivex.scheduler import HistoricalScheduler

from simon.utilities.logging_control import get_logging_controller

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")

EPOCH = datetime(2024, 1, 1)


@pytest.fixture(autouse=True)
def dummy_sdl_video_driver(monkeypatch: pytest.MonkeyPatch) -> None:
    """Force pygame to use the dummy SDL drivers so headless tests remain stable."""

    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    yield


@pytest.fixture(autouse=True)
def init_pygame() -> None:
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture(autouse=True)
def fresh_logging_controller() -> None:
    """Drop the cached controller so sampling state never leaks between tests."""

    get_logging_controller.cache_clear()
    yield
    get_logging_controller.cache_clear()


@pytest.fixture()
def scheduler() -> HistoricalScheduler:
    return HistoricalScheduler(EPOCH)


@pytest.fixture()
def advance(scheduler: HistoricalScheduler) -> Callable[[int], None]:
    """Move virtual time to ``ms`` milliseconds after the epoch."""

    def _advance(ms: int) -> None:
        scheduler.advance_to(EPOCH + timedelta(milliseconds=ms))

    return _advance
