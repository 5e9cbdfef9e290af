from reactivex.scheduler.mainloop import PyGameScheduler

from simon.peripheral.haptics import HapticTrigger, NullHaptics
from simon.renderers.simon_board.provider import PlaybackCoordinator
from simon.renderers.simon_board.renderer import SimonBoardRenderer
from simon.runtime.container import build_runtime_container
from simon.runtime.game_loop import GameLoop
from simon.runtime.pygame_event_handler import PygameEventHandler
from simon.runtime.session import LocalSession


class TestRuntimeContainer:
    """Validate runtime container wiring so every part of the loop shares one instance."""

    def test_container_registers_singletons(self) -> None:
        """Verify the board pieces resolve to the same instances everywhere."""
        container = build_runtime_container(overrides={HapticTrigger: NullHaptics()})

        loop = container.resolve(GameLoop)

        assert loop.coordinator is container.resolve(PlaybackCoordinator)
        assert loop.renderer is container.resolve(SimonBoardRenderer)
        assert loop.session is container.resolve(LocalSession)
        assert loop.event_handler is container.resolve(PygameEventHandler)
        assert loop.scheduler is container.resolve(PyGameScheduler)
        assert loop.event_handler.coordinator is loop.coordinator

    def test_command_line_settings_reach_components(self) -> None:
        """Confirm player name and window size flow from the builder into the loop."""
        container = build_runtime_container(
            player_name="Ada",
            seed=11,
            window_size=480,
            overrides={HapticTrigger: NullHaptics()},
        )

        loop = container.resolve(GameLoop)

        assert loop.session.player_name == "Ada"
        assert loop.window_size == 480
        assert loop.dimensions == (480, 720)

    def test_overrides_replace_bindings(self, scheduler) -> None:
        """Ensure overrides swap implementations without touching runtime code."""
        coordinator = PlaybackCoordinator(scheduler=scheduler)
        container = build_runtime_container(
            overrides={HapticTrigger: NullHaptics(), PlaybackCoordinator: coordinator}
        )

        assert container.resolve(SimonBoardRenderer).builder is coordinator

    def test_containers_are_independent(self) -> None:
        """Check each build starts from a clean container."""
        first = build_runtime_container(overrides={HapticTrigger: NullHaptics()})
        second = build_runtime_container(overrides={HapticTrigger: NullHaptics()})

        assert first.resolve(LocalSession) is not second.resolve(LocalSession)
