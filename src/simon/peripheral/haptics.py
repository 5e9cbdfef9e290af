from __future__ import annotations

from typing import Protocol

import pygame

from simon.utilities.env import Configuration
from simon.utilities.logging import get_logger

logger = get_logger(__name__)

CLICK_PULSE_MS = 50
SUBMIT_PULSE_MS = 100


class HapticTrigger(Protocol):
    """A vibration capability that may or may not exist on the host.

    Implementations must never raise from ``pulse``: feedback is fire and
    forget and cannot change how input is handled.
    """

    def available(self) -> bool: ...

    def pulse(self, duration_ms: int) -> None: ...


class NullHaptics:
    def available(self) -> bool:
        return False

    def pulse(self, duration_ms: int) -> None:
        return None


class GamepadRumble:
    """Rumble the first connected joystick through pygame."""

    def __init__(
        self,
        joystick: "pygame.joystick.JoystickType",
        *,
        low_frequency: float = 0.6,
        high_frequency: float = 0.6,
    ) -> None:
        self.joystick = joystick
        self.low_frequency = low_frequency
        self.high_frequency = high_frequency

    def available(self) -> bool:
        return self.joystick is not None

    def pulse(self, duration_ms: int) -> None:
        try:
            played = self.joystick.rumble(
                self.low_frequency, self.high_frequency, duration_ms
            )
        except pygame.error as e:
            logger.warning(f"Joystick rumble failed: {e}")
            return
        if not played:
            logger.debug("Joystick %s does not support rumble", self.joystick.get_name())


def detect_haptics() -> HapticTrigger:
    if not Configuration.haptics_enabled():
        return NullHaptics()
    try:
        pygame.joystick.init()
        if pygame.joystick.get_count() == 0:
            return NullHaptics()
        joystick = pygame.joystick.Joystick(0)
        joystick.init()
    except pygame.error as e:
        logger.warning(f"Error connecting joystick for haptics: {e}")
        return NullHaptics()
    logger.info(f"{joystick.get_name()} ready for haptic feedback")
    return GamepadRumble(joystick)
