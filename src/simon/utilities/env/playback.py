from simon.utilities.env.parsing import _env_int

DEFAULT_SHOW_DURATION_MS = 700
DEFAULT_SHOW_GAP_MS = 300
DEFAULT_CLICK_FLASH_MS = 150


class PlaybackConfiguration:
    @classmethod
    def show_duration_ms(cls) -> int:
        return _env_int(
            "SIMON_SHOW_DURATION_MS", default=DEFAULT_SHOW_DURATION_MS, minimum=1
        )

    @classmethod
    def show_gap_ms(cls) -> int:
        return _env_int("SIMON_SHOW_GAP_MS", default=DEFAULT_SHOW_GAP_MS, minimum=0)

    @classmethod
    def click_flash_ms(cls) -> int:
        return _env_int(
            "SIMON_CLICK_FLASH_MS", default=DEFAULT_CLICK_FLASH_MS, minimum=1
        )
