from simon.utilities.env.parsing import _env_int

DEFAULT_INPUT_SECONDS = 15
DEFAULT_MAX_FPS = 60
DEFAULT_WINDOW_SIZE = 360


class RuntimeConfiguration:
    @classmethod
    def input_seconds(cls) -> int:
        return _env_int("SIMON_INPUT_SECONDS", default=DEFAULT_INPUT_SECONDS, minimum=1)

    @classmethod
    def max_fps(cls) -> int:
        return _env_int("SIMON_MAX_FPS", default=DEFAULT_MAX_FPS, minimum=1)

    @classmethod
    def window_size(cls) -> int:
        return _env_int(
            "SIMON_WINDOW_SIZE", default=DEFAULT_WINDOW_SIZE, minimum=120, maximum=4096
        )
