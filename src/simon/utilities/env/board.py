from simon.utilities.env.parsing import _env_flag, _env_float, _env_int

DEFAULT_GAP_DEGREES = 4.0
DEFAULT_WARNING_SECONDS = 10
DEFAULT_CRITICAL_SECONDS = 5


class BoardConfiguration:
    @classmethod
    def gap_degrees(cls) -> float:
        return _env_float(
            "SIMON_GAP_DEGREES", default=DEFAULT_GAP_DEGREES, minimum=0.0, maximum=90.0
        )

    @classmethod
    def countdown_warning_seconds(cls) -> int:
        return _env_int(
            "SIMON_COUNTDOWN_WARNING_SECONDS",
            default=DEFAULT_WARNING_SECONDS,
            minimum=0,
        )

    @classmethod
    def countdown_critical_seconds(cls) -> int:
        critical = _env_int(
            "SIMON_COUNTDOWN_CRITICAL_SECONDS",
            default=DEFAULT_CRITICAL_SECONDS,
            minimum=0,
        )
        if critical > cls.countdown_warning_seconds():
            raise ValueError(
                "SIMON_COUNTDOWN_CRITICAL_SECONDS must not exceed "
                "SIMON_COUNTDOWN_WARNING_SECONDS"
            )
        return critical

    @classmethod
    def haptics_enabled(cls) -> bool:
        return _env_flag("SIMON_HAPTICS", default=True)
