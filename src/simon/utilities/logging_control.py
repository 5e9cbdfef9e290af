from __future__ import annotations

import logging
import os
import re
import time
from dataclasses import dataclass
from functools import cache
from typing import Callable

LOG_RULES_ENV_VAR = "SIMON_LOG_RULES"
DEFAULT_INTERVAL_ENV_VAR = "SIMON_LOG_DEFAULT_INTERVAL"
DEFAULT_INTERVAL_SECONDS = 1.0

_RULE_PATTERN = re.compile(
    r"^(?P<key>[^=]+)="
    r"(?P<interval>none|\d+(?:\.\d+)?)"
    r"(?::(?P<level>[A-Za-z]+))?$"
)


@dataclass(frozen=True)
class LogRule:
    """How often a sampled log key may emit, and at which level."""

    interval_seconds: float | None
    level: int | None


class LoggingController:
    """Sample noisy log statements by key.

    Board interactions such as rejected clicks happen on every stray tap, so
    they are emitted at most once per interval; everything in between is
    counted and reported with the next emitted record.
    """

    def __init__(
        self,
        *,
        default_interval: float | None,
        rules: dict[str, LogRule],
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self._default_interval = default_interval
        self._rules = rules
        self._monotonic = monotonic
        self._next_emit: dict[str, float] = {}
        self._suppressed: dict[str, int] = {}

    def _rule_for(self, key: str) -> LogRule:
        return self._rules.get(
            key, LogRule(interval_seconds=self._default_interval, level=None)
        )

    def log(
        self,
        *,
        key: str,
        logger: logging.Logger,
        level: int,
        msg: str,
        args: tuple[object, ...] = (),
    ) -> bool:
        """Emit ``msg`` unless ``key`` already emitted within its interval.

        Returns ``True`` when the record was emitted.
        """

        rule = self._rule_for(key)
        resolved_level = rule.level or level
        if rule.interval_seconds is None:
            logger.log(resolved_level, msg, *args)
            return True

        now = self._monotonic()
        if now < self._next_emit.get(key, 0.0):
            self._suppressed[key] = self._suppressed.get(key, 0) + 1
            return False

        self._next_emit[key] = now + rule.interval_seconds
        suppressed = self._suppressed.pop(key, 0)
        logger.log(
            resolved_level,
            msg,
            *args,
            extra={"log_key": key, "suppressed": suppressed},
        )
        return True


def _parse_level(name: str | None) -> int | None:
    if not name:
        return None
    resolved = getattr(logging, name.upper(), None)
    if isinstance(resolved, int):
        return resolved
    raise ValueError(f"Unknown log level {name!r}")


def _parse_interval(value: str) -> float | None:
    if value.lower() == "none":
        return None
    return float(value)


def parse_rules(raw_rules: str) -> dict[str, LogRule]:
    rules: dict[str, LogRule] = {}
    for chunk in filter(None, (part.strip() for part in raw_rules.split(","))):
        match = _RULE_PATTERN.match(chunk)
        if not match:
            raise ValueError(
                f"Invalid {LOG_RULES_ENV_VAR} entry {chunk!r}. Expected 'key=interval[:LEVEL]'."
            )
        rules[match.group("key").strip()] = LogRule(
            interval_seconds=_parse_interval(match.group("interval")),
            level=_parse_level(match.group("level")),
        )
    return rules


@cache
def get_logging_controller() -> LoggingController:
    """Return the shared logging controller instance."""

    default_interval_raw = os.getenv(DEFAULT_INTERVAL_ENV_VAR)
    default_interval = (
        DEFAULT_INTERVAL_SECONDS
        if default_interval_raw is None
        else _parse_interval(default_interval_raw)
    )
    rules_raw = os.getenv(LOG_RULES_ENV_VAR, "")
    return LoggingController(
        default_interval=default_interval,
        rules=parse_rules(rules_raw) if rules_raw else {},
    )
