"""Tests for countdown tiers."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from simon.board.countdown import (SEVERITY_TIMER_COLORS, CountdownSeverity,
                                   CountdownThresholds, TimerColor,
                                   present_countdown)


class TestCountdownThresholds:
    """Group tier boundary checks so the timer escalates at the same seconds every round."""

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (30, CountdownSeverity.CALM),
            (11, CountdownSeverity.CALM),
            (10, CountdownSeverity.WARNING),
            (6, CountdownSeverity.WARNING),
            (5, CountdownSeverity.CRITICAL),
            (0, CountdownSeverity.CRITICAL),
            (-3, CountdownSeverity.CRITICAL),
        ],
    )
    def test_classify_boundaries(self, seconds: int, expected: CountdownSeverity) -> None:
        """Verify the inclusive boundaries at ten and five seconds."""
        assert CountdownThresholds().classify(seconds) is expected

    @given(
        first=st.integers(min_value=-10, max_value=120),
        second=st.integers(min_value=-10, max_value=120),
    )
    def test_severity_never_drops_as_time_runs_out(self, first: int, second: int) -> None:
        """Ensure less time left never yields a calmer tier."""
        thresholds = CountdownThresholds()
        fewer, more = sorted((first, second))

        assert thresholds.classify(fewer) >= thresholds.classify(more)

    def test_critical_above_warning_is_rejected(self) -> None:
        """Check inconsistent thresholds fail at construction."""
        with pytest.raises(ValueError):
            CountdownThresholds(warning_seconds=3, critical_seconds=4)

    def test_from_configuration_reads_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Confirm threshold overrides come from the environment."""
        monkeypatch.setenv("SIMON_COUNTDOWN_WARNING_SECONDS", "20")
        monkeypatch.setenv("SIMON_COUNTDOWN_CRITICAL_SECONDS", "3")

        thresholds = CountdownThresholds.from_configuration()

        assert thresholds == CountdownThresholds(warning_seconds=20, critical_seconds=3)

    def test_every_severity_has_a_timer_color(self) -> None:
        """Verify the severity palette covers each tier."""
        assert SEVERITY_TIMER_COLORS[CountdownSeverity.CALM] is TimerColor.GREEN
        assert SEVERITY_TIMER_COLORS[CountdownSeverity.WARNING] is TimerColor.YELLOW
        assert SEVERITY_TIMER_COLORS[CountdownSeverity.CRITICAL] is TimerColor.RED


class TestPresentCountdown:
    """Group countdown visibility checks."""

    def test_hidden_outside_input_phase(self) -> None:
        """Ensure the countdown is hidden while the sequence plays."""
        presentation = present_countdown(12, is_input_phase=False)

        assert presentation.visible is False

    def test_hidden_at_zero(self) -> None:
        """Check an expired countdown is not drawn."""
        presentation = present_countdown(0, is_input_phase=True)

        assert presentation.visible is False
        assert presentation.seconds_remaining == 0

    @given(seconds=st.integers(min_value=1, max_value=120))
    def test_pulses_only_when_critical(self, seconds: int) -> None:
        """Verify pulsing matches the critical tier exactly."""
        presentation = present_countdown(seconds, is_input_phase=True)

        assert presentation.visible is True
        assert presentation.is_pulsing is (
            presentation.severity is CountdownSeverity.CRITICAL
        )
