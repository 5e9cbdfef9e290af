"""Tests for environment-driven configuration."""

from __future__ import annotations

import pytest

from simon.utilities.env import Configuration
from simon.utilities.env.parsing import _env_flag, _env_float, _env_int


class TestEnvParsingHelpers:
    """Group env parsing helper tests so configuration parsing stays predictable."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("true", True), ("  YES ", True), ("1", True), ("on", True), ("false", False), ("0", False)],
    )
    def test_env_flag_recognizes_truthy_tokens(
        self, monkeypatch: pytest.MonkeyPatch, value: str, expected: bool
    ) -> None:
        """Confirm _env_flag recognizes common truthy tokens."""
        monkeypatch.setenv("SIMON_TEST_FLAG", value)

        assert _env_flag("SIMON_TEST_FLAG") is expected

    def test_env_int_enforces_bounds(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Verify _env_int rejects values outside its bounds."""
        monkeypatch.setenv("SIMON_TEST_INT", "2")
        with pytest.raises(ValueError):
            _env_int("SIMON_TEST_INT", default=0, minimum=3)
        with pytest.raises(ValueError):
            _env_int("SIMON_TEST_INT", default=0, maximum=1)

    def test_env_int_rejects_garbage(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Ensure non-numeric values raise instead of silently defaulting."""
        monkeypatch.setenv("SIMON_TEST_INT", "many")

        with pytest.raises(ValueError):
            _env_int("SIMON_TEST_INT", default=0)

    def test_env_float_returns_default_when_unset(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Check unset floats fall back to the default."""
        monkeypatch.delenv("SIMON_TEST_FLOAT", raising=False)

        assert _env_float("SIMON_TEST_FLOAT", default=1.5) == 1.5


class TestConfiguration:
    """Group configuration defaults and overrides."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Verify the defaults match the classic board timings."""
        for name in (
            "SIMON_SHOW_DURATION_MS",
            "SIMON_SHOW_GAP_MS",
            "SIMON_CLICK_FLASH_MS",
            "SIMON_GAP_DEGREES",
            "SIMON_INPUT_SECONDS",
        ):
            monkeypatch.delenv(name, raising=False)

        assert Configuration.show_duration_ms() == 700
        assert Configuration.show_gap_ms() == 300
        assert Configuration.click_flash_ms() == 150
        assert Configuration.gap_degrees() == 4.0
        assert Configuration.input_seconds() == 15

    def test_gap_degrees_bounded(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Ensure an absurd gap is rejected at configuration time."""
        monkeypatch.setenv("SIMON_GAP_DEGREES", "120")

        with pytest.raises(ValueError):
            Configuration.gap_degrees()

    def test_critical_must_not_exceed_warning(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Check inconsistent countdown tiers are rejected."""
        monkeypatch.setenv("SIMON_COUNTDOWN_WARNING_SECONDS", "4")
        monkeypatch.setenv("SIMON_COUNTDOWN_CRITICAL_SECONDS", "6")

        with pytest.raises(ValueError):
            Configuration.countdown_critical_seconds()

    def test_window_size_range(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Verify tiny windows are rejected."""
        monkeypatch.setenv("SIMON_WINDOW_SIZE", "50")

        with pytest.raises(ValueError):
            Configuration.window_size()
