"""Tests for the text shown around the board."""

from __future__ import annotations

import pytest

from simon import Region
from simon.renderers.simon_board.presentation import (progress_label,
                                                      result_line, round_label,
                                                      status_line,
                                                      submit_label)
from simon.renderers.simon_board.state import BoardInputs, RoundResult

SEQUENCE = (Region.RED, Region.BLUE, Region.GREEN)


class TestStatusLine:
    """Group status text checks so players always know whose turn it is."""

    @pytest.mark.parametrize(
        ("inputs", "expected"),
        [
            (BoardInputs(sequence=SEQUENCE, disabled=True, is_input_phase=True), "Spectating..."),
            (BoardInputs(sequence=SEQUENCE, is_showing_sequence=True), "WATCH! (3 colors)"),
            (BoardInputs(sequence=(Region.RED,), is_showing_sequence=True), "WATCH! (1 color)"),
            (BoardInputs(sequence=SEQUENCE, is_input_phase=True), "Your turn!"),
            (BoardInputs(sequence=SEQUENCE), "Ready"),
        ],
        ids=["spectating", "watch-plural", "watch-single", "input", "ready"],
    )
    def test_status_line(self, inputs: BoardInputs, expected: str) -> None:
        """Verify each phase maps to its status text."""
        assert status_line(inputs) == expected

    def test_round_label(self) -> None:
        """Check the round header."""
        assert round_label(BoardInputs(round=7)) == "Round 7"


class TestSubmitLabel:
    """Group submit button text checks."""

    def test_shows_progress_until_complete(self) -> None:
        """Ensure the button counts entries until the answer is complete."""
        inputs = BoardInputs(
            sequence=SEQUENCE, is_input_phase=True, player_sequence=(Region.RED,)
        )

        assert progress_label(inputs) == "1/3"
        assert submit_label(inputs) == "1/3"

    def test_shows_submit_when_allowed(self) -> None:
        """Verify the button reads SUBMIT once the caller allows it."""
        inputs = BoardInputs(
            sequence=SEQUENCE,
            is_input_phase=True,
            player_sequence=SEQUENCE,
            can_submit=True,
        )

        assert submit_label(inputs) == "SUBMIT"


class TestResultLine:
    """Group round result text checks."""

    def test_no_result(self) -> None:
        """Check nothing is shown before the first round ends."""
        assert result_line(None) is None

    def test_correct_and_missed(self) -> None:
        """Verify both outcomes name the player."""
        assert result_line(RoundResult(is_correct=True, player_name="Ada")) == "Ada got it!"
        assert result_line(RoundResult(is_correct=False, player_name="Ada")) == "Ada missed it"
