"""Text shown around the board, derived from the caller's inputs."""

from __future__ import annotations

from simon.renderers.simon_board.state import BoardInputs, RoundResult


def round_label(inputs: BoardInputs) -> str:
    return f"Round {inputs.round}"


def status_line(inputs: BoardInputs) -> str:
    if inputs.disabled:
        return "Spectating..."
    if inputs.is_showing_sequence:
        count = len(inputs.sequence)
        return f"WATCH! ({count} color{'s' if count > 1 else ''})"
    if inputs.is_input_phase:
        return "Your turn!"
    return "Ready"


def progress_label(inputs: BoardInputs) -> str:
    return f"{len(inputs.player_sequence)}/{len(inputs.sequence)}"


def submit_label(inputs: BoardInputs) -> str:
    return "SUBMIT" if inputs.can_submit else progress_label(inputs)


def result_line(result: RoundResult | None) -> str | None:
    if result is None:
        return None
    if result.is_correct:
        return f"{result.player_name} got it!"
    return f"{result.player_name} missed it"
