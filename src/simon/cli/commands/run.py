from typing import Annotated, Optional

import typer

from simon.runtime.container import build_runtime_container
from simon.runtime.game_loop import GameLoop
from simon.runtime.session import DEFAULT_PLAYER_NAME
from simon.utilities.logging import get_logger

logger = get_logger(__name__)


def run_command(
    player_name: Annotated[
        str, typer.Option("--player-name", help="Name shown in round results")
    ] = DEFAULT_PLAYER_NAME,
    size: Annotated[
        Optional[int],
        typer.Option("--size", help="Window width in pixels; height is 1.5x"),
    ] = None,
    seed: Annotated[
        Optional[int],
        typer.Option("--seed", help="Seed the sequence generator for repeatable games"),
    ] = None,
) -> None:
    try:
        resolver = build_runtime_container(
            player_name=player_name, seed=seed, window_size=size
        )
        loop = resolver.resolve(GameLoop)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        raise typer.Exit(code=1) from e
    loop.start()
