from pathlib import Path
from typing import Annotated, Hashable, Optional

import typer

from simon.board.layout import BoardGeometry
from simon.board.regions import (CLASSIC_QUADRANTS, CLASSIC_READING_ORDER,
                                 colors_for)
from simon.utilities.env import Configuration
from simon.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_SVG_SIZE = 300


def render_board_svg(
    size: int,
    gap_degrees: float,
    active: Hashable | None = None,
) -> str:
    """Draw the classic four-wedge board as a standalone SVG document."""
    geometry = BoardGeometry.fit(
        center=(size / 2, size / 2),
        size=size,
        regions=CLASSIC_READING_ORDER,
        gap_degrees=gap_degrees,
        quadrants=CLASSIC_QUADRANTS,
    )
    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}" '
        f'viewBox="0 0 {size} {size}">',
        f'  <circle cx="{size / 2:g}" cy="{size / 2:g}" '
        f'r="{geometry.outer_radius + 5:g}" fill="#1a1a1a"/>',
    ]
    for region, outline in geometry.outlines():
        colors = colors_for(region)
        fill = colors.lit if region == active else colors.base
        lines.append(
            f'  <path data-region="{region}" d="{outline.to_svg()}" '
            f'fill="#{fill.r:02x}{fill.g:02x}{fill.b:02x}" '
            f'stroke="#1a1a1a" stroke-width="2"/>'
        )
    lines.append(
        f'  <circle cx="{size / 2:g}" cy="{size / 2:g}" '
        f'r="{max(geometry.inner_radius - 2, 0):g}" fill="#1a1a1a" '
        f'stroke="#333" stroke-width="3"/>'
    )
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def svg_command(
    size: Annotated[int, typer.Option("--size", min=1)] = DEFAULT_SVG_SIZE,
    gap: Annotated[
        Optional[float], typer.Option("--gap", help="Degrees between wedges")
    ] = None,
    output: Annotated[
        Optional[Path], typer.Option("--output", "-o", help="Write to a file")
    ] = None,
) -> None:
    document = render_board_svg(
        size=size,
        gap_degrees=gap if gap is not None else Configuration.gap_degrees(),
    )
    if output is None:
        typer.echo(document, nl=False)
        return
    output.write_text(document)
    logger.info("Wrote board SVG to %s", output)
