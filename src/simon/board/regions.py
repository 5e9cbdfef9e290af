"""Region tables for the classic four-colour board."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from simon import Region
from simon.display.color import Color

# Slot i covers [90 * i, 90 * (i + 1)) degrees, measured clockwise on screen
# from the +x axis. Slot 0 is the bottom-right quadrant.
CLASSIC_QUADRANTS: Mapping[Region, int] = MappingProxyType(
    {
        Region.BLUE: 0,
        Region.YELLOW: 1,
        Region.GREEN: 2,
        Region.RED: 3,
    }
)

# Reading order used for keyboard bindings: top-left, top-right,
# bottom-left, bottom-right.
CLASSIC_READING_ORDER: tuple[Region, ...] = (
    Region.GREEN,
    Region.RED,
    Region.YELLOW,
    Region.BLUE,
)


@dataclass(frozen=True, slots=True)
class RegionColors:
    base: Color
    lit: Color


REGION_PALETTE: Mapping[Region, RegionColors] = MappingProxyType(
    {
        Region.GREEN: RegionColors(Color.from_hex("#2ecc40"), Color.from_hex("#7dff8a")),
        Region.RED: RegionColors(Color.from_hex("#ff4136"), Color.from_hex("#ff8580")),
        Region.YELLOW: RegionColors(Color.from_hex("#ffdc00"), Color.from_hex("#fff580")),
        Region.BLUE: RegionColors(Color.from_hex("#0074d9"), Color.from_hex("#7abfff")),
    }
)

FALLBACK_COLORS = RegionColors(Color.from_hex("#888888"), Color.from_hex("#dddddd"))


def colors_for(region: object) -> RegionColors:
    return REGION_PALETTE.get(region, FALLBACK_COLORS)  # type: ignore[call-overload]
