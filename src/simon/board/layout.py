"""Radial board geometry.

Angles are in degrees, measured from the +x axis and increasing clockwise on
screen (screen y grows downwards, as in SVG and pygame). A region's wedge is an
annulus sector: the area between two radii and two angles.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Generic, Hashable, Iterator, Mapping, Sequence, TypeVar

import numpy as np

from simon.utilities.logging import get_logger
from simon.utilities.logging_control import get_logging_controller

logger = get_logger(__name__)

RegionT = TypeVar("RegionT", bound=Hashable)

FULL_TURN = 360.0
# Smallest wedge left when a gap would swallow a whole sector.
MIN_SPAN_DEGREES = 0.5
# A single region never closes into a full ring; this much stays open.
MIN_ARC_GAP_DEGREES = 0.5
OUTER_MARGIN_RATIO = 1 / 30
HUB_RATIO = 0.18

Point = tuple[float, float]


@dataclass(frozen=True, slots=True)
class RegionSpan(Generic[RegionT]):
    region: RegionT
    start_angle: float
    end_angle: float

    @property
    def width(self) -> float:
        return self.end_angle - self.start_angle


def _warn(key: str, msg: str, *args: object) -> None:
    get_logging_controller().log(
        key=key, logger=logger, level=logging.WARNING, msg=msg, args=args
    )


def _clamp_gap(gap_degrees: float, base_degrees: float) -> float:
    if math.isnan(gap_degrees) or gap_degrees < 0:
        _warn("layout.gap.negative", "Gap %s is not a positive angle; using 0", gap_degrees)
        return 0.0
    if gap_degrees >= base_degrees:
        clamped = base_degrees - min(MIN_SPAN_DEGREES, base_degrees / 2)
        _warn(
            "layout.gap.oversized",
            "Gap %s swallows the %s degree sector; clamping to %s",
            gap_degrees,
            base_degrees,
            clamped,
        )
        return clamped
    return gap_degrees


def _resolve_slots(
    regions: Sequence[RegionT], quadrants: Mapping[RegionT, int] | None
) -> list[int]:
    sequential = list(range(len(regions)))
    if quadrants is None:
        return sequential
    if len(set(regions)) == len(regions) and all(r in quadrants for r in regions):
        slots = [quadrants[r] for r in regions]
        if sorted(slots) == sequential:
            return slots
    _warn(
        "layout.quadrants.mismatch",
        "Quadrant table %s does not map %s one-to-one; using input order",
        dict(quadrants),
        list(regions),
    )
    return sequential


def compute_spans(
    regions: Sequence[RegionT],
    gap_degrees: float,
    quadrants: Mapping[RegionT, int] | None = None,
    start_angle: float = 0.0,
) -> list[RegionSpan[RegionT]]:
    """Split the circle into one equal sector per region.

    ``quadrants`` maps each region to its sector slot; slot ``i`` starts at
    ``start_angle + i * 360 / len(regions)``. Without it, slots follow input
    order. Every sector loses ``gap_degrees / 2`` on each side so neighbouring
    wedges never touch. Spans are returned in input order.
    """

    count = len(regions)
    if count == 0:
        return []

    base = FULL_TURN / count
    gap = _clamp_gap(gap_degrees, base)
    half_gap = gap / 2
    slots = _resolve_slots(regions, quadrants)

    spans: list[RegionSpan[RegionT]] = []
    for region, slot in zip(regions, slots):
        sector_start = start_angle + slot * base
        spans.append(
            RegionSpan(
                region=region,
                start_angle=sector_start + half_gap,
                end_angle=sector_start + base - half_gap,
            )
        )
    return spans


def _polar(cx: float, cy: float, radius: float, angle: float) -> Point:
    radians = math.radians(angle)
    return (cx + radius * math.cos(radians), cy + radius * math.sin(radians))


def _fmt(value: float) -> str:
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


@dataclass(frozen=True, slots=True)
class WedgeOutline:
    center_x: float
    center_y: float
    inner_radius: float
    outer_radius: float
    start_angle: float
    end_angle: float

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def large_arc(self) -> bool:
        return self.sweep > 180

    @property
    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Outer start, outer end, inner end, inner start."""
        cx, cy = self.center_x, self.center_y
        return (
            _polar(cx, cy, self.outer_radius, self.start_angle),
            _polar(cx, cy, self.outer_radius, self.end_angle),
            _polar(cx, cy, self.inner_radius, self.end_angle),
            _polar(cx, cy, self.inner_radius, self.start_angle),
        )

    def to_svg(self) -> str:
        (x1, y1), (x2, y2), (x3, y3), (x4, y4) = self.corners
        outer = _fmt(self.outer_radius)
        inner = _fmt(self.inner_radius)
        flag = 1 if self.large_arc else 0
        return (
            f"M {_fmt(x1)} {_fmt(y1)} "
            f"A {outer} {outer} 0 {flag} 1 {_fmt(x2)} {_fmt(y2)} "
            f"L {_fmt(x3)} {_fmt(y3)} "
            f"A {inner} {inner} 0 {flag} 0 {_fmt(x4)} {_fmt(y4)} Z"
        )

    def polygon(self, step_degrees: float = 2.0) -> list[Point]:
        """Approximate the outline with straight segments for raster drawing."""
        steps = max(2, math.ceil(self.sweep / max(step_degrees, 0.1)) + 1)
        angles = np.radians(np.linspace(self.start_angle, self.end_angle, steps))
        cos, sin = np.cos(angles), np.sin(angles)
        outer = np.column_stack(
            (self.center_x + self.outer_radius * cos, self.center_y + self.outer_radius * sin)
        )
        inner = np.column_stack(
            (
                self.center_x + self.inner_radius * cos[::-1],
                self.center_y + self.inner_radius * sin[::-1],
            )
        )
        return [(float(x), float(y)) for x, y in np.vstack((outer, inner))]

    def contains(self, x: float, y: float) -> bool:
        dx, dy = x - self.center_x, y - self.center_y
        distance = math.hypot(dx, dy)
        if distance < self.inner_radius or distance > self.outer_radius:
            return False
        angle = math.degrees(math.atan2(dy, dx)) % FULL_TURN
        return (angle - self.start_angle) % FULL_TURN <= self.sweep


def wedge_outline(
    center_x: float,
    center_y: float,
    inner_radius: float,
    outer_radius: float,
    start_angle: float,
    end_angle: float,
) -> WedgeOutline:
    """Build an annulus sector, clamping inputs that cannot describe one.

    An inner radius at or beyond the outer radius collapses to 0 (a plain pie
    slice). A sweep of a full turn or more is shortened so the outline stays an
    open wedge instead of two coincident arc endpoints.
    """

    outer = max(outer_radius, 0.0)
    inner = max(inner_radius, 0.0)
    if inner >= outer:
        _warn(
            "layout.radius.inverted",
            "Inner radius %s is not inside outer radius %s; drawing a pie slice",
            inner_radius,
            outer_radius,
        )
        inner = 0.0

    if end_angle < start_angle:
        start_angle, end_angle = end_angle, start_angle
    if end_angle - start_angle >= FULL_TURN:
        end_angle = start_angle + FULL_TURN - MIN_ARC_GAP_DEGREES

    return WedgeOutline(
        center_x=center_x,
        center_y=center_y,
        inner_radius=inner,
        outer_radius=outer,
        start_angle=start_angle,
        end_angle=end_angle,
    )


def wedge_path(
    center_x: float,
    center_y: float,
    inner_radius: float,
    outer_radius: float,
    start_angle: float,
    end_angle: float,
) -> str:
    """Return the SVG path of an annulus sector."""
    return wedge_outline(
        center_x, center_y, inner_radius, outer_radius, start_angle, end_angle
    ).to_svg()


@dataclass(frozen=True)
class BoardGeometry(Generic[RegionT]):
    center_x: float
    center_y: float
    inner_radius: float
    outer_radius: float
    spans: tuple[RegionSpan[RegionT], ...]

    @classmethod
    def fit(
        cls,
        *,
        center: Point,
        size: float,
        regions: Sequence[RegionT],
        gap_degrees: float,
        quadrants: Mapping[RegionT, int] | None = None,
    ) -> "BoardGeometry[RegionT]":
        """Size the board to a square of edge ``size`` centred on ``center``."""
        return cls(
            center_x=center[0],
            center_y=center[1],
            inner_radius=size * HUB_RATIO,
            outer_radius=size / 2 - size * OUTER_MARGIN_RATIO,
            spans=tuple(compute_spans(regions, gap_degrees, quadrants)),
        )

    def outline_for(self, span: RegionSpan[RegionT]) -> WedgeOutline:
        return wedge_outline(
            self.center_x,
            self.center_y,
            self.inner_radius,
            self.outer_radius,
            span.start_angle,
            span.end_angle,
        )

    def outlines(self) -> Iterator[tuple[RegionT, WedgeOutline]]:
        for span in self.spans:
            yield span.region, self.outline_for(span)

    def region_at(self, x: float, y: float) -> RegionT | None:
        for region, outline in self.outlines():
            if outline.contains(x, y):
                return region
        return None
