from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(slots=True, frozen=True)
class Color:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for variant in self._as_tuple():
            assert 0 <= variant <= 255, (
                f"Expected all color values to be between 0 and 255. Found {self._as_tuple()}"
            )

    @classmethod
    def from_hex(cls, value: str) -> Color:
        digits = value.lstrip("#")
        if len(digits) != 6:
            raise ValueError(f"Expected a #rrggbb color, got {value!r}")
        return cls(
            r=int(digits[0:2], 16),
            g=int(digits[2:4], 16),
            b=int(digits[4:6], 16),
        )

    def tuple(self) -> tuple[int, int, int]:
        return self._as_tuple()

    def _as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __iter__(self) -> Iterator[int]:
        return iter(self._as_tuple())

    def dim(self, fraction: float) -> Color:
        return Color(
            r=self.__clamp_rgb(self.r * (1 - fraction)),
            g=self.__clamp_rgb(self.g * (1 - fraction)),
            b=self.__clamp_rgb(self.b * (1 - fraction)),
        )

    def mix(self, other: Color, fraction: float) -> Color:
        """Blend towards ``other``; ``fraction`` 0 keeps self, 1 yields other."""
        return Color(
            r=self.__clamp_rgb(self.r + (other.r - self.r) * fraction),
            g=self.__clamp_rgb(self.g + (other.g - self.g) * fraction),
            b=self.__clamp_rgb(self.b + (other.b - self.b) * fraction),
        )

    def __clamp_rgb(self, value: float) -> int:
        return min(255, max(0, int(round(value))))
