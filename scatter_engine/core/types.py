# scatter_engine/core/types.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SamplePoint:
    """One accepted sample: position plus the radius drawn for it."""

    x: float
    y: float
    radius: float

    @property
    def diameter(self) -> float:
        return self.radius * 2.0

    def translated(self, dx: float, dy: float) -> "SamplePoint":
        return SamplePoint(self.x + dx, self.y + dy, self.radius)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.radius)


@dataclass(frozen=True)
class Region:
    """Axis-aligned sample rectangle. Sampling runs in local [0,w]x[0,h],
    the offset only moves the final output."""

    width: float
    height: float
    dx: float = 0.0
    dy: float = 0.0

    @property
    def size(self) -> Tuple[float, float]:
        return (self.width, self.height)

    @property
    def offset(self) -> Tuple[float, float]:
        return (self.dx, self.dy)

    @property
    def center(self) -> Tuple[float, float]:
        return (self.width / 2.0, self.height / 2.0)

    @property
    def area(self) -> float:
        return self.width * self.height

    def contains(self, x: float, y: float) -> bool:
        return 0.0 <= x <= self.width and 0.0 <= y <= self.height
