# scatter_engine/sampling/points.py
from __future__ import annotations
from typing import Iterable, Iterator, List, Optional

import numpy as np

from ..core.types import SamplePoint


class PointSet:
    """
    Accepted points in insertion order, plus x / y / radius columns as
    float64 arrays for the numba collision kernel.

    The grid holds one point per cell, so its cell count is a natural
    capacity; the columns still grow if it is exceeded.
    """

    __slots__ = ("_items", "xs", "ys", "rs")

    def __init__(self, capacity: int = 64):
        capacity = max(1, int(capacity))
        self._items: List[SamplePoint] = []
        self.xs = np.empty(capacity, dtype=np.float64)
        self.ys = np.empty(capacity, dtype=np.float64)
        self.rs = np.empty(capacity, dtype=np.float64)

    @classmethod
    def from_points(cls, points: Iterable[SamplePoint], capacity: Optional[int] = None) -> "PointSet":
        points = list(points)
        out = cls(capacity if capacity is not None else len(points))
        for p in points:
            out.append(p)
        return out

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> SamplePoint:
        return self._items[index]

    def __iter__(self) -> Iterator[SamplePoint]:
        return iter(self._items)

    def append(self, point: SamplePoint) -> int:
        index = len(self._items)
        if index == self.xs.shape[0]:
            size = index * 2
            self.xs = np.resize(self.xs, size)
            self.ys = np.resize(self.ys, size)
            self.rs = np.resize(self.rs, size)
        self.xs[index] = point.x
        self.ys[index] = point.y
        self.rs[index] = point.radius
        self._items.append(point)
        return index
