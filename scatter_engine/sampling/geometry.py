# scatter_engine/sampling/geometry.py
from __future__ import annotations
import math
from typing import Tuple


def in_bounds(x: float, y: float, width: float, height: float) -> bool:
    return 0.0 <= x <= width and 0.0 <= y <= height


def polar_offset(angle: float, magnitude: float) -> Tuple[float, float]:
    # x from sin, y from cos: angle 0 points along +y
    return magnitude * math.sin(angle), magnitude * math.cos(angle)
