# scatter_engine/sampling/kernels.py
from __future__ import annotations
import numpy as np
from numba import njit

from ..core.constants import EMPTY_CELL


@njit(cache=True)
def window_collides(
    cells: np.ndarray, xs: np.ndarray, ys: np.ndarray, rs: np.ndarray,
    x0: int, x1: int, y0: int, y1: int,
    x: float, y: float, radius: float,
) -> bool:
    """True if any occupant of cells[y0:y1+1, x0:x1+1] is closer than its radius + `radius`."""
    for cy in range(y0, y1 + 1):
        for cx in range(x0, x1 + 1):
            idx = cells[cy, cx]
            if idx == EMPTY_CELL:
                continue
            reach = rs[idx] + radius
            dx = x - xs[idx]
            dy = y - ys[idx]
            if dx * dx + dy * dy < reach * reach:
                return True
    return False
