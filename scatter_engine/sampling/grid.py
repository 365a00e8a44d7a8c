# ==============================================================================
# file: scatter_engine/sampling/grid.py
# Dense acceleration grid: one occupant index per cell.
# ==============================================================================
from __future__ import annotations
import math
from typing import Iterator, Optional, Tuple

import numpy as np

from ..core.constants import EMPTY_CELL, GRID_DTYPE, SQRT2


class AccelerationGrid:
    """
    Grid over the local sample region with cell size min_diameter / sqrt(2).

    The cell diagonal equals the smallest possible separation, so no two
    accepted points share a cell. search_depth is sized from the largest
    diameter: any occupant within 2 * max_diameter of a query is inside the
    scanned window. With a wide diameter range this is a heuristic (a big
    candidate can miss a distant occupant whose own radius reaches it).
    """

    def __init__(self, width: float, height: float, min_diameter: float, max_diameter: float):
        self.width = float(width)
        self.height = float(height)
        self.cell_size = min_diameter / SQRT2
        self.cols = max(1, math.ceil(self.width / self.cell_size))
        self.rows = max(1, math.ceil(self.height / self.cell_size))
        self.search_depth = math.ceil(2.0 * max_diameter / self.cell_size)
        # row-major: cells[cy, cx]
        self.cells = np.full((self.rows, self.cols), EMPTY_CELL, dtype=GRID_DTYPE)

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.cols, self.rows)

    def cell_index_of(self, x: float, y: float) -> Tuple[int, int]:
        cx = int(x // self.cell_size)
        cy = int(y // self.cell_size)
        # a point exactly on the far edge belongs to the last cell
        return min(cx, self.cols - 1), min(cy, self.rows - 1)

    def occupant_at(self, x: float, y: float) -> Optional[int]:
        cx, cy = self.cell_index_of(x, y)
        idx = int(self.cells[cy, cx])
        return None if idx == EMPTY_CELL else idx

    def window(self, x: float, y: float, depth: Optional[int] = None) -> Tuple[int, int, int, int]:
        """Inclusive cell bounds (x0, x1, y0, y1) of the search window, clamped to the grid."""
        if depth is None:
            depth = self.search_depth
        cx, cy = self.cell_index_of(x, y)
        return (
            max(0, cx - depth), min(self.cols - 1, cx + depth),
            max(0, cy - depth), min(self.rows - 1, cy + depth),
        )

    def occupants_near(self, x: float, y: float, depth: Optional[int] = None) -> Iterator[int]:
        """Yield occupant indices in the (2*depth+1)^2 window around (x, y), clamped to the grid."""
        x0, x1, y0, y1 = self.window(x, y, depth)
        window = self.cells[y0:y1 + 1, x0:x1 + 1]
        for idx in window[window != EMPTY_CELL]:
            yield int(idx)

    def place(self, x: float, y: float, index: int) -> None:
        """Mark the cell of (x, y) as occupied by point `index`. There is no removal."""
        cx, cy = self.cell_index_of(x, y)
        self.cells[cy, cx] = index

    @property
    def cell_count(self) -> int:
        return self.cols * self.rows

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.cells != EMPTY_CELL))
