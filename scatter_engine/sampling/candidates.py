# ==============================================================================
# file: scatter_engine/sampling/candidates.py
# Candidate proposal and rejection against the acceleration grid.
# ==============================================================================
from __future__ import annotations
import math
from typing import Optional

from ..core.constants import TAU
from ..core.types import Region, SamplePoint
from ..core.utils.rng import RandomSource, uniform_range
from .geometry import in_bounds, polar_offset
from .grid import AccelerationGrid
from .kernels import window_collides
from .points import PointSet


class CandidateGenerator:
    """
    Proposes children around an active centre inside the annulus
    [min_diameter, 2 * max_diameter]. Distance is drawn uniformly on area
    (sqrt of a uniform squared radius) so density does not pile up at the
    inner edge.

    Reads the grid and the accepted points, never mutates them.
    """

    def __init__(
        self,
        grid: AccelerationGrid,
        points: PointSet,
        region: Region,
        min_diameter: float,
        max_diameter: float,
        rng: RandomSource,
    ):
        self.grid = grid
        self.points = points
        self.region = region
        self.rng = rng
        self.inner_sq = min_diameter * min_diameter
        self.outer_sq = 4.0 * max_diameter * max_diameter

    def propose(self, cx: float, cy: float):
        angle = self.rng.uniform() * TAU
        magnitude = math.sqrt(uniform_range(self.rng, self.inner_sq, self.outer_sq))
        ox, oy = polar_offset(angle, magnitude)
        return cx + ox, cy + oy

    def collides(self, x: float, y: float, radius: float) -> bool:
        """Any occupant in the search window closer than the sum of both radii."""
        x0, x1, y0, y1 = self.grid.window(x, y)
        pts = self.points
        return bool(window_collides(
            self.grid.cells, pts.xs, pts.ys, pts.rs, x0, x1, y0, y1, x, y, radius
        ))

    def try_place(
        self, cx: float, cy: float, radius: float, rejection_budget: int
    ) -> Optional[SamplePoint]:
        """Up to `rejection_budget` attempts; the first valid candidate wins, None if all fail."""
        width, height = self.region.width, self.region.height
        for _ in range(rejection_budget):
            x, y = self.propose(cx, cy)
            if not in_bounds(x, y, width, height):
                continue
            if self.collides(x, y, radius):
                continue
            return SamplePoint(x, y, radius)
        return None
