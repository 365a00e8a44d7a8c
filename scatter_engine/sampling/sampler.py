# ==============================================================================
# file: scatter_engine/sampling/sampler.py
# Bridson's Poisson-disc sampling generalised to a discrete set of diameters.
# ==============================================================================
from __future__ import annotations
import logging
import math
import numbers
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from ..core.constants import DEFAULT_REJECTION_BUDGET, STATE_DONE, STATE_RUNNING
from ..core.errors import ConfigurationError
from ..core.types import Region, SamplePoint
from ..core.utils.rng import RNG, RandomSource
from .candidates import CandidateGenerator
from .frontier import Frontier
from .grid import AccelerationGrid
from .points import PointSet

logger = logging.getLogger(__name__)


@dataclass
class SamplerStats:
    steps: int = 0
    accepted: int = 0
    exhausted: int = 0
    elapsed_ms: float = 0.0


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ConfigurationError(msg)


def _is_number(v) -> bool:
    # numbers.Real covers numpy scalars (np.float32, np.int64...)
    return (isinstance(v, numbers.Real) and not isinstance(v, (bool, np.bool_))
            and math.isfinite(v))


def _is_count(v) -> bool:
    return isinstance(v, numbers.Integral) and not isinstance(v, (bool, np.bool_))


def _as_tuple(value, name: str) -> tuple:
    try:
        return tuple(value)
    except TypeError:
        raise ConfigurationError(f"{name} must be a sequence, got {value!r}") from None


def _validate(diameters, region_size, region_offset, rejection_budget) -> None:
    _require(len(diameters) > 0, "diameters must not be empty")
    for i, d in enumerate(diameters):
        _require(_is_number(d) and d > 0, f"diameters[{i}] must be a positive number, got {d!r}")
    _require(len(region_size) == 2, "region_size must be (width, height)")
    for name, v in zip(("width", "height"), region_size):
        _require(_is_number(v) and v > 0, f"region {name} must be > 0, got {v!r}")
    _require(len(region_offset) == 2, "region_offset must be (dx, dy)")
    for name, v in zip(("dx", "dy"), region_offset):
        _require(_is_number(v), f"region offset {name} must be a finite number, got {v!r}")
    _require(
        _is_count(rejection_budget) and rejection_budget > 0,
        f"rejection_budget must be a positive integer, got {rejection_budget!r}",
    )


class PoissonSampler:
    """
    Variable-radius Poisson-disc sampler over one rectangular region.

    Construction validates the configuration, builds the grid and places the
    seed point at the region centre. generate() runs the frontier loop until
    it is empty and returns the points translated by the region offset, in
    insertion order (seed first).

    One instance is one generation; build a new sampler for another run.
    """

    def __init__(
        self,
        diameters: Sequence[float],
        region_size: Tuple[float, float],
        region_offset: Tuple[float, float] = (0.0, 0.0),
        rejection_budget: int = DEFAULT_REJECTION_BUDGET,
        seed: Union[int, str, bytes] = 0,
        rng: Optional[RandomSource] = None,
    ):
        diameters = _as_tuple(diameters, "diameters")
        region_size = _as_tuple(region_size, "region_size")
        region_offset = _as_tuple(region_offset, "region_offset")
        _validate(diameters, region_size, region_offset, rejection_budget)

        self.diameters: Tuple[float, ...] = tuple(float(d) for d in diameters)
        self.region = Region(
            float(region_size[0]), float(region_size[1]),
            float(region_offset[0]), float(region_offset[1]),
        )
        self.rejection_budget = int(rejection_budget)
        self.seed = seed
        self.min_diameter = min(self.diameters)
        self.max_diameter = max(self.diameters)

        self.rng: RandomSource = rng if rng is not None else RNG(seed)
        self.grid = AccelerationGrid(
            self.region.width, self.region.height, self.min_diameter, self.max_diameter
        )
        self.frontier = Frontier()
        self._points = PointSet(self.grid.cell_count)
        self._result: Optional[List[SamplePoint]] = None
        self.stats = SamplerStats()
        self.generator = CandidateGenerator(
            self.grid, self._points, self.region,
            self.min_diameter, self.max_diameter, self.rng,
        )

        cx, cy = self.region.center
        self._accept(SamplePoint(cx, cy, self._draw_radius()))

        logger.debug(
            f"Sampler ready: region={self.region.size}, diameters={self.diameters}, "
            f"cell={self.cell_size:.4f}, grid={self.grid.shape}, depth={self.search_depth}"
        )

    @classmethod
    def from_preset(cls, preset, seed=None, rng: Optional[RandomSource] = None) -> "PoissonSampler":
        return cls(
            preset.diameters,
            preset.region_size,
            preset.region_offset,
            preset.rejection_budget,
            preset.seed if seed is None else seed,
            rng=rng,
        )

    # --- read-only views ---

    @property
    def cell_size(self) -> float:
        return self.grid.cell_size

    @property
    def search_depth(self) -> int:
        return self.grid.search_depth

    @property
    def state(self) -> str:
        return STATE_RUNNING if self.frontier else STATE_DONE

    @property
    def local_points(self) -> List[SamplePoint]:
        """Accepted points in region-local coordinates (no offset)."""
        return list(self._points)

    # --- algorithm ---

    def _draw_radius(self) -> float:
        return self.diameters[self.rng.randint(0, len(self.diameters) - 1)] / 2.0

    def _accept(self, point: SamplePoint) -> None:
        index = self._points.append(point)
        self.grid.place(point.x, point.y, index)
        self.frontier.add(index)

    def step(self) -> bool:
        """One frontier step. Returns True while the sampler is still running."""
        if not self.frontier:
            return False
        self.stats.steps += 1

        slot = self.frontier.pick(self.rng)
        center = self._points[self.frontier[slot]]
        radius = self._draw_radius()

        child = self.generator.try_place(center.x, center.y, radius, self.rejection_budget)
        if child is not None:
            self._accept(child)
            self.stats.accepted += 1
        else:
            self.frontier.remove_at(slot)
            self.stats.exhausted += 1
        return bool(self.frontier)

    def generate(self) -> List[SamplePoint]:
        if self._result is not None:
            return list(self._result)

        t_start = time.perf_counter()
        while self.step():
            pass

        dx, dy = self.region.offset
        self._result = [p.translated(dx, dy) for p in self._points]
        self.stats.elapsed_ms = (time.perf_counter() - t_start) * 1000

        logger.info(
            f"Poisson scatter: {len(self._result)} points in {self.stats.elapsed_ms:.1f} ms "
            f"({self.stats.steps} steps, {self.stats.exhausted} exhausted centres)"
        )
        return list(self._result)


def generate_points(
    diameters: Sequence[float],
    region_size: Tuple[float, float],
    region_offset: Tuple[float, float] = (0.0, 0.0),
    rejection_budget: int = DEFAULT_REJECTION_BUDGET,
    seed: Union[int, str, bytes] = 0,
) -> List[Tuple[float, float, float]]:
    """Run one generation and return plain (x, y, radius) tuples."""
    sampler = PoissonSampler(diameters, region_size, region_offset, rejection_budget, seed)
    return [p.as_tuple() for p in sampler.generate()]
