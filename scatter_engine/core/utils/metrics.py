# scatter_engine/core/utils/metrics.py
from __future__ import annotations
import math
from typing import Dict, Sequence

import numpy as np
from numba import njit

from ..types import Region, SamplePoint

# tolerance for float noise when a pair sits exactly at contact distance
_OVERLAP_EPS = 1e-9


@njit(cache=True)
def _pair_stats(xs: np.ndarray, ys: np.ndarray, rs: np.ndarray, eps: float):
    n = xs.shape[0]
    overlaps = 0
    min_gap = np.inf
    for i in range(n):
        for j in range(i + 1, n):
            dx = xs[i] - xs[j]
            dy = ys[i] - ys[j]
            gap = math.sqrt(dx * dx + dy * dy) - (rs[i] + rs[j])
            if gap < min_gap:
                min_gap = gap
            if gap < -eps:
                overlaps += 1
    return overlaps, min_gap


def compute_metrics(points: Sequence[SamplePoint], region: Region) -> Dict[str, float]:
    """
    Summary of one generated set: count, density per unit area, disc coverage,
    the smallest gap between two discs and the number of overlapping pairs.
    """
    n = len(points)
    if n == 0:
        return {"count": 0, "density": 0.0, "coverage_pct": 0.0,
                "min_gap": math.inf, "overlap_pairs": 0}

    xs = np.fromiter((p.x for p in points), dtype=np.float64, count=n)
    ys = np.fromiter((p.y for p in points), dtype=np.float64, count=n)
    rs = np.fromiter((p.radius for p in points), dtype=np.float64, count=n)

    overlaps, min_gap = _pair_stats(xs, ys, rs, _OVERLAP_EPS)
    disc_area = float(np.sum(np.pi * rs * rs))

    return {
        "count": n,
        "density": n / region.area,
        "coverage_pct": min(1.0, disc_area / region.area),
        "min_gap": float(min_gap),
        "overlap_pairs": int(overlaps),
    }
