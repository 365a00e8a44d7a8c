# ==============================================================================
# file: scatter_engine/core/export/numpy_exporters.py
# Point sets as (n, 3) float64 arrays: columns x, y, radius.
# ==============================================================================
from __future__ import annotations
import os
from pathlib import Path
from typing import List, Sequence

import numpy as np

from ..types import SamplePoint


def points_to_array(points: Sequence[SamplePoint]) -> np.ndarray:
    arr = np.empty((len(points), 3), dtype=np.float64)
    for i, p in enumerate(points):
        arr[i] = (p.x, p.y, p.radius)
    return arr


def array_to_points(arr: np.ndarray) -> List[SamplePoint]:
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"expected an (n, 3) array, got shape {arr.shape}")
    return [SamplePoint(float(x), float(y), float(r)) for x, y, r in arr]


def write_points_npy(path: str, points: Sequence[SamplePoint]) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    # np.save appends .npy to names without it, keep the tmp name suffixed
    tmp_path = path + ".tmp.npy"
    np.save(tmp_path, points_to_array(points))
    os.replace(tmp_path, path)


def read_points_npy(path: str) -> List[SamplePoint]:
    return array_to_points(np.load(path))
