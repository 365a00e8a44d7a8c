# ==============================================================================
# file: scatter_engine/core/export/__init__.py
# ==============================================================================
from __future__ import annotations

from .json_exporters import read_points_json, write_points_json
from .numpy_exporters import (
    array_to_points,
    points_to_array,
    read_points_npy,
    write_points_npy,
)

__all__ = [
    "write_points_json",
    "read_points_json",
    "points_to_array",
    "array_to_points",
    "write_points_npy",
    "read_points_npy",
]
