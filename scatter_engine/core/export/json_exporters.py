# ==============================================================================
# file: scatter_engine/core/export/json_exporters.py
# JSON output of generated point sets.
# ==============================================================================
from __future__ import annotations
import dataclasses
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

import numpy as np

from ..types import SamplePoint

logger = logging.getLogger(__name__)


def _ensure_path_exists(path: str) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def _atomic_write_json(path: str, data: Any) -> None:
    """Write to a .tmp sibling and swap it in, so readers never see a partial file."""
    _ensure_path_exists(path)
    tmp_path = path + ".tmp"

    def default_serializer(o):
        if dataclasses.is_dataclass(o):
            return dataclasses.asdict(o)
        if isinstance(o, np.integer): return int(o)
        if isinstance(o, np.floating): return float(o)
        raise TypeError(f"Object of type {type(o).__name__} is not JSON serializable")

    with open(tmp_path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2, default=default_serializer)
    os.replace(tmp_path, path)
    logger.debug(f"JSON file saved: {path}")


def write_points_json(
    path: str, points: Sequence[SamplePoint], meta: Optional[Dict[str, Any]] = None
) -> None:
    """Writes {"meta": ..., "points": [{x, y, radius}, ...]} in generation order."""
    data = {
        "meta": dict(meta or {}),
        "points": [{"x": p.x, "y": p.y, "radius": p.radius} for p in points],
    }
    _atomic_write_json(path, data)


def read_points_json(path: str) -> list[SamplePoint]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return [SamplePoint(float(p["x"]), float(p["y"]), float(p["radius"])) for p in data["points"]]
