# ========================
# file: scatter_engine/core/preset/validators.py
# ========================
from __future__ import annotations
import math
import numbers
from typing import Any, Dict

import numpy as np

from ..errors import ValidationError


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ValidationError(msg)


def _is_number(v: Any) -> bool:
    return (isinstance(v, numbers.Real) and not isinstance(v, (bool, np.bool_))
            and math.isfinite(v))


def _is_count(v: Any) -> bool:
    return isinstance(v, numbers.Integral) and not isinstance(v, (bool, np.bool_))


def _pair(cfg: Dict[str, Any], key: str) -> list:
    val = cfg.get(key)
    _require(
        isinstance(val, (list, tuple, np.ndarray)) and len(val) == 2,
        f"Preset.{key} must be a 2-element list",
    )
    return list(val)


def validate_dict(cfg: Dict[str, Any]) -> None:
    """Validation for scatter preset dicts.

    Raises ValidationError on the first failing check.
    """
    _require(
        isinstance(cfg.get("id"), str) and cfg["id"],
        "Preset.id must be non-empty string",
    )
    _require(
        _is_count(cfg.get("version")) and cfg["version"] >= 1,
        "Preset.version must be an integer >= 1",
    )

    diameters = cfg.get("diameters")
    _require(
        isinstance(diameters, (list, tuple, np.ndarray)) and len(diameters) > 0,
        "Preset.diameters must be a non-empty list",
    )
    for i, d in enumerate(diameters):
        _require(_is_number(d) and d > 0, f"Preset.diameters[{i}] must be > 0")

    size = _pair(cfg, "region_size")
    for i, v in enumerate(size):
        _require(_is_number(v) and v > 0, f"Preset.region_size[{i}] must be > 0")

    offset = _pair(cfg, "region_offset")
    for i, v in enumerate(offset):
        _require(_is_number(v), f"Preset.region_offset[{i}] must be a finite number")

    budget = cfg.get("rejection_budget")
    _require(
        _is_count(budget) and budget > 0,
        "Preset.rejection_budget must be an integer > 0",
    )

    seed = cfg.get("seed")
    _require(
        _is_count(seed) or isinstance(seed, str),
        "Preset.seed must be an integer or string",
    )
