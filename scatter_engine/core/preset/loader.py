# ========================
# file: scatter_engine/core/preset/loader.py
# ========================
from __future__ import annotations
import os
import json
import copy
import logging
from typing import Any, Dict, Union, Mapping

from ..errors import PresetError
from .defaults import DEFAULT_SCATTER_PRESET
from .model import ScatterPreset
from .registry import resolve_preset_path
from .validators import validate_dict

logger = logging.getLogger(__name__)


def deep_merge(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Layer a scatter preset over its base (defaults, file, then overrides).

    Nested sections merge key by key. `diameters`, `region_size` and
    `region_offset` are lists and are replaced whole, so an override of
    `diameters: [4.0]` yields a single-diameter set, never a mix with the base.
    """
    out = copy.deepcopy(base)
    for k, v in overrides.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), dict):
            out[k] = deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _load_json_file(path: str) -> Dict[str, Any]:
    """Read one scatter preset file. The top level must be a JSON object."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise PresetError(f"Scatter preset {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise PresetError(f"Scatter preset {path} must hold a JSON object, got {type(data).__name__}")
    return data


def load_preset(
    source: Union[str, Dict[str, Any]], overrides: Mapping[str, Any] | None = None
) -> ScatterPreset:
    """Load a scatter preset from id/path/dict, merge with defaults and apply overrides.

    Args:
        source: preset id (e.g., 'scatter/forest_default'), or file path to JSON, or raw dict
        overrides: mapping of ad-hoc overrides (last layer)
    Returns:
        ScatterPreset (immutable dataclass), validated
    """
    if isinstance(source, str):
        if os.path.isfile(source):
            data = _load_json_file(source)
        else:
            # treat as id
            path = resolve_preset_path(source)
            data = _load_json_file(path)
    elif isinstance(source, dict):
        data = source
    else:
        raise TypeError("source must be str path/id or dict")

    merged = deep_merge(DEFAULT_SCATTER_PRESET, data)
    if overrides:
        merged = deep_merge(merged, overrides)

    validate_dict(merged)
    logger.debug(f"Preset '{merged['id']}' loaded")

    return ScatterPreset(
        id=str(merged["id"]),
        version=int(merged["version"]),
        diameters=tuple(float(d) for d in merged["diameters"]),
        region_size=(float(merged["region_size"][0]), float(merged["region_size"][1])),
        region_offset=(float(merged["region_offset"][0]), float(merged["region_offset"][1])),
        rejection_budget=int(merged["rejection_budget"]),
        seed=merged["seed"] if isinstance(merged["seed"], str) else int(merged["seed"]),
        raw=merged,
    )
