# ========================
# file: scatter_engine/core/preset/defaults.py
# ========================
from __future__ import annotations
from typing import Any, Dict

from ..constants import DEFAULT_REJECTION_BUDGET

CURRENT_PRESET_VERSION = 1

DEFAULT_SCATTER_PRESET: Dict[str, Any] = {
    "id": "scatter/default",
    "version": CURRENT_PRESET_VERSION,
    "diameters": [2.0],
    "region_size": [100.0, 100.0],
    "region_offset": [0.0, 0.0],
    "rejection_budget": DEFAULT_REJECTION_BUDGET,
    "seed": 0,
}
