# ========================
# file: scatter_engine/core/preset/__init__.py
# ========================
from .defaults import CURRENT_PRESET_VERSION, DEFAULT_SCATTER_PRESET
from .model import ScatterPreset
from .loader import load_preset, deep_merge
from .registry import add_search_folder, list_presets, resolve_preset_path

__all__ = [
    "CURRENT_PRESET_VERSION",
    "DEFAULT_SCATTER_PRESET",
    "ScatterPreset",
    "load_preset",
    "deep_merge",
    "add_search_folder",
    "list_presets",
    "resolve_preset_path",
]
