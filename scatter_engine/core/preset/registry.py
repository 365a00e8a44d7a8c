# ========================
# file: scatter_engine/core/preset/registry.py
# ========================
from __future__ import annotations
from typing import List
import os
from ..errors import NotFoundError


# __file__ -> scatter_engine/core/preset/registry.py, presets live in scatter_engine/data/presets
_DEFAULT_PRESET_FOLDERS: List[str] = [
    os.path.join(
        os.path.dirname(os.path.dirname(os.path.dirname(__file__))),
        "data", "presets"
    ),
]


def resolve_preset_path(preset_id: str) -> str:
    """Map a scatter preset id like 'scatter/forest_default' to its JSON file.

    Folders are searched in registration order, bundled presets first, so a
    user folder cannot shadow a bundled id.
    """
    rel = preset_id.replace("\\", "/").strip("/") + ".json"
    for root in _DEFAULT_PRESET_FOLDERS:
        candidate = os.path.join(root, rel)
        if os.path.isfile(candidate):
            return candidate
    raise NotFoundError(
        f"Scatter preset '{preset_id}' not found in: {', '.join(_DEFAULT_PRESET_FOLDERS)}"
    )


def add_search_folder(path: str) -> None:
    """Register an extra folder of scatter presets (e.g. per-project prop sets)."""
    path = os.path.abspath(path)
    if not os.path.isdir(path):
        raise NotFoundError(f"Scatter preset folder {path} does not exist")
    if path not in _DEFAULT_PRESET_FOLDERS:
        _DEFAULT_PRESET_FOLDERS.append(path)


def list_presets() -> List[str]:
    """All preset ids visible in the search folders, sorted."""
    ids = set()
    for root in _DEFAULT_PRESET_FOLDERS:
        if not os.path.isdir(root):
            continue
        for dirpath, _, files in os.walk(root):
            for name in files:
                if name.endswith(".json"):
                    rel = os.path.relpath(os.path.join(dirpath, name), root)
                    ids.add(rel[:-len(".json")].replace(os.sep, "/"))
    return sorted(ids)
