"""
Generate a scatter layout from a preset and save it under artifacts/.
Run: python run_scatter.py
"""
from __future__ import annotations
import sys
import pathlib

ROOT = pathlib.Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from scatter_engine.core.export import write_points_json, write_points_npy
from scatter_engine.core.preset import list_presets, load_preset
from scatter_engine.core.utils.metrics import compute_metrics
from scatter_engine.sampling import PoissonSampler
from scatter_engine.setup_logging import setup_logging

# --- Config ---
ARTIFACTS_ROOT = ROOT / "artifacts" / "scatter"
PRESET_ID = "scatter/forest_default"


def run_scatter(preset_id: str, seed=None) -> pathlib.Path:
    preset = load_preset(preset_id)
    sampler = PoissonSampler.from_preset(preset, seed=seed)
    points = sampler.generate()

    metrics = compute_metrics(points, sampler.region)
    out_dir = ARTIFACTS_ROOT / preset.id.replace("/", "_") / str(sampler.seed)
    meta = {
        "preset": preset.to_dict(),
        "seed": sampler.seed,
        "cell_size": sampler.cell_size,
        "search_depth": sampler.search_depth,
        "metrics": metrics,
    }
    write_points_json(str(out_dir / "points.json"), points, meta)
    write_points_npy(str(out_dir / "points.npy"), points)

    print(f"--- SCATTER: {metrics['count']} points, coverage {metrics['coverage_pct']:.1%}, "
          f"min gap {metrics['min_gap']:.3f}, overlaps {metrics['overlap_pairs']}")
    print(f"--- SCATTER: saved to {out_dir}")
    return out_dir


if __name__ == "__main__":
    setup_logging()
    print("Available presets:", ", ".join(list_presets()))

    try:
        seed_str = input(f">>> Enter seed for '{PRESET_ID}' (or press Enter for the preset seed): ")
    except EOFError:
        seed_str = ""

    seed = None
    if seed_str.strip():
        seed = int(seed_str) if seed_str.strip().lstrip("-").isdigit() else seed_str.strip()

    run_scatter(PRESET_ID, seed)
