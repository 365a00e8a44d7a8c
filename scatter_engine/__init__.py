# ==============================================================================
# file: scatter_engine/__init__.py
# Poisson-disc scattering of props (trees, rocks) with per-point radii.
# ==============================================================================
from __future__ import annotations

from .core.errors import ConfigurationError, ScatterError
from .core.types import Region, SamplePoint
from .core.preset import ScatterPreset, load_preset
from .sampling import PoissonSampler, generate_points

__all__ = [
    "ConfigurationError",
    "ScatterError",
    "Region",
    "SamplePoint",
    "ScatterPreset",
    "load_preset",
    "PoissonSampler",
    "generate_points",
]
