from .grid import AccelerationGrid
from .frontier import Frontier
from .points import PointSet
from .candidates import CandidateGenerator
from .sampler import PoissonSampler, SamplerStats, generate_points

__all__ = [
    "AccelerationGrid",
    "Frontier",
    "PointSet",
    "CandidateGenerator",
    "PoissonSampler",
    "SamplerStats",
    "generate_points",
]
