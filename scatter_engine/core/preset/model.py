# ========================
# file: scatter_engine/core/preset/model.py
# ========================
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, Union


@dataclass(frozen=True)
class ScatterPreset:
    id: str
    version: int
    diameters: Tuple[float, ...]
    region_size: Tuple[float, float]
    region_offset: Tuple[float, float]
    rejection_budget: int
    seed: Union[int, str]

    raw: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "version": self.version,
            "diameters": list(self.diameters),
            "region_size": list(self.region_size),
            "region_offset": list(self.region_offset),
            "rejection_budget": self.rejection_budget,
            "seed": self.seed,
        }
