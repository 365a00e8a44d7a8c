# ==============================================================================
# file: scatter_engine/core/constants.py
# Shared constants of the sampling engine.
# ==============================================================================
from __future__ import annotations

import math

import numpy as np

# Attempts per active point before it leaves the frontier (Bridson's k)
DEFAULT_REJECTION_BUDGET = 30

# Grid cell marker, cells hold the index of their single occupant otherwise
EMPTY_CELL = -1
GRID_DTYPE = np.int32

SQRT2 = math.sqrt(2.0)
TAU = 2.0 * math.pi

STATE_RUNNING = "running"
STATE_DONE = "done"
