"""
Global configuration: shape-kind registry, dimension range, driver defaults.

The kind list is closed.  Its order is the selector order used by the random
factory (0 = Oval, 1 = Circle, 2 = Rectangle, 3 = Square); the factory table in
``shapecanvas.shapes`` is built from it and refuses to import if a kind has no
generator.
"""

import numpy as np

# ---------------------------------------------------------------------------
# Shape-kind registry (4 kinds, all active)
# ---------------------------------------------------------------------------

SHAPE_KINDS = [
    "OVAL",         # 0  horizontal radius x vertical radius
    "CIRCLE",       # 1  single radius
    "RECTANGLE",    # 2  length x width
    "SQUARE",       # 3  single side
]

NUM_KINDS = len(SHAPE_KINDS)               # 4

# ---------------------------------------------------------------------------
# Dimensions (inclusive range for every random draw)
# ---------------------------------------------------------------------------

DIM_MIN = 1
DIM_MAX = 100


def rand_dim(rng: np.random.Generator) -> int:
    """One uniform integer draw in [DIM_MIN, DIM_MAX]."""
    return int(rng.integers(DIM_MIN, DIM_MAX + 1))


# ---------------------------------------------------------------------------
# Driver
# ---------------------------------------------------------------------------

NUM_SHAPES = 10
BANNER = "Canvas has the following random shapes:"
