"""
Round shape generators: ovals and circles.
"""

from typing import Optional

import numpy as np

from shapecanvas.config import rand_dim
from shapecanvas.ids import ShapeIdCounter
from shapecanvas.shapes._types import Circle, Oval


# ---------------------------------------------------------------------------
# Oval (two independent radii)
# ---------------------------------------------------------------------------

def gen_oval(rng: np.random.Generator, ids: Optional[ShapeIdCounter] = None) -> Oval:
    h = rand_dim(rng)
    v = rand_dim(rng)
    if ids is None:
        return Oval(h, v)
    return Oval(h, v, id=ids.next())


# ---------------------------------------------------------------------------
# Circle
# ---------------------------------------------------------------------------

def gen_circle(rng: np.random.Generator, ids: Optional[ShapeIdCounter] = None) -> Circle:
    r = rand_dim(rng)
    if ids is None:
        return Circle(r)
    return Circle(r, id=ids.next())


OVAL_GENERATORS = {
    "OVAL": gen_oval,
    "CIRCLE": gen_circle,
}
