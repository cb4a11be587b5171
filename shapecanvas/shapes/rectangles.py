"""
Axis-aligned shape generators: rectangles and squares.
"""

from typing import Optional

import numpy as np

from shapecanvas.config import rand_dim
from shapecanvas.ids import ShapeIdCounter
from shapecanvas.shapes._types import Rectangle, Square


# ---------------------------------------------------------------------------
# Rectangle (independent length and width)
# ---------------------------------------------------------------------------

def gen_rectangle(rng: np.random.Generator, ids: Optional[ShapeIdCounter] = None) -> Rectangle:
    length = rand_dim(rng)
    width = rand_dim(rng)
    if ids is None:
        return Rectangle(length, width)
    return Rectangle(length, width, id=ids.next())


# ---------------------------------------------------------------------------
# Square
# ---------------------------------------------------------------------------

def gen_square(rng: np.random.Generator, ids: Optional[ShapeIdCounter] = None) -> Square:
    side = rand_dim(rng)
    if ids is None:
        return Square(side)
    return Square(side, id=ids.next())


RECTANGLE_GENERATORS = {
    "RECTANGLE": gen_rectangle,
    "SQUARE": gen_square,
}
