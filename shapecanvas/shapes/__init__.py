"""
Shape package for shapecanvas.

Each sub-module maps registry names (``config.SHAPE_KINDS``) to generator
functions.  Every generator takes a ``numpy.random.Generator`` (plus an
optional id counter) and returns one of the four frozen shape dataclasses.

Usage::

    from shapecanvas.shapes import ALL_GENERATORS, random_shape
    shape = random_shape()
    print(shape.id, shape.dimensions())
"""

from typing import Optional

import numpy as np

from shapecanvas.config import SHAPE_KINDS
from shapecanvas.ids import ShapeIdCounter
from shapecanvas.shapes._types import (  # noqa: F401
    Circle, Oval, Rectangle, Shape, ShapeKind, Square,
)
from shapecanvas.shapes.ovals import OVAL_GENERATORS
from shapecanvas.shapes.rectangles import RECTANGLE_GENERATORS


def build_generator_table(by_kind, kinds=SHAPE_KINDS):
    """Order generators by *kinds*; every kind needs exactly one generator."""
    missing = [k for k in kinds if k not in by_kind]
    extra = sorted(set(by_kind) - set(kinds))
    if missing or extra:
        raise ValueError(f"generator table mismatch: missing={missing} extra={extra}")
    return [by_kind[k] for k in kinds]


if {k.value for k in ShapeKind} != set(SHAPE_KINDS):
    raise ImportError("ShapeKind is out of sync with config.SHAPE_KINDS")

# Selector order follows SHAPE_KINDS: 0 Oval, 1 Circle, 2 Rectangle, 3 Square
ALL_GENERATORS = build_generator_table({**OVAL_GENERATORS, **RECTANGLE_GENERATORS})


def random_shape(rng: Optional[np.random.Generator] = None,
                 ids: Optional[ShapeIdCounter] = None) -> Shape:
    """Pick a generator uniformly at random and produce one shape."""
    rng = rng if rng is not None else np.random.default_rng()
    gen = ALL_GENERATORS[rng.integers(len(ALL_GENERATORS))]
    return gen(rng, ids)


generate_random_shape = random_shape
