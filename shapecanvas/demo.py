"""
Console demo: generate random shapes and list them.

Usage (CLI):
    python -m shapecanvas.demo
    python -m shapecanvas.demo --seed 7 --num-shapes 20 --dedupe

Or from a notebook:
    from shapecanvas.demo import run
    run(seed=7)
"""

import argparse
import sys

import numpy as np

from shapecanvas.canvas import Canvas
from shapecanvas.config import BANNER, NUM_SHAPES
from shapecanvas.ids import ShapeIdCounter
from shapecanvas.shapes import random_shape


def generate_random_shapes(count=NUM_SHAPES, rng=None, ids=None):
    """Return *count* random shapes in generation order (duplicates allowed)."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    rng = rng if rng is not None else np.random.default_rng()
    return [random_shape(rng, ids) for _ in range(count)]


def run(count=NUM_SHAPES, seed=None, dedupe=False, ids=None, out=None):
    """Generate shapes and print the banner followed by one line per shape.

    Parameters
    ----------
    count : int
        Number of shapes to generate.
    seed : int or None
        Seed for the random generator.  None draws fresh entropy.
    dedupe : bool
        If True, route the shapes through a :class:`Canvas` before printing.
    ids : ShapeIdCounter or None
        Counter to number the shapes with.  None uses a fresh counter when
        *seed* is given (so ids start at 1 and the output repeats), otherwise
        the process-wide one.
    out : file-like or None
        Destination stream, stdout by default.

    Returns
    -------
    list of Shape
        The shapes that were printed.
    """
    out = out if out is not None else sys.stdout
    if ids is None and seed is not None:
        ids = ShapeIdCounter()
    rng = np.random.default_rng(seed)
    shapes = generate_random_shapes(count, rng, ids)
    if dedupe:
        shapes = list(Canvas(shapes))

    print(BANNER, file=out)
    for shape in shapes:
        print(str(shape), file=out)
    return shapes


def _positive_int(value):
    n = int(value)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return n


def main(argv=None):
    p = argparse.ArgumentParser(description="Print a collection of random shapes")
    p.add_argument("--seed", type=int, default=None,
                   help="Seed for reproducible output (ids start at 1)")
    p.add_argument("--num-shapes", type=_positive_int, default=NUM_SHAPES)
    p.add_argument("--dedupe", action="store_true",
                   help="Drop shapes whose descriptor was already printed")
    args = p.parse_args(argv)

    run(args.num_shapes, seed=args.seed, dedupe=args.dedupe)
    return 0


if __name__ == "__main__":
    sys.exit(main())
