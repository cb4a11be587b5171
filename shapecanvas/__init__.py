"""shapecanvas - Random shapes with polymorphic descriptors on a deduplicating canvas."""

from shapecanvas.config import SHAPE_KINDS, NUM_KINDS, NUM_SHAPES
from shapecanvas.shapes import Oval, Circle, Rectangle, Square, Shape, ShapeKind, random_shape
from shapecanvas.canvas import Canvas
