"""Tests for the deduplicating canvas."""

import numpy as np
import pytest

from shapecanvas.canvas import Canvas
from shapecanvas.demo import generate_random_shapes
from shapecanvas.shapes import Circle, Oval, Rectangle, Square


@pytest.fixture
def canvas():
    return Canvas([Oval(3, 4), Oval(3, 4), Circle(5)])


class TestDedup:
    def test_descriptors(self, canvas):
        assert canvas.descriptors() == ["OVAL 3x4", "CIRCLE 5"]

    def test_length(self, canvas):
        assert len(canvas) == 2

    def test_dropped(self, canvas):
        assert canvas.dropped == 1

    def test_first_occurrence_wins(self):
        first = Square(8)
        second = Square(8)
        c = Canvas([first, second])
        assert c[0].id == first.id

    def test_order_preserved(self):
        shapes = [Square(2), Rectangle(1, 2), Circle(9), Oval(1, 2)]
        c = Canvas(shapes)
        assert [s.id for s in c] == [s.id for s in shapes]

    def test_label_distinguishes_kinds(self):
        c = Canvas([Circle(5), Square(5), Oval(5, 5), Rectangle(5, 5)])
        assert len(c) == 4

    def test_swapped_dimensions_are_distinct(self):
        c = Canvas([Rectangle(2, 3), Rectangle(3, 2)])
        assert len(c) == 2

    def test_empty(self):
        c = Canvas([])
        assert len(c) == 0
        assert list(c) == []

    def test_accepts_generator(self):
        c = Canvas(Circle(r) for r in (1, 1, 2))
        assert c.descriptors() == ["CIRCLE 1", "CIRCLE 2"]

    def test_random_input_unique(self):
        shapes = generate_random_shapes(500, np.random.default_rng(3))
        c = Canvas(shapes)
        descs = c.descriptors()
        assert len(descs) == len(set(descs))
        assert len(c) + c.dropped == 500


class TestReadOnly:
    def test_shapes_is_tuple(self, canvas):
        assert isinstance(canvas.shapes, tuple)

    def test_no_setter(self, canvas):
        with pytest.raises(AttributeError):
            canvas.shapes = ()

    def test_input_list_not_aliased(self):
        src = [Circle(1)]
        c = Canvas(src)
        src.append(Circle(2))
        assert len(c) == 1


class TestContains:
    def test_by_descriptor(self, canvas):
        assert "CIRCLE 5" in canvas
        assert "CIRCLE 6" not in canvas

    def test_by_shape(self, canvas):
        assert Oval(3, 4) in canvas
        assert Square(3) not in canvas
