"""Shape variants shared across the shapes package (avoids circular imports)."""

from dataclasses import dataclass, field
from enum import Enum

from shapecanvas.ids import next_shape_id


class ShapeKind(Enum):
    """Closed set of shape variants; the value is the descriptor label."""
    OVAL = "OVAL"
    CIRCLE = "CIRCLE"
    RECTANGLE = "RECTANGLE"
    SQUARE = "SQUARE"


class Shape:
    """Common interface of every variant.

    Subclasses are frozen dataclasses that end with an ``id`` field drawn from
    the process-wide counter, and implement :meth:`dimensions`.
    """

    kind: ShapeKind

    def dimensions(self) -> str:
        raise NotImplementedError

    def __str__(self):
        return f"Shape {self.id}: {self.dimensions()}"


@dataclass(frozen=True)
class Oval(Shape):
    horizontal_radius: int
    vertical_radius: int
    id: int = field(default_factory=next_shape_id, compare=False)

    kind = ShapeKind.OVAL

    def dimensions(self) -> str:
        return f"{self.kind.value} {self.horizontal_radius}x{self.vertical_radius}"


@dataclass(frozen=True)
class Circle(Shape):
    radius: int
    id: int = field(default_factory=next_shape_id, compare=False)

    kind = ShapeKind.CIRCLE

    def dimensions(self) -> str:
        return f"{self.kind.value} {self.radius}"


@dataclass(frozen=True)
class Rectangle(Shape):
    length: int
    width: int
    id: int = field(default_factory=next_shape_id, compare=False)

    kind = ShapeKind.RECTANGLE

    def dimensions(self) -> str:
        return f"{self.kind.value} {self.length}x{self.width}"


@dataclass(frozen=True)
class Square(Shape):
    side: int
    id: int = field(default_factory=next_shape_id, compare=False)

    kind = ShapeKind.SQUARE

    def dimensions(self) -> str:
        return f"{self.kind.value} {self.side}"
