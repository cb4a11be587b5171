"""
Canvas: an ordered, descriptor-deduplicated collection of shapes.

Shapes are compared by ``dimensions()`` only, so two shapes with identical
descriptors collide even though their ids differ.  The collection is fixed at
construction time.
"""

from typing import Iterable, Iterator, Tuple

from shapecanvas.shapes import Shape


class Canvas:
    """Keep *shapes* in input order, dropping repeated descriptors.

    The first shape carrying a given descriptor wins; later ones are counted
    in ``dropped`` and discarded.
    """

    def __init__(self, shapes: Iterable[Shape]):
        seen = set()
        kept = []
        dropped = 0
        for shape in shapes:
            key = shape.dimensions()
            if key in seen:
                dropped += 1
                continue
            seen.add(key)
            kept.append(shape)
        self._shapes: Tuple[Shape, ...] = tuple(kept)
        self._descriptors = frozenset(seen)
        self.dropped = dropped

    @property
    def shapes(self) -> Tuple[Shape, ...]:
        return self._shapes

    def descriptors(self):
        """Descriptors of the retained shapes, in order."""
        return [s.dimensions() for s in self._shapes]

    def __len__(self):
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes)

    def __getitem__(self, idx):
        return self._shapes[idx]

    def __contains__(self, item):
        if isinstance(item, str):
            return item in self._descriptors
        return item in self._shapes

    def __repr__(self):
        return f"Canvas({len(self)} shapes, {self.dropped} dropped)"
