"""Process-wide shape identifiers."""

import threading


class ShapeIdCounter:
    """Hands out sequential integer ids starting at *start*.

    Increment and read happen under one lock, so ids stay unique and ordered
    by construction even if shapes are built from several threads.
    """

    def __init__(self, start: int = 1):
        self._lock = threading.Lock()
        self._next = start

    def next(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def peek(self) -> int:
        """Id the next call to :meth:`next` will return (does not consume it)."""
        with self._lock:
            return self._next


SHAPE_IDS = ShapeIdCounter()


def next_shape_id() -> int:
    return SHAPE_IDS.next()
