"""Navigation points and traversable paths."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Navpoint:
    """A point on a path.

    ``coord`` is a tile coordinate (ints) or a world coordinate (floats);
    ``value`` is a general purpose payload.
    """

    coord: tuple
    value: int = 0


class Path:
    """Ordered list of navpoints walked one at a time.

    A looping path wraps back to its first point and is never traversed
    unless it is empty.
    """

    def __init__(self, points, looping=False):
        self.points = list(points)
        self.looping = looping
        self._current = 0

    def is_traversed(self):
        """True when no more points are left to visit."""
        return len(self.points) <= self._current

    def current_point(self):
        """Return the navpoint currently being walked to."""
        if self.is_traversed():
            raise IndexError("Path is already traversed")
        return self.points[self._current]

    def advance(self):
        """Move on to the next navpoint."""
        self._current += 1
        if self.looping and self.is_traversed():
            self._current = 0

    def clone(self):
        """Return a copy that keeps the current progress."""
        copy = Path(self.points, self.looping)
        copy._current = self._current
        return copy

    def __len__(self):
        return len(self.points)