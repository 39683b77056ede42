"""Helpers for jump-point style grid discovery."""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """Eight grid directions; the value is the ``(dx, dy)`` step (y grows down)."""

    UP = (0, -1)
    UP_RIGHT = (1, -1)
    RIGHT = (1, 0)
    DOWN_RIGHT = (1, 1)
    DOWN = (0, 1)
    DOWN_LEFT = (-1, 1)
    LEFT = (-1, 0)
    UP_LEFT = (-1, -1)

    @property
    def is_diagonal(self):
        dx, dy = self.value
        return dx != 0 and dy != 0


def advance(point, direction):
    """Return the neighbour of ``point`` one step in ``direction``."""
    dx, dy = direction.value
    return (point[0] + dx, point[1] + dy)


def should_stop_straight(point, mesh):
    """Straight discovery stops on a solid tile."""
    return mesh[point] > 0


def should_stop_diagonal(point, mesh, direction):
    """Diagonal discovery stops on a solid tile or when a corner is cut.

    The two tiles adjacent to ``point`` on the side it was entered from
    are checked as well.
    """
    if not direction.is_diagonal:
        raise ValueError(f"{direction.name} is not a diagonal direction")
    dx, dy = direction.value
    x, y = point
    return mesh[point] > 0 or mesh[(x - dx, y)] > 0 or mesh[(x, y - dy)] > 0