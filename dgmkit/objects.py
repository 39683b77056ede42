"""Basic logic objects: circles, rectangles and collision meshes."""

from __future__ import annotations

from dataclasses import dataclass, field

Vector = tuple


def _add(a, b):
    return (a[0] + b[0], a[1] + b[1])


@dataclass
class Circle:
    """Circle given by the position of its centre and its radius."""

    position: tuple = (0.0, 0.0)
    radius: float = 0.0

    def move(self, forward):
        """Shift the centre by ``forward``."""
        self.position = _add(self.position, forward)


@dataclass
class Rect:
    """Rectangle given by its top-left corner and its size."""

    position: tuple = (0.0, 0.0)
    size: tuple = (0.0, 0.0)

    def move(self, forward):
        """Shift the top-left corner by ``forward``."""
        self.position = _add(self.position, forward)

    def center(self):
        """Return the centre point of the rectangle."""
        return (
            self.position[0] + self.size[0] / 2.0,
            self.position[1] + self.size[1] / 2.0,
        )


@dataclass(eq=False)
class Mesh:
    """Row-major grid of integers describing level geometry.

    A cell with a value <= 0 is passable, anything greater is solid.
    Cells are addressed either by flat index or by an ``(x, y)`` pair.
    """

    data_size: tuple
    voxel_size: tuple
    data: list | None = None
    position: tuple = field(default=(0.0, 0.0))

    def __init__(self, data_size, voxel_size, data=None):
        width, height = data_size
        if data is None:
            data = [0] * (width * height)
        else:
            data = list(data)
            if len(data) != width * height:
                raise ValueError(
                    "Mesh data length must equal data_size width * height"
                )
        self.data = data
        self.data_size = (width, height)
        self.voxel_size = tuple(voxel_size)
        self.position = (0.0, 0.0)

    def _flat_index(self, key):
        if isinstance(key, tuple):
            x, y = key
            width, height = self.data_size
            if not (0 <= x < width and 0 <= y < height):
                raise IndexError(f"Coordinate {key} lies outside the mesh")
            return y * width + x
        if not 0 <= key < len(self.data):
            raise IndexError(f"Index {key} lies outside the mesh")
        return key

    def __getitem__(self, key):
        return self.data[self._flat_index(key)]

    def __setitem__(self, key, value):
        self.data[self._flat_index(key)] = value

    def clone(self):
        """Return an independent copy of the mesh data and sizes."""
        return Mesh(self.data_size, self.voxel_size, self.data)

    def move(self, forward):
        """Shift the top-left corner by ``forward``."""
        self.position = _add(self.position, forward)

    def set_data_size(self, width, height):
        """Resize the grid; all previous data is replaced by zeros."""
        self.data = [0] * (width * height)
        self.data_size = (width, height)