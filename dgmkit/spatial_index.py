"""Dense-grid spatial lookup and a spatially indexed item container."""

from __future__ import annotations

from dgmkit.dynamic_buffer import DynamicBuffer
from dgmkit.objects import Circle, Rect


def _box_overlaps(area, box):
    """True when ``box`` (a point, Circle or Rect) touches the rectangle ``area``."""
    left, top = area.position
    right = left + area.size[0]
    bottom = top + area.size[1]
    if isinstance(box, Rect):
        bx, by = box.position
        bw, bh = box.size
        return bx <= right and bx + bw >= left and by <= bottom and by + bh >= top
    if isinstance(box, Circle):
        cx, cy = box.position
        nearest_x = min(max(cx, left), right)
        nearest_y = min(max(cy, top), bottom)
        dx = cx - nearest_x
        dy = cy - nearest_y
        return dx * dx + dy * dy <= box.radius * box.radius
    x, y = box
    return left <= x <= right and top <= y <= bottom


class SpatialIndex:
    """Grid over a bounding box mapping cells to lists of item indices.

    Boxes may be points given as ``(x, y)`` pairs, ``Circle`` or ``Rect``
    objects. Coordinates outside the bounding box are clamped to its edge
    cells.
    """

    def __init__(self, bounding_box, grid_resolution):
        if grid_resolution <= 0:
            raise ValueError("Grid resolution must be positive")
        width, height = bounding_box.size
        if width <= 0 or height <= 0:
            raise ValueError("Bounding box must have a positive size")
        self._bounding_box = Rect(tuple(bounding_box.position), tuple(bounding_box.size))
        self._resolution = grid_resolution
        self._coord_to_grid = (grid_resolution / width, grid_resolution / height)
        self._grid = [[] for _ in range(grid_resolution * grid_resolution)]

    @property
    def bounding_box(self):
        """The area covered by the grid."""
        return self._bounding_box

    def _grid_coord(self, coord):
        limit = float(self._resolution - 1)
        origin = self._bounding_box.position
        return tuple(
            int(min(max((coord[axis] - origin[axis]) * self._coord_to_grid[axis], 0.0), limit))
            for axis in (0, 1)
        )

    def _grid_rect(self, box):
        if isinstance(box, Rect):
            top_left = self._grid_coord(box.position)
            bottom_right = self._grid_coord(
                (box.position[0] + box.size[0], box.position[1] + box.size[1])
            )
        elif isinstance(box, Circle):
            cx, cy = box.position
            r = box.radius
            top_left = self._grid_coord((cx - r, cy - r))
            bottom_right = self._grid_coord((cx + r, cy + r))
        else:
            top_left = bottom_right = self._grid_coord(box)
        return top_left, bottom_right

    def _cells(self, box, skip_empty=True):
        (x1, y1), (x2, y2) = self._grid_rect(box)
        for y in range(y1, y2 + 1):
            row = y * self._resolution
            for x in range(x1, x2 + 1):
                cell = self._grid[row + x]
                if cell or not skip_empty:
                    yield cell

    def remove_from_lookup(self, index, box):
        """Stop reporting ``index`` for cells covered by ``box``."""
        for cell in self._cells(box):
            try:
                position = cell.index(index)
            except ValueError:
                continue
            cell[position] = cell[-1]
            cell.pop()

    def return_to_lookup(self, index, box):
        """Register ``index`` in every cell covered by ``box``."""
        for cell in self._cells(box, skip_empty=False):
            cell.append(index)

    def get_overlap_candidates(self, box):
        """Return sorted, unique indices of items that may overlap ``box``."""
        if not _box_overlaps(self._bounding_box, box):
            return []
        found = set()
        for cell in self._cells(box):
            found.update(cell)
        return sorted(found)

    def clear(self):
        """Drop every index from the lookup."""
        for cell in self._grid:
            cell.clear()


class SpatialBuffer(SpatialIndex):
    """Item storage with stable indices and spatial lookup of those indices.

    To move an item, call ``remove_from_lookup`` with its old box, update
    it, then ``return_to_lookup`` with the new box.
    """

    def __init__(self, bounding_box, grid_resolution):
        super().__init__(bounding_box, grid_resolution)
        self._items = DynamicBuffer()

    def insert(self, item, box):
        """Store ``item`` under ``box`` and return its index."""
        index = self._items.add(item)
        self.return_to_lookup(index, box)
        return index

    def erase_at_index(self, index, box):
        """Delete the item at ``index`` and remove it from the lookup."""
        self._items.erase(index)
        self.remove_from_lookup(index, box)

    def __getitem__(self, index):
        return self._items[index]

    def __iter__(self):
        return iter(self._items)