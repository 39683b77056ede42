"""Fixed-capacity buffer with O(1) growth and removal."""

from __future__ import annotations

import copy


class StaticBuffer:
    """Preallocated array of ``capacity`` items of which the first few are in use.

    ``grow`` exposes the next preallocated item, ``remove`` swaps the
    removed item with the last used one and hides it, so item order is not
    kept. Indexing reaches every preallocated item; ``len`` and iteration
    cover only the used ones.
    """

    def __init__(self, capacity, factory=None):
        if capacity < 0:
            raise ValueError("Capacity must not be negative")
        make = factory if factory is not None else (lambda: None)
        self._items = [make() for _ in range(capacity)]
        self._size = 0

    @property
    def capacity(self):
        """Total number of preallocated items."""
        return len(self._items)

    def grow(self):
        """Expose one more item; return False if the buffer is already full."""
        if self.is_full():
            return False
        self._size += 1
        return True

    def grow_unchecked(self):
        """Grow if possible and return the last used item either way."""
        self.grow()
        return self.last()

    def remove(self, index):
        """Hide the item at ``index`` by swapping it with the last used item."""
        if not 0 <= index < self._size:
            raise IndexError(f"Index {index} is not in use")
        self._size -= 1
        items = self._items
        items[index], items[self._size] = items[self._size], items[index]

    def last(self):
        """Return the last used item."""
        if self._size == 0:
            raise IndexError("Buffer is empty")
        return self._items[self._size - 1]

    def _check(self, index):
        if not 0 <= index < len(self._items):
            raise IndexError(f"Index {index} is out of capacity")

    def __getitem__(self, index):
        self._check(index)
        return self._items[index]

    def __setitem__(self, index, value):
        self._check(index)
        self._items[index] = value

    def __len__(self):
        return self._size

    def __iter__(self):
        return iter(self._items[: self._size])

    def is_empty(self):
        """True when no item is in use."""
        return self._size == 0

    def is_full(self):
        """True when every preallocated item is in use."""
        return self._size == len(self._items)

    def clone(self):
        """Return a copy holding copies of all preallocated items."""
        other = StaticBuffer(0)
        other._items = [copy.copy(item) for item in self._items]
        other._size = self._size
        return other