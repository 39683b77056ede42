"""Vector-like container with O(1) insertion and deletion and stable indices."""

from __future__ import annotations

import copy


class _FreeSlot:
    """Marker for a deleted slot, linking to the next free slot."""

    __slots__ = ("next_free",)

    def __init__(self, next_free):
        self.next_free = next_free


class DynamicBuffer:
    """Container whose indices stay valid until the item under them is erased.

    Erased slots are recycled by later insertions, most recently freed first.
    Iterating yields ``(item, index)`` pairs for live items in index order.
    """

    def __init__(self):
        self._slots = []
        self._first_free = None

    def add(self, item):
        """Store ``item`` and return the index it was placed at."""
        if self._first_free is None:
            self._slots.append(item)
            return len(self._slots) - 1
        index = self._first_free
        self._first_free = self._slots[index].next_free
        self._slots[index] = item
        return index

    def erase(self, index):
        """Delete the item at ``index``; raise ``IndexError`` if there is none."""
        if not self.is_index_valid(index):
            raise IndexError(f"No item stored at index {index}")
        self._slots[index] = _FreeSlot(self._first_free)
        self._first_free = index

    def is_index_valid(self, index):
        """True when a live item is stored at ``index``."""
        return (
            isinstance(index, int)
            and 0 <= index < len(self._slots)
            and not isinstance(self._slots[index], _FreeSlot)
        )

    def is_empty(self):
        """True when the buffer holds no live items."""
        return not any(
            not isinstance(slot, _FreeSlot) for slot in self._slots
        )

    def get(self, index):
        """Return the item at ``index`` or ``None`` when there is none."""
        if not self.is_index_valid(index):
            return None
        return self._slots[index]

    def __getitem__(self, index):
        if not self.is_index_valid(index):
            raise IndexError(f"No item stored at index {index}")
        return self._slots[index]

    def __iter__(self):
        for index, slot in enumerate(self._slots):
            if not isinstance(slot, _FreeSlot):
                yield slot, index

    def clone(self):
        """Return a copy with the same items, indices and free slots."""
        other = DynamicBuffer()
        other._slots = [
            _FreeSlot(slot.next_free) if isinstance(slot, _FreeSlot)
            else copy.copy(slot)
            for slot in self._slots
        ]
        other._first_free = self._first_free
        return other