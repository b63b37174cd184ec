"""
Growable integer array used to hold the daily step counts.

Wraps a Python list and tracks an advisory capacity that mimics a
doubling allocator, so the demonstration can report size/capacity
pairs. Capacity never affects contents or order.
"""

from typing import Iterable, Iterator, List, Optional


class StepSequence:
    """Ordered, mutable sequence of signed integers indexed from 0."""

    def __init__(self, values: Optional[Iterable[int]] = None):
        self._data: List[int] = list(values) if values is not None else []
        self._capacity = len(self._data)

    # ------------------------------------------------------------------
    # Size and capacity
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        return len(self._data)

    @property
    def capacity(self) -> int:
        return self._capacity

    def empty(self) -> bool:
        return not self._data

    def reserve(self, new_capacity: int) -> None:
        """Raise capacity to at least new_capacity. Never shrinks."""
        if new_capacity > self._capacity:
            self._capacity = new_capacity

    def shrink_to_fit(self) -> None:
        """Trim capacity to the current size."""
        self._capacity = len(self._data)

    def _grow_for(self, needed: int) -> None:
        if needed > self._capacity:
            self._capacity = max(needed, self._capacity * 2)

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def at(self, index: int) -> int:
        """Bounds-checked access; negative indexes are rejected."""
        if not 0 <= index < len(self._data):
            raise IndexError(
                f"index {index} out of range for sequence of size {len(self._data)}"
            )
        return self._data[index]

    def front(self) -> int:
        return self.at(0)

    def back(self) -> int:
        return self.at(len(self._data) - 1)

    # ------------------------------------------------------------------
    # Modifiers
    # ------------------------------------------------------------------

    def push_back(self, value: int) -> None:
        self._grow_for(len(self._data) + 1)
        self._data.append(value)

    def pop_back(self) -> int:
        if not self._data:
            raise IndexError("pop_back on empty sequence")
        return self._data.pop()

    def insert(self, index: int, value: int) -> None:
        """Insert value before index (index == size appends)."""
        if not 0 <= index <= len(self._data):
            raise IndexError(
                f"insert position {index} out of range for sequence of size {len(self._data)}"
            )
        self._grow_for(len(self._data) + 1)
        self._data.insert(index, value)

    def erase(self, index: int) -> int:
        """Remove and return the element at index."""
        value = self.at(index)
        del self._data[index]
        return value

    def swap(self, other: "StepSequence") -> None:
        """Exchange contents and capacity with another sequence."""
        self._data, other._data = other._data, self._data
        self._capacity, other._capacity = other._capacity, self._capacity

    # ------------------------------------------------------------------
    # Copies and protocol methods
    # ------------------------------------------------------------------

    def copy(self) -> "StepSequence":
        return StepSequence(self._data)

    def to_list(self) -> List[int]:
        return list(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __getitem__(self, index):
        return self._data[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._data[index] = value

    def __eq__(self, other) -> bool:
        if isinstance(other, StepSequence):
            return self._data == other._data
        if isinstance(other, list):
            return self._data == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"StepSequence(size={len(self._data)}, capacity={self._capacity})"
