"""A growable array that doubles when full and halves when a quarter full."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator


class Vector:
    """Sequence of ints with an explicit capacity."""

    def __init__(self, values: Iterable[int] = ()):
        self._items = list(values)
        self._capacity = len(self._items)

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, value: int) -> None:
        """Add *value* at the end, doubling the capacity when full."""
        if len(self._items) == self._capacity:
            self._capacity = self._capacity * 2 or 1
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the last value, halving the capacity at a quarter full."""
        if not self._items:
            raise IndexError("pop from empty vector")
        value = self._items.pop()
        if len(self._items) == self._capacity // 4:
            self._capacity //= 2
        return value

    def clear(self) -> None:
        """Drop every value and release the capacity."""
        self._items.clear()
        self._capacity = 0

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Vector({self._items!r}, capacity={self._capacity})"


def main(argv=None) -> int:
    vector = Vector([4])
    for value in (5, 6, 7):
        vector.append(value)
    vector.pop()
    print(f"first value: {vector[0]}")
    print(f"second value: {vector[1]}")
    print(f"third value: {vector[2]}")
    print(f"size: {len(vector)}")
    print(f"capacity: {vector.capacity}")
    vector.clear()
    return 0


if __name__ == "__main__":
    sys.exit(main())