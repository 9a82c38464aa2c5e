"""A FIFO queue with separate locks for its head and tail."""

from __future__ import annotations

import sys
import threading
from typing import Iterator, Optional


class QueueEmpty(Exception):
    """Raised when dequeuing from an empty queue."""


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Optional[int] = None):
        self.value = value
        self.next: Optional[_Node] = None


class TwoLockQueue:
    """Linked queue with a dummy head node; enqueue and dequeue take different locks."""

    def __init__(self):
        dummy = _Node()
        self._head = dummy
        self._tail = dummy
        self._head_lock = threading.Lock()
        self._tail_lock = threading.Lock()

    def enqueue(self, value: int) -> None:
        """Add *value* at the back."""
        node = _Node(value)
        with self._tail_lock:
            self._tail.next = node
            self._tail = node

    def dequeue(self) -> int:
        """Remove and return the value at the front; raise QueueEmpty if none."""
        with self._head_lock:
            first = self._head.next
            if first is None:
                raise QueueEmpty("queue is empty")
            self._head = first
            value = first.value
            first.value = None
        return value

    def __iter__(self) -> Iterator[int]:
        values = []
        with self._head_lock, self._tail_lock:
            current = self._head.next
            while current is not None:
                values.append(current.value)
                current = current.next
        return iter(values)


def main(argv=None) -> int:
    queue = TwoLockQueue()
    for value in range(4):
        queue.enqueue(value)
    queue.dequeue()
    for value in queue:
        print(value)
    return 0


if __name__ == "__main__":
    sys.exit(main())