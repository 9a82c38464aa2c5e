"""Linked lists for concurrent use: one with a single lock, one with per-node locks."""

from __future__ import annotations

import sys
import threading
import time
from typing import Iterator, Optional

ONE_MILLION = 1_000_000


class _Node:
    __slots__ = ("key", "next")

    def __init__(self, key: int, next: Optional[_Node] = None):
        self.key = key
        self.next = next


class ConcurrentList:
    """Singly linked list, newest first, guarded by one lock."""

    def __init__(self):
        self._head: Optional[_Node] = None
        self._lock = threading.Lock()

    def insert(self, key: int) -> None:
        """Add *key* at the front."""
        node = _Node(key)
        with self._lock:
            node.next = self._head
            self._head = node

    def lookup(self, key: int) -> bool:
        """Return whether *key* is in the list."""
        with self._lock:
            current = self._head
            while current is not None:
                if current.key == key:
                    return True
                current = current.next
        return False

    def __iter__(self) -> Iterator[int]:
        keys = []
        with self._lock:
            current = self._head
            while current is not None:
                keys.append(current.key)
                current = current.next
        return iter(keys)


class _LockedNode:
    __slots__ = ("key", "next", "lock")

    def __init__(self, key: int, next: Optional[_LockedNode] = None):
        self.key = key
        self.next = next
        self.lock = threading.Lock()


class HandOverHandList:
    """Linked list, newest first, locked node by node while it is walked.

    The list ends with a sentinel node that is never reported.
    """

    def __init__(self):
        self._head = _LockedNode(0)

    def _lock_head(self) -> _LockedNode:
        while True:
            head = self._head
            head.lock.acquire()
            if head is self._head:
                return head
            head.lock.release()

    def insert(self, key: int) -> None:
        """Add *key* at the front."""
        node = _LockedNode(key)
        head = self._lock_head()
        try:
            node.next = head
            self._head = node
        finally:
            head.lock.release()

    def _walk(self, stop_at: Optional[int]) -> tuple[bool, list[int]]:
        keys: list[int] = []
        current = self._lock_head()
        try:
            while current.next is not None:
                if stop_at is not None and current.key == stop_at:
                    return True, keys
                keys.append(current.key)
                following = current.next
                following.lock.acquire()
                current.lock.release()
                current = following
        finally:
            current.lock.release()
        return False, keys

    def lookup(self, key: int) -> bool:
        """Return whether *key* is in the list."""
        found, _ = self._walk(key)
        return found

    def __iter__(self) -> Iterator[int]:
        _, keys = self._walk(None)
        return iter(keys)


def _time_threads(target, count: int) -> float:
    threads = [threading.Thread(target=target) for _ in range(count)]
    started = time.perf_counter()
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return time.perf_counter() - started


def _single_lock_benchmark() -> None:
    operations = ONE_MILLION // 500
    for count in range(1, 11):
        shared = ConcurrentList()

        def work(shared=shared) -> None:
            for key in range(operations):
                shared.insert(key)
            for _ in range(operations):
                shared.lookup(1)

        elapsed = _time_threads(work, count)
        print(f"{count} threads, time (seconds): {elapsed:f}\n")


def _hand_over_hand_benchmark() -> None:
    print_lock = threading.Lock()
    for count in range(1, 11):
        shared = HandOverHandList()

        def work(shared=shared) -> None:
            for key in range(10):
                shared.insert(key)
            keys = list(shared)
            with print_lock:
                for key in keys:
                    print(key)

        elapsed = _time_threads(work, count)
        print(f"{count} threads, time (seconds): {elapsed:f}\n")


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if "--hand-over-hand" in args:
        _hand_over_hand_benchmark()
    else:
        _single_lock_benchmark()
    return 0


if __name__ == "__main__":
    sys.exit(main())