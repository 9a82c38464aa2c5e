"""An ordered B-tree of string keys and values, filled from several threads."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass
from typing import Optional

M = 4
ADDRESS = "128.112.136.12"
URLS = (
    "www.cs.princeton.edu",
    "www.princeton.edu",
    "www.yale.edu",
    "www.simpsons.com",
    "www.apple.com",
    "www.amazon.com",
    "www.ebay.com",
    "www.cnn.com",
    "www.google.com",
    "www.nytimes.com",
    "www.microsoft.com",
)


@dataclass
class _Entry:
    key: str
    value: Optional[str] = None
    next: Optional[_Node] = None


class _Node:
    __slots__ = ("children",)

    def __init__(self, children: Optional[list[_Entry]] = None):
        self.children: list[_Entry] = [] if children is None else children


def _child_index(node: _Node, key: str) -> int:
    children = node.children
    return next(
        (i - 1 for i in range(1, len(children)) if key < children[i].key),
        len(children) - 1,
    )


class BTree:
    """B-tree with at most M-1 children per node.

    Inserting a key that is already present adds another entry rather than
    replacing the value; lookups return the first one found.
    """

    def __init__(self):
        self._root = _Node()
        self.height = 0
        self._size = 0

    def get(self, key: Optional[str]) -> Optional[str]:
        """Return the value stored for *key*, or None."""
        if key is None:
            return None
        node = self._root
        for _ in range(self.height):
            node = node.children[_child_index(node, key)].next
        return next((e.value for e in node.children if e.key == key), None)

    def put(self, key: Optional[str], value: Optional[str]) -> None:
        """Insert *key* with *value*; a None key is ignored."""
        if key is None:
            return
        sibling = self._insert(self._root, key, value, self.height)
        self._size += 1
        if sibling is None:
            return
        old = self._root
        self._root = _Node([
            _Entry(old.children[0].key, None, old),
            _Entry(sibling.children[0].key, None, sibling),
        ])
        self.height += 1

    def _insert(self, node: _Node, key: str, value: Optional[str], height: int) -> Optional[_Node]:
        if height == 0:
            entry = _Entry(key, value)
            position = next(
                (i for i, e in enumerate(node.children) if key < e.key),
                len(node.children),
            )
        else:
            index = _child_index(node, key)
            sibling = self._insert(node.children[index].next, key, value, height - 1)
            if sibling is None:
                return None
            entry = _Entry(sibling.children[0].key, None, sibling)
            position = index + 1
        node.children.insert(position, entry)
        if len(node.children) < M:
            return None
        return self._split(node)

    @staticmethod
    def _split(node: _Node) -> _Node:
        half = M // 2
        upper = _Node(node.children[half:])
        del node.children[half:]
        return upper

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        lines: list[str] = []
        self._render(self._root, self.height, "", lines)
        return "".join(lines)

    def _render(self, node: _Node, height: int, indent: str, lines: list[str]) -> None:
        if height == 0:
            for entry in node.children:
                shown = "null" if entry.value is None else entry.value
                lines.append(f"{indent}{entry.key} {shown}\n")
            return
        for position, entry in enumerate(node.children):
            if position:
                lines.append(f"{indent}({entry.key})\n")
            self._render(entry.next, height - 1, indent + "     ", lines)


def fill_concurrently(tree: BTree, threads: int) -> float:
    """Have *threads* threads each insert 100 // threads entries; return seconds taken."""
    if threads < 1:
        raise ValueError("at least one thread is required")
    lock = threading.Lock()
    per_thread = 100 // threads

    def work() -> None:
        with lock:
            for i in range(per_thread):
                tree.put(URLS[i % len(URLS)], ADDRESS)

    workers = [threading.Thread(target=work) for _ in range(threads)]
    started = time.perf_counter()
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return time.perf_counter() - started


def main(argv=None) -> int:
    for threads in range(1, 11):
        tree = BTree()
        elapsed = fill_concurrently(tree, threads)
        print(f"{threads} threads, time (seconds): {elapsed:f}")
        print(f"size: {len(tree)}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())