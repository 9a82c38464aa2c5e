"""Synchronisation primitives built from counting semaphores."""

from __future__ import annotations

import contextlib
import threading
from typing import Iterator


class Barrier:
    """One-shot barrier: no thread passes wait() until *num_threads* have arrived."""

    def __init__(self, num_threads: int):
        if num_threads < 1:
            raise ValueError("a barrier needs at least one thread")
        self.num_threads = num_threads
        self._arrived = 0
        self._counter_lock = threading.Semaphore(1)
        self._all_arrived = threading.Semaphore(0)

    def wait(self) -> None:
        """Block until every thread has reached the barrier."""
        with self._counter_lock:
            self._arrived += 1
            if self._arrived == self.num_threads:
                self._all_arrived.release()
        # Turnstile: each thread passing lets the next one through.
        self._all_arrived.acquire()
        self._all_arrived.release()


class NoStarveMutex:
    """Mutex in which a waiting thread cannot be overtaken indefinitely.

    Threads gather in a first waiting room; once it empties, they pass one
    at a time through a second room before anyone new is admitted.
    """

    def __init__(self):
        self._room1 = 0
        self._room2 = 0
        self._mutex = threading.Semaphore(1)
        self._t1 = threading.Semaphore(1)
        self._t2 = threading.Semaphore(0)

    def acquire(self) -> None:
        with self._mutex:
            self._room1 += 1

        self._t1.acquire()
        self._room2 += 1
        with self._mutex:
            self._room1 -= 1
            room1_empty = self._room1 == 0

        if room1_empty:
            self._t2.release()
        else:
            self._t1.release()

        self._t2.acquire()
        self._room2 -= 1

    def release(self) -> None:
        if self._room2 == 0:
            self._t1.release()
        else:
            self._t2.release()

    def __enter__(self) -> NoStarveMutex:
        self.acquire()
        return self

    def __exit__(self, *args) -> None:
        self.release()


class ReaderWriterLock:
    """Many readers or one writer; a steady stream of readers can starve writers."""

    def __init__(self):
        self._readers = 0
        self._lock = threading.Semaphore(1)
        self._write_lock = threading.Semaphore(1)

    def acquire_read(self) -> None:
        with self._lock:
            self._readers += 1
            if self._readers == 1:
                self._write_lock.acquire()

    def release_read(self) -> None:
        with self._lock:
            self._readers -= 1
            if self._readers == 0:
                self._write_lock.release()

    def acquire_write(self) -> None:
        self._write_lock.acquire()

    def release_write(self) -> None:
        self._write_lock.release()

    @contextlib.contextmanager
    def reading(self) -> Iterator[None]:
        """Hold the lock for reading inside a with block."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextlib.contextmanager
    def writing(self) -> Iterator[None]:
        """Hold the lock for writing inside a with block."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


class FairReaderWriterLock(ReaderWriterLock):
    """Reader-writer lock in which a waiting writer holds back new readers."""

    def __init__(self):
        super().__init__()
        self._read_gate = threading.Semaphore(1)

    def acquire_read(self) -> None:
        self._read_gate.acquire()
        self._read_gate.release()
        super().acquire_read()

    def acquire_write(self) -> None:
        self._read_gate.acquire()
        super().acquire_write()

    def release_write(self) -> None:
        super().release_write()
        self._read_gate.release()