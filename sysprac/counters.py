"""A locked counter and an approximate (sloppy) counter, with timing drivers."""

from __future__ import annotations

import os
import sys
import threading
import time
from typing import Callable, Iterable

ONE_MILLION = 1_000_000
DEFAULT_SLOTS = 4


class SimpleCounter:
    """Counter guarded by a single lock."""

    def __init__(self):
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> None:
        with self._lock:
            self._value += 1

    def decrement(self) -> None:
        with self._lock:
            self._value -= 1

    def get(self) -> int:
        with self._lock:
            return self._value


class ApproximateCounter:
    """Counter with per-thread local counts moved to a global total in batches.

    Each of the first *slots* threads to update gets a local count of its
    own; any further threads share the first slot. A local count is added
    to the global total once it reaches *threshold*, so get() may lag
    behind the true count.
    """

    def __init__(self, threshold: int, slots: int = DEFAULT_SLOTS):
        if slots < 1:
            raise ValueError("at least one slot is required")
        self.threshold = threshold
        self._global = 0
        self._global_lock = threading.Lock()
        self._local = [0] * slots
        self._local_locks = [threading.Lock() for _ in range(slots)]
        self._owners: dict[int, int] = {}
        self._owners_lock = threading.Lock()

    def _slot(self) -> int:
        ident = threading.get_ident()
        with self._owners_lock:
            slot = self._owners.get(ident)
            if slot is None:
                if len(self._owners) < len(self._local):
                    slot = len(self._owners)
                    self._owners[ident] = slot
                else:
                    slot = 0
        return slot

    def update(self, amount: int) -> None:
        """Add *amount* to the calling thread's local count."""
        slot = self._slot()
        with self._local_locks[slot]:
            self._local[slot] += amount
            if self._local[slot] >= self.threshold:
                with self._global_lock:
                    self._global += self._local[slot]
                self._local[slot] = 0

    def get(self) -> int:
        """Return the global total (only approximate)."""
        with self._global_lock:
            return self._global


def run_threads(worker: Callable[[], object], count: int) -> float:
    """Run *worker* in *count* threads at once; return the seconds taken."""
    if count < 1:
        raise ValueError("at least one thread is required")
    threads = [threading.Thread(target=worker) for _ in range(count)]
    started = time.perf_counter()
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return time.perf_counter() - started


def _pin(cpus: Iterable[int]) -> bool:
    if not hasattr(os, "sched_setaffinity"):
        return True
    try:
        os.sched_setaffinity(0, set(cpus))
    except OSError:
        return False
    return True


def simple_main(argv=None) -> int:
    for cpu_count in range(1, 5):
        cpus = range(cpu_count)
        print(f"{cpu_count} CPUs")
        for threads in range(1, 5):
            counter = SimpleCounter()
            loops = ONE_MILLION // threads

            def work(counter=counter, loops=loops) -> None:
                if not _pin(cpus):
                    print("Set CPU affinity error")
                    return
                for _ in range(loops):
                    counter.increment()

            elapsed = run_threads(work, threads)
            print(f"{threads} threads")
            print(f"Time (seconds): {elapsed:f}\n")
    return 0


def approximate_main(argv=None) -> int:
    for threshold in range(1, 6):
        for threads in range(1, DEFAULT_SLOTS + 1):
            counter = ApproximateCounter(threshold)
            loops = ONE_MILLION // threads

            def work(counter=counter, loops=loops) -> None:
                for _ in range(loops):
                    counter.update(1)

            elapsed = run_threads(work, threads)
            print(f"{threads} threads, {threshold} threshold")
            print(f"Time (seconds): {elapsed:f}\n")
    return 0


if __name__ == "__main__":
    sys.exit(approximate_main())