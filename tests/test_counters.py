import threading

import pytest

from sysprac.counters import ApproximateCounter, SimpleCounter, run_threads


def test_simple_counter_starts_at_zero():
    assert SimpleCounter().get() == 0


def test_simple_counter_increment_and_decrement():
    counter = SimpleCounter()
    for _ in range(5):
        counter.increment()
    counter.decrement()
    counter.decrement()
    assert counter.get() == 3


def test_simple_counter_is_exact_under_threads():
    counter = SimpleCounter()

    def work():
        for _ in range(1000):
            counter.increment()

    run_threads(work, 4)
    assert counter.get() == 4 * 1000


def test_approximate_counter_holds_until_threshold():
    counter = ApproximateCounter(5)
    for _ in range(4):
        counter.update(1)
    assert counter.get() == 0
    counter.update(1)
    assert counter.get() == 5


def test_approximate_counter_threshold_one_is_exact():
    counter = ApproximateCounter(1)
    for _ in range(7):
        counter.update(1)
    assert counter.get() == 7


def test_approximate_counter_transfers_whole_local_count():
    counter = ApproximateCounter(3)
    counter.update(2)
    counter.update(2)
    assert counter.get() == 4


@pytest.mark.parametrize("threshold", [1, 2, 5])
def test_approximate_counter_totals_across_threads(threshold):
    counter = ApproximateCounter(threshold)

    def work():
        for _ in range(100):
            counter.update(1)

    run_threads(work, 4)
    assert counter.get() == 4 * 100


def test_more_threads_than_slots_share_a_slot():
    counter = ApproximateCounter(1, slots=2)

    def work():
        for _ in range(10):
            counter.update(1)

    run_threads(work, 6)
    assert counter.get() == 6 * 10


def test_approximate_counter_never_exceeds_true_count():
    counter = ApproximateCounter(4)
    for _ in range(10):
        counter.update(1)
    assert counter.get() <= 10
    assert 10 - counter.get() < 4


def test_approximate_counter_rejects_zero_slots():
    with pytest.raises(ValueError):
        ApproximateCounter(1, slots=0)


def test_run_threads_runs_worker_once_per_thread():
    seen = []
    lock = threading.Lock()

    def work():
        with lock:
            seen.append(threading.get_ident())

    elapsed = run_threads(work, 3)
    assert len(seen) == 3
    assert elapsed >= 0


def test_run_threads_rejects_zero():
    with pytest.raises(ValueError):
        run_threads(lambda: None, 0)