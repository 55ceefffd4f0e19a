from concurrent.futures import ThreadPoolExecutor

import pytest

from booba_bot.core.counter import Counter


def test_counter_operations():
    counter = Counter()
    assert counter.read() == 0
    assert counter.increment() == 1
    counter.increment()
    assert counter.read() == 2
    counter.store(42)
    assert counter.read() == 42
    counter.store(0)
    assert counter.read() == 0


def test_counter_rejects_negative_values():
    counter = Counter(5)
    with pytest.raises(ValueError):
        counter.store(-1)
    assert counter.read() == 5
    with pytest.raises(ValueError):
        Counter(-3)


def test_concurrent_increments_are_not_lost():
    counter = Counter()

    def work(_):
        for _ in range(1000):
            counter.increment()
            counter.read()

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(work, range(8)))

    assert counter.read() == 8000
