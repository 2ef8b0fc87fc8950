"""Tests for the hit counter."""

import threading

from chirpy.metrics import HitCounter


class TestHitCounter:
    """Tests for HitCounter."""

    def test_starts_at_zero(self):
        assert HitCounter().value == 0

    def test_increment_and_reset(self):
        counter = HitCounter()
        assert counter.increment() == 1
        assert counter.increment() == 2
        assert counter.value == 2

        counter.reset()
        assert counter.value == 0

    def test_instances_are_isolated(self):
        first, second = HitCounter(), HitCounter()
        first.increment()
        assert second.value == 0

    def test_concurrent_increments(self):
        counter = HitCounter()

        def bump():
            for _ in range(1000):
                counter.increment()

        threads = [threading.Thread(target=bump) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert counter.value == 8000
