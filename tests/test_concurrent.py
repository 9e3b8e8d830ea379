"""
Tests for the thread-safe LRU cache.

Covers the sequential LRU behaviour plus stress and ordering checks from
multiple threads.
"""

import random
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from boundedcache import MISS, ConcurrentLRUCache


class TestConcurrentLRUSequential:
    """Single-threaded behaviour matches the plain LRU cache."""

    def test_eviction_and_update(self):
        cache = ConcurrentLRUCache(3)
        cache.put(1, "one")
        cache.put(2, "two")
        cache.put(3, "three")
        assert cache.size() == 3

        cache.put(4, "four") # evicts 1
        assert cache.get(1) is MISS
        assert cache.size() == 3

        cache.put(2, "two-updated")
        assert cache.get(2) == "two-updated"
        cache.get(4)
        cache.put(5, "five") # evicts 3
        assert cache.get(3) is MISS
        assert cache.keys() == [2, 4, 5]

    def test_get_refreshes_recency(self):
        cache = ConcurrentLRUCache(3)
        cache.put(1, "a")
        cache.put(2, "b")
        cache.put(3, "c")
        cache.get(1)
        cache.put(4, "d")
        assert cache.get(1) == "a"
        assert cache.get(2) is MISS

    def test_keys_snapshot_order(self):
        cache = ConcurrentLRUCache(4)
        for key in "abc":
            cache.put(key, key)
        cache.get("a")
        assert cache.keys() == ["b", "c", "a"]

    def test_clear(self):
        cache = ConcurrentLRUCache(2)
        cache.put(1, 1)
        cache.clear()
        assert cache.size() == 0
        assert cache.keys() == []


class TestConcurrentLRUThreads:
    """Behaviour under contention."""

    @pytest.mark.parametrize("threads,operations,capacity", [(10, 1000, 100), (10, 100, 50), (8, 2000, 1)])
    def test_stress_keeps_capacity(self, threads, operations, capacity):
        cache = ConcurrentLRUCache(capacity)

        def worker(seed):
            rng = random.Random(seed)
            for _ in range(operations):
                key = rng.randrange(capacity * 2)
                if rng.random() < 0.7:
                    cache.put(key, key * 2)
                else:
                    value = cache.get(key)
                    assert value is MISS or value == key * 2

        with ThreadPoolExecutor(max_workers=threads) as executor:
            for future in [executor.submit(worker, seed) for seed in range(threads)]:
                future.result(timeout=60)

        assert cache.size() <= capacity
        keys = cache.keys()
        assert len(keys) == cache.size()
        assert all(key in cache for key in keys)

    def test_same_key_contention(self):
        cache = ConcurrentLRUCache(25)

        def worker(thread_id):
            for j in range(200):
                key = j % 25
                cache.put(key, f"Thread-{thread_id}-Value-{j}")
                cache.get(key)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(10)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=60)
            assert not thread.is_alive()

        assert cache.size() == 25

    def test_ordered_puts_keep_later_value(self):
        cache = ConcurrentLRUCache(4)
        first_done = threading.Event()
        barrier = threading.Barrier(2)

        def first():
            barrier.wait()
            cache.put("key", "first")
            first_done.set()

        def second():
            barrier.wait()
            first_done.wait()
            cache.put("key", "second")

        threads = [threading.Thread(target=first), threading.Thread(target=second)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=10)

        assert cache.get("key") == "second"
        assert cache.size() == 1

    def test_full_cache_evicts_one_per_insert(self):
        capacity = 50
        cache = ConcurrentLRUCache(capacity)
        for key in range(capacity):
            cache.put(key, key)

        barrier = threading.Barrier(8)

        def insert(thread_id):
            barrier.wait()
            for j in range(100):
                cache.put((thread_id, j), j)

        threads = [threading.Thread(target=insert, args=(i,)) for i in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=60)

        assert cache.size() == capacity
        assert len(cache.keys()) == capacity
