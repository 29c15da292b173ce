"""
Tests for the background cache sweeper.

Tests cover:
- run_once evicts expired entries deterministically
- start/stop lifecycle
- the background thread sweeps on its interval
- a failing sweep does not kill the loop
"""

import threading
import time

import pytest

from forzeit.cache import CacheManager, CacheSweeper
from tests.fixtures import FakeClock


class TestCacheSweeper:
    @pytest.fixture
    def clock(self):
        return FakeClock()

    @pytest.fixture
    def cache(self, clock):
        return CacheManager(clock=clock)

    def test_run_once_evicts_expired(self, cache, clock):
        cache.set("old", 1, ttl_seconds=1)
        cache.set("fresh", 2, ttl_seconds=100)
        clock.advance(5)

        sweeper = CacheSweeper(cache, interval_seconds=30)
        assert sweeper.run_once() == 1
        assert cache.stats().total_entries == 1
        assert cache.get("fresh") == 2

    def test_run_once_keeps_valid_entries(self, cache):
        cache.set("a", 1, ttl_seconds=60)
        assert CacheSweeper(cache).run_once() == 0
        assert len(cache) == 1

    def test_start_and_stop(self, cache):
        sweeper = CacheSweeper(cache, interval_seconds=30)
        assert sweeper.is_running is False

        sweeper.start()
        assert sweeper.is_running is True

        sweeper.stop()
        assert sweeper.is_running is False

    def test_start_twice_is_noop(self, cache):
        sweeper = CacheSweeper(cache, interval_seconds=30)
        sweeper.start()
        first = sweeper._thread
        sweeper.start()
        assert sweeper._thread is first
        sweeper.stop()

    def test_stop_without_start(self, cache):
        CacheSweeper(cache).stop()  # should not raise

    def test_background_thread_sweeps(self, cache, clock):
        cache.set("old", 1, ttl_seconds=1)
        clock.advance(5)

        sweeper = CacheSweeper(cache, interval_seconds=0.01)
        sweeper.start()
        try:
            deadline = time.monotonic() + 2
            while len(cache) and time.monotonic() < deadline:
                time.sleep(0.01)
        finally:
            sweeper.stop()

        assert len(cache) == 0

    def test_sweep_failure_keeps_loop_running(self, cache):
        calls = []
        swept_twice = threading.Event()

        def flaky_cleanup():
            calls.append(1)
            if len(calls) == 1:
                raise RuntimeError("boom")
            swept_twice.set()
            return 0

        cache.cleanup_expired = flaky_cleanup
        sweeper = CacheSweeper(cache, interval_seconds=0.01)
        sweeper.start()
        try:
            assert swept_twice.wait(timeout=2)
        finally:
            sweeper.stop()
        assert len(calls) >= 2
