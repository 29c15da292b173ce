"""
Background sweep that evicts expired cache entries on a fixed interval.

Lazy expiry already guarantees reads never see stale values; the sweep only
bounds memory held by entries nobody reads again.
"""

import logging
import threading

from .cache_manager import CacheManager

logger = logging.getLogger(__name__)


class CacheSweeper:
    """
    Periodic cleanup task with explicit lifecycle.

    start() launches a daemon thread, stop() signals and joins it.
    run_once() performs one sweep on the calling thread.
    """

    def __init__(self, cache: CacheManager, interval_seconds: float = 30):
        self.cache = cache
        self.interval_seconds = interval_seconds
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def run_once(self) -> int:
        """Evict expired entries now. Returns the number removed."""
        return self.cache.cleanup_expired()

    def start(self) -> None:
        with self._lock:
            if self.is_running:
                return
            self._stop_event.clear()
            self._thread = threading.Thread(
                target=self._loop, name="cache-sweeper", daemon=True
            )
            self._thread.start()
        logger.info(f"Cache sweeper started (interval={self.interval_seconds}s)")

    def stop(self, timeout: float | None = 5.0) -> None:
        with self._lock:
            thread = self._thread
            self._stop_event.set()
            self._thread = None
        if thread is not None:
            thread.join(timeout=timeout)
            logger.info("Cache sweeper stopped")

    def _loop(self) -> None:
        while not self._stop_event.wait(timeout=self.interval_seconds):
            try:
                self.run_once()
            except Exception as e:
                logger.error(f"Cache sweep failed: {e}", exc_info=True)
