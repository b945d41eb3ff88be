"""In-memory response cache with per-entry expiry."""

import logging
import threading
import time
from collections.abc import Callable
from datetime import timedelta
from typing import Protocol, runtime_checkable

from moviedb.infrastructure.http_client import RawResponse

logger = logging.getLogger(__name__)

DEFAULT_EXPIRY = timedelta(minutes=30)
DEFAULT_MAX_SIZE = 10_000


@runtime_checkable
class ResponseCache(Protocol):
    def get(self, key: str) -> RawResponse | None: ...

    def set(self, key: str, value: RawResponse, expiry: timedelta = DEFAULT_EXPIRY) -> None: ...


class MemoryCache:
    """Raw responses keyed by the fully composed request URL.

    Expiry is checked when an entry is read, and every write drops the
    entries that have already expired; there is no background sweep. When
    max_size live entries are stored, the tenth closest to expiry is evicted.
    """

    def __init__(
        self, max_size: int = DEFAULT_MAX_SIZE, clock: Callable[[], float] = time.monotonic
    ) -> None:
        if max_size < 1:
            raise ValueError("max_size must be >= 1")
        self._max_size = max_size
        self._clock = clock
        self._store: dict[str, tuple[RawResponse, float]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> RawResponse | None:
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            value, deadline = entry
            if self._clock() >= deadline:
                del self._store[key]
                logger.debug(f"Cache entry expired: {key}")
                return None
            return value

    def set(self, key: str, value: RawResponse, expiry: timedelta = DEFAULT_EXPIRY) -> None:
        seconds = expiry.total_seconds()
        if seconds <= 0:
            return
        with self._lock:
            now = self._clock()
            self._evict_expired(now)
            if key not in self._store and len(self._store) >= self._max_size:
                self._evict_oldest()
            self._store[key] = (value, now + seconds)

    def _evict_expired(self, now: float) -> None:
        """Called with the lock held."""
        expired = [key for key, (_, deadline) in self._store.items() if now >= deadline]
        for key in expired:
            del self._store[key]
        if expired:
            logger.debug(f"Dropped {len(expired)} expired cache entries")

    def _evict_oldest(self) -> None:
        """Called with the lock held."""
        count = max(1, len(self._store) // 10)
        oldest = sorted(self._store, key=lambda key: self._store[key][1])[:count]
        for key in oldest:
            del self._store[key]
        logger.debug(f"Cache full, evicted {count} entries closest to expiry")

    def delete(self, key: str) -> None:
        with self._lock:
            self._store.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def __len__(self) -> int:
        """Number of stored entries, expired ones included until the next read or write."""
        with self._lock:
            return len(self._store)
