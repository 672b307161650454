"""In-memory store implementation."""

import threading
import time

from .base import Store


class MemoryStore(Store):
    """Thread-safe in-memory store for locks.

    Note: This store does NOT coordinate across processes.
    Use RedisStore for multi-process scenarios.
    """

    def __init__(self) -> None:
        self._entries: dict[str, tuple[str, float | None]] = {}
        self._global_lock = threading.Lock()

    def _current(self, key: str) -> str | None:
        """Return the live value for key. Caller must hold the global lock."""
        entry = self._entries.get(key)
        if entry is None:
            return None

        value, expires_at = entry
        if expires_at is not None and time.monotonic() >= expires_at:
            del self._entries[key]
            return None

        return value

    def acquire(self, key: str, token: str, ttl: float) -> bool:
        with self._global_lock:
            if self._current(key) is not None:
                return False
            self._entries[key] = (token, time.monotonic() + ttl)
            return True

    def release(self, key: str, token: str) -> bool:
        with self._global_lock:
            if self._current(key) != token:
                return False
            del self._entries[key]
            return True

    def refresh(self, key: str, token: str, ttl: float) -> bool:
        with self._global_lock:
            if self._current(key) != token:
                return False
            self._entries[key] = (token, time.monotonic() + ttl)
            return True

    def ttl(self, key: str, token: str) -> float | None:
        with self._global_lock:
            if self._current(key) != token:
                return None

            _, expires_at = self._entries[key]
            if expires_at is None:
                return None
            return max(expires_at - time.monotonic(), 0.0)

    def set(self, key: str, value: str, ttl: float | None = None) -> None:
        """Write a value unconditionally (useful for testing)."""
        with self._global_lock:
            expires_at = None
            if ttl is not None:
                expires_at = time.monotonic() + ttl

            self._entries[key] = (value, expires_at)

    def clear(self) -> None:
        """Clear all entries (useful for testing)."""
        with self._global_lock:
            self._entries.clear()
