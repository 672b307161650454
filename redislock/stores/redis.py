"""Redis-based store implementation with atomic operations."""

import math
import os
from typing import TYPE_CHECKING

from .base import Store

if TYPE_CHECKING:
    from redis import Redis

DEFAULT_URL = "redis://localhost:6379/0"

# KEYS[1] = lock key, ARGV[1] = token
_LUA_RELEASE = """
if redis.call("get", KEYS[1]) == ARGV[1] then
    return redis.call("del", KEYS[1])
else
    return 0
end
"""

# KEYS[1] = lock key, ARGV[1] = token, ARGV[2] = ttl in milliseconds
_LUA_REFRESH = """
if redis.call("get", KEYS[1]) == ARGV[1] then
    return redis.call("pexpire", KEYS[1], ARGV[2])
else
    return 0
end
"""

# KEYS[1] = lock key, ARGV[1] = token
_LUA_PTTL = """
if redis.call("get", KEYS[1]) == ARGV[1] then
    return redis.call("pttl", KEYS[1])
else
    return -2
end
"""


def _to_millis(seconds: float) -> int:
    """Convert seconds to whole milliseconds, at least 1."""
    return max(math.ceil(seconds * 1000), 1)


class RedisStore(Store):
    """Redis-based store for locks.

    Acquisition is a single ``SET NX PX`` command. Release, refresh and
    TTL reads are Lua scripts, so the token comparison and the mutation
    run as one step on the server.
    Safe for multi-process and multi-server scenarios.

    Args:
        client: Redis client instance
        prefix: Key prefix for namespacing (default: "redislock:")
    """

    def __init__(self, client: "Redis", prefix: str = "redislock:") -> None:
        self.client = client
        self.prefix = prefix
        self._release_script = client.register_script(_LUA_RELEASE)
        self._refresh_script = client.register_script(_LUA_REFRESH)
        self._pttl_script = client.register_script(_LUA_PTTL)

    @classmethod
    def from_url(
        cls, url: str | None = None, prefix: str = "redislock:"
    ) -> "RedisStore":
        """Create a store from a Redis URL.

        Args:
            url: Connection URL (defaults to $REDIS_URL, then localhost)
            prefix: Key prefix for namespacing
        """
        from redis import Redis

        client = Redis.from_url(url or os.getenv("REDIS_URL", DEFAULT_URL))
        return cls(client, prefix=prefix)

    def _key(self, key: str) -> str:
        """Add prefix to key."""
        return f"{self.prefix}{key}"

    def acquire(self, key: str, token: str, ttl: float) -> bool:
        acquired = self.client.set(
            self._key(key), token, nx=True, px=_to_millis(ttl)
        )
        return bool(acquired)

    def release(self, key: str, token: str) -> bool:
        deleted = self._release_script(keys=[self._key(key)], args=[token])
        return int(deleted) == 1

    def refresh(self, key: str, token: str, ttl: float) -> bool:
        extended = self._refresh_script(
            keys=[self._key(key)], args=[token, _to_millis(ttl)]
        )
        return int(extended) == 1

    def ttl(self, key: str, token: str) -> float | None:
        millis = int(self._pttl_script(keys=[self._key(key)], args=[token]))
        # -2: missing or not ours, -1: no expiry
        if millis < 0:
            return None
        return millis / 1000

    def clear(self) -> None:
        """Clear all keys with this prefix (useful for testing)."""
        pattern = f"{self.prefix}*"
        cursor = 0

        while True:
            cursor, keys = self.client.scan(cursor, match=pattern, count=100)
            if keys:
                self.client.delete(*keys)
            if cursor == 0:
                break
